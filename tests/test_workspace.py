from mgparse.derivation import DerivationTree
from mgparse.feature import Feature
from mgparse.lexical_item import LexicalItem
from mgparse.workspace import Workspace, WorkspaceRegistry


def _leaf(form, cat, index):
    return DerivationTree.leaf(LexicalItem(form, [Feature.categorial(cat)]), index)


def test_workspace_creation():
    workspace = Workspace(1)
    assert workspace.workspace_id == 1
    assert workspace.active
    assert workspace.is_empty()

    tree = _leaf("the", "D", 0)
    workspace.set_tree(tree)
    assert not workspace.is_empty()
    assert workspace.tree.chain.head.phonetic_form == "the"

    workspace2 = Workspace.with_tree(tree, 2)
    assert workspace2.workspace_id == 2
    assert not workspace2.is_empty()
    assert workspace2.tree.chain.head.phonetic_form == "the"


def test_workspace_operations():
    workspace = Workspace(1)
    workspace.set_tree(_leaf("the", "D", 0))
    assert not workspace.is_empty()

    workspace.clear()
    assert workspace.is_empty()

    assert workspace.active
    workspace.deactivate()
    assert not workspace.active
    workspace.activate()
    assert workspace.active


def test_workspace_registry():
    registry = WorkspaceRegistry()
    id1 = registry.new_workspace()
    id2 = registry.new_workspace()
    assert (id1, id2) == (0, 1)
    assert len(registry.workspaces) == 2

    assert registry.add_tree(id1, _leaf("the", "D", 0))
    assert registry.add_tree(id2, _leaf("cat", "N", 1))

    assert registry.get_tree(id1).chain.head.phonetic_form == "the"
    assert registry.get_tree(id2).chain.head.phonetic_form == "cat"

    assert sorted(registry.active_workspaces()) == [id1, id2]

    registry.deactivate(id1)
    assert registry.active_workspaces() == [id2]

    registry.activate(id1)
    assert len(registry.active_workspaces()) == 2

    new_id = registry.copy_tree(id1)
    assert new_id == 2
    assert registry.get_tree(new_id).chain.head.phonetic_form == "the"

    id3 = registry.new_workspace()
    assert registry.transfer_tree(id1, id3)
    assert registry.get_tree(id3).chain.head.phonetic_form == "the"
    assert registry.get_tree(id1) is None


def test_add_tree_to_unknown_or_inactive_workspace():
    registry = WorkspaceRegistry()
    ws = registry.new_workspace()
    assert not registry.add_tree(99, _leaf("the", "D", 0))
    registry.deactivate(ws)
    assert not registry.add_tree(ws, _leaf("the", "D", 0))
    assert registry.get_tree(ws) is None


def test_active_workspaces_with_trees():
    registry = WorkspaceRegistry()
    a = registry.new_workspace()
    b = registry.new_workspace()
    c = registry.new_workspace()
    registry.add_tree(a, _leaf("the", "D", 0))
    registry.add_tree(c, _leaf("cat", "N", 1))
    registry.deactivate(c)
    assert registry.active_workspaces_with_trees() == [a]
    assert b not in registry.active_workspaces_with_trees()


def test_copy_tree_is_independent():
    registry = WorkspaceRegistry()
    ws = registry.new_workspace()
    registry.add_tree(ws, _leaf("the", "D", 0))
    new_id = registry.copy_tree(ws)
    registry.get_tree(new_id).remove_first_feature()
    assert registry.get_tree(ws).first_feature() == Feature.categorial("D")
    assert registry.get_tree(new_id).first_feature() is None


def test_copy_and_transfer_from_empty_workspace():
    registry = WorkspaceRegistry()
    ws = registry.new_workspace()
    other = registry.new_workspace()
    assert registry.copy_tree(ws) is None
    assert not registry.transfer_tree(ws, other)
    assert len(registry.workspaces) == 2


def test_merge_workspaces():
    registry = WorkspaceRegistry()
    ws1 = registry.new_workspace()
    ws2 = registry.new_workspace()
    registry.add_tree(ws1, _leaf("the", "D", 0))
    registry.add_tree(ws2, _leaf("book", "N", 1))

    merged = registry.merge_workspaces(ws1, ws2)
    assert merged == 2
    assert registry.get_tree(merged).chain.head.phonetic_form == "the"
    assert registry.active_workspaces() == [merged]
    assert registry.get_tree(ws1) is None


def test_merge_workspaces_needs_both_trees():
    registry = WorkspaceRegistry()
    ws1 = registry.new_workspace()
    ws2 = registry.new_workspace()
    registry.add_tree(ws1, _leaf("the", "D", 0))
    assert registry.merge_workspaces(ws1, ws2) is None
    assert registry.active_workspaces() == [ws1, ws2]