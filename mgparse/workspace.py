"""Workspaces that hold partial derivations side by side."""

from __future__ import annotations

from dataclasses import dataclass, field

from mgparse.derivation import DerivationTree


@dataclass
class Workspace:
    """A workspace holding at most one partially derived tree."""

    workspace_id: int
    tree: DerivationTree | None = None
    active: bool = True

    @classmethod
    def with_tree(cls, tree: DerivationTree, workspace_id: int) -> Workspace:
        return cls(workspace_id, tree)

    def set_tree(self, tree: DerivationTree) -> None:
        self.tree = tree

    def clear(self) -> None:
        self.tree = None

    def deactivate(self) -> None:
        self.active = False

    def activate(self) -> None:
        self.active = True

    def is_empty(self) -> bool:
        return self.tree is None


@dataclass
class WorkspaceRegistry:
    """A collection of workspaces for parallel derivations."""

    workspaces: list[Workspace] = field(default_factory=list)
    _next_id: int = field(default=0, repr=False)

    def _find(self, workspace_id: int, *, active_only: bool) -> Workspace | None:
        return next(
            (
                ws
                for ws in self.workspaces
                if ws.workspace_id == workspace_id and (ws.active or not active_only)
            ),
            None,
        )

    def new_workspace(self) -> int:
        """Create an empty workspace and return its id."""
        workspace_id = self._next_id
        self._next_id += 1
        self.workspaces.append(Workspace(workspace_id))
        return workspace_id

    def add_tree(self, workspace_id: int, tree: DerivationTree) -> bool:
        """Put a tree into an active workspace; False if there is none with that id."""
        workspace = self._find(workspace_id, active_only=True)
        if workspace is None:
            return False
        workspace.tree = tree
        return True

    def get_tree(self, workspace_id: int) -> DerivationTree | None:
        """The tree of an active workspace, or None."""
        workspace = self._find(workspace_id, active_only=True)
        return workspace.tree if workspace is not None else None

    def active_workspaces(self) -> list[int]:
        return [ws.workspace_id for ws in self.workspaces if ws.active]

    def active_workspaces_with_trees(self) -> list[int]:
        return [ws.workspace_id for ws in self.workspaces if ws.active and ws.tree is not None]

    def deactivate(self, workspace_id: int) -> None:
        workspace = self._find(workspace_id, active_only=False)
        if workspace is not None:
            workspace.active = False

    def activate(self, workspace_id: int) -> None:
        workspace = self._find(workspace_id, active_only=False)
        if workspace is not None:
            workspace.active = True

    def transfer_tree(self, from_id: int, to_id: int) -> bool:
        """Move the tree of one workspace into another, emptying the source."""
        tree = self.get_tree(from_id)
        if tree is None:
            return False
        self.add_tree(to_id, tree)
        source = self._find(from_id, active_only=False)
        if source is not None:
            source.tree = None
        return True

    def copy_tree(self, from_id: int) -> int | None:
        """Copy a workspace's tree into a new workspace and return its id."""
        tree = self.get_tree(from_id)
        if tree is None:
            return None
        new_id = self.new_workspace()
        self.add_tree(new_id, tree.copy())
        return new_id

    def merge_workspaces(self, ws1: int, ws2: int) -> int | None:
        """Combine two workspaces into a new one and deactivate both.

        The new workspace carries the first workspace's tree.
        """
        tree1 = self.get_tree(ws1)
        tree2 = self.get_tree(ws2)
        if tree1 is None or tree2 is None:
            return None
        new_id = self.new_workspace()
        self.add_tree(new_id, tree1.copy())
        self.deactivate(ws1)
        self.deactivate(ws2)
        return new_id