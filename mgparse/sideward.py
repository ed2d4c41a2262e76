"""Sideward movement of material between parallel workspaces."""

from __future__ import annotations

import copy

from mgparse.config import SidewardMovementType
from mgparse.derivation import Chain, DerivationTree
from mgparse.feature import Feature
from mgparse.lexical_item import LexicalItem
from mgparse.parser import MinimalistParser


def sideward_move(
    parser: MinimalistParser,
    source_workspace_id: int,
    target_workspace_id: int,
    moved_chain: Chain,
    movement_type: SidewardMovementType,
) -> DerivationTree | None:
    """Move ``moved_chain`` from one workspace towards another.

    Returns None when either workspace is missing, inactive or empty.
    Node indexes are taken from ``parser``; workspaces are updated in
    ``parser.workspaces`` as each movement type requires.
    """
    workspaces = parser.workspaces
    source = workspaces.get_tree(source_workspace_id)
    target = workspaces.get_tree(target_workspace_id)
    if source is None or target is None:
        return None
    source_tree = source.copy()
    target_tree = target.copy()

    if movement_type is SidewardMovementType.NUNES_STYLE:
        # Copy the moved element and merge it with the target; the trace is a silent leaf.
        trace = DerivationTree.leaf(LexicalItem.empty(), parser.allocate_index())
        result = DerivationTree(
            chain=copy.deepcopy(moved_chain),
            children=(target_tree, trace),
            index=parser.allocate_index(),
        )
        workspaces.add_tree(source_workspace_id, source_tree)
        return result

    if movement_type is SidewardMovementType.PARALLEL_DERIVATION:
        parallel_id = workspaces.new_workspace()
        moved_element = DerivationTree(
            chain=copy.deepcopy(moved_chain),
            index=parser.allocate_index(),
        )
        workspaces.add_tree(parallel_id, moved_element.copy())
        return moved_element

    if movement_type is SidewardMovementType.MULTIDOMINANCE:
        return DerivationTree(
            chain=copy.deepcopy(moved_chain),
            children=(target_tree, source_tree),
            index=parser.allocate_index(),
        )

    if movement_type is SidewardMovementType.WHOLESALE_LATE:
        first = moved_chain.head.first_feature()
        if first is not None:
            target_tree.delayed_features.append(Feature.delayed(first))
        return target_tree

    raise ValueError(f"Unknown sideward movement type: {movement_type!r}")