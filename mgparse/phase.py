"""Phases and the Phase Impenetrability Condition."""

from __future__ import annotations

from dataclasses import dataclass, field

from mgparse.derivation import DerivationTree
from mgparse.feature import FeatureKind


@dataclass
class PhaseConfig:
    """Settings for phase-based computation."""

    enforce_pic: bool = True
    phase_heads: list[str] = field(default_factory=lambda: ["C", "v", "D"])
    max_edge_elements: int = 1
    immediate_transfer: bool = True


@dataclass
class PhaseChecker:
    """Checks phase membership, phase edges and extraction under the PIC."""

    config: PhaseConfig = field(default_factory=PhaseConfig)

    def is_phase_head(self, node: DerivationTree) -> bool:
        """True for nodes with a phase feature or a phase-head category first."""
        if any(f.kind is FeatureKind.PHASE for f in node.chain.head.features):
            return True
        first = node.first_feature()
        if first is not None and first.kind is FeatureKind.CATEGORIAL:
            return first.name in self.config.phase_heads
        return False

    def get_phase_edge(self, phase: DerivationTree) -> list[DerivationTree]:
        """The specifiers on the left edge of a phase, at most ``max_edge_elements``."""
        if not self.is_phase_head(phase) or phase.children is None:
            return []
        edge: list[DerivationTree] = []
        node: DerivationTree | None = phase.children[0]
        while node is not None:
            edge.append(node)
            node = node.children[0] if node.children is not None else None
        return edge[: self.config.max_edge_elements]

    def check_extraction(self, phase: DerivationTree, target_index: int) -> bool:
        """Whether the node with ``target_index`` may leave ``phase``."""
        if not self.config.enforce_pic or not phase.phase_completed:
            return True
        return any(
            element.index == target_index or target_index in element.chain.tail
            for element in self.get_phase_edge(phase)
        )

    def transfer_phase(self, tree: DerivationTree) -> None:
        """Complete this phase and, recursively, the phases embedded in it."""
        if not self.is_phase_head(tree):
            return
        tree.complete_phase()
        if tree.children is not None:
            for child in tree.children:
                self.transfer_phase(child)

    def phase_spine(self, tree: DerivationTree) -> list[DerivationTree]:
        """The phase heads met while descending through complements."""
        spine: list[DerivationTree] = []
        node: DerivationTree | None = tree
        while node is not None:
            if self.is_phase_head(node):
                spine.append(node)
            node = node.children[1] if node.children is not None else None
        return spine