"""Derivation trees built by Merge, Move and their variants."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace

from mgparse.feature import Feature, FeatureKind
from mgparse.lexical_item import AgreementFeatures, LexicalItem


def _delayed_inners(features: list[Feature]) -> list[Feature]:
    return [f.inner for f in features if f.is_delayed() and f.inner is not None]


@dataclass
class Chain:
    """A chain: the head item together with the indexes of its traces."""

    head: LexicalItem
    tail: list[int] = field(default_factory=list)
    agreement: AgreementFeatures | None = None
    is_phase_head: bool = False

    @classmethod
    def from_head(cls, head: LexicalItem) -> Chain:
        """A chain with no traces, taking agreement and phase status from its head."""
        agreement = head.agreement_features.copy() if head.agreement_features is not None else None
        return cls(head, [], agreement, head.is_phase_head())

    @classmethod
    def with_tail(cls, head: LexicalItem, tail: list[int]) -> Chain:
        chain = cls.from_head(head)
        chain.tail = list(tail)
        return chain

    def with_agreement(self, agreement: AgreementFeatures) -> Chain:
        """A copy of this chain carrying the given agreement information."""
        return replace(self, tail=list(self.tail), agreement=agreement)

    def merge_agreement(self, other: Chain) -> None:
        """Unify the other chain's agreement into this one.

        Conflicting agreement leaves this chain unchanged.
        """
        if other.agreement is None:
            return
        if self.agreement is None:
            self.agreement = other.agreement.copy()
            return
        merged = self.agreement.unify(other.agreement)
        if merged is not None:
            self.agreement = merged

    def has_traces(self) -> bool:
        return bool(self.tail)

    def __str__(self) -> str:
        text = str(self.head)
        if self.tail:
            text += f" (traces: {self.tail})"
        return text


@dataclass
class DerivationTree:
    """A binary-branching node of a derived structure."""

    chain: Chain
    children: tuple[DerivationTree, DerivationTree] | None = None
    index: int = 0
    is_adjunct: bool = False
    delayed_features: list[Feature] = field(default_factory=list)
    is_phase: bool = False
    phase_completed: bool = False

    @classmethod
    def leaf(cls, item: LexicalItem, index: int) -> DerivationTree:
        return cls(
            chain=Chain.from_head(item),
            index=index,
            delayed_features=item.get_delayed_features(),
            is_phase=item.is_phase_head(),
        )

    @classmethod
    def merge(
        cls,
        left: DerivationTree,
        right: DerivationTree,
        head_features: list[Feature],
        index: int,
    ) -> DerivationTree:
        """Combine two trees under a new head carrying ``head_features``."""
        phonetic_form = left.chain.head.phonetic_form or right.chain.head.phonetic_form
        chain = Chain.from_head(LexicalItem(phonetic_form, list(head_features)))
        chain.merge_agreement(left.chain)
        chain.merge_agreement(right.chain)
        return cls(
            chain=chain,
            children=(left, right),
            index=index,
            delayed_features=_delayed_inners(head_features),
            is_phase=any(f.is_phase_head() for f in head_features),
        )

    @classmethod
    def pair_merge(cls, host: DerivationTree, adjunct: DerivationTree, index: int) -> DerivationTree:
        """Adjoin ``adjunct`` to ``host``; the host projects."""
        result = host.copy()
        adjunct_copy = adjunct.copy()
        adjunct_copy.is_adjunct = True
        result.children = (adjunct_copy, host)
        result.index = index
        return result

    @classmethod
    def late_merge(
        cls, host: DerivationTree, delayed_material: DerivationTree, index: int
    ) -> DerivationTree:
        """Attach material selected by the host's first delayed feature.

        The first delayed feature is consumed whether or not it matches.
        """
        result = host.copy()
        if result.delayed_features:
            feature = result.delayed_features.pop(0)
            first = delayed_material.first_feature()
            if (
                first is not None
                and feature.kind is FeatureKind.SELECTOR
                and first.kind is FeatureKind.CATEGORIAL
                and feature.name == first.name
            ):
                result.children = (delayed_material, host)
                result.index = index
        return result

    @classmethod
    def move(
        cls,
        base: DerivationTree,
        moved_chain: Chain,
        head_features: list[Feature],
        index: int,
    ) -> DerivationTree:
        """Build a node whose head is the moved chain, over ``base`` and a trace."""
        agreement = moved_chain.agreement
        head = LexicalItem(
            moved_chain.head.phonetic_form,
            list(head_features),
            agreement.copy() if agreement is not None else None,
        )
        chain = Chain(head, list(moved_chain.tail), agreement, moved_chain.is_phase_head)
        trace = cls(chain=Chain.from_head(LexicalItem.empty()), index=0)
        return cls(
            chain=chain,
            children=(base, trace),
            index=index,
            delayed_features=_delayed_inners(head_features),
            is_phase=any(f.is_phase_head() for f in head_features),
        )

    def copy(self) -> DerivationTree:
        """A deep copy of this tree."""
        return copy.deepcopy(self)

    def first_feature(self) -> Feature | None:
        return self.chain.head.first_feature()

    def remove_first_feature(self) -> Feature | None:
        return self.chain.head.remove_first_feature()

    def without_first_feature(self) -> DerivationTree:
        result = self.copy()
        result.remove_first_feature()
        return result

    def complete_phase(self) -> None:
        """Mark this phase as transferred; non-phases are left alone."""
        if self.is_phase:
            self.phase_completed = True

    def is_leaf(self) -> bool:
        return self.children is None

    def depth(self) -> int:
        if self.children is None:
            return 0
        left, right = self.children
        return 1 + max(left.depth(), right.depth())

    def get_yield(self) -> list[str]:
        """Phonetic forms in pre-order, skipping empty forms and traces."""
        forms: list[str] = []
        form = self.chain.head.phonetic_form
        if form and self.index not in self.chain.tail:
            forms.append(form)
        if self.children is not None:
            for child in self.children:
                forms.extend(child.get_yield())
        return forms

    def word(self) -> str | None:
        return self.chain.head.phonetic_form or None

    def rule(self) -> str:
        """The name of the operation that built this node."""
        if self.is_adjunct:
            return "Adjunction"
        if self.chain.has_traces():
            return "Move"
        if self.children is not None:
            return "Merge"
        return "Lexical"

    def _lines(self, indent: int) -> list[str]:
        line = " " * indent + str(self.chain)
        if self.is_adjunct:
            line += " (adjunct)"
        if self.is_phase:
            line += " (phase, completed)" if self.phase_completed else " (phase)"
        lines = [line]
        if self.children is not None:
            for child in self.children:
                lines.extend(child._lines(indent + 2))
        return lines

    def __str__(self) -> str:
        return "".join(line + "\n" for line in self._lines(0))