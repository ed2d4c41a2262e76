"""A breadth-first parser for Minimalist Grammars."""

from __future__ import annotations

import copy
import logging
from collections import deque
from collections.abc import Iterable

from mgparse.config import (
    FeatureTypeRegistry,
    GrammarError,
    MergeStrategy,
    ParserConfig,
)
from mgparse.derivation import Chain, DerivationTree
from mgparse.feature import Feature, FeatureKind
from mgparse.lexical_item import LexicalItem
from mgparse.phase import PhaseChecker
from mgparse.workspace import WorkspaceRegistry

logger = logging.getLogger(__name__)

_CATEGORY_FEATURE_TYPES = {
    "selector": FeatureKind.SELECTOR,
    "strong_selector": FeatureKind.STRONG_SELECTOR,
    "adjunct_selector": FeatureKind.ADJUNCT_SELECTOR,
    "licensor": FeatureKind.LICENSOR,
    "licensee": FeatureKind.LICENSEE,
    "phase": FeatureKind.PHASE,
}


def _same_tree(a: DerivationTree, b: DerivationTree) -> bool:
    return (
        a.index == b.index
        and a.chain.head.features == b.chain.head.features
        and a.chain.head.phonetic_form == b.chain.head.phonetic_form
    )


def _null_heads() -> list[LexicalItem]:
    """Phonologically empty functional heads added to every parse."""
    return [
        LexicalItem("", [Feature.categorial("T"), Feature.selector("V"), Feature.selector("D")]),
        LexicalItem("", [Feature.categorial("C"), Feature.selector("T")]),
    ]


class MinimalistParser:
    """Derives sentences by Merge and Move over a lexicon of feature bundles."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.lexicon: dict[str, list[LexicalItem]] = {}
        self.feature_types = FeatureTypeRegistry.with_defaults()
        self.config = config if config is not None else ParserConfig()
        self.next_index = 0
        self.workspaces = WorkspaceRegistry()
        self.phase_checker = PhaseChecker(self.config.phase_config)

    def add_to_lexicon(self, word: str, item: LexicalItem) -> None:
        """Add an entry for ``word``; a word may have several entries."""
        self.lexicon.setdefault(word, []).append(item)

    def register_categorial_feature(self, feature: str) -> None:
        self.feature_types.register_categorial(feature)

    def register_movement_feature(self, feature: str) -> None:
        self.feature_types.register_movement(feature)

    def validate_feature(self, feature: Feature) -> bool:
        """Whether the feature's label is registered for its kind."""
        kind = feature.kind
        if kind is FeatureKind.AGREEMENT:
            return True
        if kind is FeatureKind.DELAYED:
            return feature.inner is not None and self.validate_feature(feature.inner)
        if kind in (FeatureKind.LICENSOR, FeatureKind.LICENSEE):
            return self.feature_types.is_movement_registered(feature.name)
        return self.feature_types.is_categorial_registered(feature.name)

    def allocate_index(self) -> int:
        """Hand out the next unique node index."""
        index = self.next_index
        self.next_index += 1
        return index

    def set_config(self, config: ParserConfig) -> None:
        self.config = config
        self.phase_checker = PhaseChecker(config.phase_config)

    def parse(self, sentence: str) -> DerivationTree | None:
        """Find a complete derivation whose yield is ``sentence``, or None.

        The parser itself is left unchanged.
        """
        return copy.deepcopy(self)._parse(sentence)

    def _parse(self, sentence: str) -> DerivationTree | None:
        self.workspaces = WorkspaceRegistry()
        self.workspaces.new_workspace()
        self.next_index = 0

        words = sentence.split()
        queue: deque[DerivationTree] = deque()
        for word in words:
            items = self.lexicon.get(word, [])
            if not items:
                logger.warning("Unknown word: %s", word)
                return None
            for item in items:
                queue.append(DerivationTree.leaf(item.copy(), self.allocate_index()))
        for item in _null_heads():
            queue.append(DerivationTree.leaf(item, self.allocate_index()))

        seen: list[DerivationTree] = []

        def enqueue(candidate: DerivationTree | None) -> None:
            if candidate is not None and not any(_same_tree(candidate, t) for t in seen):
                queue.append(candidate)

        for _ in range(self.config.max_derivation_depth):
            if not queue:
                break
            current = queue.popleft()

            first = current.first_feature()
            if (
                first is not None
                and first.kind is FeatureKind.CATEGORIAL
                and first.name == "C"
                and len(current.chain.head.features) == 1
                and self.linearize(current) == words
            ):
                return current

            for other in seen:
                enqueue(self.apply_merge(current, other))
                enqueue(self.apply_merge(other, current))
            enqueue(self.apply_move(current))
            seen.append(current)

        logger.warning("No valid derivation found for: %s", sentence)
        return None

    def apply_merge(self, spec: DerivationTree, head: DerivationTree) -> DerivationTree | None:
        """Merge ``spec`` into ``head`` by the first configured strategy that applies."""
        if self.config.phase_config.enforce_pic and head.is_phase and head.phase_completed:
            return None

        head_feature = head.first_feature()
        spec_feature = spec.first_feature()

        for strategy in self.config.merge_strategies:
            if strategy is MergeStrategy.STANDARD:
                if head_feature is None or spec_feature is None:
                    continue
                if not head_feature.matches(spec_feature):
                    continue
                spec_new = spec.without_first_feature()
                head_new = head.without_first_feature()
                head_features = list(head.chain.head.features[1:])
                if head_feature.triggers_head_movement():
                    form = head.chain.head.phonetic_form + spec.chain.head.phonetic_form
                    return DerivationTree(
                        chain=Chain.from_head(LexicalItem(form, head_features)),
                        children=(spec_new, head_new),
                        index=self.allocate_index(),
                    )
                return DerivationTree.merge(spec_new, head_new, head_features, self.allocate_index())

            if strategy is MergeStrategy.PAIR_MERGE:
                if (
                    head_feature is not None
                    and spec_feature is not None
                    and head_feature.kind is FeatureKind.ADJUNCT_SELECTOR
                    and spec_feature.kind is FeatureKind.CATEGORIAL
                    and head_feature.name == spec_feature.name
                ):
                    return DerivationTree.pair_merge(
                        head.without_first_feature(),
                        spec.without_first_feature(),
                        self.allocate_index(),
                    )

            elif strategy is MergeStrategy.LATE_MERGE:
                if (
                    head.delayed_features
                    and spec_feature is not None
                    and head.delayed_features[0].matches(spec_feature)
                ):
                    return DerivationTree.late_merge(head.copy(), spec.copy(), self.allocate_index())

        return None

    def apply_move(self, tree: DerivationTree) -> DerivationTree | None:
        """Move the element attracted by the tree's leading licensor, if any."""
        first = tree.first_feature()
        if first is None or first.kind is not FeatureKind.LICENSOR:
            return None
        found = self.find_movable_element(tree, first.name)
        if found is None:
            return None
        moved_chain, new_base = found
        new_base.remove_first_feature()
        return DerivationTree.move(
            new_base,
            moved_chain,
            list(tree.chain.head.features[1:]),
            self.allocate_index(),
        )

    def find_movable_element(
        self, tree: DerivationTree, licensor: str
    ) -> tuple[Chain, DerivationTree] | None:
        """Locate the first node (pre-order) whose leading licensee is ``licensor``.

        Returns the chain for the moved element and a copy of ``tree`` in
        which that node has been replaced by a trace.
        """
        path = self._path_to_licensee(tree, licensor)
        if path is None:
            return None

        target = tree
        for go_right in path:
            assert target.children is not None
            target = target.children[1 if go_right else 0]

        agreement = target.chain.agreement
        chain = Chain.with_tail(
            LexicalItem(
                target.chain.head.phonetic_form,
                list(target.chain.head.features[1:]),
                agreement.copy() if agreement is not None else None,
            ),
            [],
        )

        trace = DerivationTree(chain=Chain.from_head(LexicalItem.empty()), index=target.index)
        chain.tail = [target.index]

        if not path:
            return chain, trace

        new_tree = tree.copy()
        parent = new_tree
        for go_right in path[:-1]:
            assert parent.children is not None
            parent = parent.children[1 if go_right else 0]
        assert parent.children is not None
        left, right = parent.children
        parent.children = (left, trace) if path[-1] else (trace, right)
        return chain, new_tree

    def _path_to_licensee(self, tree: DerivationTree, licensor: str) -> list[bool] | None:
        first = tree.first_feature()
        if first is not None and first.kind is FeatureKind.LICENSEE and first.name == licensor:
            return []
        if tree.children is None:
            return None
        for go_right, child in zip((False, True), tree.children):
            sub = self._path_to_licensee(child, licensor)
            if sub is not None:
                return [go_right, *sub]
        return None

    def linearize(self, tree: DerivationTree) -> list[str]:
        """Pronounced forms of the tree, ordered by node index."""
        forms: list[tuple[str, int]] = []

        def collect(node: DerivationTree) -> None:
            form = node.chain.head.phonetic_form
            if form and node.index not in node.chain.tail:
                forms.append((form, node.index))
            if node.children is not None:
                for child in node.children:
                    collect(child)

        collect(tree)
        forms.sort(key=lambda pair: pair[1])
        return [form for form, _ in forms]

    def create_category_with_features(
        self, cat_type: str, features: Iterable[tuple[str, str]]
    ) -> LexicalItem:
        """Build a silent item: category ``cat_type`` followed by ``(type, name)`` features."""
        bundle = [Feature.categorial(cat_type)]
        for feat_type, feat_name in features:
            kind = _CATEGORY_FEATURE_TYPES.get(feat_type)
            if kind is None:
                raise GrammarError(f"Unknown feature type: {feat_type}")
            bundle.append(Feature(kind, feat_name))
        return LexicalItem("", bundle)