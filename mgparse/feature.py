"""Syntactic features of Minimalist Grammar lexical items."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FeatureKind(Enum):
    """The kinds of feature a lexical item can carry."""

    CATEGORIAL = "categorial"
    SELECTOR = "selector"
    LICENSOR = "licensor"
    LICENSEE = "licensee"
    STRONG_SELECTOR = "strong_selector"
    ADJUNCT_SELECTOR = "adjunct_selector"
    AGREEMENT = "agreement"
    PHASE = "phase"
    DELAYED = "delayed"


_PLAIN_FORMATS = {
    FeatureKind.CATEGORIAL: "{}",
    FeatureKind.SELECTOR: "={}",
    FeatureKind.LICENSOR: "+{}",
    FeatureKind.LICENSEE: "-{}",
    FeatureKind.STRONG_SELECTOR: "={}+",
    FeatureKind.ADJUNCT_SELECTOR: "~{}",
    FeatureKind.PHASE: "\u2691{}",
}


@dataclass(frozen=True)
class Feature:
    """A single feature.

    ``name`` is the feature's label (the key for agreement features),
    ``value`` is used only by agreement features and ``inner`` only by
    delayed features.
    """

    kind: FeatureKind
    name: str = ""
    value: str = ""
    inner: Feature | None = None

    def __post_init__(self) -> None:
        if self.kind is FeatureKind.DELAYED:
            if self.inner is None:
                raise ValueError("a delayed feature needs an inner feature")
        elif self.inner is not None:
            raise ValueError(f"a {self.kind.value} feature cannot wrap another feature")

    @classmethod
    def categorial(cls, name: str) -> Feature:
        return cls(FeatureKind.CATEGORIAL, name)

    @classmethod
    def selector(cls, name: str) -> Feature:
        return cls(FeatureKind.SELECTOR, name)

    @classmethod
    def licensor(cls, name: str) -> Feature:
        return cls(FeatureKind.LICENSOR, name)

    @classmethod
    def licensee(cls, name: str) -> Feature:
        return cls(FeatureKind.LICENSEE, name)

    @classmethod
    def strong_selector(cls, name: str) -> Feature:
        return cls(FeatureKind.STRONG_SELECTOR, name)

    @classmethod
    def adjunct_selector(cls, name: str) -> Feature:
        return cls(FeatureKind.ADJUNCT_SELECTOR, name)

    @classmethod
    def agreement(cls, key: str, value: str) -> Feature:
        return cls(FeatureKind.AGREEMENT, key, value)

    @classmethod
    def phase(cls, name: str) -> Feature:
        return cls(FeatureKind.PHASE, name)

    @classmethod
    def delayed(cls, inner: Feature) -> Feature:
        return cls(FeatureKind.DELAYED, inner.name, inner=inner)

    def __str__(self) -> str:
        if self.kind is FeatureKind.AGREEMENT:
            return f"\u03c6:{self.name}={self.value}"
        if self.kind is FeatureKind.DELAYED:
            return f"{self.inner}[delay]"
        return _PLAIN_FORMATS[self.kind].format(self.name)

    def matches(self, other: Feature) -> bool:
        """Whether this (strong) selector selects the categorial ``other``."""
        return (
            self.kind in (FeatureKind.SELECTOR, FeatureKind.STRONG_SELECTOR)
            and other.kind is FeatureKind.CATEGORIAL
            and self.name == other.name
        )

    def matches_move(self, other: Feature) -> bool:
        """Whether this licensor attracts the licensee ``other``."""
        return (
            self.kind is FeatureKind.LICENSOR
            and other.kind is FeatureKind.LICENSEE
            and self.name == other.name
        )

    def is_matching(self, other: Feature) -> bool:
        """Whether the two features check each other by Merge or Move."""
        return self.matches(other) or self.matches_move(other)

    def triggers_head_movement(self) -> bool:
        return self.kind is FeatureKind.STRONG_SELECTOR

    def is_phase_head(self) -> bool:
        return self.kind is FeatureKind.PHASE

    def is_delayed(self) -> bool:
        return self.kind is FeatureKind.DELAYED

    def get_delayed_feature(self) -> Feature | None:
        """The wrapped feature of a delayed feature, otherwise None."""
        return self.inner if self.kind is FeatureKind.DELAYED else None

    def unwrap_delayed(self) -> Feature:
        """The wrapped feature of a delayed feature, otherwise the feature itself."""
        if self.kind is FeatureKind.DELAYED and self.inner is not None:
            return self.inner
        return self

    def feature_name(self) -> str:
        """The feature's label; delayed features report their inner label."""
        if self.kind is FeatureKind.DELAYED and self.inner is not None:
            return self.inner.feature_name()
        return self.name