"""Parser configuration, feature registry and feature-string parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mgparse.feature import Feature, FeatureKind
from mgparse.phase import PhaseConfig


class GrammarError(ValueError):
    """Raised for malformed feature specifications."""


class MovementStrategy(Enum):
    """Kinds of movement the parser may use."""

    STANDARD = "standard"
    MULTI_SPECIFIER = "multi_specifier"
    SIDEWARD = "sideward"
    INTERARBOREAL = "interarboreal"


class MergeStrategy(Enum):
    """Kinds of merge the parser may use."""

    STANDARD = "standard"
    PAIR_MERGE = "pair_merge"
    LATE_MERGE = "late_merge"


class SidewardMovementType(Enum):
    """Kinds of sideward movement between workspaces."""

    NUNES_STYLE = "nunes_style"
    PARALLEL_DERIVATION = "parallel_derivation"
    MULTIDOMINANCE = "multidominance"
    WHOLESALE_LATE = "wholesale_late"


@dataclass
class ParserConfig:
    """Options controlling a Minimalist Grammar parse."""

    max_derivation_depth: int = 20
    allow_remnant_movement: bool = False
    allow_vacuous_movement: bool = False
    movement_strategies: list[MovementStrategy] = field(
        default_factory=lambda: [MovementStrategy.STANDARD]
    )
    merge_strategies: list[MergeStrategy] = field(
        default_factory=lambda: [MergeStrategy.STANDARD]
    )
    sideward_movement_types: list[SidewardMovementType] = field(default_factory=list)
    enable_parallel_workspaces: bool = False
    max_workspaces: int = 3
    phase_config: PhaseConfig = field(default_factory=PhaseConfig)


_DEFAULT_CATEGORIES = ("C", "T", "v", "V", "D", "N", "P", "A")
_DEFAULT_MOVEMENT = ("wh", "case", "top", "foc")


@dataclass
class FeatureTypeRegistry:
    """The categorial and movement feature labels known to a grammar."""

    categorial: set[str] = field(default_factory=set)
    licensors: set[str] = field(default_factory=set)
    licensees: set[str] = field(default_factory=set)

    @classmethod
    def with_defaults(cls) -> FeatureTypeRegistry:
        """A registry holding the standard categories and movement features."""
        registry = cls()
        for category in _DEFAULT_CATEGORIES:
            registry.register_categorial(category)
        for feature in _DEFAULT_MOVEMENT:
            registry.register_movement(feature)
        return registry

    def register_categorial(self, feature: str) -> None:
        self.categorial.add(feature)

    def register_movement(self, feature: str) -> None:
        """Register both the licensor and the licensee for ``feature``."""
        self.licensors.add(feature)
        self.licensees.add(feature)

    def is_categorial_registered(self, feature: str) -> bool:
        return feature in self.categorial

    def is_movement_registered(self, feature: str) -> bool:
        return feature in self.licensors and feature in self.licensees

    def all_categorial(self) -> list[str]:
        """Every registered category, sorted."""
        return sorted(self.categorial)

    def all_movement(self) -> list[str]:
        """Every registered movement feature, sorted."""
        return sorted(self.licensors)


_FEATURE_PREFIXES = {
    "cat": FeatureKind.CATEGORIAL,
    "sel": FeatureKind.SELECTOR,
    "sel+": FeatureKind.STRONG_SELECTOR,
    "sel*": FeatureKind.ADJUNCT_SELECTOR,
    "licensor": FeatureKind.LICENSOR,
    "licensee": FeatureKind.LICENSEE,
    "phase": FeatureKind.PHASE,
}


def parse_feature(feature_str: str) -> Feature:
    """Parse a ``type:name`` string such as ``sel:D`` into a feature."""
    parts = feature_str.split(":")
    if len(parts) != 2:
        raise GrammarError(f"Invalid feature format: {feature_str}")
    feat_type, feat_name = parts
    kind = _FEATURE_PREFIXES.get(feat_type)
    if kind is None:
        raise GrammarError(f"Unknown feature type: {feat_type}")
    return Feature(kind, feat_name)