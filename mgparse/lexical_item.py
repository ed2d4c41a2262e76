"""Lexical items: a phonetic form with an ordered bundle of features."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from mgparse.feature import Feature, FeatureKind


@dataclass
class AgreementFeatures:
    """A flat set of agreement attributes such as ``num=sg``."""

    values: dict[str, str] = field(default_factory=dict)

    def add(self, key: str, value: str) -> None:
        self.values[key] = value

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def unify(self, other: AgreementFeatures) -> AgreementFeatures | None:
        """Combine two sets; None if they disagree on any attribute."""
        merged = dict(self.values)
        for key, value in other.values.items():
            if merged.setdefault(key, value) != value:
                return None
        return AgreementFeatures(merged)

    def copy(self) -> AgreementFeatures:
        return AgreementFeatures(dict(self.values))

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        body = ", ".join(f"{key}={value}" for key, value in self.values.items())
        return f"[{body}]"


@dataclass
class LexicalItem:
    """An entry of the lexicon, lexical or functional."""

    phonetic_form: str
    features: list[Feature] = field(default_factory=list)
    agreement_features: AgreementFeatures | None = None

    @classmethod
    def with_agreement(
        cls, phonetic_form: str, features: list[Feature], agreement: AgreementFeatures
    ) -> LexicalItem:
        return cls(phonetic_form, list(features), agreement)

    @classmethod
    def empty(cls) -> LexicalItem:
        """An item with no sound and no features, as used for traces."""
        return cls("")

    def __str__(self) -> str:
        text = f"{self.phonetic_form}[{' '.join(str(f) for f in self.features)}]"
        if self.agreement_features is not None:
            text += str(self.agreement_features)
        return text

    def has_feature_type(self, feature_type: str) -> bool:
        """Whether any feature carries the label ``feature_type``.

        Delayed features count only when they wrap a selector.
        """
        for feature in self.features:
            if feature.kind is FeatureKind.DELAYED:
                inner = feature.inner
                if inner is not None and inner.kind is FeatureKind.SELECTOR and inner.name == feature_type:
                    return True
            elif feature.name == feature_type:
                return True
        return False

    def first_feature(self) -> Feature | None:
        return self.features[0] if self.features else None

    def remove_first_feature(self) -> Feature | None:
        """Pop and return the first feature, or None if there is none."""
        return self.features.pop(0) if self.features else None

    def is_phase_head(self) -> bool:
        return any(f.is_phase_head() for f in self.features)

    def is_empty(self) -> bool:
        return not self.phonetic_form and not self.features

    def has_delayed_features(self) -> bool:
        return any(f.is_delayed() for f in self.features)

    def get_delayed_features(self) -> list[Feature]:
        """The inner features of every delayed feature, in order."""
        return [f.inner for f in self.features if f.is_delayed() and f.inner is not None]

    def copy(self) -> LexicalItem:
        agreement = self.agreement_features.copy() if self.agreement_features is not None else None
        return LexicalItem(self.phonetic_form, list(self.features), agreement)

    def without_first_feature(self) -> LexicalItem:
        item = self.copy()
        item.remove_first_feature()
        return item

    def is_atomic(self) -> bool:
        """True if the bundle is exactly one categorial feature."""
        return len(self.features) == 1 and self.features[0].kind is FeatureKind.CATEGORIAL

    def atomic_name(self) -> str | None:
        """The label of the leading categorial feature, if there is one."""
        first = self.first_feature()
        if first is not None and first.kind is FeatureKind.CATEGORIAL:
            return first.name
        return None