"""Named normalizer presets and chain assembly."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from tweetnorm.errors import ConstructionError
from tweetnorm.normalizers.base import Normalizer
from tweetnorm.normalizers.case import LowerCaseNormalizer
from tweetnorm.normalizers.chain import ChainNormalizer
from tweetnorm.normalizers.regex import url_normalizer
from tweetnorm.normalizers.replacement import PUNCTUATION, StringReplacementNormalizer
from tweetnorm.normalizers.unicode_range import (
    EMOTICONS,
    TRANSPORT_AND_MAP,
    UnicodeRangeNormalizer,
)

_FACTORIES: dict[str, Callable[[], Normalizer]] = {
    "lowercase": LowerCaseNormalizer,
    "casefold": lambda: LowerCaseNormalizer(full_folding=True),
    "emoticons": lambda: UnicodeRangeNormalizer.from_range(EMOTICONS),
    "transport": lambda: UnicodeRangeNormalizer.from_range(TRANSPORT_AND_MAP),
    "urls": url_normalizer,
    "hashtags": lambda: StringReplacementNormalizer(["#"], name="hashtags"),
    "mentions": lambda: StringReplacementNormalizer(["@"], name="mentions"),
    "punctuation": lambda: StringReplacementNormalizer(PUNCTUATION, name="punctuation"),
}

_ALIASES = {
    "lower": "lowercase",
    "emoji": "emoticons",
    "emojis": "emoticons",
    "transport_and_map": "transport",
    "url": "urls",
    "punct": "punctuation",
}

DEFAULT_CHAIN = ("lowercase", "emoticons", "urls", "punctuation")


def available_normalizers() -> list[str]:
    """Return the names accepted by :func:`resolve_normalizer`."""
    return sorted(_FACTORIES)


def resolve_normalizer(name: str) -> Normalizer:
    """Build a fresh normalizer for a preset name."""
    key = name.strip().casefold().replace("-", "_")
    canonical = _ALIASES.get(key, key)
    factory = _FACTORIES.get(canonical)
    if factory is None:
        raise ConstructionError(
            f"unknown normalizer {name!r}; expected one of {', '.join(available_normalizers())}"
        )
    return factory()


def build_chain(names: Iterable[str] = DEFAULT_CHAIN) -> ChainNormalizer:
    """Build a chain from preset names, in the given order."""
    return ChainNormalizer(*(resolve_normalizer(name) for name in names))
