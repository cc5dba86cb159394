"""Composable text normalizers."""

from tweetnorm.normalizers.base import Normalizer
from tweetnorm.normalizers.case import LowerCaseNormalizer
from tweetnorm.normalizers.chain import ChainNormalizer
from tweetnorm.normalizers.regex import URL_PATTERN, RegexNormalizer, url_normalizer
from tweetnorm.normalizers.registry import (
    DEFAULT_CHAIN,
    available_normalizers,
    build_chain,
    resolve_normalizer,
)
from tweetnorm.normalizers.replacement import PUNCTUATION, StringReplacementNormalizer
from tweetnorm.normalizers.unicode_range import (
    EMOTICONS,
    TRANSPORT_AND_MAP,
    CodeRange,
    UnicodeRangeNormalizer,
)

__all__ = [
    "DEFAULT_CHAIN",
    "EMOTICONS",
    "PUNCTUATION",
    "TRANSPORT_AND_MAP",
    "URL_PATTERN",
    "ChainNormalizer",
    "CodeRange",
    "LowerCaseNormalizer",
    "Normalizer",
    "RegexNormalizer",
    "StringReplacementNormalizer",
    "UnicodeRangeNormalizer",
    "available_normalizers",
    "build_chain",
    "resolve_normalizer",
    "url_normalizer",
]
