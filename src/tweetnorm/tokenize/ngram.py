"""Sliding-window n-gram extraction."""

from __future__ import annotations

import logging
from enum import Enum

from tweetnorm.errors import ConstructionError, UnsupportedLevelError

logger = logging.getLogger(__name__)

UNIGRAM = 1
BIGRAM = 2
TRIGRAM = 3


class TokenLevel(str, Enum):
    """Unit an n-gram window is measured in."""

    WORD = "word"
    CHARACTER = "character"


class NGramTokenizer:
    """Extract overlapping n-grams of ``window_size`` words or characters.

    Characters are unicode code points. Words are separated by single spaces;
    consecutive spaces produce empty words rather than being collapsed.
    Inputs shorter than the window produce no n-grams.
    """

    def __init__(self, window_size: int, level: TokenLevel | str = TokenLevel.CHARACTER) -> None:
        if isinstance(window_size, bool) or not isinstance(window_size, int):
            raise ConstructionError("window_size must be an integer", window_size=window_size)
        if window_size < 1:
            raise ConstructionError("window_size must be at least 1", window_size=window_size)
        try:
            resolved_level = TokenLevel(level)
        except ValueError as exc:
            expected = ", ".join(item.value for item in TokenLevel)
            raise UnsupportedLevelError(
                f"unsupported tokenizer level; expected one of {expected}", level=level
            ) from exc

        self._window_size = window_size
        self._level = resolved_level
        logger.debug("Built %s-level tokenizer with window %d", resolved_level.value, window_size)

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def level(self) -> TokenLevel:
        return self._level

    def tokenize(self, text: str) -> list[str]:
        if self._level is TokenLevel.WORD:
            return self._tokenize_words(text)
        return self._tokenize_characters(text)

    def _tokenize_characters(self, text: str) -> list[str]:
        width = self._window_size
        return [text[index : index + width] for index in range(len(text) - width + 1)]

    def _tokenize_words(self, text: str) -> list[str]:
        width = self._window_size
        words = text.split(" ")
        return [" ".join(words[index : index + width]) for index in range(len(words) - width + 1)]

    def __repr__(self) -> str:
        return f"NGramTokenizer(window_size={self._window_size}, level={self._level.value!r})"
