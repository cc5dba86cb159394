"""Literal multi-string replacement."""

from __future__ import annotations

import re
from collections.abc import Iterable

from tweetnorm.errors import ConstructionError

PUNCTUATION = ("?", ".", ",", "@", "-", "/", ":", "#", "!", "(", ")", "[", "]", "¿")


class StringReplacementNormalizer:
    """Replace each occurrence of any configured literal in a single pass.

    Matching is leftmost-first: at a given position the earliest configured
    literal that matches wins, and replaced output is never scanned again.
    """

    def __init__(
        self,
        strings: Iterable[str],
        replacement: str = "",
        *,
        name: str = "strings",
    ) -> None:
        if isinstance(strings, str):
            raise ConstructionError("strings must be a collection of literals, not a string")
        if not isinstance(replacement, str):
            raise ConstructionError(
                "replacement must be a string", replacement=type(replacement).__name__
            )

        literals: list[str] = []
        for candidate in strings:
            if not isinstance(candidate, str):
                raise ConstructionError(
                    "literals must be strings", literal=type(candidate).__name__
                )
            if not candidate:
                raise ConstructionError("literals must not be empty")
            if candidate not in literals:
                literals.append(candidate)

        self.strings = tuple(literals)
        self.replacement = replacement
        self.normalizer_id = name
        self._matcher = (
            re.compile("|".join(re.escape(literal) for literal in literals)) if literals else None
        )

    def normalize(self, text: str) -> str:
        if self._matcher is None:
            return text
        replacement = self.replacement
        return self._matcher.sub(lambda _match: replacement, text)

    def __repr__(self) -> str:
        return (
            f"StringReplacementNormalizer(strings={list(self.strings)!r}, "
            f"replacement={self.replacement!r})"
        )
