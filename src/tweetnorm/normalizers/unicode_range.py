"""Removal of unicode code point ranges such as emoticon blocks."""

from __future__ import annotations

from dataclasses import dataclass

from tweetnorm.errors import ConstructionError

MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True)
class CodeRange:
    """Inclusive range of unicode code points."""

    name: str
    start: int
    end: int


# https://www.unicode.org/charts/PDF/U1F600.pdf
EMOTICONS = CodeRange(name="emoticons", start=0x1F600, end=0x1F64F)
# https://www.unicode.org/charts/PDF/U1F680.pdf
TRANSPORT_AND_MAP = CodeRange(name="transport", start=0x1F680, end=0x1F6FF)


class UnicodeRangeNormalizer:
    """Replace every code point within ``[start, end]`` by ``replacement``."""

    def __init__(
        self,
        start: int,
        end: int,
        replacement: str = "",
        *,
        name: str | None = None,
    ) -> None:
        _validate_bounds(start, end)
        if not isinstance(replacement, str):
            raise ConstructionError(
                "replacement must be a string", replacement=type(replacement).__name__
            )
        self.start = start
        self.end = end
        self.replacement = replacement
        self.normalizer_id = name or f"unicode-range-{start:04X}-{end:04X}"

    @classmethod
    def from_range(cls, code_range: CodeRange, replacement: str = "") -> UnicodeRangeNormalizer:
        """Build a normalizer for a predefined :class:`CodeRange`."""
        return cls(code_range.start, code_range.end, replacement, name=code_range.name)

    def normalize(self, text: str) -> str:
        start, end, replacement = self.start, self.end, self.replacement
        return "".join(replacement if start <= ord(char) <= end else char for char in text)

    def __repr__(self) -> str:
        return (
            f"UnicodeRangeNormalizer(start=0x{self.start:04X}, end=0x{self.end:04X}, "
            f"replacement={self.replacement!r})"
        )


def _validate_bounds(start: object, end: object) -> None:
    for label, value in (("start", start), ("end", end)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConstructionError(f"{label} must be an integer code point", **{label: value})
        if not 0 <= value <= MAX_CODE_POINT:
            raise ConstructionError(f"{label} is outside the unicode range", **{label: value})
    if start > end:  # type: ignore[operator]
        raise ConstructionError("start must not be greater than end", start=start, end=end)
