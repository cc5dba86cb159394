"""Case normalization."""

from __future__ import annotations


class LowerCaseNormalizer:
    """Lower-case text without regard to locale.

    ``full_folding`` switches from ``str.lower`` to ``str.casefold``, which
    also expands characters such as ``ß`` to ``ss``.
    """

    def __init__(self, *, full_folding: bool = False) -> None:
        self.full_folding = full_folding
        self.normalizer_id = "casefold" if full_folding else "lowercase"

    def normalize(self, text: str) -> str:
        if self.full_folding:
            return text.casefold()
        return text.lower()

    def __repr__(self) -> str:
        return f"LowerCaseNormalizer(full_folding={self.full_folding})"
