"""Normalizer interfaces."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Normalizer(Protocol):
    """Protocol implemented by every text normalizer.

    Implementations are pure: ``normalize`` never mutates instance state and
    never raises for a well-formed ``str``.
    """

    normalizer_id: str

    def normalize(self, text: str) -> str:
        """Return the normalized form of ``text``."""
