"""Error types raised while building normalizers and tokenizers."""

from __future__ import annotations

from typing import Any


class ConstructionError(ValueError):
    """Invalid normalizer or tokenizer configuration."""

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
            return f"{self.message} ({details})"
        return self.message


class UnsupportedLevelError(ConstructionError):
    """Tokenizer configured with an unknown level."""
