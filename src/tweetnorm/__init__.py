"""Normalization and n-gram tokenization for short social-media text."""

__version__ = "0.1.0"

__all__ = ["__version__"]
