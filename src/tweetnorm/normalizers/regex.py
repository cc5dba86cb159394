"""Pattern-based replacement normalizers."""

from __future__ import annotations

import re

from tweetnorm.errors import ConstructionError

# Scheme-prefixed (http://, ftp:, mailto:), www.-prefixed and user@host URLs
# with optional path, query and fragment. The user@host branch only starts at
# the beginning of a run of user characters, which keeps scanning linear.
URL_PATTERN = (
    r"((([A-Za-z]{3,9}:(?://)?)(?:[-;:&=+$,\w]+@)?[A-Za-z0-9.-]+"
    r"|(?:www\.|(?<![-;:&=+$,\w])[-;:&=+$,\w]+@)[A-Za-z0-9.-]+)"
    r"((?:/[+~%/.\w_-]*)?\??(?:[-+=&;%@.\w_]*)#?(?:\w*))?)"
)


class RegexNormalizer:
    """Replace every non-overlapping match of ``pattern`` with ``replacement``.

    The replacement is inserted verbatim; group references such as ``\\1``
    are not expanded.
    """

    def __init__(
        self,
        pattern: str,
        replacement: str = "",
        *,
        flags: int = 0,
        name: str = "regex",
    ) -> None:
        if not isinstance(replacement, str):
            raise ConstructionError(
                "replacement must be a string", replacement=type(replacement).__name__
            )
        try:
            self._regex = re.compile(pattern, flags)
        except (re.error, TypeError) as exc:
            raise ConstructionError(f"invalid pattern: {exc}", pattern=pattern) from exc
        self.replacement = replacement
        self.normalizer_id = name

    @property
    def pattern(self) -> str:
        return self._regex.pattern

    def normalize(self, text: str) -> str:
        replacement = self.replacement
        return self._regex.sub(lambda _match: replacement, text)

    def __repr__(self) -> str:
        return f"RegexNormalizer(pattern={self.pattern!r}, replacement={self.replacement!r})"


def url_normalizer(replacement: str = "") -> RegexNormalizer:
    """Build a normalizer that replaces URLs."""
    return RegexNormalizer(URL_PATTERN, replacement, name="urls")
