"""Sequential composition of normalizers."""

from __future__ import annotations

import logging

from tweetnorm.errors import ConstructionError
from tweetnorm.normalizers.base import Normalizer

logger = logging.getLogger(__name__)


class ChainNormalizer:
    """Apply normalizers one after another in construction order."""

    def __init__(self, *normalizers: Normalizer) -> None:
        for position, normalizer in enumerate(normalizers):
            if not callable(getattr(normalizer, "normalize", None)):
                raise ConstructionError(
                    "chain members must provide normalize()",
                    position=position,
                    member=type(normalizer).__name__,
                )
        self._normalizers = tuple(normalizers)
        member_ids = ",".join(_member_id(normalizer) for normalizer in self._normalizers)
        self.normalizer_id = f"chain({member_ids})"
        logger.debug("Built normalizer chain %s", self.normalizer_id)

    @property
    def normalizers(self) -> tuple[Normalizer, ...]:
        return self._normalizers

    def normalize(self, text: str) -> str:
        normalized = text
        for normalizer in self._normalizers:
            normalized = normalizer.normalize(normalized)
        return normalized

    def __len__(self) -> int:
        return len(self._normalizers)

    def __repr__(self) -> str:
        return f"ChainNormalizer({', '.join(repr(item) for item in self._normalizers)})"


def _member_id(normalizer: object) -> str:
    return str(getattr(normalizer, "normalizer_id", type(normalizer).__name__))
