"""Normalize-then-tokenize pipeline."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from tweetnorm.models import PipelineMetadata, PipelineRequest, PipelineResponse
from tweetnorm.normalizers import build_chain
from tweetnorm.tokenize import NGramTokenizer

logger = logging.getLogger(__name__)


def run_pipeline(request: PipelineRequest) -> PipelineResponse:
    """Normalize the request text and extract its n-grams."""
    chain = build_chain(request.normalizers)
    tokenizer = NGramTokenizer(request.window_size, request.level)

    normalized = chain.normalize(request.text)
    ngrams = tokenizer.tokenize(normalized)
    logger.debug(
        "Pipeline %s produced %d %s-level n-grams", chain.normalizer_id, len(ngrams), request.level
    )

    metadata = PipelineMetadata(
        normalizer_id=chain.normalizer_id,
        normalizers=[normalizer.normalizer_id for normalizer in chain.normalizers],
        window_size=tokenizer.window_size,
        level=tokenizer.level.value,
        ngram_count=len(ngrams),
        generated_at=datetime.now(UTC),
    )
    return PipelineResponse(
        metadata=metadata,
        original=request.text,
        normalized=normalized,
        ngrams=ngrams,
    )
