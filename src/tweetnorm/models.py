"""Shared data models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from tweetnorm.normalizers.registry import DEFAULT_CHAIN

LevelName = Literal["word", "character"]


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class NormalizersResponse(BaseModel):
    """Available normalizer presets."""

    normalizers: list[str]
    default_chain: list[str]


class PipelineRequest(BaseModel):
    """Normalization + tokenization request used by both CLI and API."""

    text: str
    normalizers: list[str] = Field(default_factory=lambda: list(DEFAULT_CHAIN))
    window_size: int = Field(default=2, ge=1)
    level: LevelName = "character"


class PipelineMetadata(BaseModel):
    """Metadata describing how a pipeline result was produced."""

    normalizer_id: str
    normalizers: list[str]
    window_size: int = Field(ge=1)
    level: LevelName
    ngram_count: int = Field(ge=0)
    generated_at: datetime


class PipelineResponse(BaseModel):
    """Canonical pipeline output schema."""

    metadata: PipelineMetadata
    original: str
    normalized: str
    ngrams: list[str]
