"""HTTP API for tweetnorm."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from tweetnorm import __version__
from tweetnorm.config import load_config
from tweetnorm.core import run_pipeline
from tweetnorm.models import (
    HealthResponse,
    NormalizersResponse,
    PipelineRequest,
    PipelineResponse,
)
from tweetnorm.normalizers import DEFAULT_CHAIN, available_normalizers


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="tweetnorm",
        version=__version__,
        description="Tweet normalization and n-gram tokenization service API.",
    )
    config = load_config()

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.get("/v1/normalizers", response_model=NormalizersResponse, tags=["pipeline"])
    def normalizers() -> NormalizersResponse:
        return NormalizersResponse(
            normalizers=available_normalizers(),
            default_chain=list(DEFAULT_CHAIN),
        )

    @app.post("/v1/pipeline", response_model=PipelineResponse, tags=["pipeline"])
    def pipeline(request: PipelineRequest) -> PipelineResponse:
        try:
            return run_pipeline(request)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    return app


app = create_app()
