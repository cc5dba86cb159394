"""Pipeline output rendering."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from tweetnorm.models import PipelineResponse

OutputFormat = Literal["json", "text"]


def to_json(response: PipelineResponse) -> str:
    """Serialize a pipeline response to formatted JSON."""
    return response.model_dump_json(indent=2)


def to_text(response: PipelineResponse) -> str:
    """Render the normalized text followed by one quoted n-gram per line."""
    metadata = response.metadata
    lines = [
        f"normalized: {json.dumps(response.normalized, ensure_ascii=False)}",
        f"normalizers: {', '.join(metadata.normalizers) or '(none)'}",
        f"ngrams: {metadata.ngram_count} ({metadata.level} level, window {metadata.window_size})",
    ]
    lines.extend(f"  {json.dumps(ngram, ensure_ascii=False)}" for ngram in response.ngrams)
    return "\n".join(lines)


def render(response: PipelineResponse, output_format: OutputFormat = "json") -> str:
    """Render a pipeline response in the requested format."""
    if output_format == "text":
        return to_text(response)
    return to_json(response)


def write_output(
    response: PipelineResponse,
    output_path: str | Path,
    output_format: OutputFormat = "json",
) -> Path:
    """Write a rendered pipeline response to disk and return the path."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render(response, output_format) + "\n", encoding="utf-8")
    return path
