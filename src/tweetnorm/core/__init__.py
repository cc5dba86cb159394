"""Pipeline orchestration."""

from tweetnorm.core.pipeline import run_pipeline

__all__ = ["run_pipeline"]
