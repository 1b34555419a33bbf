"""Pagescope core: data model, errors, fetching, parsing and the pipeline."""

from core.errors import (
    AnalysisError,
    AnalysisTimeoutError,
    FetchError,
    ValidationError,
)

__all__ = [
    "AnalysisError",
    "AnalysisTimeoutError",
    "FetchError",
    "ValidationError",
]
