"""Pagescope scoring package."""

from scoring.engine import compute_scores

__all__ = ["compute_scores"]
