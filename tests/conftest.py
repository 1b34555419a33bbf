"""Shared fixtures for the Pagescope test suite."""

from __future__ import annotations

from typing import Callable

import pytest

from core.document import Document, parse_document
from core.models import FetchOutcome

PageFactory = Callable[..., tuple[Document, FetchOutcome]]


@pytest.fixture
def make_page() -> PageFactory:
    """Build a parsed document plus the fetch outcome it came from."""

    def _make(
        html: str,
        url: str = "https://example.com/",
        status_code: int = 200,
        response_time_ms: int = 120,
        headers: dict[str, str] | None = None,
    ) -> tuple[Document, FetchOutcome]:
        outcome = FetchOutcome(
            html=html,
            status_code=status_code,
            response_time_ms=response_time_ms,
            final_url=url,
            headers=headers or {},
        )
        return parse_document(html), outcome

    return _make
