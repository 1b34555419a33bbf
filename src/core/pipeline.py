"""Analysis pipeline: fetch, parse, extract, score, report."""

import asyncio
import logging
import time

from pydantic import ValidationError as PydanticValidationError

from analyzers import EXTRACTORS, with_probes
from config import Settings, settings as default_settings
from core.document import Document, parse_document
from core.errors import AnalysisTimeoutError, ValidationError
from core.fetcher import build_client, fetch_page
from core.models import (
    AnalysisRequest,
    AnalysisResult,
    FeatureSet,
    FetchOutcome,
)
from core.probes import run_probes
from recommendations import generate_action_items, generate_findings
from scoring import compute_scores

logger = logging.getLogger(__name__)


def validate_url(url: str) -> AnalysisRequest:
    """
    Validate a URL before any network activity.

    Raises:
        ValidationError: If the URL is not an absolute http(s) URL
    """
    try:
        return AnalysisRequest(url=url)
    except PydanticValidationError as e:
        message = e.errors()[0]["msg"] if e.errors() else str(e)
        raise ValidationError(f"Invalid URL {url!r}: {message}") from e


async def analyze(url: str, settings: Settings | None = None) -> AnalysisResult:
    """
    Run a complete analysis of a single page.

    Args:
        url: Absolute http(s) URL of the page
        settings: Optional settings; defaults to environment configuration

    Returns:
        AnalysisResult with features, scores, findings and action items

    Raises:
        ValidationError: If the URL is malformed (no network I/O happens)
        FetchError: If the page cannot be retrieved or answers 5xx
        AnalysisTimeoutError: If the run exceeds ``settings.analysis_timeout``
    """
    settings = settings or default_settings
    request = validate_url(url)

    try:
        return await asyncio.wait_for(
            _run(url.strip(), request, settings), timeout=settings.analysis_timeout
        )
    except asyncio.TimeoutError as e:
        logger.error(f"Analysis of {url} exceeded {settings.analysis_timeout}s")
        raise AnalysisTimeoutError(
            f"Analysis of {url} exceeded {settings.analysis_timeout}s"
        ) from e


async def _run(
    url: str, request: AnalysisRequest, settings: Settings
) -> AnalysisResult:
    started = time.perf_counter()
    logger.info(f"Starting analysis for {url}")

    async with build_client(settings) as client:
        outcome = await fetch_page(client, url, timeout=settings.http_timeout)

    document = parse_document(outcome.html)

    features = await extract_features(document, outcome, settings)

    scores, findings = await asyncio.gather(
        asyncio.to_thread(compute_scores, features),
        asyncio.to_thread(generate_findings, features),
    )

    content = features.content
    result = AnalysisResult(
        url=url,
        domain=request.url.host or "",
        title=content.title,
        meta_description=content.meta_description,
        h1_tags=content.h1_tags,
        h2_tags=content.h2_tags,
        h3_tags=content.h3_tags,
        features=features,
        scores=scores,
        findings=findings,
        action_items=generate_action_items(features),
    )

    elapsed_ms = round((time.perf_counter() - started) * 1000)
    logger.info(
        f"Analysis for {url} completed in {elapsed_ms}ms (score {scores.overall})"
    )
    return result


async def extract_features(
    document: Document, outcome: FetchOutcome, settings: Settings
) -> FeatureSet:
    """
    Run every extractor and the probe runner concurrently.

    Extractors run in worker threads over the shared read-only document; an
    extractor that raises is logged and replaced by its default record.
    """
    names = list(EXTRACTORS)
    results = await asyncio.gather(
        *(asyncio.to_thread(_safe_extract, name, document, outcome) for name in names),
        run_probes(outcome.final_url, settings),
    )
    records = dict(zip(names, results[:-1]))
    probes = results[-1]

    records["technical"] = with_probes(records["technical"], probes)
    return FeatureSet(**records)


def _safe_extract(name: str, document: Document, outcome: FetchOutcome):
    try:
        return EXTRACTORS[name](document, outcome)
    except Exception as e:
        logger.exception(f"{name} extractor failed, using defaults: {e}")
        return FeatureSet.model_fields[name].default_factory()


def run_analysis(url: str, settings: Settings | None = None) -> AnalysisResult:
    """Synchronous wrapper around :func:`analyze`."""
    return asyncio.run(analyze(url, settings))
