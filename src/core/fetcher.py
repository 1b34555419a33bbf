"""Primary page fetcher."""

import asyncio
import logging
import time

import httpx

from config import Settings
from core.errors import FetchError
from core.models import FetchOutcome

logger = logging.getLogger(__name__)

# Status codes at or above this abort the run; 4xx pages are still analyzed.
SERVER_ERROR_STATUS = 500


def build_client(settings: Settings) -> httpx.AsyncClient:
    """Create the client used for the main page fetch."""
    return httpx.AsyncClient(
        timeout=settings.http_timeout,
        follow_redirects=True,
        max_redirects=settings.max_redirects,
        headers={"User-Agent": settings.user_agent},
    )


async def fetch_page(
    client: httpx.AsyncClient, url: str, timeout: float | None = None
) -> FetchOutcome:
    """
    Fetch the target page.

    Args:
        client: Client configured by :func:`build_client`
        url: Validated absolute URL
        timeout: Wall-clock limit for the whole request, redirects and body
            included. The client timeout alone only bounds each network phase.

    Returns:
        FetchOutcome with markup, status, elapsed time and final URL

    Raises:
        FetchError: On transport failure, timeout, too many redirects or a
            5xx response
    """
    started = time.perf_counter()
    try:
        response = await asyncio.wait_for(client.get(url), timeout=timeout)
    except (httpx.TimeoutException, asyncio.TimeoutError) as e:
        logger.error(f"Timeout fetching {url}")
        raise FetchError(url, f"Timeout fetching page ({e.__class__.__name__})") from e
    except httpx.HTTPError as e:
        logger.error(f"Error fetching {url}: {e}")
        raise FetchError(url, str(e) or e.__class__.__name__) from e

    elapsed_ms = round((time.perf_counter() - started) * 1000)

    if response.status_code >= SERVER_ERROR_STATUS:
        logger.error(f"Server error {response.status_code} fetching {url}")
        raise FetchError(
            url,
            f"Server responded with status {response.status_code}",
            status_code=response.status_code,
        )

    logger.debug(f"Fetched {url} ({response.status_code}) in {elapsed_ms}ms")

    return FetchOutcome(
        html=response.text,
        status_code=response.status_code,
        response_time_ms=elapsed_ms,
        final_url=str(response.url),
        headers={key.lower(): value for key, value in response.headers.items()},
    )
