"""Best-effort robots.txt and sitemap probes."""

import asyncio
import logging
from urllib.parse import urlparse

import httpx

from config import Settings
from core.models import ProbeResult

logger = logging.getLogger(__name__)

ROBOTS_PATH = "/robots.txt"

# Checked concurrently; the earliest one answering 200 wins
SITEMAP_PATHS = [
    "/sitemap.xml",
    "/sitemap_index.xml",
    "/wp-sitemap.xml",
]


def origin_of(url: str) -> str:
    """Scheme and host (with port) of a URL, e.g. ``https://example.com``."""
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


async def probe(
    client: httpx.AsyncClient, url: str, timeout: float | None = None
) -> bool:
    """
    HEAD a URL and report whether it answered 200 within ``timeout`` seconds.

    Any failure (timeout, error status, network error) reads as not found.
    """
    try:
        response = await asyncio.wait_for(client.head(url), timeout=timeout)
    except asyncio.TimeoutError:
        logger.debug(f"Probe {url} exceeded {timeout}s")
        return False
    except httpx.HTTPError as e:
        logger.debug(f"Probe {url} failed: {e.__class__.__name__}: {e}")
        return False

    if response.status_code != 200:
        logger.debug(f"Probe {url} returned {response.status_code}")
        return False
    return True


async def find_sitemap(
    client: httpx.AsyncClient, origin: str, timeout: float | None = None
) -> str | None:
    """
    Race all sitemap candidates and return the first one found.

    "First" follows ``SITEMAP_PATHS`` order: a hit is reported once every
    earlier candidate has failed, and the remaining candidates are cancelled.
    """

    async def check(url: str) -> str | None:
        return url if await probe(client, url, timeout) else None

    tasks = [
        asyncio.create_task(check(f"{origin}{path}")) for path in SITEMAP_PATHS
    ]
    try:
        for next_done in asyncio.as_completed(tasks):
            await next_done
            for task in tasks:
                if not task.done():
                    break
                if task.result():
                    return task.result()
        return None
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)


async def run_probes(page_url: str, settings: Settings) -> ProbeResult:
    """
    Probe the page's origin for robots.txt and an XML sitemap.

    Each HEAD is bounded by ``settings.probe_timeout`` end to end; probes
    never raise.
    """
    origin = origin_of(page_url)

    async with httpx.AsyncClient(
        timeout=settings.probe_timeout,
        follow_redirects=True,
        max_redirects=settings.max_redirects,
        headers={"User-Agent": settings.user_agent},
    ) as client:
        has_robots, sitemap_url = await asyncio.gather(
            probe(client, f"{origin}{ROBOTS_PATH}", settings.probe_timeout),
            find_sitemap(client, origin, settings.probe_timeout),
        )

    logger.info(
        f"Probes for {origin}: robots.txt={has_robots}, sitemap={sitemap_url}"
    )

    return ProbeResult(
        has_robots_txt=has_robots,
        has_sitemap=sitemap_url is not None,
        sitemap_url=sitemap_url,
    )
