"""Tests for the robots.txt / sitemap probe runner.

Probe routes are mocked with ``respx``; a catch-all HEAD route answers 404
for anything a test does not set up explicitly.
"""

from __future__ import annotations

import asyncio
import time

import httpx
import respx

from config import Settings
from core.models import ProbeResult
from core.probes import origin_of, run_probes

_SETTINGS = Settings(probe_timeout=1)


def _run(
    page_url: str = "https://example.com/blog/post", settings: Settings = _SETTINGS
) -> ProbeResult:
    return asyncio.run(run_probes(page_url, settings))


def _fallback_404(router: respx.MockRouter) -> None:
    router.route(method="HEAD").mock(return_value=httpx.Response(404))


def _delayed(status_code: int, delay: float):
    async def respond(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(delay)
        return httpx.Response(status_code)

    return respond


class TestOriginOf:
    def test_keeps_scheme_host_and_port(self) -> None:
        assert origin_of("https://example.com/a/b?c=1") == "https://example.com"
        assert origin_of("http://localhost:8080/x") == "http://localhost:8080"


class TestRunProbes:
    def test_robots_missing_sitemap_index_found(self) -> None:
        with respx.mock(assert_all_called=False) as router:
            router.head("https://example.com/robots.txt").mock(
                return_value=httpx.Response(404)
            )
            router.head("https://example.com/sitemap_index.xml").mock(
                return_value=httpx.Response(200)
            )
            _fallback_404(router)
            result = _run()

        assert result.has_robots_txt is False
        assert result.has_sitemap is True
        assert result.sitemap_url == "https://example.com/sitemap_index.xml"

    def test_everything_found(self) -> None:
        with respx.mock(assert_all_called=False) as router:
            router.head("https://example.com/robots.txt").mock(
                return_value=httpx.Response(200)
            )
            router.head("https://example.com/sitemap.xml").mock(
                return_value=httpx.Response(200)
            )
            _fallback_404(router)
            result = _run()

        assert result.has_robots_txt is True
        assert result.has_sitemap is True
        assert result.sitemap_url == "https://example.com/sitemap.xml"

    def test_nothing_found(self) -> None:
        with respx.mock(assert_all_called=False) as router:
            _fallback_404(router)
            result = _run()

        assert result == ProbeResult()

    def test_network_failures_read_as_not_found(self) -> None:
        with respx.mock(assert_all_called=False) as router:
            router.head("https://example.com/robots.txt").mock(
                side_effect=httpx.ConnectTimeout("timed out")
            )
            router.head("https://example.com/sitemap.xml").mock(
                side_effect=httpx.ConnectError("refused")
            )
            router.head("https://example.com/wp-sitemap.xml").mock(
                return_value=httpx.Response(200)
            )
            _fallback_404(router)
            result = _run()

        assert result.has_robots_txt is False
        assert result.has_sitemap is True
        assert result.sitemap_url == "https://example.com/wp-sitemap.xml"

    def test_server_errors_read_as_not_found(self) -> None:
        with respx.mock(assert_all_called=False) as router:
            router.route(method="HEAD").mock(return_value=httpx.Response(500))
            result = _run()

        assert result.has_robots_txt is False
        assert result.has_sitemap is False

    def test_probes_use_page_origin(self) -> None:
        with respx.mock(assert_all_called=False) as router:
            robots = router.head("http://shop.example.org:8080/robots.txt").mock(
                return_value=httpx.Response(200)
            )
            _fallback_404(router)
            result = _run("http://shop.example.org:8080/products/1")

        assert robots.called
        assert result.has_robots_txt is True


# ---------------------------------------------------------------------------
# Ordering and time limits
# ---------------------------------------------------------------------------


class TestSitemapRace:
    def test_earliest_candidate_wins_even_if_slower(self) -> None:
        with respx.mock(assert_all_called=False) as router:
            router.head("https://example.com/sitemap.xml").mock(
                side_effect=_delayed(200, 0.2)
            )
            router.head("https://example.com/sitemap_index.xml").mock(
                return_value=httpx.Response(200)
            )
            router.head("https://example.com/wp-sitemap.xml").mock(
                return_value=httpx.Response(200)
            )
            _fallback_404(router)
            result = _run()

        assert result.sitemap_url == "https://example.com/sitemap.xml"

    def test_later_candidate_wins_once_earlier_ones_fail(self) -> None:
        with respx.mock(assert_all_called=False) as router:
            router.head("https://example.com/sitemap.xml").mock(
                side_effect=_delayed(404, 0.1)
            )
            router.head("https://example.com/wp-sitemap.xml").mock(
                return_value=httpx.Response(200)
            )
            _fallback_404(router)
            result = _run()

        assert result.sitemap_url == "https://example.com/wp-sitemap.xml"

    def test_slow_probes_are_cut_off(self) -> None:
        settings = Settings(probe_timeout=0.2)
        with respx.mock(assert_all_called=False) as router:
            router.head("https://example.com/robots.txt").mock(
                side_effect=_delayed(200, 3)
            )
            router.head("https://example.com/sitemap.xml").mock(
                side_effect=_delayed(200, 3)
            )
            router.head("https://example.com/sitemap_index.xml").mock(
                return_value=httpx.Response(200)
            )
            _fallback_404(router)
            started = time.perf_counter()
            result = _run(settings=settings)
            elapsed = time.perf_counter() - started

        assert elapsed < 2
        assert result.has_robots_txt is False
        assert result.sitemap_url == "https://example.com/sitemap_index.xml"
