"""Performance heuristics extractor."""

import re

from core.document import Document
from core.models import FetchOutcome, PerformanceFeatures

# Asset naming conventions taken as a sign of minification.
# Substring heuristics only; file contents are not inspected.
MINIFIED_JS_HINT = ".min.js"
MINIFIED_CSS_HINT = ".min.css"

COMPRESSED_ENCODINGS = ("gzip", "br", "deflate", "zstd")
STYLESHEET_REL = re.compile(r"\bstylesheet\b", re.I)


def extract_performance(
    document: Document, outcome: FetchOutcome
) -> PerformanceFeatures:
    """
    Estimate page weight and request count from the markup.

    Request count is 1 for the document plus every external script,
    stylesheet and image referenced by the page.
    """
    scripts = [
        document.attr(script, "src", "")
        for script in document.select_all("script", {"src": True})
    ]
    stylesheets = [
        document.attr(link, "href", "")
        for link in document.select_all("link", {"rel": STYLESHEET_REL})
    ]
    images = document.count("img", {"src": True})

    encoding = outcome.headers.get("content-encoding", "").lower()

    return PerformanceFeatures(
        load_time_ms=outcome.response_time_ms,
        page_size_kb=round(len(outcome.html.encode("utf-8")) / 1024),
        requests=1 + len(scripts) + len(stylesheets) + images,
        minified_js=any(MINIFIED_JS_HINT in src.lower() for src in scripts),
        minified_css=any(MINIFIED_CSS_HINT in href.lower() for href in stylesheets),
        compression=any(name in encoding for name in COMPRESSED_ENCODINGS),
        cache_headers=(
            "cache-control" in outcome.headers or "expires" in outcome.headers
        ),
    )
