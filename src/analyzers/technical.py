"""Technical and crawlability extractor."""

import re
from urllib.parse import urlparse

from core.document import Document
from core.models import FetchOutcome, ProbeResult, TechnicalFeatures

# Response headers carried into the feature set for display
REPORTED_HEADERS = [
    "server",
    "content-type",
    "cache-control",
    "content-encoding",
    "x-robots-tag",
    "strict-transport-security",
]

OG_PROPERTY = re.compile(r"^og:")


def extract_technical(document: Document, outcome: FetchOutcome) -> TechnicalFeatures:
    """
    Extract crawlability signals from the document and fetch metadata.

    robots.txt and sitemap presence come from the probe runner and are
    merged in with :func:`with_probes`.
    """
    viewport = document.select_first("meta", {"name": re.compile(r"^viewport$", re.I)})

    charset = document.attr(document.select_first("meta", {"charset": True}), "charset")
    if not charset:
        content_type_meta = document.select_first(
            "meta", {"http-equiv": re.compile(r"^content-type$", re.I)}
        )
        charset = document.attr(content_type_meta, "content", "")

    hreflang = [
        document.attr(link, "hreflang")
        for link in document.select_all(
            "link",
            {"rel": re.compile(r"\balternate\b", re.I), "hreflang": True},
        )
        if document.attr(link, "hreflang")
    ]

    doctype = document.doctype()

    return TechnicalFeatures(
        has_ssl=urlparse(outcome.final_url).scheme == "https",
        is_responsive=viewport is not None,
        has_structured_data=_has_structured_data(document),
        canonical_url=document.attr(
            document.select_first("link", {"rel": re.compile(r"\bcanonical\b", re.I)}),
            "href",
            "",
        ).strip(),
        meta_viewport=document.attr(viewport, "content", ""),
        charset=charset,
        doctype=f"<!DOCTYPE {doctype}>" if doctype else "",
        lang=document.root_attr("lang", ""),
        hreflang=hreflang,
        status_code=outcome.status_code,
        response_time_ms=outcome.response_time_ms,
        http_headers={
            name: outcome.headers[name]
            for name in REPORTED_HEADERS
            if name in outcome.headers
        },
    )


def _has_structured_data(document: Document) -> bool:
    """JSON-LD block, microdata scope or any Open Graph tag."""
    return (
        document.select_first("script", {"type": "application/ld+json"}) is not None
        or document.select_first(attrs={"itemscope": True}) is not None
        or document.select_first("meta", {"property": OG_PROPERTY}) is not None
    )


def with_probes(technical: TechnicalFeatures, probes: ProbeResult) -> TechnicalFeatures:
    """Merge probe outcomes into a technical record."""
    return technical.model_copy(
        update={
            "has_robots_txt": probes.has_robots_txt,
            "has_sitemap": probes.has_sitemap,
            "sitemap_url": probes.sitemap_url,
        }
    )
