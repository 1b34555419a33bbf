"""Link classification extractor."""

from urllib.parse import urljoin, urlparse

from core.document import Document
from core.models import FetchOutcome, LinkFeatures

# hrefs that never leave the page or are not navigable
SKIPPED_PREFIXES = ("#", "mailto:", "tel:", "javascript:")

# Schemes that must carry a host to be valid
WEB_SCHEMES = ("http", "https")


def extract_links(document: Document, outcome: FetchOutcome) -> LinkFeatures:
    """
    Classify anchors as internal or external relative to the page's host.

    "Broken" is a malformed-URL heuristic: hrefs that cannot be parsed or
    web URLs without a host. Other schemes without a host (``sms:``,
    ``whatsapp:``) point off-site and count as external. No request is made
    per link.
    """
    base_url = outcome.final_url
    base_host = urlparse(base_url).hostname

    internal = 0
    external = 0
    broken = 0
    nofollow = 0
    dofollow = 0

    for link in document.select_all("a", {"href": True}):
        href = document.attr(link, "href", "").strip()
        if not href or href.lower().startswith(SKIPPED_PREFIXES):
            continue

        if "nofollow" in document.attr(link, "rel", "").lower().split():
            nofollow += 1
        else:
            dofollow += 1

        host = resolve_host(href, base_url)
        if host is None:
            broken += 1
        elif host == base_host:
            internal += 1
        else:
            external += 1

    return LinkFeatures(
        internal=internal,
        external=external,
        broken=broken,
        nofollow=nofollow,
        dofollow=dofollow,
    )


def resolve_host(href: str, base_url: str) -> str | None:
    """
    Hostname an href points to.

    Returns an empty string for host-less non-web URLs such as ``sms:123``
    and None if the href is malformed.
    """
    try:
        parsed = urlparse(href)
        if not parsed.scheme:
            parsed = urlparse(urljoin(base_url, href))
        hostname = parsed.hostname
    except ValueError:
        return None

    if hostname:
        return hostname
    if parsed.scheme.lower() in WEB_SCHEMES:
        return None
    return ""
