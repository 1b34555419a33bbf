"""Image extractor."""

import posixpath
from urllib.parse import urlparse

from core.document import Document
from core.models import FetchOutcome, ImageFeatures

# Substrings in an image source that suggest a very large original.
# A naming heuristic, not a measurement of real dimensions.
OVERSIZED_HINTS = ("2048", "1920", "4k")

# Attribute used by lazy-loading libraries to defer the real source
DEFERRED_SOURCE_ATTR = "data-src"


def extract_images(document: Document, outcome: FetchOutcome) -> ImageFeatures:
    images = document.select_all("img")
    with_alt = 0
    oversized = 0
    lazy_loaded = 0
    formats: dict[str, int] = {}

    for img in images:
        if document.attr(img, "alt", "").strip():
            with_alt += 1

        deferred = document.attr(img, DEFERRED_SOURCE_ATTR)
        if document.attr(img, "loading", "").lower() == "lazy" or deferred:
            lazy_loaded += 1

        src = document.attr(img, "src") or deferred or ""
        if not src:
            continue

        extension = image_extension(src)
        if extension:
            formats[extension] = formats.get(extension, 0) + 1

        if is_oversized(src):
            oversized += 1

    return ImageFeatures(
        total=len(images),
        with_alt=with_alt,
        missing_alt=len(images) - with_alt,
        oversized=oversized,
        lazy_loaded=lazy_loaded,
        formats=formats,
    )


def image_extension(src: str) -> str:
    """Lower-cased file extension of an image URL's path, without the dot."""
    try:
        path = urlparse(src.strip()).path
    except ValueError:
        return ""
    return posixpath.splitext(path)[1].lstrip(".").lower()


def is_oversized(src: str) -> bool:
    lowered = src.lower()
    return any(hint in lowered for hint in OVERSIZED_HINTS)
