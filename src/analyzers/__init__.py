"""Pagescope feature extractors."""

from analyzers.accessibility import extract_accessibility
from analyzers.base import Extractor
from analyzers.content import extract_content
from analyzers.images import extract_images
from analyzers.links import extract_links
from analyzers.performance import extract_performance
from analyzers.social import extract_social
from analyzers.technical import extract_technical, with_probes

# FeatureSet field name -> extractor
EXTRACTORS: dict[str, Extractor] = {
    "content": extract_content,
    "technical": extract_technical,
    "images": extract_images,
    "links": extract_links,
    "performance": extract_performance,
    "social": extract_social,
    "accessibility": extract_accessibility,
}

__all__ = [
    "EXTRACTORS",
    "Extractor",
    "extract_accessibility",
    "extract_content",
    "extract_images",
    "extract_links",
    "extract_performance",
    "extract_social",
    "extract_technical",
    "with_probes",
]
