"""Social metadata extractor."""

import re

from core.document import Document
from core.models import FetchOutcome, SocialFeatures

OPEN_GRAPH = re.compile(r"^og:")
TWITTER = re.compile(r"^twitter:")
FACEBOOK = re.compile(r"^fb:")


def extract_social(document: Document, outcome: FetchOutcome) -> SocialFeatures:
    open_graph = _meta_map(document, "property", OPEN_GRAPH)
    twitter_card = _meta_map(document, "name", TWITTER)
    facebook = _meta_map(document, "property", FACEBOOK)

    return SocialFeatures(
        has_open_graph=document.select_first("meta", {"property": OPEN_GRAPH})
        is not None,
        has_twitter_cards=document.select_first("meta", {"name": TWITTER})
        is not None,
        has_facebook_meta=document.select_first("meta", {"property": FACEBOOK})
        is not None,
        open_graph=open_graph,
        twitter_card=twitter_card,
        facebook=facebook,
    )


def _meta_map(document: Document, key_attr: str, prefix: re.Pattern) -> dict[str, str]:
    """Key to content map of meta tags whose key attribute has a prefix."""
    tags = {}
    for meta in document.select_all("meta", {key_attr: prefix}):
        key = document.attr(meta, key_attr)
        content = document.attr(meta, "content")
        if key and content:
            tags[key] = content
    return tags
