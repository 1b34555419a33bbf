"""Accessibility heuristics extractor."""

import re

from core.document import Document
from core.models import AccessibilityFeatures, FetchOutcome

# Penalties (points off a starting score of 100)
MISSING_ALT_PENALTY = 3
MISSING_ALT_CAP = 30
MISSING_LABEL_PENALTY = 5
MISSING_LABEL_CAP = 20
MISSING_LANG_PENALTY = 10
MISSING_H1_PENALTY = 15
LOW_CONTRAST_PENALTY = 15

# Inputs that carry their own accessible name or are not user-facing
UNLABELLED_EXEMPT_TYPES = {"hidden", "submit", "button", "reset"}

# Inline text colors known to give poor contrast on white.
# A pattern match on style attributes, not a contrast computation.
LOW_CONTRAST_STYLE = re.compile(
    r"(?:^|;)\s*color\s*:\s*(?:#ccc\b|#cccccc\b|lightgr[ae]y\b)", re.I
)


def extract_accessibility(
    document: Document, outcome: FetchOutcome
) -> AccessibilityFeatures:
    """
    Score basic accessibility from 100 down, collecting an issue per deduction.

    Deductions: images without an alt attribute, form inputs without an
    accessible label, missing ``lang`` on ``<html>``, no H1, and inline
    low-contrast text colors. The score floors at 0.
    """
    issues = []
    score = 100

    images_without_alt = len(
        [img for img in document.select_all("img") if document.attr(img, "alt") is None]
    )
    if images_without_alt > 0:
        issues.append(f"{images_without_alt} images missing alt attributes")
        score -= min(MISSING_ALT_CAP, images_without_alt * MISSING_ALT_PENALTY)

    missing_labels = _count_unlabelled_inputs(document)
    if missing_labels > 0:
        issues.append(f"{missing_labels} form inputs without proper labels")
        score -= min(MISSING_LABEL_CAP, missing_labels * MISSING_LABEL_PENALTY)

    if document.root_attr("lang") is None:
        issues.append("Missing language declaration in HTML tag")
        score -= MISSING_LANG_PENALTY

    missing_h1 = document.select_first("h1") is None
    if missing_h1:
        issues.append("Missing H1 heading for proper document structure")
        score -= MISSING_H1_PENALTY

    contrast_issues = document.count(attrs={"style": LOW_CONTRAST_STYLE})
    if contrast_issues > 0:
        issues.append("Potential low contrast text detected")
        score -= LOW_CONTRAST_PENALTY

    skip_links = [
        link
        for link in document.select_all("a", {"href": re.compile(r"^#")})
        if "skip" in document.text(link).lower()
    ]

    return AccessibilityFeatures(
        score=max(0, score),
        issues=issues,
        missing_alt=images_without_alt,
        missing_labels=missing_labels,
        missing_h1=missing_h1,
        contrast_issues=contrast_issues,
        has_skip_links=bool(skip_links),
    )


def _count_unlabelled_inputs(document: Document) -> int:
    """Inputs with no aria-label, aria-labelledby, label[for] or wrapping label."""
    labelled_ids = {
        document.attr(label, "for")
        for label in document.select_all("label", {"for": True})
    }

    count = 0
    for field in document.select_all("input"):
        if document.attr(field, "type", "text").lower() in UNLABELLED_EXEMPT_TYPES:
            continue
        if document.attr(field, "aria-label", "").strip():
            continue
        if document.attr(field, "aria-labelledby", "").strip():
            continue
        if document.attr(field, "id") in labelled_ids:
            continue
        if document.has_ancestor(field, "label"):
            continue
        count += 1
    return count
