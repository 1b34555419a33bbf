"""Finding generator: evaluates the rule table against a feature set."""

import logging

from core.models import FeatureSet, Finding, FindingBuckets, ScoreSet
from recommendations.actions import ACCESSIBILITY_ISSUES, ACTION_ITEMS
from recommendations.rules import (
    ALL_RULES,
    CRITICAL,
    POSITIVE,
    RECOMMENDATION,
    WARNING,
    Rule,
)

logger = logging.getLogger(__name__)

TITLE_PREVIEW_LENGTH = 100
DEFAULT_ACTION_LIMIT = 12


def template_values(features: FeatureSet) -> dict:
    """Measured values available to finding and action item templates."""
    title = features.content.title
    return {
        "title": title,
        "title_length": len(title),
        "title_preview": (
            f"{title[:TITLE_PREVIEW_LENGTH]}..."
            if len(title) > TITLE_PREVIEW_LENGTH
            else title
        ),
        "h1_count": len(features.content.h1_tags),
        "first_h1": features.content.h1_tags[0] if features.content.h1_tags else "",
        "word_count": features.content.word_count,
        "missing_alt": features.images.missing_alt,
        "total_images": features.images.total,
        "oversized": features.images.oversized,
        "response_time_ms": features.technical.response_time_ms,
        "page_size_kb": features.performance.page_size_kb,
        "requests": features.performance.requests,
    }


def generate_findings(
    features: FeatureSet, scores: ScoreSet | None = None
) -> FindingBuckets:
    """
    Build severity-bucketed findings for a feature set.

    Deterministic: rules are evaluated in table order and each triggered
    rule yields exactly one finding in its bucket. ``scores`` is accepted
    for callers that have them; no current rule depends on them.
    """
    values = template_values(features)
    buckets: dict[str, list[Finding]] = {
        CRITICAL: [],
        WARNING: [],
        RECOMMENDATION: [],
        POSITIVE: [],
    }

    for rule in ALL_RULES:
        if rule.condition(features):
            buckets[rule.bucket].append(_render(rule, values))
            logger.debug(f"Rule triggered: {rule.id}")

    logger.info(
        "Generated findings: "
        + ", ".join(f"{len(items)} {name}" for name, items in buckets.items())
    )

    return FindingBuckets(**buckets)


def _render(rule: Rule, values: dict) -> Finding:
    def fill(template: str | None) -> str | None:
        return template.format(**values) if template is not None else None

    return Finding(
        category=rule.category,
        title=rule.title,
        description=fill(rule.description),
        impact=rule.impact,
        technical_details=fill(rule.technical_details),
        recommendation=fill(rule.recommendation),
        how_to_fix=fill(rule.how_to_fix),
        resources=list(rule.resources),
    )


def generate_action_items(
    features: FeatureSet, limit: int = DEFAULT_ACTION_LIMIT
) -> list[str]:
    """Short, prioritised to-do list, truncated to ``limit`` items."""
    values = template_values(features)
    items = []

    for condition, template in ACTION_ITEMS:
        if not condition(features):
            continue
        if template == ACCESSIBILITY_ISSUES:
            items.extend(features.accessibility.issues)
        else:
            items.append(template.format(**values))

    return items[:limit]
