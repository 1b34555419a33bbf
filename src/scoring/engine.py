"""Category and overall scoring."""

import math

from core.models import FeatureSet, ScoreSet

# Technical signal weights (total = 100)
TECHNICAL_WEIGHTS = {
    "has_ssl": 20,
    "has_robots_txt": 15,
    "has_sitemap": 15,
    "is_responsive": 15,
    "has_structured_data": 15,
    "status_ok": 20,
}

# Social signal weights (total = 100)
SOCIAL_WEIGHTS = {
    "has_open_graph": 40,
    "has_twitter_cards": 30,
    "has_facebook_meta": 30,
}

# Content credits
TITLE_CREDIT = 20
META_DESCRIPTION_CREDIT = 20
H1_CREDIT = 15
WORD_COUNT_CREDIT = 20
WORDS_PER_POINT = 15  # full credit at 300 words
READABILITY_CREDIT = 15
READABILITY_PER_POINT = 4  # full credit at readability 60
ALT_TEXT_CREDIT = 10

# Performance credits and the thresholds under which they are granted in full
RESPONSE_TIME_CREDIT = 30
RESPONSE_TIME_FULL_MS = 1000
RESPONSE_TIME_MS_PER_POINT = 100
PAGE_SIZE_CREDIT = 25
PAGE_SIZE_FULL_KB = 1000
PAGE_SIZE_KB_PER_POINT = 100
REQUESTS_CREDIT = 20
REQUESTS_FULL = 50
OVERSIZED_CREDIT = 25
OVERSIZED_PENALTY = 5


def compute_scores(features: FeatureSet) -> ScoreSet:
    """
    Score a feature set.

    Pure and deterministic: the same features always give the same scores.
    Every category is clamped to 0-100; overall is the rounded mean of the
    five unrounded category values.
    """
    technical = technical_score(features)
    content = content_score(features)
    performance = performance_score(features)
    accessibility = _clamp(features.accessibility.score)
    social = social_score(features)

    overall = (technical + content + performance + accessibility + social) / 5

    return ScoreSet(
        overall=_to_int(overall),
        technical=_to_int(technical),
        content=_to_int(content),
        performance=_to_int(performance),
        accessibility=_to_int(accessibility),
        social=_to_int(social),
    )


def technical_score(features: FeatureSet) -> float:
    tech = features.technical
    signals = {
        "has_ssl": tech.has_ssl,
        "has_robots_txt": tech.has_robots_txt,
        "has_sitemap": tech.has_sitemap,
        "is_responsive": tech.is_responsive,
        "has_structured_data": tech.has_structured_data,
        "status_ok": tech.status_code == 200,
    }
    return _clamp(_weighted(signals, TECHNICAL_WEIGHTS))


def content_score(features: FeatureSet) -> float:
    content = features.content
    score = 0.0
    score += TITLE_CREDIT if content.title else 0
    score += META_DESCRIPTION_CREDIT if content.meta_description else 0
    score += H1_CREDIT if content.h1_tags else 0
    score += min(WORD_COUNT_CREDIT, max(0, content.word_count) / WORDS_PER_POINT)
    score += min(
        READABILITY_CREDIT,
        max(0, content.readability_score) / READABILITY_PER_POINT,
    )
    score += max(0, ALT_TEXT_CREDIT - max(0, features.images.missing_alt))
    return _clamp(score)


def performance_score(features: FeatureSet) -> float:
    response_time = features.technical.response_time_ms
    page_size = features.performance.page_size_kb
    requests = features.performance.requests
    oversized = features.images.oversized

    score = 0.0
    score += _graded(
        RESPONSE_TIME_CREDIT,
        (response_time - RESPONSE_TIME_FULL_MS) / RESPONSE_TIME_MS_PER_POINT,
    )
    score += _graded(
        PAGE_SIZE_CREDIT, (page_size - PAGE_SIZE_FULL_KB) / PAGE_SIZE_KB_PER_POINT
    )
    score += _graded(REQUESTS_CREDIT, requests - REQUESTS_FULL)
    score += _graded(OVERSIZED_CREDIT, oversized * OVERSIZED_PENALTY)
    return _clamp(score)


def social_score(features: FeatureSet) -> float:
    social = features.social
    signals = {
        "has_open_graph": social.has_open_graph,
        "has_twitter_cards": social.has_twitter_cards,
        "has_facebook_meta": social.has_facebook_meta,
    }
    return _clamp(_weighted(signals, SOCIAL_WEIGHTS))


def _weighted(signals: dict[str, bool], weights: dict[str, int]) -> float:
    return float(sum(weight for name, weight in weights.items() if signals[name]))


def _graded(credit: float, overshoot: float) -> float:
    """Full credit when nothing overshoots, else credit minus the overshoot."""
    if overshoot <= 0:
        return credit
    return max(0.0, credit - overshoot)


def _clamp(value: float) -> float:
    return max(0.0, min(100.0, float(value)))


def _to_int(value: float) -> int:
    """Round half up and clamp to 0-100."""
    return int(min(100, max(0, math.floor(value + 0.5))))
