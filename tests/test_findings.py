"""Tests for the finding rules and the action item list."""

from __future__ import annotations

from core.models import (
    AccessibilityFeatures,
    ContentFeatures,
    FeatureSet,
    ImageFeatures,
    Impact,
    TechnicalFeatures,
)
from recommendations import ALL_RULES, generate_action_items, generate_findings
from recommendations.engine import template_values


def _titles(findings: list) -> list[str]:
    return [f.title for f in findings]


class TestGenerateFindings:
    def test_plain_http_page_with_h1(self) -> None:
        features = FeatureSet(
            content=ContentFeatures(h1_tags=["Test"], word_count=1),
            technical=TechnicalFeatures(has_ssl=False, response_time_ms=100),
        )
        buckets = generate_findings(features)

        critical = _titles(buckets.critical_issues)
        assert "SSL Certificate Missing" in critical
        assert "Missing H1 Heading" not in critical
        assert "Proper H1 Usage" in _titles(buckets.positive_findings)

        ssl = buckets.critical_issues[0]
        assert ssl.impact is Impact.CRITICAL
        assert ssl.category == "Security"
        assert ssl.resources

    def test_optimal_title_length(self) -> None:
        title = "An Example Page Title That Is Forty-Five Char"
        assert len(title) == 45

        buckets = generate_findings(
            FeatureSet(content=ContentFeatures(title=title))
        )

        positive = {f.title: f for f in buckets.positive_findings}
        assert "Optimal Title Tag Length" in positive
        assert "45" in positive["Optimal Title Tag Length"].description
        assert "Title Tag Length Issues" not in _titles(buckets.warnings)

    def test_short_title_warning(self) -> None:
        buckets = generate_findings(
            FeatureSet(content=ContentFeatures(title="Short page"))
        )

        warnings = {f.title: f for f in buckets.warnings}
        assert "10" in warnings["Title Tag Length Issues"].description
        assert '"Short page"' in warnings["Title Tag Length Issues"].technical_details

    def test_long_title_is_previewed(self) -> None:
        buckets = generate_findings(
            FeatureSet(content=ContentFeatures(title="x" * 150))
        )

        warning = next(
            f for f in buckets.warnings if f.title == "Title Tag Length Issues"
        )
        assert warning.technical_details == f'Current title: "{"x" * 100}..."'

    def test_missing_alt_warning_cites_counts(self) -> None:
        buckets = generate_findings(
            FeatureSet(images=ImageFeatures(total=5, with_alt=3, missing_alt=2))
        )

        warning = next(
            f for f in buckets.warnings if f.title == "Images Missing Alt Text"
        )
        assert warning.description.startswith("2 images")
        assert warning.technical_details == "2 out of 5 images lack alt text"
        assert "All Images Have Alt Text" not in _titles(buckets.positive_findings)

    def test_all_alt_text_needs_images(self) -> None:
        no_images = generate_findings(FeatureSet())
        assert "All Images Have Alt Text" not in _titles(no_images.positive_findings)

        with_images = generate_findings(
            FeatureSet(images=ImageFeatures(total=3, with_alt=3))
        )
        assert "All Images Have Alt Text" in _titles(with_images.positive_findings)

    def test_probe_warnings(self) -> None:
        buckets = generate_findings(
            FeatureSet(technical=TechnicalFeatures(has_robots_txt=True))
        )

        warnings = _titles(buckets.warnings)
        assert "Missing Robots.txt File" not in warnings
        assert "XML Sitemap Not Found" in warnings

    def test_thin_content_and_fast_response(self) -> None:
        buckets = generate_findings(
            FeatureSet(
                content=ContentFeatures(word_count=120),
                technical=TechnicalFeatures(response_time_ms=1999),
            )
        )

        thin = next(
            f
            for f in buckets.recommendations
            if f.title == "Increase Content Length"
        )
        assert "120" in thin.description
        assert "Fast Server Response" in _titles(buckets.positive_findings)

    def test_slow_response_is_not_praised(self) -> None:
        buckets = generate_findings(
            FeatureSet(technical=TechnicalFeatures(response_time_ms=2000))
        )
        assert "Fast Server Response" not in _titles(buckets.positive_findings)

    def test_findings_follow_rule_order(self) -> None:
        buckets = generate_findings(FeatureSet())
        rendered = [
            f.title
            for bucket in (
                buckets.critical_issues,
                buckets.warnings,
                buckets.recommendations,
                buckets.positive_findings,
            )
            for f in bucket
        ]
        expected = [rule.title for rule in ALL_RULES if rule.title in rendered]

        assert rendered == expected

    def test_findings_are_deterministic(self) -> None:
        features = FeatureSet(
            content=ContentFeatures(title="Short", h1_tags=["A", "B"]),
            images=ImageFeatures(total=2, missing_alt=1),
        )
        assert generate_findings(features) == generate_findings(features)


# ---------------------------------------------------------------------------
# Template values
# ---------------------------------------------------------------------------


class TestTemplateValues:
    def test_values_for_empty_features(self) -> None:
        values = template_values(FeatureSet())

        assert values["title"] == ""
        assert values["title_length"] == 0
        assert values["h1_count"] == 0
        assert values["first_h1"] == ""


# ---------------------------------------------------------------------------
# Action items
# ---------------------------------------------------------------------------


class TestGenerateActionItems:
    def test_empty_page_is_capped(self) -> None:
        items = generate_action_items(FeatureSet())

        assert len(items) == 12
        assert items[0].startswith("Install an SSL certificate")

    def test_custom_limit(self) -> None:
        assert len(generate_action_items(FeatureSet(), limit=3)) == 3

    def test_measured_values_are_filled_in(self) -> None:
        features = FeatureSet(
            content=ContentFeatures(h1_tags=["One", "Two"]),
            images=ImageFeatures(total=4, missing_alt=4),
        )
        items = generate_action_items(features, limit=50)

        assert "Use only one H1 tag per page (found 2)" in items
        assert "Add alt text to 4 images for accessibility and SEO" in items
        assert not any("{" in item for item in items)

    def test_accessibility_issues_are_listed(self) -> None:
        features = FeatureSet(
            accessibility=AccessibilityFeatures(
                score=75,
                issues=[
                    "Missing language declaration in HTML tag",
                    "Potential low contrast text detected",
                ],
            )
        )
        items = generate_action_items(features, limit=50)

        assert "Missing language declaration in HTML tag" in items
        assert "Potential low contrast text detected" in items

    def test_healthy_page_has_few_items(self) -> None:
        features = FeatureSet(
            content=ContentFeatures(
                title="A perfectly reasonable page title here",
                meta_description="Description",
                h1_tags=["Heading"],
                word_count=450,
                readability_score=72,
            ),
            technical=TechnicalFeatures(
                has_ssl=True,
                has_robots_txt=True,
                has_sitemap=True,
                is_responsive=True,
                has_structured_data=True,
                status_code=200,
            ),
        )
        items = generate_action_items(features)

        assert items == [
            "Add Open Graph meta tags for better social media sharing",
            "Add Twitter Card meta tags for enhanced sharing previews",
        ]
