"""Flat, prioritised one-line action items."""

from typing import Callable

from core.models import FeatureSet

# (condition, template) pairs in priority order. Templates are filled from
# recommendations.engine.template_values. The "{accessibility_issues}"
# marker expands to one item per accessibility issue.
ACCESSIBILITY_ISSUES = "{accessibility_issues}"

ACTION_ITEMS: list[tuple[Callable[[FeatureSet], bool], str]] = [
    (
        lambda fs: not fs.technical.has_ssl,
        "Install an SSL certificate to secure your website and improve search rankings",
    ),
    (
        lambda fs: not fs.technical.has_robots_txt,
        "Create a robots.txt file to guide search engine crawlers",
    ),
    (
        lambda fs: not fs.technical.has_sitemap,
        "Generate and submit an XML sitemap to search engines",
    ),
    (
        lambda fs: not fs.technical.is_responsive,
        "Add a mobile viewport meta tag for responsive design",
    ),
    (
        lambda fs: not fs.content.title,
        "Add a descriptive title tag to your page",
    ),
    (
        lambda fs: bool(fs.content.title) and not 30 <= len(fs.content.title) <= 60,
        "Optimize title tag length (30-60 characters recommended, currently {title_length})",
    ),
    (
        lambda fs: not fs.content.meta_description,
        "Add a compelling meta description (150-160 characters)",
    ),
    (
        lambda fs: len(fs.content.h1_tags) == 0,
        "Add an H1 heading for better content structure",
    ),
    (
        lambda fs: len(fs.content.h1_tags) > 1,
        "Use only one H1 tag per page (found {h1_count})",
    ),
    (
        lambda fs: fs.content.word_count < 300,
        "Increase content length to at least 300 words (currently {word_count})",
    ),
    (
        lambda fs: fs.content.readability_score < 60,
        "Improve readability with shorter sentences and simpler words",
    ),
    (
        lambda fs: fs.images.missing_alt > 0,
        "Add alt text to {missing_alt} images for accessibility and SEO",
    ),
    (
        lambda fs: fs.images.oversized > 0,
        "Optimize {oversized} oversized images for better performance",
    ),
    (
        lambda fs: fs.technical.response_time_ms > 3000,
        "Improve server response time (currently {response_time_ms}ms)",
    ),
    (
        lambda fs: fs.performance.page_size_kb > 2000,
        "Reduce page size ({page_size_kb}KB) by compressing resources",
    ),
    (
        lambda fs: fs.performance.requests > 100,
        "Reduce HTTP requests ({requests}) by combining CSS and JS files",
    ),
    (
        lambda fs: not fs.social.has_open_graph,
        "Add Open Graph meta tags for better social media sharing",
    ),
    (
        lambda fs: not fs.social.has_twitter_cards,
        "Add Twitter Card meta tags for enhanced sharing previews",
    ),
    (
        lambda fs: bool(fs.accessibility.issues),
        ACCESSIBILITY_ISSUES,
    ),
    (
        lambda fs: not fs.technical.has_structured_data,
        "Add structured data markup (Schema.org) for rich results",
    ),
]
