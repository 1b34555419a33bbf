"""Finding rules definition."""

from dataclasses import dataclass, field
from typing import Callable

from core.models import FeatureSet, Impact

# Buckets findings are grouped into
CRITICAL = "critical_issues"
WARNING = "warnings"
RECOMMENDATION = "recommendations"
POSITIVE = "positive_findings"

TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
MIN_WORD_COUNT = 300
FAST_RESPONSE_MS = 2000


@dataclass(frozen=True)
class Rule:
    """
    A single finding rule.

    Text fields are ``str.format`` templates filled from
    :func:`recommendations.engine.template_values`.
    """

    id: str
    bucket: str
    category: str
    impact: Impact
    title: str
    description: str
    condition: Callable[[FeatureSet], bool]
    technical_details: str | None = None
    recommendation: str | None = None
    how_to_fix: str | None = None
    resources: tuple[str, ...] = field(default_factory=tuple)


def _title_length(fs: FeatureSet) -> int:
    return len(fs.content.title)


def _title_in_range(fs: FeatureSet) -> bool:
    return TITLE_MIN_LENGTH <= _title_length(fs) <= TITLE_MAX_LENGTH


# =============================================================================
# Critical Issues
# =============================================================================

CRITICAL_RULES = [
    Rule(
        id="no-ssl",
        bucket=CRITICAL,
        category="Security",
        impact=Impact.CRITICAL,
        title="SSL Certificate Missing",
        description="Your website is not served over HTTPS, which exposes visitors to security risks and hurts search rankings.",
        technical_details="Page was served over plain HTTP instead of HTTPS",
        recommendation="Install and configure an SSL certificate immediately",
        how_to_fix="Ask your hosting provider to enable HTTPS, or issue a free certificate with Let's Encrypt and redirect all HTTP traffic to HTTPS.",
        resources=(
            "https://letsencrypt.org/",
            "https://web.dev/why-https-matters/",
        ),
        condition=lambda fs: not fs.technical.has_ssl,
    ),
    Rule(
        id="missing-title",
        bucket=CRITICAL,
        category="On-Page SEO",
        impact=Impact.CRITICAL,
        title="Missing Title Tag",
        description="No title tag was found. The title is essential for search results and browser tabs.",
        technical_details="The <title> element is missing or empty",
        recommendation="Add a descriptive, keyword-rich title tag",
        how_to_fix="Add <title>Your Page Title</title> inside the <head> section.",
        resources=("https://developers.google.com/search/docs/appearance/title-link",),
        condition=lambda fs: not fs.content.title,
    ),
    Rule(
        id="missing-h1",
        bucket=CRITICAL,
        category="Content Structure",
        impact=Impact.CRITICAL,
        title="Missing H1 Heading",
        description="No H1 heading was found. The H1 tells readers and search engines what the page is about.",
        technical_details="No <h1> elements with text were detected",
        recommendation="Add one H1 heading that describes the main topic of the page",
        how_to_fix="Add <h1>Main Page Heading</h1> at the top of your main content.",
        resources=(
            "https://developer.mozilla.org/en-US/docs/Web/HTML/Element/Heading_Elements",
        ),
        condition=lambda fs: len(fs.content.h1_tags) == 0,
    ),
]

# =============================================================================
# Warnings
# =============================================================================

WARNING_RULES = [
    Rule(
        id="missing-meta-description",
        bucket=WARNING,
        category="On-Page SEO",
        impact=Impact.HIGH,
        title="Missing Meta Description",
        description="No meta description was found. Search engines may generate a less relevant snippet for your page.",
        technical_details='The <meta name="description"> tag is missing or empty',
        recommendation="Add a compelling meta description (150-160 characters)",
        how_to_fix='Add <meta name="description" content="Your page description"> in the head section.',
        resources=("https://developers.google.com/search/docs/appearance/snippet",),
        condition=lambda fs: not fs.content.meta_description,
    ),
    Rule(
        id="title-length",
        bucket=WARNING,
        category="On-Page SEO",
        impact=Impact.MEDIUM,
        title="Title Tag Length Issues",
        description="Title tag is {title_length} characters. Optimal length is 30-60 characters.",
        technical_details='Current title: "{title_preview}"',
        recommendation="Adjust the title to 30-60 characters so it displays fully in search results",
        how_to_fix="Rewrite the title to be concise yet descriptive within the recommended length.",
        resources=("https://moz.com/learn/seo/title-tag",),
        condition=lambda fs: bool(fs.content.title) and not _title_in_range(fs),
    ),
    Rule(
        id="missing-alt-text",
        bucket=WARNING,
        category="Accessibility",
        impact=Impact.MEDIUM,
        title="Images Missing Alt Text",
        description="{missing_alt} images are missing alt text, affecting accessibility and image search.",
        technical_details="{missing_alt} out of {total_images} images lack alt text",
        recommendation="Add descriptive alt text to all images",
        how_to_fix='Add an alt="descriptive text" attribute to each <img> tag.',
        resources=(
            "https://www.w3.org/WAI/tutorials/images/",
            "https://developers.google.com/search/docs/appearance/google-images",
        ),
        condition=lambda fs: fs.images.missing_alt > 0,
    ),
    Rule(
        id="missing-robots-txt",
        bucket=WARNING,
        category="Technical SEO",
        impact=Impact.MEDIUM,
        title="Missing Robots.txt File",
        description="No robots.txt file was found to guide search engine crawlers.",
        technical_details="A HEAD request for /robots.txt did not return 200",
        recommendation="Create a robots.txt file to guide search engines",
        how_to_fix="Place a robots.txt file in your website root directory.",
        resources=(
            "https://developers.google.com/search/docs/crawling-indexing/robots/intro",
        ),
        condition=lambda fs: not fs.technical.has_robots_txt,
    ),
    Rule(
        id="missing-sitemap",
        bucket=WARNING,
        category="Technical SEO",
        impact=Impact.MEDIUM,
        title="XML Sitemap Not Found",
        description="No XML sitemap was detected. Sitemaps help search engines discover your content.",
        technical_details="None of /sitemap.xml, /sitemap_index.xml or /wp-sitemap.xml returned 200",
        recommendation="Generate and submit an XML sitemap",
        how_to_fix="Create an XML sitemap and submit it in Google Search Console.",
        resources=(
            "https://developers.google.com/search/docs/crawling-indexing/sitemaps/overview",
        ),
        condition=lambda fs: not fs.technical.has_sitemap,
    ),
]

# =============================================================================
# Recommendations
# =============================================================================

RECOMMENDATION_RULES = [
    Rule(
        id="missing-viewport",
        bucket=RECOMMENDATION,
        category="Mobile Optimization",
        impact=Impact.MEDIUM,
        title="Add Mobile Viewport Meta Tag",
        description="No viewport meta tag was found, which may break the layout on mobile devices.",
        technical_details='Missing <meta name="viewport"> tag in document head',
        recommendation="Add a viewport meta tag for responsive design",
        how_to_fix='Add <meta name="viewport" content="width=device-width, initial-scale=1"> to the head section.',
        resources=(
            "https://developer.mozilla.org/en-US/docs/Web/HTML/Viewport_meta_tag",
        ),
        condition=lambda fs: not fs.technical.is_responsive,
    ),
    Rule(
        id="missing-open-graph",
        bucket=RECOMMENDATION,
        category="Social Media",
        impact=Impact.LOW,
        title="Add Open Graph Meta Tags",
        description="No Open Graph tags were found, so shared links may render without a title or image.",
        technical_details="No og: prefixed meta property tags detected",
        recommendation="Add Open Graph tags for better social sharing",
        how_to_fix="Add og:title, og:description, og:image and og:url meta tags.",
        resources=(
            "https://ogp.me/",
            "https://developers.facebook.com/docs/sharing/webmasters/",
        ),
        condition=lambda fs: not fs.social.has_open_graph,
    ),
    Rule(
        id="missing-twitter-cards",
        bucket=RECOMMENDATION,
        category="Social Media",
        impact=Impact.LOW,
        title="Add Twitter Card Meta Tags",
        description="No Twitter Card tags were found, missing enhanced previews on X/Twitter.",
        technical_details="No twitter: prefixed meta name tags detected",
        recommendation="Add Twitter Card meta tags",
        how_to_fix="Add twitter:card, twitter:title and twitter:description meta tags.",
        resources=(
            "https://developer.x.com/en/docs/twitter-for-websites/cards/overview/abouts-cards",
        ),
        condition=lambda fs: not fs.social.has_twitter_cards,
    ),
    Rule(
        id="thin-content",
        bucket=RECOMMENDATION,
        category="Content Quality",
        impact=Impact.MEDIUM,
        title="Increase Content Length",
        description="Page has only {word_count} words. More substantive content may improve rankings.",
        technical_details="Current word count: {word_count} words",
        recommendation="Aim for at least 300 words of quality content",
        how_to_fix="Add relevant, useful content that answers your visitors' questions.",
        resources=("https://backlinko.com/content-study",),
        condition=lambda fs: fs.content.word_count < MIN_WORD_COUNT,
    ),
]

# =============================================================================
# Positive Findings
# =============================================================================

POSITIVE_RULES = [
    Rule(
        id="ssl-active",
        bucket=POSITIVE,
        category="Security",
        impact=Impact.HIGH,
        title="SSL Certificate Active",
        description="Website is served over HTTPS for secure communication.",
        technical_details="HTTPS protocol detected",
        recommendation="Keep the certificate renewed and monitor its expiry date",
        condition=lambda fs: fs.technical.has_ssl,
    ),
    Rule(
        id="title-length-ok",
        bucket=POSITIVE,
        category="On-Page SEO",
        impact=Impact.MEDIUM,
        title="Optimal Title Tag Length",
        description="Title tag length ({title_length} characters) is within the optimal range.",
        technical_details='Title: "{title}"',
        recommendation="Continue using well-optimized title tags",
        condition=lambda fs: bool(fs.content.title) and _title_in_range(fs),
    ),
    Rule(
        id="single-h1",
        bucket=POSITIVE,
        category="Content Structure",
        impact=Impact.MEDIUM,
        title="Proper H1 Usage",
        description="Page has exactly one H1 heading.",
        technical_details='H1 heading: "{first_h1}"',
        recommendation="Maintain a heading hierarchy with one H1 per page",
        condition=lambda fs: len(fs.content.h1_tags) == 1,
    ),
    Rule(
        id="all-alt-text",
        bucket=POSITIVE,
        category="Accessibility",
        impact=Impact.MEDIUM,
        title="All Images Have Alt Text",
        description="All images include alt text for accessibility and image search.",
        technical_details="{total_images} images all have alt text",
        recommendation="Continue providing descriptive alt text for new images",
        condition=lambda fs: fs.images.missing_alt == 0 and fs.images.total > 0,
    ),
    Rule(
        id="fast-response",
        bucket=POSITIVE,
        category="Performance",
        impact=Impact.MEDIUM,
        title="Fast Server Response",
        description="Server responds quickly ({response_time_ms}ms), providing a good user experience.",
        technical_details="Response time: {response_time_ms}ms",
        recommendation="Monitor and maintain fast response times",
        condition=lambda fs: fs.technical.response_time_ms < FAST_RESPONSE_MS,
    ),
]

# =============================================================================
# All Rules Combined
# =============================================================================

ALL_RULES = CRITICAL_RULES + WARNING_RULES + RECOMMENDATION_RULES + POSITIVE_RULES
