"""Pydantic models for analysis inputs, extracted features and results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class _Frozen(BaseModel):
    """Base for immutable, serializable records."""

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Request / Fetch
# =============================================================================


class AnalysisRequest(_Frozen):
    """A validated request to analyze a single page."""

    url: HttpUrl = Field(
        ...,
        description="Absolute http(s) URL of the page to analyze",
        examples=["https://example.com"],
    )


class FetchOutcome(_Frozen):
    """Result of retrieving the target page."""

    html: str
    status_code: int
    response_time_ms: int
    final_url: str
    headers: dict[str, str] = Field(default_factory=dict)


class ProbeResult(_Frozen):
    """Outcome of the robots.txt and sitemap probes."""

    has_robots_txt: bool = False
    has_sitemap: bool = False
    sitemap_url: str | None = None


# =============================================================================
# Feature Records
# =============================================================================


class ContentFeatures(_Frozen):
    title: str = ""
    meta_description: str = ""
    h1_tags: list[str] = Field(default_factory=list)
    h2_tags: list[str] = Field(default_factory=list)
    h3_tags: list[str] = Field(default_factory=list)
    word_count: int = 0
    sentences: int = 0
    paragraphs: int = 0
    avg_words_per_sentence: float = 0
    avg_syllables_per_word: float = 0
    readability_score: int = 0
    keyword_density: dict[str, float] = Field(default_factory=dict)


class TechnicalFeatures(_Frozen):
    has_ssl: bool = False
    has_robots_txt: bool = False
    has_sitemap: bool = False
    sitemap_url: str | None = None
    is_responsive: bool = False
    has_structured_data: bool = False
    canonical_url: str = ""
    meta_viewport: str = ""
    charset: str = ""
    doctype: str = ""
    lang: str = ""
    hreflang: list[str] = Field(default_factory=list)
    status_code: int = 0
    response_time_ms: int = 0
    http_headers: dict[str, str] = Field(default_factory=dict)


class ImageFeatures(_Frozen):
    total: int = 0
    with_alt: int = 0
    missing_alt: int = 0
    oversized: int = 0
    lazy_loaded: int = 0
    formats: dict[str, int] = Field(default_factory=dict)


class LinkFeatures(_Frozen):
    internal: int = 0
    external: int = 0
    broken: int = 0
    nofollow: int = 0
    dofollow: int = 0


class PerformanceFeatures(_Frozen):
    load_time_ms: int = 0
    page_size_kb: int = 0
    requests: int = 0
    minified_css: bool = False
    minified_js: bool = False
    compression: bool = False
    cache_headers: bool = False


class SocialFeatures(_Frozen):
    has_open_graph: bool = False
    has_twitter_cards: bool = False
    has_facebook_meta: bool = False
    open_graph: dict[str, str] = Field(default_factory=dict)
    twitter_card: dict[str, str] = Field(default_factory=dict)
    facebook: dict[str, str] = Field(default_factory=dict)


class AccessibilityFeatures(_Frozen):
    score: int = 100
    issues: list[str] = Field(default_factory=list)
    missing_alt: int = 0
    missing_labels: int = 0
    missing_h1: bool = False
    contrast_issues: int = 0
    has_skip_links: bool = False


class FeatureSet(_Frozen):
    """All signals extracted from one page."""

    content: ContentFeatures = Field(default_factory=ContentFeatures)
    technical: TechnicalFeatures = Field(default_factory=TechnicalFeatures)
    images: ImageFeatures = Field(default_factory=ImageFeatures)
    links: LinkFeatures = Field(default_factory=LinkFeatures)
    performance: PerformanceFeatures = Field(default_factory=PerformanceFeatures)
    social: SocialFeatures = Field(default_factory=SocialFeatures)
    accessibility: AccessibilityFeatures = Field(
        default_factory=AccessibilityFeatures
    )


# =============================================================================
# Scores / Findings / Result
# =============================================================================


class ScoreSet(_Frozen):
    overall: int = Field(ge=0, le=100)
    technical: int = Field(ge=0, le=100)
    content: int = Field(ge=0, le=100)
    performance: int = Field(ge=0, le=100)
    accessibility: int = Field(ge=0, le=100)
    social: int = Field(ge=0, le=100)


class Impact(str, Enum):
    """How strongly a finding affects the page."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Finding(_Frozen):
    """A single categorized observation with remediation guidance."""

    category: str
    title: str
    description: str
    impact: Impact
    technical_details: str | None = None
    recommendation: str | None = None
    how_to_fix: str | None = None
    resources: list[str] = Field(default_factory=list)


class FindingBuckets(_Frozen):
    critical_issues: list[Finding] = Field(default_factory=list)
    warnings: list[Finding] = Field(default_factory=list)
    recommendations: list[Finding] = Field(default_factory=list)
    positive_findings: list[Finding] = Field(default_factory=list)


class AnalysisResult(_Frozen):
    """Complete, serializable outcome of one analysis run."""

    url: str
    domain: str
    title: str
    meta_description: str
    h1_tags: list[str]
    h2_tags: list[str]
    h3_tags: list[str]
    features: FeatureSet
    scores: ScoreSet
    findings: FindingBuckets
    action_items: list[str] = Field(default_factory=list)
