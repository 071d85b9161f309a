"""Pydantic configuration models for articlepull."""

from pathlib import Path
from typing import Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field

# Structural selectors tried in priority order; only the first match of each counts
CONTENT_SELECTORS = [
    "article",
    '[role="main"]',
    "main",
    ".post-content",
    ".entry-content",
    ".article-content",
    ".content",
    ".post",
    ".entry",
    "#content",
    "#main-content",
]

# Descendants removed from the winning element before cleanup
REMOVE_SELECTORS = [
    "script",
    "style",
    "noscript",
    "nav",
    "header",
    "footer",
    "aside",
    ".ads",
    ".ad",
    ".advertisement",
    ".social-share",
    ".share",
    ".sharing",
    ".comments",
    ".comment",
    "#comments",
    ".loading",
    ".loader",
    ".spinner",
    ".subscribe",
    ".newsletter",
    ".popup",
    ".modal",
    ".overlay",
    ".cookie-banner",
    ".cookie-consent",
    ".gdpr",
    ".related-posts",
    ".recommended",
    ".read-more",
    ".author-bio",
    ".post-meta",
    ".post-tags",
    ".breadcrumb",
    ".breadcrumbs",
    ".sidebar",
    "#sidebar",
    ".widget",
    ".pagination",
    ".nav-links",
    '[class*="share"]',
    '[class*="social"]',
    '[class*="loading"]',
    '[class*="subscribe"]',
    '[id*="share"]',
    '[id*="social"]',
    '[id*="loading"]',
    '[id*="subscribe"]',
]

FALLBACK_NOISE_TOKENS = [
    "nav",
    "menu",
    "sidebar",
    "footer",
    "header",
    "comment",
    "meta",
    "tag",
    "share",
    "social",
    "related",
    "recommended",
]

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class ExtractionRules(BaseModel):
    """Selector lists and noise patterns driving candidate search and cleanup."""

    content_selectors: list[str] = Field(
        default_factory=lambda: list(CONTENT_SELECTORS),
        description="Content selectors in priority order",
    )
    fallback_tags: list[str] = Field(
        default_factory=lambda: ["div", "section"],
        description="Container tags walked by the fallback scan",
    )
    fallback_noise_tokens: list[str] = Field(
        default_factory=lambda: list(FALLBACK_NOISE_TOKENS),
        description="Substrings that disqualify a fallback container",
    )
    fallback_noise_attributes: list[str] = Field(
        default_factory=lambda: ["class", "id"],
        description="Attributes checked against the fallback noise tokens",
    )
    remove_selectors: list[str] = Field(
        default_factory=lambda: list(REMOVE_SELECTORS),
        description="Selectors for descendants removed from the winning element",
    )
    class_noise_pattern: str = Field(
        "loading|spinner|share|social|subscribe",
        description="Regex; a class attribute matching it is stripped",
    )
    icon_tokens: list[str] = Field(
        default_factory=lambda: ["icon", "avatar", "logo"],
        description="Source substrings marking small images as icons",
    )
    image_source_attributes: list[str] = Field(
        default_factory=lambda: ["src", "data-src", "data-lazy-src"],
        description="Image source attributes in lookup order",
    )
    image_strip_attributes: list[str] = Field(
        default_factory=lambda: [
            "width",
            "height",
            "loading",
            "srcset",
            "sizes",
            "decoding",
            "data-src",
            "data-lazy-src",
        ],
        description="Sizing and lazy-loading attributes dropped from kept images",
    )
    exempt_empty_tags: list[str] = Field(
        default_factory=lambda: ["br", "hr", "img"],
        description="Tags kept even when they have no text or children",
    )

    model_config = {"extra": "forbid"}

    def with_preferred_selectors(self, selectors: list[str]) -> "ExtractionRules":
        """Return a copy that tries ``selectors`` before the default ones."""
        merged = list(selectors)
        merged.extend(s for s in self.content_selectors if s not in merged)
        return self.model_copy(update={"content_selectors": merged})


class ExtractorConfig(BaseModel):
    """Thresholds for scoring, cleanup and the content gate."""

    rules: ExtractionRules = Field(default_factory=ExtractionRules)
    min_candidate_score: float = Field(
        100.0,
        description="Density a candidate must exceed to be admitted",
    )
    min_fallback_text_length: int = Field(
        200,
        ge=0,
        description="Shortest trimmed text a fallback container may have",
    )
    max_link_density: float = Field(
        0.5,
        ge=0,
        description="Anchors per 100 characters above which a container is navigation",
    )
    min_content_length: int = Field(
        500,
        ge=0,
        description="Shortest cleaned markup accepted as an article",
    )
    min_promoted_text_length: int = Field(
        50,
        ge=0,
        description="Bare-text divs longer than this become paragraphs",
    )
    min_image_dimension: int = Field(
        100,
        ge=1,
        description="Declared width/height under this marks an icon candidate",
    )
    default_image_alt: str = Field("Article image", description="Alt text for images without one")
    parser: Literal["html.parser", "lxml", "html5lib"] = Field(
        "html.parser",
        description="BeautifulSoup tree builder",
    )

    model_config = {"extra": "forbid"}


class FetchConfig(BaseModel):
    """Configuration for fetching article pages."""

    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header sent with requests")
    connect_timeout: float = Field(10.0, gt=0, description="Connection timeout in seconds")
    read_timeout: float = Field(30.0, gt=0, description="Read timeout in seconds")

    model_config = {"extra": "forbid"}


class SourceConfig(BaseModel):
    """A news source with site-specific content selectors."""

    name: str = Field(..., description="Display name of the source")
    url: str = Field(..., description="Site URL; its host selects this source")
    content_selectors: list[str] = Field(
        default_factory=list,
        description="Selectors tried before the defaults for this site",
    )

    model_config = {"extra": "forbid"}

    @property
    def host(self) -> str:
        return _normalize_host(urlparse(self.url).netloc)


DEFAULT_SOURCES = [
    SourceConfig(
        name="OpenAI Blog",
        url="https://openai.com/blog",
        content_selectors=["article", ".post-content", ".blog-content", "main"],
    ),
    SourceConfig(
        name="Anthropic News",
        url="https://www.anthropic.com/news",
        content_selectors=["article", ".post-content", "main"],
    ),
    SourceConfig(
        name="Google AI Blog",
        url="https://ai.googleblog.com",
        content_selectors=[".post-body", "article", ".entry-content"],
    ),
    SourceConfig(
        name="TechCrunch AI",
        url="https://techcrunch.com/category/artificial-intelligence/",
        content_selectors=["article", ".article-content", ".post-content"],
    ),
    SourceConfig(
        name="The Verge AI",
        url="https://www.theverge.com/ai-artificial-intelligence/",
        content_selectors=[".c-entry-content", "article", "main"],
    ),
]


def _normalize_host(netloc: str) -> str:
    host = netloc.lower().split(":", 1)[0]
    return host[4:] if host.startswith("www.") else host


class ArticlepullConfig(BaseModel):
    """
    Root configuration model for articlepull.

    Example:
        config = ArticlepullConfig(
            extractor=ExtractorConfig(min_content_length=800),
            fetch=FetchConfig(read_timeout=15),
        )

    YAML format:
        extractor:
          min_content_length: 800
        fetch:
          read_timeout: 15
        sources:
          - name: Example
            url: https://example.com
            content_selectors: [".story-body"]
    """

    extractor: ExtractorConfig = Field(default_factory=ExtractorConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    sources: list[SourceConfig] = Field(default_factory=lambda: list(DEFAULT_SOURCES))

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def source_for_url(self, url: str) -> Optional[SourceConfig]:
        """Find the configured source whose host matches ``url``."""
        host = _normalize_host(urlparse(url).netloc)
        if not host:
            return None
        for source in self.sources:
            if source.host == host:
                return source
        return None

    def extractor_for_url(self, url: str) -> ExtractorConfig:
        """Extractor config with the matching source's selectors tried first."""
        source = self.source_for_url(url)
        if source is None or not source.content_selectors:
            return self.extractor
        rules = self.extractor.rules.with_preferred_selectors(source.content_selectors)
        return self.extractor.model_copy(update={"rules": rules})

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ArticlepullConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "ArticlepullConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text())
