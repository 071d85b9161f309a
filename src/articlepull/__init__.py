"""
articlepull - Extract the main article body from news pages.

Usage:
    from articlepull import ArticleExtractor

    extractor = ArticleExtractor()
    outcome = extractor.extract(html, "https://news.example.com/story")

    if outcome.ok:
        print(outcome.content, outcome.images)
    else:
        print(outcome.reason)
"""

__version__ = "1.0.0"

from .article import ArticleBody, fetch_article_body, resolve_article_body
from .extraction import ArticleExtractor, ContentSanitizer, extract_article
from .fetcher import ArticleFetcher
from .models.config import (
    ArticlepullConfig,
    ExtractionRules,
    ExtractorConfig,
    FetchConfig,
    SourceConfig,
)
from .models.results import ExtractionFailure, ExtractionOutcome, ExtractionResult, FailureReason

__all__ = [
    "__version__",
    # Core
    "ArticleExtractor",
    "ContentSanitizer",
    "extract_article",
    # Results
    "ExtractionResult",
    "ExtractionFailure",
    "ExtractionOutcome",
    "FailureReason",
    # Config
    "ArticlepullConfig",
    "ExtractionRules",
    "ExtractorConfig",
    "FetchConfig",
    "SourceConfig",
    # Fetching and fallback
    "ArticleFetcher",
    "ArticleBody",
    "resolve_article_body",
    "fetch_article_body",
]
