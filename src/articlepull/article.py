"""Choosing the stored article body: extracted content or the feed excerpt."""

import logging
from dataclasses import dataclass, field
from typing import Literal, Optional

from .extraction.extractor import ArticleExtractor
from .fetcher import ArticleFetcher
from .models.config import ArticlepullConfig
from .models.results import ExtractionOutcome

logger = logging.getLogger(__name__)


@dataclass
class ArticleBody:
    """
    Body to store for one article.

    Attributes:
        content: Extracted markup, or the feed excerpt on failure
        images: Extracted image URLs (empty on failure)
        cover_image: Feed image if given, else the first extracted image
        source: Where the content came from
    """

    content: str
    images: list[str] = field(default_factory=list)
    cover_image: Optional[str] = None
    source: Literal["extracted", "excerpt"] = "excerpt"


def resolve_article_body(
    outcome: Optional[ExtractionOutcome],
    excerpt: str,
    feed_cover_image: Optional[str] = None,
) -> ArticleBody:
    """
    Pick the body to publish.

    A missing outcome (the page could not be fetched) and every extraction
    failure are treated the same: the excerpt is used and no partially
    cleaned fragment is kept.

    Args:
        outcome: Extraction outcome, or None when fetching failed
        excerpt: Short-form content supplied by the feed
        feed_cover_image: Cover image supplied by the feed

    Returns:
        ArticleBody
    """
    if outcome is not None and outcome.ok:
        images = list(outcome.images)
        return ArticleBody(
            content=outcome.content,
            images=images,
            cover_image=feed_cover_image or (images[0] if images else None),
            source="extracted",
        )

    if outcome is not None:
        logger.info(f"Falling back to excerpt: {outcome.reason.value}")
    return ArticleBody(content=excerpt, cover_image=feed_cover_image, source="excerpt")


def fetch_article_body(
    url: str,
    excerpt: str,
    feed_cover_image: Optional[str] = None,
    config: Optional[ArticlepullConfig] = None,
    fetcher: Optional[ArticleFetcher] = None,
) -> ArticleBody:
    """
    Fetch a page, extract its article and fall back to the excerpt.

    Args:
        url: Article URL
        excerpt: Feed-provided excerpt used when extraction fails
        feed_cover_image: Feed-provided cover image
        config: Root configuration (source selectors, fetch settings)
        fetcher: Fetcher to use (built from config if None)

    Returns:
        ArticleBody
    """
    config = config or ArticlepullConfig()

    if fetcher is None:
        with ArticleFetcher(config.fetch) as owned_fetcher:
            html = owned_fetcher.fetch(url)
    else:
        html = fetcher.fetch(url)

    if html is None:
        return resolve_article_body(None, excerpt, feed_cover_image)

    outcome = ArticleExtractor(config.extractor_for_url(url)).extract(html, url)
    return resolve_article_body(outcome, excerpt, feed_cover_image)
