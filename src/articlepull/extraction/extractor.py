"""Main article extraction from news pages."""

import logging
import re
from typing import Optional, Union

from bs4 import BeautifulSoup

from ..models.config import ExtractorConfig
from ..models.results import ExtractionFailure, ExtractionOutcome, ExtractionResult, FailureReason
from .candidates import Candidate, pick_best, scan_fallback, select_by_selectors
from .sanitizer import ContentSanitizer

logger = logging.getLogger(__name__)


class ArticleExtractor:
    """
    Extracts the main article body from news-site HTML.

    Finds the densest content container (structural selectors first, then
    a scan of every div/section), cleans a copy of it and applies the
    minimum-length gate. Failures are returned as ExtractionFailure values.

    Example:
        extractor = ArticleExtractor()
        outcome = extractor.extract(html, "https://news.example.com/story")
        if outcome.ok:
            save(outcome.content, outcome.images)
        else:
            save(feed_excerpt, [])
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        """
        Initialize the article extractor.

        Args:
            config: Rule sets and thresholds (uses defaults if None)
        """
        self._config = config or ExtractorConfig()
        self._sanitizer = ContentSanitizer(self._config)

    @property
    def config(self) -> ExtractorConfig:
        return self._config

    def _detect_encoding(self, html: bytes) -> str:
        """Detect character encoding from HTML content."""
        head = html[:2048].decode("latin-1", errors="ignore")
        charset_match = re.search(r'charset=["\']?([^"\'\s>;]+)', head, re.IGNORECASE)
        if charset_match:
            return charset_match.group(1).strip()
        return "utf-8"

    def parse(self, html: Union[str, bytes]) -> BeautifulSoup:
        """Parse HTML text (or raw bytes) into a document tree."""
        if isinstance(html, bytes):
            encoding = self._detect_encoding(html)
            try:
                html = html.decode(encoding, errors="replace")
            except LookupError:
                html = html.decode("utf-8", errors="replace")
        return BeautifulSoup(html, self._config.parser)

    def find_candidate(self, doc: BeautifulSoup) -> Optional[Candidate]:
        """Run the selector pass, the fallback scan if needed, and rank."""
        candidates = select_by_selectors(
            doc,
            self._config.rules,
            min_score=self._config.min_candidate_score,
        )
        if not candidates:
            logger.debug("No selector candidate cleared the threshold, scanning containers")
            candidates = scan_fallback(doc, self._config)
        return pick_best(candidates)

    def extract_document(self, doc: BeautifulSoup, base_url: str) -> ExtractionOutcome:
        """
        Extract the article body from an already parsed document.

        The document is read but never modified.

        Args:
            doc: Parsed page
            base_url: Page URL used to absolutize image sources

        Returns:
            ExtractionResult or ExtractionFailure
        """
        candidate = self.find_candidate(doc)
        if candidate is None:
            logger.info(f"No content candidate found for {base_url}")
            return ExtractionFailure(
                reason=FailureReason.NO_CANDIDATE,
                message="No element scored above the candidate threshold",
            )

        cleaned = self._sanitizer.clean(candidate.element, base_url)
        content_length = len(cleaned.content)
        if content_length < self._config.min_content_length:
            logger.info(
                f"Content too short for {base_url}: {content_length} < "
                f"{self._config.min_content_length} chars"
            )
            return ExtractionFailure(
                reason=FailureReason.CONTENT_TOO_SHORT,
                message=f"Cleaned content has {content_length} characters",
                content_length=content_length,
            )

        logger.debug(
            f"Extracted {content_length} chars and {len(cleaned.images)} images from {base_url}"
        )
        return ExtractionResult(content=cleaned.content, images=tuple(cleaned.images))

    def extract(self, html: Union[str, bytes], base_url: str) -> ExtractionOutcome:
        """
        Extract the article body from HTML.

        Args:
            html: Raw HTML text or bytes
            base_url: Page URL used to absolutize image sources

        Returns:
            ExtractionResult or ExtractionFailure
        """
        return self.extract_document(self.parse(html), base_url)


def extract_article(
    html: Union[str, bytes],
    base_url: str,
    config: Optional[ExtractorConfig] = None,
) -> ExtractionOutcome:
    """Extract an article body with a one-off extractor."""
    return ArticleExtractor(config).extract(html, base_url)
