"""Density-based article extraction for articlepull."""

from .candidates import Candidate, pick_best, scan_fallback, select_by_selectors
from .extractor import ArticleExtractor, extract_article
from .metrics import comma_count, density, link_density, link_length, text_length
from .protocols import ContentExtractor, DomElement
from .sanitizer import ContentSanitizer, SanitizedContent

__all__ = [
    # Protocols
    "ContentExtractor",
    "DomElement",
    # Metrics
    "text_length",
    "link_length",
    "comma_count",
    "density",
    "link_density",
    # Candidates
    "Candidate",
    "select_by_selectors",
    "scan_fallback",
    "pick_best",
    # Cleanup
    "ContentSanitizer",
    "SanitizedContent",
    # Orchestration
    "ArticleExtractor",
    "extract_article",
]
