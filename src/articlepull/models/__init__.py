"""Articlepull configuration and result models."""

from .config import (
    CONTENT_SELECTORS,
    DEFAULT_SOURCES,
    FALLBACK_NOISE_TOKENS,
    REMOVE_SELECTORS,
    ArticlepullConfig,
    ExtractionRules,
    ExtractorConfig,
    FetchConfig,
    SourceConfig,
)
from .results import ExtractionFailure, ExtractionOutcome, ExtractionResult, FailureReason

__all__ = [
    # Config
    "ArticlepullConfig",
    "ExtractionRules",
    "ExtractorConfig",
    "FetchConfig",
    "SourceConfig",
    "CONTENT_SELECTORS",
    "REMOVE_SELECTORS",
    "FALLBACK_NOISE_TOKENS",
    "DEFAULT_SOURCES",
    # Results
    "ExtractionResult",
    "ExtractionFailure",
    "ExtractionOutcome",
    "FailureReason",
]
