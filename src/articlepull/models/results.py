"""Outcome types returned by article extraction."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class FailureReason(str, Enum):
    """Reasons an extraction produced no usable content."""

    NO_CANDIDATE = "no_candidate"
    CONTENT_TOO_SHORT = "content_too_short"


@dataclass(frozen=True)
class ExtractionResult:
    """
    Successfully extracted article body.

    Attributes:
        content: Sanitized article markup
        images: Absolute image URLs in document order (duplicates kept)
    """

    content: str
    images: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ExtractionFailure:
    """
    Extraction produced nothing publishable.

    Callers treat every reason the same way: discard the attempt and fall
    back to their own short-form content.
    """

    reason: FailureReason
    message: str = ""
    content_length: Optional[int] = None

    @property
    def ok(self) -> bool:
        return False


ExtractionOutcome = Union[ExtractionResult, ExtractionFailure]
