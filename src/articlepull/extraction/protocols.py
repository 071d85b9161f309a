"""Protocol definitions for article extraction."""

from typing import Any, Optional, Protocol

from ..models.results import ExtractionOutcome


class DomElement(Protocol):
    """
    The element operations the extractor relies on.

    BeautifulSoup's ``Tag`` satisfies this structurally; any other DOM
    library can be adapted by exposing the same members.
    """

    name: str
    attrs: dict[str, Any]

    def get(self, key: str, default: Any = None) -> Any: ...

    def get_text(self, separator: str = "", strip: bool = False) -> str: ...

    def find(self, name: Any = None, **kwargs: Any) -> Optional["DomElement"]: ...

    def find_all(self, name: Any = None, **kwargs: Any) -> list["DomElement"]: ...

    def select(self, selector: str) -> list["DomElement"]: ...

    def select_one(self, selector: str) -> Optional["DomElement"]: ...

    def decompose(self) -> None: ...

    def replace_with(self, *args: Any) -> Any: ...

    def decode_contents(self) -> str: ...


class ContentExtractor(Protocol):
    """
    Protocol for extracting the main article body from HTML.

    Implementations locate the article region, strip navigation, ads and
    widgets, and report failure as a value rather than raising.
    """

    def extract(self, html: str, base_url: str) -> ExtractionOutcome:
        """
        Extract the article body.

        Args:
            html: Raw HTML text
            base_url: Page URL used to absolutize image sources

        Returns:
            ExtractionResult on success, ExtractionFailure otherwise
        """
        ...
