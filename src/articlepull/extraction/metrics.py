"""Text metrics used to score candidate containers."""

from .protocols import DomElement


def text_length(element: DomElement) -> int:
    """
    Length of the element's full text content, trimmed.

    bs4's get_text() leaves out inline <script> and <style> bodies, so code
    embedded in a container never counts as article text.
    """
    return len(element.get_text().strip())


def link_length(element: DomElement) -> int:
    """Length of the text found inside anchor descendants."""
    return sum(len(anchor.get_text()) for anchor in element.find_all("a"))


def comma_count(element: DomElement) -> int:
    return element.get_text().count(",")


def density(element: DomElement) -> float:
    """
    Score how article-like an element's text is.

    Link-dominated text (menus, related-link lists) is penalized and
    comma-rich prose is rewarded:

        ((text - links) / (text + 1)) * text + commas * 10
    """
    text_len = text_length(element)
    link_len = link_length(element)
    return ((text_len - link_len) / (text_len + 1)) * text_len + comma_count(element) * 10


def link_density(element: DomElement, text_len: int) -> float:
    """Anchors per hundred characters of text, smoothed by one."""
    return len(element.find_all("a")) / (text_len / 100 + 1)
