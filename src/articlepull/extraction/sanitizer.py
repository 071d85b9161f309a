"""Cleanup and image rewriting for the winning article element."""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from ..models.config import ExtractorConfig
from .protocols import DomElement

logger = logging.getLogger(__name__)


@dataclass
class SanitizedContent:
    """Cleaned article markup and the absolute image URLs found in it."""

    content: str
    images: list[str] = field(default_factory=list)


def _declared_dimension(value: object) -> Optional[int]:
    """Parse a width/height attribute such as ``48`` or ``48px``."""
    if value is None:
        return None
    match = re.match(r"\s*(\d+)", str(value))
    return int(match.group(1)) if match else None


class ContentSanitizer:
    """
    Turns a candidate element into publishable markup.

    Always works on a freshly parsed copy of the element, so the source
    document is never modified and the same element can be cleaned again
    with identical results.

    Example:
        sanitizer = ContentSanitizer()
        cleaned = sanitizer.clean(article_tag, "https://news.example.com/story")
        print(cleaned.content, cleaned.images)
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        """
        Initialize the sanitizer.

        Args:
            config: Extractor configuration (uses defaults if None)
        """
        self._config = config or ExtractorConfig()
        rules = self._config.rules
        self._remove_selector = ", ".join(rules.remove_selectors)
        self._class_noise = re.compile(rules.class_noise_pattern, re.IGNORECASE)

    def _clone(self, element: DomElement) -> tuple[BeautifulSoup, Tag]:
        """Parse a detached copy of ``element`` and return it with its root."""
        soup = BeautifulSoup(str(element), self._config.parser)
        root = soup.find(element.name)
        if not isinstance(root, Tag):
            return soup, soup
        return soup, root

    def _remove_unwanted(self, root: Tag) -> None:
        """Remove chrome, ads and widgets below the root."""
        if not self._remove_selector:
            return
        for el in root.select(self._remove_selector):
            # Nested matches go away with their ancestor
            if not el.decomposed:
                el.decompose()

    def _is_empty(self, tag: Tag) -> bool:
        if tag.name in self._config.rules.exempt_empty_tags:
            return False
        return not tag.get_text(strip=True) and tag.find(True) is None

    def _image_source(self, img: Tag) -> Optional[str]:
        for attribute in self._config.rules.image_source_attributes:
            value = img.get(attribute)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None

    def _is_icon(self, img: Tag, src: str) -> bool:
        """Small declared size plus an icon-like source means decoration."""
        limit = self._config.min_image_dimension
        small = False
        for attribute in ("width", "height"):
            dimension = _declared_dimension(img.get(attribute))
            if dimension is not None and 0 < dimension < limit:
                small = True
        if not small:
            return False
        lowered = src.lower()
        return any(token in lowered for token in self._config.rules.icon_tokens)

    def _process_image(self, img: Tag, base_url: str, images: list[str]) -> bool:
        """
        Resolve, filter and rewrite one image.

        Returns:
            False if the image was removed
        """
        src = self._image_source(img)
        if src is None:
            img.decompose()
            return False

        if self._is_icon(img, src):
            logger.debug(f"Dropping icon-sized image {src}")
            img.decompose()
            return False

        absolute_url = src if src.startswith("http") else urljoin(base_url, src)
        images.append(absolute_url)
        img["src"] = absolute_url

        for attribute in self._config.rules.image_strip_attributes:
            if attribute in img.attrs:
                del img[attribute]
        if "alt" not in img.attrs:
            img["alt"] = self._config.default_image_alt
        return True

    def _clean_attributes(self, tag: Tag) -> None:
        """Drop data-*, event handler and style attributes, plus noisy classes."""
        for attribute in list(tag.attrs):
            if attribute.startswith(("data-", "on")) or attribute == "style":
                del tag[attribute]

        classes = tag.get("class")
        if classes:
            class_text = " ".join(classes) if isinstance(classes, list) else str(classes)
            if self._class_noise.search(class_text):
                del tag["class"]

    def _promote_bare_text(self, soup: BeautifulSoup, tag: Tag) -> None:
        """Replace a childless div holding plain prose with a paragraph."""
        if tag.name != "div" or tag.find(True) is not None:
            return
        text = tag.get_text().strip()
        if len(text) > self._config.min_promoted_text_length and "<" not in text:
            paragraph = soup.new_tag("p")
            paragraph.string = text
            tag.replace_with(paragraph)

    def _clean_whitespace(self, html: str) -> str:
        """Drop empty paragraph/div pairs and collapse blank-line runs."""
        html = html.replace("\r\n", "\n").replace("\r", "\n")
        html = re.sub(r"<p>\s*</p>", "", html, flags=re.IGNORECASE)
        html = re.sub(r"<div>\s*</div>", "", html, flags=re.IGNORECASE)
        html = re.sub(r"\n(?:[ \t]*\n){2,}", "\n\n", html)
        return html.strip()

    def clean(self, element: DomElement, base_url: str) -> SanitizedContent:
        """
        Clean a candidate element.

        Args:
            element: Winning candidate element (left untouched)
            base_url: Page URL used to absolutize image sources

        Returns:
            SanitizedContent with inner markup and image URLs
        """
        soup, root = self._clone(element)
        self._remove_unwanted(root)

        images: list[str] = []
        for tag in root.find_all(True):
            if tag.decomposed:
                continue

            if self._is_empty(tag):
                tag.decompose()
                continue

            if tag.name == "img" and not self._process_image(tag, base_url, images):
                continue

            self._clean_attributes(tag)
            self._promote_bare_text(soup, tag)

        content = self._clean_whitespace(root.decode_contents())
        return SanitizedContent(content=content, images=images)
