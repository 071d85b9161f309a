"""Markdown rendering of extracted article markup."""

from __future__ import annotations

import logging
import re

import html2text
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class HtmlToMarkdown:
    """
    Renders cleaned article HTML as Markdown.

    Example:
        converter = HtmlToMarkdown()
        markdown = converter.convert(outcome.content, "https://news.example.com/story")
    """

    def __init__(
        self,
        body_width: int = 0,
        inline_links: bool = True,
        ignore_images: bool = False,
        unicode_snob: bool = True,
    ):
        """
        Initialize the Markdown converter.

        Args:
            body_width: Max line width (0 = no wrapping)
            inline_links: Use inline [text](url) vs reference style
            ignore_images: Skip image conversion
            unicode_snob: Use Unicode chars where possible
        """
        self._converter = html2text.HTML2Text()
        self._converter.body_width = body_width
        self._converter.inline_links = inline_links
        self._converter.protect_links = True
        self._converter.ignore_images = ignore_images
        self._converter.unicode_snob = unicode_snob
        self._converter.single_line_break = False

    def _clean_output(self, markdown: str) -> str:
        markdown = re.sub(r"\n{3,}", "\n\n", markdown)
        markdown = "\n".join(line.rstrip() for line in markdown.split("\n"))
        return markdown.strip() + "\n"

    def convert(self, html: str, url: str) -> str:
        """
        Convert article HTML to Markdown.

        Args:
            html: Cleaned article markup
            url: Article URL for resolving relative links

        Returns:
            Markdown string
        """
        try:
            self._converter.baseurl = url
            return self._clean_output(self._converter.handle(html))
        except Exception as e:
            logger.error(f"Failed to convert HTML to Markdown: {e}")
            soup = BeautifulSoup(html, "html.parser")
            text: str = soup.get_text(separator="\n")
            return text.strip() + "\n"
