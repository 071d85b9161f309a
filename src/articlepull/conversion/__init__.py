"""Output conversion for articlepull."""

from .markdown import HtmlToMarkdown

__all__ = ["HtmlToMarkdown"]
