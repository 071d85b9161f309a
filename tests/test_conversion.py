"""Tests for Markdown conversion and logging setup."""

import logging

from articlepull.conversion import HtmlToMarkdown
from articlepull.logging_config import setup_logging


class TestHtmlToMarkdown:
    """Tests for HtmlToMarkdown converter."""

    def test_converts_paragraphs_and_emphasis(self):
        converter = HtmlToMarkdown()

        result = converter.convert("<p>First <strong>bold</strong> point.</p><p>Second.</p>", "https://example.com")

        assert "First **bold** point." in result
        assert "Second." in result
        assert result.endswith("\n")

    def test_converts_images(self):
        converter = HtmlToMarkdown()

        result = converter.convert(
            '<img src="https://example.com/pics/a.png" alt="Article image">', "https://example.com"
        )

        assert "![Article image]" in result
        assert "https://example.com/pics/a.png" in result

    def test_ignore_images(self):
        converter = HtmlToMarkdown(ignore_images=True)

        result = converter.convert('<p>Text</p><img src="https://example.com/a.png">', "https://example.com")

        assert "a.png" not in result

    def test_collapses_blank_lines(self):
        result = HtmlToMarkdown().convert("<p>A</p><br><br><br><br><p>B</p>", "https://example.com")

        assert "\n\n\n" not in result


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_configures_articlepull_logger(self):
        logger = setup_logging("DEBUG")

        assert logger.name == "articlepull"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "articlepull.log"

        logger = setup_logging("INFO", log_file=log_file)
        logging.getLogger("articlepull.extraction").info("hello log")
        for handler in logger.handlers:
            handler.flush()

        assert "hello log" in log_file.read_text()

    def test_does_not_duplicate_handlers(self):
        setup_logging("INFO")
        logger = setup_logging("WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
