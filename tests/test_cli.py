"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest
from helpers import BASE_URL, page, prose

from articlepull.cli import create_parser, main


@pytest.fixture
def article_file(tmp_path):
    path = tmp_path / "story.html"
    path.write_text(
        page(f'<nav>Menu</nav><article><p>{prose(700, 7)}</p><img src="/a.png"></article>'),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def stub_file(tmp_path):
    path = tmp_path / "stub.html"
    path.write_text(page("<article><p>Subscribe to continue.</p></article>"), encoding="utf-8")
    return path


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = create_parser().parse_args(["https://example.com/story"])

        assert args.url == "https://example.com/story"
        assert args.format == "html"
        assert args.html_file is None
        assert args.min_length is None

    def test_rejects_unknown_format(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["https://example.com", "--format", "pdf"])


class TestMain:
    """Tests for running the CLI end to end."""

    def test_requires_input(self, capsys):
        assert main([]) == 1

    def test_html_file_requires_base_url(self, article_file):
        assert main(["--html-file", str(article_file)]) == 1

    def test_html_output(self, article_file, capsys):
        code = main(["--html-file", str(article_file), "--base-url", BASE_URL, "--quiet"])

        out = capsys.readouterr().out
        assert code == 0
        assert prose(700, 7) in out
        assert "Menu" not in out
        assert 'src="https://example.com/a.png"' in out

    def test_json_output(self, article_file, capsys):
        code = main(["--html-file", str(article_file), "--base-url", BASE_URL, "-q", "--format", "json"])

        payload = json.loads(capsys.readouterr().out)
        assert code == 0
        assert payload["source"] == "extracted"
        assert payload["images"] == ["https://example.com/a.png"]
        assert payload["cover_image"] == "https://example.com/a.png"
        assert payload["url"] == BASE_URL

    def test_markdown_output(self, article_file, capsys):
        code = main(["--html-file", str(article_file), "--base-url", BASE_URL, "-q", "-f", "markdown"])

        out = capsys.readouterr().out
        assert code == 0
        assert "<p>" not in out
        assert "https://example.com/a.png" in out

    def test_output_file(self, article_file, tmp_path):
        target = tmp_path / "out.html"

        code = main(["--html-file", str(article_file), "--base-url", BASE_URL, "-q", "-o", str(target)])

        assert code == 0
        assert prose(700, 7) in target.read_text(encoding="utf-8")

    def test_short_content_fails_without_excerpt(self, stub_file, capsys):
        assert main(["--html-file", str(stub_file), "--base-url", BASE_URL, "-q"]) == 1
        assert capsys.readouterr().out == ""

    def test_short_content_uses_excerpt(self, stub_file, capsys):
        code = main(
            [
                "--html-file",
                str(stub_file),
                "--base-url",
                BASE_URL,
                "-q",
                "--format",
                "json",
                "--excerpt",
                "Feed summary",
            ]
        )

        payload = json.loads(capsys.readouterr().out)
        assert code == 0
        assert payload["source"] == "excerpt"
        assert payload["content"] == "Feed summary"
        assert payload["failure"] == "no_candidate"

    def test_min_length_override(self, article_file):
        assert main(["--html-file", str(article_file), "--base-url", BASE_URL, "-q", "--min-length", "5000"]) == 1

    def test_config_file(self, article_file, tmp_path):
        config = tmp_path / "articlepull.yaml"
        config.write_text("extractor:\n  min_content_length: 5000\n")

        code = main(["--html-file", str(article_file), "--base-url", BASE_URL, "-q", "--config", str(config)])

        assert code == 1

    def test_invalid_config(self, article_file, tmp_path):
        config = tmp_path / "articlepull.yaml"
        config.write_text("extractor:\n  unknown_option: 1\n")

        code = main(["--html-file", str(article_file), "--base-url", BASE_URL, "-q", "--config", str(config)])

        assert code == 1

    def test_fetches_url(self, capsys):
        html = page(f"<article><p>{prose(700, 7)}</p></article>")

        with patch("articlepull.cli.ArticleFetcher") as fetcher_cls:
            fetcher_cls.return_value.__enter__.return_value.fetch.return_value = html
            code = main([BASE_URL, "-q", "--user-agent", "TestAgent/1.0"])

        assert code == 0
        assert prose(700, 7) in capsys.readouterr().out
        fetch_config = fetcher_cls.call_args[0][0]
        assert fetch_config.user_agent == "TestAgent/1.0"

    def test_fetch_failure(self):
        with patch("articlepull.cli.ArticleFetcher") as fetcher_cls:
            fetcher_cls.return_value.__enter__.return_value.fetch.return_value = None
            code = main([BASE_URL, "-q"])

        assert code == 1
