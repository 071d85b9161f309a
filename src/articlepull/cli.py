"""Command-line interface for articlepull."""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional, Union

from rich.console import Console

from . import __version__
from .article import ArticleBody, resolve_article_body
from .conversion.markdown import HtmlToMarkdown
from .extraction.extractor import ArticleExtractor
from .fetcher import ArticleFetcher
from .logging_config import setup_logging
from .models.config import ArticlepullConfig
from .models.results import ExtractionOutcome


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="articlepull",
        description="Extract the main article body from a news page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fetch a page and print the cleaned article HTML
  articlepull https://news.example.com/story

  # Extract from a saved page
  articlepull --html-file story.html --base-url https://news.example.com/story

  # Markdown output, falling back to a feed excerpt
  articlepull https://news.example.com/story --format markdown --excerpt "Short summary"
        """,
    )

    parser.add_argument(
        "url",
        nargs="?",
        help="Article URL to fetch",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="FILE",
        help="YAML configuration file",
    )

    # Input
    input_group = parser.add_argument_group("input")
    input_group.add_argument(
        "--html-file",
        type=Path,
        default=None,
        metavar="FILE",
        help="Read HTML from a file instead of fetching",
    )
    input_group.add_argument(
        "--base-url",
        type=str,
        default=None,
        metavar="URL",
        help="Base URL for resolving images (default: the article URL)",
    )

    # Extraction settings
    extract_group = parser.add_argument_group("extraction settings")
    extract_group.add_argument(
        "--min-length",
        type=int,
        default=None,
        help="Minimum cleaned content length (default: 500)",
    )
    extract_group.add_argument(
        "--excerpt",
        type=str,
        default=None,
        help="Fallback content used when extraction fails",
    )

    # Network settings
    network_group = parser.add_argument_group("network settings")
    network_group.add_argument(
        "--user-agent",
        type=str,
        help="Custom User-Agent string",
    )
    network_group.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Read timeout in seconds",
    )

    # Output control
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--format",
        "-f",
        choices=["html", "markdown", "json"],
        default="html",
        help="Output format (default: html)",
    )
    output_group.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        metavar="FILE",
        help="Write output to a file instead of stdout",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress status output",
    )

    return parser


def build_config(args: argparse.Namespace) -> ArticlepullConfig:
    """Load the config file (if any) and apply command-line overrides."""
    data: dict[str, Any] = {}
    if args.config:
        data = ArticlepullConfig.from_yaml_file(args.config).model_dump()

    if args.min_length is not None:
        data.setdefault("extractor", {})["min_content_length"] = args.min_length

    fetch_kwargs: dict = {}
    if args.user_agent:
        fetch_kwargs["user_agent"] = args.user_agent
    if args.timeout is not None:
        fetch_kwargs["read_timeout"] = args.timeout
    if fetch_kwargs:
        data.setdefault("fetch", {}).update(fetch_kwargs)

    if args.verbose:
        data["log_level"] = "DEBUG"
    elif args.quiet:
        data["log_level"] = "ERROR"

    return ArticlepullConfig.model_validate(data)


def render(body: ArticleBody, outcome: Optional[ExtractionOutcome], fmt: str, url: str) -> str:
    """Render an article body in the requested output format."""
    if fmt == "markdown":
        return HtmlToMarkdown().convert(body.content, url)
    if fmt == "json":
        payload = asdict(body)
        payload["url"] = url
        if outcome is not None and not outcome.ok:
            payload["failure"] = outcome.reason.value
        elif outcome is None:
            payload["failure"] = "fetch_failed"
        return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    return body.content + "\n"


def run_extract(args: argparse.Namespace) -> int:
    """Run extraction with given arguments."""
    console = Console(stderr=True, quiet=args.quiet)

    if not args.url and not args.html_file:
        console.print("[red]Error:[/red] Please provide a URL or --html-file")
        return 1

    base_url = args.base_url or args.url
    if not base_url:
        console.print("[red]Error:[/red] --base-url is required with --html-file")
        return 1

    try:
        config = build_config(args)
    except Exception as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        return 1

    setup_logging(config.log_level, config.log_file)

    html: Optional[Union[str, bytes]]
    if args.html_file:
        try:
            html = args.html_file.read_bytes()
        except OSError as e:
            console.print(f"[red]Error:[/red] {e}")
            return 1
    else:
        console.print(f"[bold blue]articlepull[/bold blue] v{__version__}")
        console.print(f"Target: {args.url}")
        with ArticleFetcher(config.fetch) as fetcher:
            html = fetcher.fetch(args.url)
        if html is None:
            console.print(f"[red]Failed:[/red] could not fetch {args.url}")

    outcome: Optional[ExtractionOutcome] = None
    if html is not None:
        extractor = ArticleExtractor(config.extractor_for_url(base_url))
        outcome = extractor.extract(html, base_url)

    body = resolve_article_body(outcome, args.excerpt or "")
    if outcome is not None:
        if outcome.ok:
            console.print(
                f"[green]Extracted[/green] {len(body.content)} chars, {len(body.images)} images"
            )
        else:
            console.print(f"[yellow]No usable content:[/yellow] {outcome.reason.value}")

    if body.source == "excerpt" and args.excerpt is None:
        return 1

    output = render(body, outcome, args.format, base_url)
    if args.output:
        try:
            args.output.write_text(output, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Error:[/red] {e}")
            return 1
    else:
        sys.stdout.write(output)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_extract(args)


if __name__ == "__main__":
    sys.exit(main())
