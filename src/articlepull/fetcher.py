"""Article page fetching."""

import logging
from typing import Optional

import requests

from .models.config import FetchConfig


class ArticleFetcher:
    """
    Fetches article pages for extraction.

    Sends a browser User-Agent so sites serve their full markup. There is
    no retry: any network error, timeout or non-2xx status yields None,
    which callers handle exactly like a failed extraction.

    Example:
        fetcher = ArticleFetcher()
        html = fetcher.fetch("https://news.example.com/story")
        if html is None:
            use_feed_excerpt()
    """

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            config: Fetch settings (uses defaults if None)
            session: Optional requests session to reuse connections
            logger: Optional logger for debug messages
        """
        self.config = config or FetchConfig()
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger(__name__)

    def fetch(self, url: str) -> Optional[bytes]:
        """
        Fetch the HTML of an article page.

        The body is returned undecoded. requests falls back to ISO-8859-1
        when the Content-Type has no charset, so decoding is left to the
        extractor, which reads the page's own <meta charset>.

        Args:
            url: Article URL

        Returns:
            Raw page bytes, or None if it could not be fetched
        """
        try:
            response = self.session.get(
                url,
                timeout=(self.config.connect_timeout, self.config.read_timeout),
                headers={"User-Agent": self.config.user_agent},
            )
        except requests.RequestException as e:
            self.logger.warning(f"Failed to fetch {url}: {e}")
            return None

        if not response.ok:
            self.logger.warning(f"Failed to fetch {url}: {response.status_code}")
            return None

        self.logger.debug(f"Fetched {url} ({len(response.content)} bytes)")
        return response.content

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ArticleFetcher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
