"""
Page fetcher for comic publisher sites.

Retrieves raw page content over HTTP. Each call is a single blocking
request with no retry or caching layer.
"""

import logging
from typing import Optional

import requests

from .config import config

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a page cannot be retrieved."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{reason} ({url})")
        self.url = url
        self.reason = reason


class ComicFetcher:
    """Fetches comic pages from publisher sites."""

    def __init__(self, timeout: Optional[int] = None, user_agent: Optional[str] = None) -> None:
        """
        Initialize the comic fetcher.

        Args:
            timeout: Request timeout in seconds. Defaults to ``fetch.timeout``.
            user_agent: User-Agent header. Defaults to ``fetch.user_agent``.
        """
        self.timeout = timeout or config.get("fetch.timeout", 30)
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent or config.get("fetch.user_agent"),
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
        })

    def get_content(self, url: str) -> str:
        """
        Fetch the content of a page.

        Args:
            url: URL to fetch.

        Returns:
            The decoded response body.

        Raises:
            FetchError: If the page could not be retrieved.
        """
        logger.debug("Fetching %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.text
        except requests.exceptions.Timeout:
            raise FetchError(url, "Timeout fetching page")
        except requests.exceptions.HTTPError as e:
            raise FetchError(url, f"HTTP error {e.response.status_code}")
        except requests.exceptions.RequestException as e:
            raise FetchError(url, f"Request failed: {e}")
