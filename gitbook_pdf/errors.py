"""Exceptions that stop a run. Anything else is logged and skipped."""

from typing import Optional


class SitemapError(Exception):
    """The sitemap could not be turned into a list of page URLs."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.message = message
        self.url = url
        super().__init__(f"{message} ({url})" if url else message)


class FetchError(SitemapError):
    """Sitemap download failed: network error, HTTP error or empty body."""


class FormatError(SitemapError):
    """Sitemap body is not XML, or is neither a <urlset> nor a <sitemapindex>."""
