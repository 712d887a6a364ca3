"""Fetchers that turn a URL into raw document bytes."""

from .url_fetcher import URLFetcher

__all__ = ["URLFetcher"]
