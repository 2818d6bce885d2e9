from __future__ import annotations

from typing import Optional


class CrawlerError(Exception):
    """Base class for failures raised while crawling a page."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class NetworkError(CrawlerError):
    """The page could not be fetched (transport failure or non-2xx status)."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


class ParseError(CrawlerError):
    """Fetched content could not be turned into a document tree."""


class ShapeViolation(CrawlerError):
    """A detail page whose tables do not have the expected row layout."""
