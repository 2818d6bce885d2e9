"""Structural classification of report pages.

Every page of the report site shares one template; the page-specific part
lives in ``span#user_provided``. Which navigation or data element sits inside
that region tells us what kind of page we are looking at.
"""

from __future__ import annotations

from bs4 import BeautifulSoup

from .models import PageKind

USER_CONTENT = "span#user_provided"
LIST_MARKER = "ul"
TABLE_MARKERS = ("table.new_layout", "table#country")
DETAILS_MARKER = "table#details"


def _in_region(selector: str) -> str:
    return f"{USER_CONTENT} {selector}"


def classify(page: BeautifulSoup) -> PageKind:
    """Return the shape of ``page``. Earlier checks take precedence:
    list navigation, then table navigation, then a details table."""
    if page.select_one(_in_region(LIST_MARKER)) is not None:
        return PageKind.LINK_INDEX
    if any(page.select_one(_in_region(marker)) is not None for marker in TABLE_MARKERS):
        return PageKind.TABLE_LINK_INDEX
    if page.select_one(_in_region(DETAILS_MARKER)) is not None:
        return PageKind.DETAIL
    return PageKind.UNKNOWN
