from __future__ import annotations

import logging
import re
from typing import List
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

from .classifier import USER_CONTENT

logger = logging.getLogger(__name__)

_ABSOLUTE = re.compile(r"^https?:", re.IGNORECASE)


def collect_list_links(page: BeautifulSoup, base_url: str) -> List[str]:
    """Absolute URLs of every anchor inside the user-content lists."""
    return _collect(page, f"{USER_CONTENT} ul a", base_url)


def collect_table_links(page: BeautifulSoup, base_url: str) -> List[str]:
    """Absolute URLs of every anchor inside the user-content tables."""
    return _collect(page, f"{USER_CONTENT} table a", base_url)


def absolutize(href: str, base_url: str) -> str:
    if _ABSOLUTE.match(href):
        return href
    return urljoin(base_url, href)


def _collect(page: BeautifulSoup, selector: str, base_url: str) -> List[str]:
    links: List[str] = []
    for anchor in page.select(selector):
        href = (anchor.get("href") or "").strip()
        # Skip anchors that cannot lead to another page
        if not href or href.startswith("#"):
            logger.debug("skipping anchor without a target href=%r base=%s", href, base_url)
            continue
        link = absolutize(href, base_url)
        if not _ABSOLUTE.match(link) or not urlsplit(link).netloc:
            # mailto:, javascript: and the like
            logger.debug("skipping non-http link=%r base=%s", link, base_url)
            continue
        links.append(link)
    return links
