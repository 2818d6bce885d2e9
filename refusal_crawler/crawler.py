from __future__ import annotations

import logging
from typing import Callable, List, Tuple, Union
from urllib.parse import ParseResult, SplitResult, urlsplit

from bs4 import BeautifulSoup

from .base import BaseFetcher
from .classifier import classify
from .errors import CrawlerError, NetworkError, ParseError, ShapeViolation
from .extractors import extract_detail
from .links import collect_list_links, collect_table_links
from .models import CrawlError, CrawlReport, PageKind, PageOutcome, RawDocument, RefusalRecord
from .parser import parse_page

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 16

UrlLike = Union[str, SplitResult, ParseResult]


def normalize_url(url: UrlLike) -> str:
    """Return ``url`` as a string, rejecting anything that is not http(s)."""
    if isinstance(url, (SplitResult, ParseResult)):
        url = url.geturl()
    url = (url or "").strip()
    parts = urlsplit(url)
    if parts.scheme.lower() not in ("http", "https") or not parts.netloc:
        raise ValueError(f"Not an absolute http(s) URL: {url!r}")
    return url


class Crawler:
    """Depth-first crawler over the import refusal report pages.

    Index pages contribute links to the frontier, detail pages contribute one
    record each, unknown pages contribute nothing. Records come out in the
    order a recursive depth-first walk would produce them: everything reachable
    from the first link of a page before anything reachable from the second.

    - ``max_depth`` bounds how far links are followed from the seed (depth 0),
      which also ends the walk on cyclic site graphs.
    - With ``fail_fast`` (default) a NetworkError or ParseError aborts the
      crawl; otherwise the failing page is recorded and its siblings continue.
    - A detail page with an unexpected layout is always skipped and recorded.
    """

    def __init__(
        self,
        fetcher: BaseFetcher,
        max_depth: int = DEFAULT_MAX_DEPTH,
        fail_fast: bool = True,
        parse: Callable[[RawDocument], BeautifulSoup] = parse_page,
    ) -> None:
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        self._fetcher = fetcher
        self._max_depth = max_depth
        self._fail_fast = fail_fast
        self._parse = parse

    def visit(self, url: UrlLike, depth: int = 0) -> PageOutcome:
        """Run one fetch-parse-classify cycle for ``url``."""
        url = normalize_url(url)
        logger.info("visit depth=%d url=%s", depth, url)

        raw = self._fetcher.fetch(url)
        page = self._parse(raw)
        kind = classify(page)
        logger.info("classified url=%s kind=%s", url, kind.value)

        if kind is PageKind.LINK_INDEX:
            return PageOutcome(url=url, depth=depth, kind=kind, links=tuple(collect_list_links(page, url)))
        if kind is PageKind.TABLE_LINK_INDEX:
            return PageOutcome(url=url, depth=depth, kind=kind, links=tuple(collect_table_links(page, url)))
        if kind is PageKind.DETAIL:
            return PageOutcome(url=url, depth=depth, kind=kind, record=extract_detail(page, url=url))

        logger.debug("no known page shape at url=%s", url)
        return PageOutcome(url=url, depth=depth, kind=kind)

    def crawl(self, seed_url: UrlLike) -> CrawlReport:
        """Crawl everything reachable from ``seed_url`` and return the flat record list."""
        seed = normalize_url(seed_url)
        records: List[RefusalRecord] = []
        errors: List[CrawlError] = []
        visited = 0

        frontier: List[Tuple[str, int]] = [(seed, 0)]
        while frontier:
            url, depth = frontier.pop()
            try:
                outcome = self.visit(url, depth)
            except ShapeViolation as exc:
                visited += 1
                logger.warning("skipping malformed detail page url=%s: %s", url, exc)
                errors.append(self._error(url, depth, exc))
                continue
            except (NetworkError, ParseError) as exc:
                if self._fail_fast:
                    raise
                logger.warning("failed url=%s error=%s: %s", url, type(exc).__name__, exc)
                errors.append(self._error(url, depth, exc))
                continue

            visited += 1
            if outcome.record is not None:
                records.append(outcome.record)
            if not outcome.links:
                continue

            if depth >= self._max_depth:
                for link in outcome.links:
                    logger.warning("depth limit %d reached, not following url=%s", self._max_depth, link)
                    errors.append(
                        CrawlError(
                            url=link,
                            depth=depth + 1,
                            error_type="DepthLimitExceeded",
                            message=f"link found at max_depth={self._max_depth}",
                        )
                    )
                continue

            # LIFO frontier: push in reverse so the first link is visited first
            for link in reversed(outcome.links):
                frontier.append((link, depth + 1))

        logger.info("crawl done seed=%s pages=%d records=%d errors=%d", seed, visited, len(records), len(errors))
        return CrawlReport(seed_url=seed, records=records, errors=errors, pages_visited=visited)

    @staticmethod
    def _error(url: str, depth: int, exc: CrawlerError) -> CrawlError:
        return CrawlError(url=url, depth=depth, error_type=type(exc).__name__, message=str(exc))
