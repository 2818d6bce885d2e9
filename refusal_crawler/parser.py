from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .errors import ParseError
from .models import RawDocument

PARSER_FEATURES = "html.parser"


def parse_page(raw: RawDocument) -> BeautifulSoup:
    """Parse a fetched document into a queryable tree."""
    content = raw.content
    if not isinstance(content, (str, bytes)):
        raise ParseError(f"Cannot parse content of type {type(content).__name__}", url=raw.url)
    try:
        return BeautifulSoup(content, PARSER_FEATURES)
    except ParserRejectedMarkup as exc:
        raise ParseError(str(exc), url=raw.url) from exc
