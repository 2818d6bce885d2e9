from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

ChargeRecord = Dict[str, str]
RefusalRecord = Dict[str, Any]


class PageKind(str, Enum):
    LINK_INDEX = "link_index"
    TABLE_LINK_INDEX = "table_link_index"
    DETAIL = "detail"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class RawDocument:
    url: str
    content: str
    status_code: Optional[int] = None


@dataclass(frozen=True)
class PageOutcome:
    url: str
    depth: int
    kind: PageKind
    links: Tuple[str, ...] = ()
    record: Optional[RefusalRecord] = None


@dataclass(frozen=True)
class CrawlError:
    url: str
    depth: int
    error_type: str
    message: str


@dataclass(frozen=True)
class CrawlReport:
    seed_url: str
    records: List[RefusalRecord] = field(default_factory=list)
    errors: List[CrawlError] = field(default_factory=list)
    pages_visited: int = 0
