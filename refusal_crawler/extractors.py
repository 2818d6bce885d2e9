"""Record extraction from refusal detail pages.

A detail page holds one table, ``table#details``, whose direct rows are
``<th>field</th><td>value</td>`` pairs. The last direct row is different: it
wraps a nested table listing the charges, with a single header row naming the
charge fields followed by one row per charge.
"""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from .classifier import DETAILS_MARKER, USER_CONTENT
from .errors import ShapeViolation
from .models import ChargeRecord, RefusalRecord

# Rows owned by the details table itself, not by the charges table inside it.
DIRECT_ROWS = ":scope > tr, :scope > thead > tr, :scope > tbody > tr, :scope > tfoot > tr"


def _text(cell: Tag) -> str:
    return cell.get_text().strip()


def extract_detail(page: BeautifulSoup, url: Optional[str] = None) -> RefusalRecord:
    """Build one refusal record from a detail page.

    Raises ShapeViolation when the details table is missing, when its last
    row does not wrap a charges table, or when a field row is not exactly one
    header cell and one data cell.
    """
    table = page.select_one(f"{USER_CONTENT} {DETAILS_MARKER}")
    if table is None:
        raise ShapeViolation("details table not found", url=url)

    rows = table.select(DIRECT_ROWS)
    if not rows:
        raise ShapeViolation("details table has no rows", url=url)

    charges_row = rows.pop()
    if charges_row.find("table") is None:
        raise ShapeViolation("last details row does not contain a charges table", url=url)

    record: RefusalRecord = {"charges": extract_charges(charges_row, url=url)}
    for index, row in enumerate(rows):
        headers = row.find_all("th", recursive=False)
        cells = row.find_all("td", recursive=False)
        if len(headers) != 1 or len(cells) != 1:
            raise ShapeViolation(
                f"row {index} has {len(headers)} header and {len(cells)} data cells, expected 1 and 1",
                url=url,
            )
        record[_text(headers[0])] = _text(cells[0])
    return record


def extract_charges(container: Tag, url: Optional[str] = None) -> List[ChargeRecord]:
    """List the charges of the nested table inside ``container``.

    The first row is the header; data rows are paired with it by position,
    so short rows leave trailing fields out and extra cells are dropped.
    """
    rows = container.select("table tr")
    if not rows:
        raise ShapeViolation("charges table has no rows", url=url)

    header, data_rows = rows[0], rows[1:]
    fields = [_text(cell) for cell in header.find_all("th")]

    charges: List[ChargeRecord] = []
    for row in data_rows:
        values = [_text(cell) for cell in row.find_all("td")]
        charges.append(dict(zip(fields, values)))
    return charges
