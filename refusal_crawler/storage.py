from __future__ import annotations

import csv
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, TextIO

from .models import RefusalRecord


class StorageBase(ABC):
    """Abstract base class for all record exporters.

    Subclasses must implement write() and close() to handle
    persistence of refusal records.
    """

    @abstractmethod
    def write(self, record: RefusalRecord) -> None:
        """Persist a single refusal record."""

    @abstractmethod
    def close(self) -> None:
        """Flush pending writes and release resources."""

    def write_all(self, records: List[RefusalRecord]) -> None:
        for record in records:
            self.write(record)

    def __enter__(self) -> "StorageBase":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class JsonlStorage(StorageBase):
    """Stores refusal records as JSON Lines (.jsonl), one object per line.

    The file is truncated on open, so each run replaces the previous output.
    """

    def __init__(self, path: str) -> None:
        self._path = path
        self._file: Optional[TextIO] = open(path, "w", encoding="utf-8")

    def write(self, record: RefusalRecord) -> None:
        """Append a record to the output file."""
        if self._file is None:
            raise ValueError(f"{self._path} is already closed")
        self._file.write(json.dumps(record, ensure_ascii=False) + "\n")

    def close(self) -> None:
        """Flush and close the output file."""
        if self._file is not None:
            self._file.close()
            self._file = None


class CsvStorage(StorageBase):
    """Stores refusal records as one CSV row each.

    Field names differ between pages, so rows are buffered until close() and
    the header is the union of all field names in first-seen order. Charges
    are nested and go into their column as a JSON string.
    """

    def __init__(self, path: str) -> None:
        self._path = path
        self._rows: List[Dict[str, str]] = []
        self._columns: Dict[str, None] = {}

    def write(self, record: RefusalRecord) -> None:
        row: Dict[str, str] = {}
        for key, value in record.items():
            if not isinstance(value, str):
                value = json.dumps(value, ensure_ascii=False)
            row[key] = value
            self._columns.setdefault(key, None)
        self._rows.append(row)

    def close(self) -> None:
        with open(self._path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(self._columns), restval="")
            writer.writeheader()
            writer.writerows(self._rows)
        self._rows = []
