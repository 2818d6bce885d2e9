"""Tests for the record exporters."""

import csv
import json
import os
import tempfile
import unittest

from refusal_crawler.storage import CsvStorage, JsonlStorage

RECORDS = [
    {"charges": [{"Code": "A1", "Description": "Adulterated"}], "Firm Name": "ACME", "Country": "US"},
    {"charges": [], "Firm Name": "Globex", "Product": "Shrimp"},
]


class TestJsonlStorage(unittest.TestCase):
    """Verify one JSON object is written per record."""

    def test_writes_one_line_per_record(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out.jsonl")
            storage = JsonlStorage(path)
            storage.write_all(RECORDS)
            storage.close()

            with open(path, encoding="utf-8") as f:
                lines = [json.loads(line) for line in f]
        self.assertEqual(lines, RECORDS)

    def test_unwritable_path_raises(self):
        """A path in a missing directory fails in the caller, not silently."""
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "missing_dir", "out.jsonl")
            with self.assertRaises(OSError):
                with JsonlStorage(path) as storage:
                    storage.write(RECORDS[0])

    def test_second_run_replaces_output(self):
        """Writing the same records twice leaves one copy, as CsvStorage does."""
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out.jsonl")
            for _ in range(2):
                with JsonlStorage(path) as storage:
                    storage.write(RECORDS[0])

            with open(path, encoding="utf-8") as f:
                lines = [json.loads(line) for line in f]
        self.assertEqual(lines, [RECORDS[0]])

    def test_write_after_close_raises(self):
        with tempfile.TemporaryDirectory() as tmp:
            storage = JsonlStorage(os.path.join(tmp, "out.jsonl"))
            storage.close()
            storage.close()
            with self.assertRaises(ValueError):
                storage.write(RECORDS[0])


class TestCsvStorage(unittest.TestCase):
    """Verify dynamic columns and nested charges in CSV output."""

    def test_header_is_union_in_first_seen_order(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out.csv")
            with CsvStorage(path) as storage:
                storage.write_all(RECORDS)

            with open(path, encoding="utf-8", newline="") as f:
                reader = csv.DictReader(f)
                rows = list(reader)
                header = reader.fieldnames

        self.assertEqual(header, ["charges", "Firm Name", "Country", "Product"])
        self.assertEqual(rows[0]["Country"], "US")
        self.assertEqual(rows[1]["Country"], "")
        self.assertEqual(json.loads(rows[0]["charges"]), RECORDS[0]["charges"])
        self.assertEqual(json.loads(rows[1]["charges"]), [])


if __name__ == "__main__":
    unittest.main()
