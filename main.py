from __future__ import annotations

import argparse
import logging
import sys

from refusal_crawler.crawler import DEFAULT_MAX_DEPTH, Crawler
from refusal_crawler.factory import BACKENDS, FetcherFactory
from refusal_crawler.fetchers import DEFAULT_TIMEOUT
from refusal_crawler.models import CrawlReport
from refusal_crawler.storage import CsvStorage, JsonlStorage, StorageBase


DEFAULT_SEED_URL = "http://www.accessdata.fda.gov/scripts/importrefusals/ir_months.cfm?LType=C"
DEFAULT_RESULTS_PATH = "refusals.jsonl"


def _build_storage(path: str, fmt: str) -> StorageBase:
    if fmt == "csv":
        return CsvStorage(path)
    return JsonlStorage(path)


def run_crawl(
    seed_url: str,
    results_path: str,
    fmt: str,
    backend: str,
    timeout: int,
    max_depth: int,
    keep_going: bool,
) -> CrawlReport:
    factory = FetcherFactory(timeout=timeout)
    try:
        fetcher = factory.create_fetcher(backend)
        crawler = Crawler(fetcher, max_depth=max_depth, fail_fast=not keep_going)
        report = crawler.crawl(seed_url)
    finally:
        factory.close()

    with _build_storage(results_path, fmt) as storage:
        storage.write_all(report.records)

    for err in report.errors:
        print(f"error url={err.url} depth={err.depth} type={err.error_type} message={err.message}")

    print(
        f"\nDONE: pages={report.pages_visited} records={len(report.records)} "
        f"errors={len(report.errors)} output={results_path}"
    )
    return report


def main() -> None:
    parser = argparse.ArgumentParser(description="Crawl the FDA Import Refusal Report")
    parser.add_argument("--run", action="store_true", help="Run the crawl")

    parser.add_argument("--seed", default=DEFAULT_SEED_URL, help="URL of the page to start crawling from")
    parser.add_argument("--results", default=DEFAULT_RESULTS_PATH, help="Output file path")
    parser.add_argument("--format", choices=("jsonl", "csv"), default="jsonl", help="Output format")

    parser.add_argument("--backend", choices=BACKENDS, default="requests", help="HTTP client backend")
    parser.add_argument("--timeout", type=int, default=DEFAULT_TIMEOUT, help="Per-request timeout in seconds")
    parser.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH, help="Max link depth from the seed page")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Record fetch/parse failures and continue instead of aborting",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...)")

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.run:
        report = run_crawl(
            seed_url=args.seed,
            results_path=args.results,
            fmt=args.format,
            backend=args.backend,
            timeout=args.timeout,
            max_depth=args.max_depth,
            keep_going=args.keep_going,
        )
        if report.errors:
            sys.exit(1)
        return

    print("Nothing to do. Use --run to crawl the report.")


if __name__ == "__main__":
    main()
