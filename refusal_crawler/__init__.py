"""FDA import refusal report crawler.

Walks the report site from an index page, classifies every page by its
markup shape and extracts one record per refusal detail page.

Key modules:
    classifier      -- classify() and the page-shape selectors
    links           -- collect_list_links, collect_table_links
    extractors      -- extract_detail, extract_charges
    crawler         -- Crawler, the depth-first traversal
    base            -- BaseFetcher abstract class
    fetchers        -- RequestsFetcher, CurlFetcher concrete implementations
    factory         -- FetcherFactory for creating fetchers by backend name
    parser          -- parse_page, fetched content to BeautifulSoup tree
    models          -- PageKind, RawDocument, PageOutcome, CrawlError, CrawlReport
    errors          -- CrawlerError, NetworkError, ParseError, ShapeViolation
    storage         -- StorageBase, JsonlStorage and CsvStorage exporters
"""
