from __future__ import annotations

from typing import Dict, List

from .base import BaseFetcher
from .fetchers import DEFAULT_TIMEOUT, CurlFetcher, RequestsFetcher

BACKENDS = ("requests", "curl")


class FetcherFactory:
    """Factory for creating fetcher instances by backend name.

    Instances are cached per backend by default so a crawl reuses one HTTP
    session; pass ``cache=False`` to get a fresh fetcher on every call.
    close() releases every fetcher the factory has created, cached or not.
    """

    def __init__(self, timeout: int = DEFAULT_TIMEOUT, cache: bool = True) -> None:
        self._timeout = timeout
        self._cache_enabled = cache
        self._cache: Dict[str, BaseFetcher] = {}
        self._created: List[BaseFetcher] = []

    def create_fetcher(self, backend: str = "requests") -> BaseFetcher:
        if self._cache_enabled and backend in self._cache:
            return self._cache[backend]

        if backend == "requests":
            fetcher: BaseFetcher = RequestsFetcher(timeout=self._timeout)
        elif backend == "curl":
            fetcher = CurlFetcher(timeout=self._timeout)
        else:
            raise ValueError(f"Unknown backend: {backend}")

        self._created.append(fetcher)
        if self._cache_enabled:
            self._cache[backend] = fetcher
        return fetcher

    def close(self) -> None:
        for fetcher in self._created:
            fetcher.close()
        self._created.clear()
        self._cache.clear()
