from __future__ import annotations

from typing import Any, Optional

from curl_cffi import requests as curl_requests
import requests

from .base import BaseFetcher

DEFAULT_TIMEOUT = 20
DEFAULT_USER_AGENT = "refusal-crawler/0.1 (+https://www.accessdata.fda.gov/scripts/importrefusals/)"


class RequestsFetcher(BaseFetcher):
    """Plain HTTP fetcher backed by a shared ``requests.Session``."""

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers["User-Agent"] = user_agent

    def _request(self, url: str) -> Any:
        return self._session.get(url, timeout=self._timeout)

    def close(self) -> None:
        self._session.close()


class CurlFetcher(BaseFetcher):
    """Fetcher that impersonates a real browser's TLS fingerprint via curl_cffi.

    Useful when the report site rejects non-browser clients."""

    def __init__(self, timeout: int = DEFAULT_TIMEOUT, impersonate: str = "chrome120") -> None:
        self._timeout = timeout
        self._impersonate = impersonate
        self._session = curl_requests.Session()

    def _request(self, url: str) -> Any:
        return self._session.request(
            method="GET",
            url=url,
            impersonate=self._impersonate,
            timeout=self._timeout,
        )

    def close(self) -> None:
        self._session.close()
