from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .errors import NetworkError
from .models import RawDocument


class BaseFetcher(ABC):
    """Abstract base class defining the common fetch pipeline.

    - Any 2xx status is a success; everything else raises NetworkError.
    - Transport exceptions from the HTTP client are wrapped in NetworkError
      with the original exception chained.
    - No retries: a failed fetch is reported to the caller immediately.
    """

    def fetch(self, url: str) -> RawDocument:
        self.validate(url)
        try:
            response = self._request(url)
        except NetworkError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise NetworkError(f"{type(exc).__name__}: {exc}", url=url) from exc

        status_code = getattr(response, "status_code", None)
        if status_code is None or not 200 <= int(status_code) < 300:
            raise NetworkError(f"HTTP_{status_code}", url=url, status_code=status_code)

        return RawDocument(url=url, content=getattr(response, "text", ""), status_code=int(status_code))

    def validate(self, url: str) -> None:
        if not url:
            raise ValueError("url is required")

    @abstractmethod
    def _request(self, url: str) -> Any:
        """Perform the HTTP GET; the response needs ``status_code`` and ``text``."""
        ...

    def close(self) -> None:
        """Release the underlying HTTP session, if any."""

    def __enter__(self) -> "BaseFetcher":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
