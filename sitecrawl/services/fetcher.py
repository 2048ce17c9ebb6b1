from __future__ import annotations

from typing import Protocol

from sitecrawl.exceptions import FetchError, HttpStatusError
from sitecrawl.services.http_service import HttpService


class Fetcher(Protocol):
    """Fetch a URL and return its body text.

    Implementations raise `FetchError` for any failure, including a
    non-success status code. No retries.
    """

    def fetch(self, url: str) -> str: ...


class HttpServiceFetcher:
    def __init__(self, http_service: HttpService):
        self._http_service = http_service

    def fetch(self, url: str) -> str:
        response = self._http_service.fetch(url)
        if not response.ok:
            raise FetchError(url, HttpStatusError(response.status_code))
        return response.text
