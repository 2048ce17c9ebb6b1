import requests
from typing import Callable

from sitecrawl.domain.http_response import HttpResponse
from sitecrawl.exceptions import FetchError


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires the http_client callable to be injected (e.g. ``requests.get`` or a
    ``requests.Session().get``) so tests can substitute a fake transport.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: float = 30):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """Fetch URL and return its status code and body text."""
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise FetchError(url, e) from e
        # Anything else raised here is a bug, not a fetch failure; let it bubble up.
        return HttpResponse(resp.status_code, resp.text)
