"""Custom exceptions for sitecrawl."""


class SeedUrlError(ValueError):
    """Raised when the seed URL is empty or cannot be parsed into a host."""

    def __init__(self, seed_url, reason: str = "is not a valid URL"):
        self.seed_url = seed_url
        self.reason = reason
        super().__init__(f"Seed URL {seed_url!r} {reason}")


class FetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors or a non-success status."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class ResolutionError(Exception):
    """Raised when an href cannot be resolved against its page URL."""

    def __init__(self, href: str, base_url: str, original: Exception):
        self.href = href
        self.base_url = base_url
        self.original = original
        super().__init__(f"Could not resolve {href!r} against {base_url}: {original}")


class HttpStatusError(Exception):
    """Cause attached to a `FetchError` when the server answered with a non-2xx status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"non-success status {status_code}")
