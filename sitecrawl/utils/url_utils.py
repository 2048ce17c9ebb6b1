import re
from typing import Optional
from urllib.parse import urldefrag, urljoin, urlparse, urlsplit, urlunsplit

from sitecrawl.exceptions import ResolutionError, SeedUrlError

SCHEME_PATTERN = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*)://")
CRAWLABLE_SCHEMES = ("http", "https")


def _lowercase_host(url: str) -> str:
    """Lowercase the scheme and host of `url`; userinfo, path and query keep their case."""
    parts = urlsplit(url)
    userinfo, sep, hostport = parts.netloc.rpartition("@")
    netloc = f"{userinfo}{sep}{hostport.lower()}"
    return urlunsplit((parts.scheme.lower(), netloc, parts.path, parts.query, parts.fragment))


def normalize_seed_url(url: Optional[str]) -> str:
    """Return the seed as an absolute URL usable as a crawl key.

    Adds an ``https://`` scheme when none is given, lowercases the host, drops
    the fragment and a single trailing slash. Raises ``SeedUrlError`` for a
    scheme other than http(s) or if no host can be parsed.
    """
    if url is None or url.strip() == "":
        raise SeedUrlError(url, "is empty")
    normalized = url.strip()
    match = SCHEME_PATTERN.match(normalized)
    if match is None:
        normalized = "https://" + normalized
    elif match.group(1).lower() not in CRAWLABLE_SCHEMES:
        raise SeedUrlError(url, f"has unsupported scheme {match.group(1)!r}")
    try:
        normalized, _ = urldefrag(normalized)
        normalized = _lowercase_host(normalized)
        if normalized.endswith("/"):
            normalized = normalized[:-1]
        host = urlparse(normalized).hostname
    except ValueError as e:
        raise SeedUrlError(url, f"could not be parsed: {e}") from e
    if not host:
        raise SeedUrlError(url, "has no host")
    return normalized


def extract_domain(url: str) -> str:
    """Lowercase host of `url`, or an empty string if it has none."""
    try:
        host = urlparse(url).hostname
    except ValueError:
        return ""
    return host.lower() if host else ""


def resolve_href(href: str, base_url: str) -> str:
    """Resolve `href` against `base_url`, strip any fragment and lowercase the host."""
    try:
        resolved = urljoin(base_url, href)
        resolved, _ = urldefrag(resolved)
        # urljoin accepts malformed netlocs; parsing the host surfaces them
        urlparse(resolved).hostname
        resolved = _lowercase_host(resolved)
    except ValueError as e:
        raise ResolutionError(href, base_url, e) from e
    return resolved


def same_domain(url: str, domain: str) -> bool:
    """Exact, case-insensitive host comparison. Subdomains do not match."""
    host = extract_domain(url)
    return bool(host) and host == domain.lower()
