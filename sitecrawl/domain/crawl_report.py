"""Crawl report data model."""
from typing import NamedTuple

from sitecrawl.domain.link import Link


class CrawlReport(NamedTuple):
    """Final state of a crawl, read only after the crawl has quiesced.

    `visited_urls` and `links` are kept apart on purpose: one URL is visited
    once, but may be collected under several labels.
    """
    seed_url: str
    domain: str
    visited_urls: tuple[str, ...]
    """Every URL claimed for processing, sorted"""

    links: tuple[Link, ...]
    """Collected links, sorted case-insensitively by label then by url"""

    pages_fetched: int = 0
    fetch_errors: int = 0

    completed: bool = True
    """False if the await bound expired before the crawl went quiet"""

    stopped: bool = False
    """True if the crawl was cancelled via its stop event"""

    @property
    def pages_visited(self) -> int:
        return len(self.visited_urls)

    @property
    def links_found(self) -> int:
        return len(self.links)
