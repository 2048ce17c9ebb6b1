import threading
from typing import Set

from sitecrawl.domain.link import Link


class LinkCollector:
    """Thread-safe, grow-only set of links found during a crawl."""

    def __init__(self):
        self._lock = threading.Lock()
        self._links: Set[Link] = set()

    def add(self, link: Link) -> bool:
        """Add `link`; returns False if the same (label, url) was already collected."""
        with self._lock:
            if link in self._links:
                return False
            self._links.add(link)
            return True

    def sorted_links(self) -> list[Link]:
        with self._lock:
            return sorted(self._links, key=Link.sort_key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._links)
