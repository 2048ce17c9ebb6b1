import threading
from typing import Set


class VisitedTracker:
    """
    Thread-safe set of URLs claimed during a crawl.

    A URL is claimed at most once; `try_mark` performs the membership test
    and the insert under one lock so concurrent workers can never both
    win the same URL. Entries are never evicted.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()

    def try_mark(self, url: str) -> bool:
        """Mark `url` as visited. Returns True only for the call that inserted it."""
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def snapshot(self) -> list[str]:
        with self._lock:
            return sorted(self._visited)

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
