import queue
from typing import Optional

from sitecrawl.domain.visited_tracker import VisitedTracker


class Frontier:
    """Visited set plus the unbounded work queue the workers consume.

    Claiming a URL and queueing it are separate steps: callers must win
    `try_claim` before they `submit`, which is what keeps any URL from being
    dispatched twice. A `None` item on the queue tells one worker to exit.
    """

    def __init__(self, visited_tracker: Optional[VisitedTracker] = None):
        self.visited_tracker = visited_tracker if visited_tracker is not None else VisitedTracker()
        self._queue: "queue.Queue[Optional[str]]" = queue.Queue()

    def try_claim(self, url: str) -> bool:
        return self.visited_tracker.try_mark(url)

    def submit(self, url: str) -> None:
        self._queue.put(url)

    def next_url(self) -> Optional[str]:
        """Block until a URL (or a shutdown sentinel, returned as None) is available."""
        return self._queue.get()

    def close(self, worker_count: int) -> None:
        for _ in range(worker_count):
            self._queue.put(None)

    def visited_urls(self) -> list[str]:
        return self.visited_tracker.snapshot()

    def visited_count(self) -> int:
        return len(self.visited_tracker)
