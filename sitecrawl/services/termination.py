import enum
import logging
import threading
from typing import Optional

logger = logging.getLogger(__name__)


class CrawlState(enum.Enum):
    RUNNING = "running"
    DONE = "done"


class TerminationDetector:
    """Reference count of outstanding crawl tasks with a single-fire completion signal.

    The count starts at 1 for the seed. Each newly claimed URL is counted with
    `task_dispatched` before it is queued, and every finished task calls
    `task_completed` exactly once. Because a task counts its children before
    it completes itself, the count can only reach zero when nothing is in
    flight and nothing more can be produced.
    """

    def __init__(self, initial_outstanding: int = 1):
        if initial_outstanding < 1:
            raise ValueError("initial_outstanding must be at least 1")
        self._cond = threading.Condition()
        self._outstanding = initial_outstanding
        self._state = CrawlState.RUNNING

    @property
    def outstanding(self) -> int:
        with self._cond:
            return self._outstanding

    @property
    def state(self) -> CrawlState:
        with self._cond:
            return self._state

    def is_done(self) -> bool:
        return self.state is CrawlState.DONE

    def task_dispatched(self) -> None:
        with self._cond:
            if self._state is CrawlState.DONE:
                raise RuntimeError("task dispatched after crawl completed")
            self._outstanding += 1

    def task_completed(self) -> bool:
        """Account for one finished task. Returns True for the call that completed the crawl."""
        with self._cond:
            if self._outstanding <= 0:
                raise RuntimeError("outstanding task count would drop below zero")
            self._outstanding -= 1
            if self._outstanding > 0:
                return False
            self._state = CrawlState.DONE
            self._cond.notify_all()
        logger.debug("Outstanding work reached zero; crawl is done")
        return True

    def await_done(self, timeout: Optional[float] = None) -> bool:
        """Block until DONE. Returns False if `timeout` seconds passed first."""
        with self._cond:
            return self._cond.wait_for(lambda: self._state is CrawlState.DONE, timeout=timeout)
