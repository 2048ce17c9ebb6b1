import logging
import threading
import time
from typing import Optional

from sitecrawl.domain.link_collector import LinkCollector
from sitecrawl.exceptions import FetchError
from sitecrawl.services.fetcher import Fetcher
from sitecrawl.services.frontier import Frontier
from sitecrawl.services.link_extractor import LinkExtractor
from sitecrawl.services.termination import TerminationDetector

logger = logging.getLogger(__name__)


class WorkerPool:
    """Fixed set of worker threads fed by the frontier's queue.

    Workers never wait on each other: each one fetches a page, collects its
    links, claims and queues the new ones, then reports its own completion
    to the termination detector.
    """

    def __init__(
        self,
        size: int,
        frontier: Frontier,
        fetcher: Fetcher,
        link_extractor: LinkExtractor,
        collector: LinkCollector,
        detector: TerminationDetector,
        stop_event: Optional[threading.Event] = None,
    ):
        if size is None or int(size) < 1:
            raise ValueError("worker pool size must be a positive integer")
        self.size = int(size)
        self.frontier = frontier
        self.fetcher = fetcher
        self.link_extractor = link_extractor
        self.collector = collector
        self.detector = detector
        self.stop_event = stop_event if stop_event is not None else threading.Event()
        self._threads: list[threading.Thread] = []
        self._stats_lock = threading.Lock()
        self.pages_fetched = 0
        self.fetch_errors = 0

    def start(self) -> None:
        if self._threads:
            raise RuntimeError("worker pool already started")
        self._threads = [
            threading.Thread(target=self._run, args=(worker_id,), name=f"crawl-worker-{worker_id}", daemon=True)
            for worker_id in range(self.size)
        ]
        for thread in self._threads:
            thread.start()

    def shutdown(self, timeout: Optional[float] = None) -> bool:
        """Send one stop sentinel per worker and join them.

        `timeout` bounds the whole shutdown, not each join. Returns False if
        some worker was still busy when it expired.
        """
        self.frontier.close(len(self._threads))
        deadline = None if timeout is None else time.monotonic() + timeout
        for thread in self._threads:
            if deadline is None:
                thread.join()
            else:
                thread.join(max(0.0, deadline - time.monotonic()))
        alive = [t.name for t in self._threads if t.is_alive()]
        if alive:
            logger.warning("Workers still running after shutdown: %s", ", ".join(alive))
            return False
        return True

    def _run(self, worker_id: int) -> None:
        while True:
            url = self.frontier.next_url()
            if url is None:
                logger.debug("Worker %s stopping", worker_id)
                return
            self.process(url)

    def process(self, url: str) -> None:
        """Run one task; always accounts for its completion, whatever happens."""
        try:
            if self.stop_event.is_set():
                logger.debug("Crawl stopped; skipping %s", url)
                return
            logger.info("Crawling: %s", url)
            try:
                body = self.fetcher.fetch(url)
            except FetchError as e:
                logger.warning("Fetch failed for %s: %s", url, e)
                self._count(errors=1)
                return
            self._count(fetched=1)
            self._dispatch_links(url, body)
        except Exception:
            logger.exception("Unexpected error processing %s", url)
        finally:
            self.detector.task_completed()

    def _dispatch_links(self, url: str, body: str) -> None:
        for link in self.link_extractor.extract(body, url):
            self.collector.add(link)
            if self.stop_event.is_set():
                continue
            if self.frontier.try_claim(link.url):
                # count before queueing so the child can never finish first
                self.detector.task_dispatched()
                self.frontier.submit(link.url)
            else:
                logger.debug("Skipping (visited) %s", link.url)

    def _count(self, fetched: int = 0, errors: int = 0) -> None:
        with self._stats_lock:
            self.pages_fetched += fetched
            self.fetch_errors += errors
