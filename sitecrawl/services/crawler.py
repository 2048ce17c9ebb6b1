import logging
import threading
from typing import Optional

from sitecrawl.domain import CrawlReport, LinkCollector
from sitecrawl.services.fetcher import Fetcher
from sitecrawl.services.frontier import Frontier
from sitecrawl.services.link_extractor import LinkExtractor
from sitecrawl.services.link_extractor_factory import LinkExtractorFactory
from sitecrawl.services.termination import TerminationDetector
from sitecrawl.services.worker_pool import WorkerPool
from sitecrawl.utils.url_utils import extract_domain, normalize_seed_url

logger = logging.getLogger(__name__)

SHUTDOWN_GRACE_SECONDS = 5.0


class WebCrawler:
    """Crawls every page reachable from a seed URL without leaving its host.

    Owns one crawl: the seed is validated up front (a bad seed raises
    `SeedUrlError` before any thread exists), then `crawl()` runs the worker
    pool until the termination detector reports that no work is left, or
    until `await_timeout` seconds have passed.
    """

    def __init__(
        self,
        seed_url: str,
        fetcher: Fetcher,
        thread_pool_size: int = 10,
        link_extractor: Optional[LinkExtractor] = None,
        link_extractor_factory: Optional[LinkExtractorFactory] = None,
        await_timeout: Optional[float] = 60.0,
        stop_event: Optional[threading.Event] = None,
    ):
        self.seed_url = normalize_seed_url(seed_url)
        self.domain = extract_domain(self.seed_url)
        self.await_timeout = await_timeout if await_timeout and await_timeout > 0 else None
        self.stop_event = stop_event if stop_event is not None else threading.Event()

        if link_extractor is None:
            factory = link_extractor_factory or LinkExtractorFactory()
            link_extractor = factory.for_domain(self.domain)

        self.frontier = Frontier()
        self.collector = LinkCollector()
        self.detector = TerminationDetector()
        self.pool = WorkerPool(
            thread_pool_size,
            frontier=self.frontier,
            fetcher=fetcher,
            link_extractor=link_extractor,
            collector=self.collector,
            detector=self.detector,
            stop_event=self.stop_event,
        )
        self._started = False
        self._completed = False

    def start(self) -> None:
        if self._started:
            raise RuntimeError("crawl already started")
        self._started = True
        logger.info("Starting crawl of %s (domain=%s, workers=%s)", self.seed_url, self.domain, self.pool.size)
        self.frontier.try_claim(self.seed_url)
        self.frontier.submit(self.seed_url)
        self.pool.start()

    def stop(self) -> None:
        """Stop dispatching new work; queued tasks drain without being fetched."""
        if not self.stop_event.is_set():
            logger.warning("Crawl of %s cancelled", self.seed_url)
        self.stop_event.set()

    def wait_until_finished(self, timeout: Optional[float] = None) -> bool:
        """Wait for the crawl to go quiet, then shut the workers down.

        Waits at most `timeout` seconds (default: `await_timeout`). Returns
        False if the bound expired first; in that case the crawl is stopped
        and the results reflect whatever was gathered so far.
        """
        if not self._started:
            raise RuntimeError("crawl not started")
        bound = timeout if timeout is not None else self.await_timeout
        self._completed = self.detector.await_done(bound)
        if not self._completed:
            logger.warning(
                "Crawl of %s did not finish within %ss; %s tasks outstanding",
                self.seed_url,
                bound,
                self.detector.outstanding,
            )
            self.stop()
        self.pool.shutdown(timeout=None if self._completed else SHUTDOWN_GRACE_SECONDS)
        logger.info(
            "Crawl of %s finished: %s pages visited, %s links found",
            self.seed_url,
            self.frontier.visited_count(),
            len(self.collector),
        )
        return self._completed

    def results(self) -> CrawlReport:
        return CrawlReport(
            seed_url=self.seed_url,
            domain=self.domain,
            visited_urls=tuple(self.frontier.visited_urls()),
            links=tuple(self.collector.sorted_links()),
            pages_fetched=self.pool.pages_fetched,
            fetch_errors=self.pool.fetch_errors,
            completed=self._completed,
            stopped=self.stop_event.is_set(),
        )

    def crawl(self) -> CrawlReport:
        self.start()
        self.wait_until_finished()
        return self.results()
