"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from sitecrawl import config as env
from sitecrawl.services.crawler import WebCrawler
from sitecrawl.services.fetcher import HttpServiceFetcher
from sitecrawl.services.http_service import HttpService
from sitecrawl.services.link_extractor_factory import LinkExtractorFactory


# Environment variables used by the container (read via `sitecrawl.config` helpers).
#
# USER_AGENT (str, default: "Mozilla/5.0")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (float seconds, default: 30)
#   Per-request timeout; a hung connection would otherwise hold a worker forever.
#
# CRAWL_THREADS (int, default: 10)
#   Worker pool size when the caller does not pass one.
#
# CRAWL_AWAIT_TIMEOUT (float seconds, default: 60)
#   Upper bound on waiting for a crawl to finish. Values <= 0 wait forever.
#
# LINK_EXTRACTOR (str, default: "regex")
#   "regex" or "soup" (BeautifulSoup). Normalized with `.strip().lower()`.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "Mozilla/5.0"),
    "HTTP_TIMEOUT": env.get_float_env("HTTP_TIMEOUT", 30.0),
    "CRAWL_THREADS": env.get_int_env("CRAWL_THREADS", 10),
    "CRAWL_AWAIT_TIMEOUT": env.get_float_env("CRAWL_AWAIT_TIMEOUT", 60.0),
    "LINK_EXTRACTOR": env.get_str_env("LINK_EXTRACTOR", "regex").strip().lower(),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for sitecrawl."""

    config = providers.Configuration(default=ENV)

    # Shared HTTP client; override with a fake callable in tests
    http_client = providers.Object(requests.get)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=http_client,
        timeout=config.HTTP_TIMEOUT.as_(float),
    )

    page_fetcher = providers.Singleton(
        HttpServiceFetcher,
        http_service=http_service,
    )

    link_extractor_factory = providers.Singleton(
        LinkExtractorFactory,
        default_mode=config.LINK_EXTRACTOR.as_(str),
    )

    # One crawler per seed: call with seed_url=... (and optionally thread_pool_size=...)
    web_crawler = providers.Factory(
        WebCrawler,
        fetcher=page_fetcher,
        thread_pool_size=config.CRAWL_THREADS.as_(int),
        link_extractor_factory=link_extractor_factory,
        await_timeout=config.CRAWL_AWAIT_TIMEOUT.as_(float),
    )
