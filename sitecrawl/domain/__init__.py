"""Domain objects for sitecrawl - explicit re-exports to satisfy linters."""
from .link import Link as Link
from .http_response import HttpResponse as HttpResponse
from .crawl_report import CrawlReport as CrawlReport
from .visited_tracker import VisitedTracker as VisitedTracker
from .link_collector import LinkCollector as LinkCollector

__all__ = ["Link", "HttpResponse", "CrawlReport", "VisitedTracker", "LinkCollector"]
