from sitecrawl.domain import CrawlReport, Link
from sitecrawl.services.report_formatter import format_report


def test_format_report_lists_counts_then_links():
    report = CrawlReport(
        seed_url="https://example.com",
        domain="example.com",
        visited_urls=("https://example.com", "https://example.com/a"),
        links=(Link("A page", "https://example.com/a"), Link("Again A", "https://example.com/a")),
    )
    assert format_report(report) == [
        "Collected Links (sorted by link label):",
        "--- Crawling Results ---",
        "Total pages visited: 2",
        "Total links found: 2",
        "A page -> https://example.com/a",
        "Again A -> https://example.com/a",
    ]


def test_format_empty_report():
    report = CrawlReport(seed_url="https://example.com", domain="example.com", visited_urls=(), links=())
    lines = format_report(report)
    assert lines[-2:] == ["Total pages visited: 0", "Total links found: 0"]
