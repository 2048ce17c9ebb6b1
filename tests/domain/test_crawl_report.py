from sitecrawl.domain import CrawlReport, Link


def test_counts_come_from_separate_sets():
    report = CrawlReport(
        seed_url="https://example.com",
        domain="example.com",
        visited_urls=("https://example.com", "https://example.com/a"),
        links=(Link("A page", "https://example.com/a"), Link("Again A", "https://example.com/a"),
               Link("Home", "https://example.com")),
    )
    assert report.pages_visited == 2
    assert report.links_found == 3
    assert report.completed is True
    assert report.stopped is False
