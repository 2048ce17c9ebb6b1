from sitecrawl.domain import CrawlReport


def format_report(report: CrawlReport) -> list[str]:
    """Render a crawl report as printable lines, links in report order."""
    lines = [
        "Collected Links (sorted by link label):",
        "--- Crawling Results ---",
        f"Total pages visited: {report.pages_visited}",
        f"Total links found: {report.links_found}",
    ]
    lines.extend(link.render() for link in report.links)
    return lines
