import argparse
import logging
import sys

from sitecrawl import config as env
from sitecrawl.container import Container
from sitecrawl.exceptions import SeedUrlError
from sitecrawl.services.report_formatter import format_report


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Crawl every page of a single site and list its links.")
    parser.add_argument("url", help="Seed URL; https:// is assumed when no scheme is given")
    parser.add_argument("--threads", type=int, default=None,
                        help="Worker pool size (default: CRAWL_THREADS)")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Seconds to wait for the crawl to finish (default: CRAWL_AWAIT_TIMEOUT)")
    return parser.parse_args(argv)


def main(argv=None, container: Container = None, out=None) -> int:
    args = parse_args(argv)
    out = out or sys.stdout
    container = container or Container()

    overrides = {}
    if args.threads is not None:
        overrides["thread_pool_size"] = args.threads
    if args.timeout is not None:
        overrides["await_timeout"] = args.timeout

    try:
        crawler = container.web_crawler(seed_url=args.url, **overrides)
    except (SeedUrlError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    report = crawler.crawl()
    for line in format_report(report):
        print(line, file=out)
    return 0 if report.completed else 1


if __name__ == '__main__':
    logging.basicConfig(
        level=env.get_str_env("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s",
    )
    sys.exit(main())
