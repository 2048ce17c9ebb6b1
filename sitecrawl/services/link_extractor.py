import logging
import re
from typing import Iterable, Iterator, Protocol

from bs4 import BeautifulSoup

from sitecrawl.domain import Link
from sitecrawl.exceptions import ResolutionError
from sitecrawl.utils.url_utils import resolve_href, same_domain

logger = logging.getLogger(__name__)

ANCHOR_PATTERN = re.compile(
    r"""<a\s(?:[^>]*?\s)?href\s*=\s*(["'])([^"'>]*)\1[^>]*>(.*?)</a\s*>""",
    re.IGNORECASE | re.DOTALL,
)
TAG_PATTERN = re.compile(r"<[^>]*>", re.DOTALL)


class LinkExtractor(Protocol):
    """Extract in-scope links from an HTML page.

    `extract` returns a fresh iterator per call; out-of-scope and malformed
    candidates are dropped silently.
    """

    def extract(self, html: str, base_url: str) -> Iterator[Link]: ...


class _ScopedLinkExtractor:
    """Candidate pipeline shared by the extractors.

    Subclasses only find raw (href, label) pairs in the markup.
    """

    def __init__(self, domain: str):
        self.domain = domain.lower()

    def _candidates(self, html: str) -> Iterable[tuple[str, str]]:
        raise NotImplementedError

    def extract(self, html: str, base_url: str) -> Iterator[Link]:
        for raw_href, raw_label in self._candidates(html or ""):
            link = self._to_link(raw_href, raw_label, base_url)
            if link is not None:
                yield link

    def _to_link(self, raw_href: str, raw_label: str, base_url: str):
        href = raw_href.strip()
        label = raw_label.strip()
        if not href or not label:
            logger.debug("Skipping (empty href or label) %r on %s", raw_href, base_url)
            return None
        if href.startswith("#"):
            logger.debug("Skipping (fragment only) %s on %s", href, base_url)
            return None
        try:
            url = resolve_href(href, base_url)
        except ResolutionError as e:
            logger.debug("Skipping (unresolvable) %s", e)
            return None
        if not same_domain(url, self.domain):
            logger.debug("Skipping (external) %s -> not same host as %s", url, self.domain)
            return None
        return Link(label=label, url=url)


class RegexLinkExtractor(_ScopedLinkExtractor):
    """Scans anchors with a regular expression; nested markup is stripped from labels."""

    def _candidates(self, html: str) -> Iterable[tuple[str, str]]:
        for match in ANCHOR_PATTERN.finditer(html):
            yield match.group(2), TAG_PATTERN.sub("", match.group(3))


class SoupLinkExtractor(_ScopedLinkExtractor):
    """Same contract as `RegexLinkExtractor`, parsed with BeautifulSoup."""

    def _candidates(self, html: str) -> Iterable[tuple[str, str]]:
        soup = BeautifulSoup(html, "html.parser")
        for a in soup.find_all("a", href=True):
            yield a.get("href"), a.get_text()
