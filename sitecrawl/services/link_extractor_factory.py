from __future__ import annotations

from dataclasses import dataclass

from sitecrawl.services.link_extractor import LinkExtractor, RegexLinkExtractor, SoupLinkExtractor


@dataclass(frozen=True)
class LinkExtractorFactory:
    """Builds the extractor for one crawl; the domain is only known per seed."""

    default_mode: str = "regex"

    def get(self, mode: str, domain: str) -> LinkExtractor:
        if mode is None or (isinstance(mode, str) and mode.strip() == ""):
            raise ValueError("extractor mode is required")
        normalized = mode.strip().lower()
        if normalized == "regex":
            return RegexLinkExtractor(domain)
        if normalized == "soup":
            return SoupLinkExtractor(domain)
        raise ValueError(f"Unknown extractor mode: {mode!r}")

    def for_domain(self, domain: str) -> LinkExtractor:
        return self.get(self.default_mode, domain)
