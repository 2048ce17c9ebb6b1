from dataclasses import dataclass


@dataclass(frozen=True)
class Link:
    """A labelled hyperlink found on a crawled page.

    Identity is the (label, url) pair so one URL may be collected under
    several labels.
    """

    label: str
    url: str

    def sort_key(self) -> tuple[str, str]:
        return (self.label.lower(), self.url)

    def render(self) -> str:
        return f"{self.label} -> {self.url}"

    def __str__(self):
        return self.render()
