from __future__ import annotations

from html.parser import HTMLParser
from typing import List

from bunzz_cli.domain.constants import APP_VERSION

USER_AGENT = f"Bunzz-CLI/{APP_VERSION}"
DEFAULT_TIMEOUT = 30


class _PreTextExtractor(HTMLParser):
    """Collect the text of <pre> blocks from an HTML error page."""

    def __init__(self) -> None:
        super().__init__()
        self._depth = 0
        self.chunks: List[str] = []

    def handle_starttag(self, tag, attrs):
        if tag == "pre":
            self._depth += 1

    def handle_endtag(self, tag):
        if tag == "pre" and self._depth:
            self._depth -= 1

    def handle_data(self, data):
        if self._depth:
            self.chunks.append(data)


def extract_pre_text(html: str) -> str:
    """Return the text of the first <pre> elements of an HTML page, or ''."""
    parser = _PreTextExtractor()
    parser.feed(html)
    parser.close()
    return "".join(parser.chunks).strip()
