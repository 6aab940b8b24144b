# site_export/crawler/link_extractor.py
"""
Link extraction for exported pages.

Anchors are found with a textual scan instead of a full HTML parser: the
renderer output is trusted markup and only the ``href`` of each ``<a>`` is
needed.
"""
from __future__ import annotations

import re
from html import unescape
from typing import Iterator
from urllib.parse import urljoin, urlsplit

__all__ = ("ExtractedLinks", "extract_links", "get_href")

LINK_RE = re.compile(r"<a\s([^>]+?)>", re.IGNORECASE)
HREF_RE = re.compile(r"""href\s*=\s*(?:"(.*?)"|'(.*?)'|([^\s>]*))""", re.IGNORECASE)


def get_href(attrs: str) -> str | None:
    """Return the first href value in an attribute string, entity-decoded, or None."""
    match = HREF_RE.search(attrs)
    if match is None:
        return None
    value = match.group(1) or match.group(2) or match.group(3)
    return unescape(value) if value else None


class ExtractedLinks:
    """
    Same-origin routes referenced by a page.

    Iteration is lazy and can be repeated: every ``iter()`` rescans the
    document. Query strings and fragments are dropped, relative references
    are resolved against the route the page was rendered from.
    """

    __slots__ = ("html", "route")

    def __init__(self, html: str, route: str = "/") -> None:
        self.html = html
        self.route = route

    def __iter__(self) -> Iterator[str]:
        for match in LINK_RE.finditer(self.html):
            href = get_href(match.group(1))
            if not href:
                continue
            try:
                parsed = urlsplit(href.strip())
            except ValueError:
                continue
            # mailto:, javascript:, and absolute URLs to any host
            if parsed.scheme or parsed.netloc or not parsed.path:
                continue
            yield urljoin(self.route, parsed.path)

    def __repr__(self) -> str:
        return f"ExtractedLinks(route={self.route!r}, size={len(self.html)})"


def extract_links(html: str, route: str = "/") -> ExtractedLinks:
    return ExtractedLinks(html, route)
