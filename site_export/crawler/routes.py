# site_export/crawler/routes.py
"""
Mapping of routes to output files.
"""
from __future__ import annotations

import re

__all__ = ("SPECIAL_EXTENSIONS_RE", "is_special_route", "route_to_file")

#: routes that are exported verbatim and rendered without a page lifecycle
SPECIAL_EXTENSIONS_RE = re.compile(r"\.(xml|json)$")


def is_special_route(route: str) -> bool:
    return SPECIAL_EXTENSIONS_RE.search(route) is not None


def route_to_file(route: str) -> str:
    """
    Return the site-relative file path a route is written to.

    ``/x.html``, ``/feed.xml`` and ``/data.json`` are kept as they are,
    anything else becomes a directory index: ``/about`` -> ``/about/index.html``.
    """
    if route.endswith(".html") or is_special_route(route):
        return route
    if not route.endswith("/"):
        route += "/"
    return route + "index.html"
