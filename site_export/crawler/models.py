# site_export/crawler/models.py
"""
Data models for the SiteExport crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


@dataclass(slots=True)
class RenderedPage:
    """HTML produced by the renderer for one route."""

    route: str
    html: str


@dataclass(slots=True)
class OutputFile:
    """Content and site-relative destination path handed to the writer."""

    path: str
    content: str


@dataclass(slots=True)
class ExportedPage:
    route: str
    file: str


@dataclass(slots=True)
class ItemFailure:
    """A work item whose processing raised."""

    item: Any
    error: BaseException

    def __str__(self) -> str:
        return f"{self.item}: {type(self.error).__name__}: {self.error}"


@dataclass(slots=True)
class CrawlResult:
    """Outcome of one crawl pass."""

    pages: List[ExportedPage] = field(default_factory=list)
    failures: List[ItemFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
