# site_export/crawler/__init__.py
"""Crawl engine: work queue, link discovery, route mapping and orchestration."""
from site_export.crawler.crawler import CrawlError, Crawler, SeedResolutionError
from site_export.crawler.link_extractor import extract_links
from site_export.crawler.models import CrawlResult, ExportedPage, ItemFailure, OutputFile
from site_export.crawler.queue import QueueClosedError, WorkQueue
from site_export.crawler.routes import route_to_file

__all__ = [
    "CrawlError",
    "CrawlResult",
    "Crawler",
    "ExportedPage",
    "ItemFailure",
    "OutputFile",
    "QueueClosedError",
    "SeedResolutionError",
    "WorkQueue",
    "extract_links",
    "route_to_file",
]
