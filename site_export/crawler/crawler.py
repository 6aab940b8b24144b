# === FILE: site_export/crawler/crawler.py ===
from __future__ import annotations

import time
from typing import Awaitable, Callable, List, Optional, Protocol, Sequence, Union

import click

from site_export.config import ExportConfig
from site_export.crawler.link_extractor import extract_links
from site_export.crawler.models import CrawlResult, ExportedPage, OutputFile, RenderedPage
from site_export.crawler.queue import WorkQueue
from site_export.crawler.routes import is_special_route, route_to_file
from site_export.logger import get_logger
from site_export.renderer.base import ConsoleMessage, Renderer, RenderHooks

__all__ = ("Crawler", "CrawlError", "SeedResolutionError", "RoutesOption")

RoutesOption = Union[Sequence[str], Callable[[], Awaitable[Sequence[str]]]]

#: console message types forwarded to stderr instead of stdout
_STDERR_CONSOLE_TYPES = frozenset({"error", "warning", "assert", "trace"})


class Writer(Protocol):
    async def write(self, file: OutputFile) -> object: ...


class SeedResolutionError(RuntimeError):
    """The seed route provider failed; nothing was crawled."""


class CrawlError(RuntimeError):
    """At least one route failed. ``result`` holds everything that did succeed."""

    def __init__(self, result: CrawlResult) -> None:
        self.result = result
        lines = "\n".join(f"  {f}" for f in result.failures)
        super().__init__(f"{len(result.failures)} route(s) failed to export:\n{lines}")


def forward_console(message: ConsoleMessage) -> None:
    """Print a console message of a rendered page, tagged with its source location."""
    click.echo(
        f"Message from {message.location} {message.text}",
        err=message.type in _STDERR_CONSOLE_TYPES,
    )


class Crawler:
    """Exports every route reachable from the seed routes in one pass."""

    def __init__(
        self,
        config: ExportConfig,
        renderer: Renderer,
        writer: Writer,
        *,
        routes: Optional[RoutesOption] = None,
    ) -> None:
        self.config = config
        self.renderer = renderer
        self.writer = writer
        self.routes: RoutesOption = routes if routes is not None else config.routes
        self.logger = get_logger("crawler")

    async def crawl(self) -> CrawlResult:
        start = time.monotonic()
        try:
            seeds = await self._resolve_routes()
            result = await self._crawl_routes(seeds)
        finally:
            await self.renderer.cleanup()

        duration = time.monotonic() - start
        self.logger.info(
            "Exported %d page(s) in %.2f s, %d failure(s)",
            len(result.pages),
            duration,
            len(result.failures),
        )
        if not result.ok:
            raise CrawlError(result)
        return result

    async def _resolve_routes(self) -> List[str]:
        if callable(self.routes):
            try:
                routes = await self.routes()
            except Exception as exc:
                raise SeedResolutionError(f"Could not resolve seed routes: {exc}") from exc
        else:
            routes = self.routes
        return list(routes)

    async def _crawl_routes(self, seeds: Sequence[str]) -> CrawlResult:
        result = CrawlResult()
        hooks = RenderHooks(
            on_before_request=lambda url: self.logger.info("Crawling contents from %s", url),
            on_console=forward_console,
        )

        async def export_route(route: str) -> None:
            html = await self.renderer.render(
                self.config.url_for(route),
                manual=is_special_route(route),
                hooks=hooks,
            )
            page = RenderedPage(route, html)

            # find all <a> tags and export the pages they point to
            for link in extract_links(page.html, page.route):
                queue.add(link)

            file = route_to_file(route)
            self.logger.info("Writing %s for %s", file, route)
            await self.writer.write(OutputFile(file, page.html))
            result.pages.append(ExportedPage(route, file))

        queue: WorkQueue[str] = WorkQueue(
            export_route,
            max_concurrent=self.config.max_concurrent,
            item_timeout=self.config.item_timeout,
            key=route_to_file if self.config.dedupe else None,
        )
        for route in seeds:
            queue.add(route)
        result.failures = await queue.run()
        return result
