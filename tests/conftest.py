# File: tests/conftest.py
import asyncio
import logging
from collections.abc import AsyncIterator
from typing import Dict, Iterable, List, Optional
from urllib.parse import urlsplit

import pytest
from aiohttp import web

from site_export.config import ExportConfig
from site_export.crawler.models import OutputFile
from site_export.logger import LOGGER_NAME
from site_export.renderer.base import RenderError, Renderer, RenderHooks


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


class FakeRenderer(Renderer):
    """
    In-memory renderer keyed by route.
    Records every call, the manual-mode routes and the peak parallelism.
    """

    def __init__(
        self,
        pages: Dict[str, str],
        *,
        delay: float = 0.0,
        fail: Iterable[str] = (),
    ) -> None:
        self.pages = pages
        self.delay = delay
        self.fail = set(fail)
        self.calls: List[str] = []
        self.manual: List[str] = []
        self.cleanups = 0
        self.active = 0
        self.peak = 0

    async def render(
        self, url: str, *, manual: bool = False, hooks: Optional[RenderHooks] = None
    ) -> str:
        if hooks is not None:
            hooks.before_request(url)
        route = urlsplit(url).path
        self.calls.append(route)
        if manual:
            self.manual.append(route)
        self.active += 1
        self.peak = max(self.peak, self.active)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.active -= 1
        if route in self.fail or route not in self.pages:
            raise RenderError(url, "HTTP 404", status=404)
        return self.pages[route]

    async def cleanup(self) -> None:
        self.cleanups += 1


class RecordingWriter:
    """Writer that keeps the files in memory."""

    def __init__(self, fail: Iterable[str] = ()) -> None:
        self.files: List[OutputFile] = []
        self.fail = set(fail)

    async def write(self, file: OutputFile) -> None:
        await asyncio.sleep(0)
        if file.path in self.fail:
            raise OSError(f"disk full: {file.path}")
        self.files.append(file)

    @property
    def paths(self) -> List[str]:
        return [f.path for f in self.files]


@pytest.fixture()
def export_config(tmp_path) -> ExportConfig:
    """
    Return a basic valid ExportConfig pointing at localhost:8080.
    """
    return ExportConfig(
        hostname="localhost",
        port=8080,
        out_dir=tmp_path / "dist",
        max_concurrent=4,
        timeout=2.0,
        user_agent="TestAgent/1.0",
    )


@pytest.fixture()
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture()
def project_log(caplog):
    """Attach caplog to the project logger (it does not propagate to root)."""
    lg = logging.getLogger(LOGGER_NAME)
    lg.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    yield caplog
    lg.removeHandler(caplog.handler)


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()
