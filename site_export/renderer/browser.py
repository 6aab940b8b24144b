# site_export/renderer/browser.py
"""
Headless Chromium renderer (Playwright) for sites that build pages client-side.
"""
from __future__ import annotations

import asyncio
from typing import Any, Optional

from playwright.async_api import Browser, BrowserContext, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from site_export.config import ExportConfig
from site_export.logger import get_logger
from site_export.renderer.base import ConsoleMessage, RenderError, Renderer, RenderHooks


def console_message_from(msg: Any) -> ConsoleMessage:
    """Convert a Playwright console message into a :class:`ConsoleMessage`."""
    location = msg.location or {}
    return ConsoleMessage(
        type=msg.type,
        text=msg.text,
        url=location.get("url", ""),
        line=location.get("lineNumber", 0),
        column=location.get("columnNumber", 0),
    )


class BrowserRenderer(Renderer):
    """Renders pages in one shared browser context, launched on first use."""

    def __init__(self, config: ExportConfig) -> None:
        self.config = config
        self.logger = get_logger("renderer.browser")
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._launch_lock = asyncio.Lock()

    @property
    def _timeout_ms(self) -> float:
        return self.config.timeout * 1000

    async def _ensure_context(self) -> BrowserContext:
        async with self._launch_lock:
            if self._context is None:
                self.logger.debug("Launching headless Chromium")
                self._playwright = await async_playwright().start()
                self._browser = await self._playwright.chromium.launch(headless=True)
                self._context = await self._browser.new_context(user_agent=self.config.user_agent)
            return self._context

    async def render(
        self, url: str, *, manual: bool = False, hooks: Optional[RenderHooks] = None
    ) -> str:
        hooks = hooks or RenderHooks()
        context = await self._ensure_context()
        hooks.before_request(url)
        if manual:
            return await self._fetch_raw(context, url)

        page = await context.new_page()
        page.on("console", lambda msg: hooks.console(console_message_from(msg)))
        try:
            resp = await page.goto(url, wait_until="networkidle", timeout=self._timeout_ms)
            if resp is not None and resp.status >= 400:
                raise RenderError(url, f"HTTP {resp.status}", status=resp.status)
            return await page.content()
        except PlaywrightError as exc:
            raise RenderError(url, exc.message) from exc
        finally:
            await page.close()

    async def _fetch_raw(self, context: BrowserContext, url: str) -> str:
        try:
            resp = await context.request.get(url, timeout=self._timeout_ms)
            if not resp.ok:
                raise RenderError(url, f"HTTP {resp.status}", status=resp.status)
            return await resp.text()
        except PlaywrightError as exc:
            raise RenderError(url, exc.message) from exc

    async def cleanup(self) -> None:
        async with self._launch_lock:
            if self._context is not None:
                await self._context.close()
            if self._browser is not None:
                await self._browser.close()
            if self._playwright is not None:
                await self._playwright.stop()
            self._context = self._browser = self._playwright = None
