# site_export/renderer/http.py
"""
Plain HTTP renderer: the server-rendered response body is the page.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from site_export.config import ExportConfig
from site_export.logger import get_logger
from site_export.renderer.base import RenderError, Renderer, RenderHooks


class HttpRenderer(Renderer):
    """Fetches pages with a shared aiohttp session, opened on first use."""

    def __init__(self, config: ExportConfig) -> None:
        self.config = config
        self.session: Optional[ClientSession] = None
        self.logger = get_logger("renderer.http")

    def _ensure_session(self) -> ClientSession:
        if self.session is None or self.session.closed:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self.session

    async def render(
        self, url: str, *, manual: bool = False, hooks: Optional[RenderHooks] = None
    ) -> str:
        session = self._ensure_session()
        if hooks is not None:
            hooks.before_request(url)
        try:
            async with session.get(url) as resp:
                if resp.status >= 400:
                    raise RenderError(url, f"HTTP {resp.status}", status=resp.status)
                text = await resp.text()
        except asyncio.TimeoutError as exc:
            raise RenderError(url, f"timed out after {self.config.timeout} s") from exc
        except ClientError as exc:
            raise RenderError(url, str(exc) or type(exc).__name__) from exc
        self.logger.debug("Fetched %s (%d chars, manual=%s)", url, len(text), manual)
        return text

    async def cleanup(self) -> None:
        if self.session is not None and not self.session.closed:
            await self.session.close()
        self.session = None
