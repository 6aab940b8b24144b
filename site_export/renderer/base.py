# site_export/renderer/base.py
"""
Renderer interface: turns a fully-qualified URL into HTML.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional


class RenderError(RuntimeError):
    """The renderer could not produce content for a URL."""

    def __init__(self, url: str, message: str, status: Optional[int] = None) -> None:
        self.url = url
        self.status = status
        super().__init__(f"{url}: {message}")


@dataclass(slots=True)
class ConsoleMessage:
    """A console message emitted by a rendered page."""

    type: str
    text: str
    url: str = ""
    line: int = 0
    column: int = 0

    @property
    def location(self) -> str:
        return f"{self.url}:{self.line}:{self.column}"


@dataclass(slots=True)
class RenderHooks:
    """Per-render observer callbacks."""

    on_before_request: Optional[Callable[[str], None]] = None
    on_console: Optional[Callable[[ConsoleMessage], None]] = None

    def before_request(self, url: str) -> None:
        if self.on_before_request is not None:
            self.on_before_request(url)

    def console(self, message: ConsoleMessage) -> None:
        if self.on_console is not None:
            self.on_console(message)


class Renderer(ABC):
    """Base class for page renderers."""

    @abstractmethod
    async def render(
        self, url: str, *, manual: bool = False, hooks: Optional[RenderHooks] = None
    ) -> str:
        """
        Return the HTML for *url*.

        ``manual`` asks for the raw payload without waiting for a live page
        lifecycle (used for ``.xml``/``.json`` routes).
        """

    @abstractmethod
    async def cleanup(self) -> None:
        """Release everything the renderer holds. Called once per crawl."""

    async def __aenter__(self) -> Renderer:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.cleanup()
