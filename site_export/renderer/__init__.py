# File: site_export/renderer/__init__.py
"""site_export.renderer: page renderers used by the crawler."""

from __future__ import annotations

from site_export.config import ExportConfig
from site_export.renderer.base import ConsoleMessage, RenderError, Renderer, RenderHooks
from site_export.renderer.http import HttpRenderer


def build_renderer(config: ExportConfig) -> Renderer:
    """Instantiate the renderer selected by ``config.renderer``."""
    if config.renderer == "browser":
        # Playwright is only imported when a browser is actually wanted.
        from site_export.renderer.browser import BrowserRenderer

        return BrowserRenderer(config)
    return HttpRenderer(config)


__all__ = [
    "ConsoleMessage",
    "HttpRenderer",
    "RenderError",
    "RenderHooks",
    "Renderer",
    "build_renderer",
]
