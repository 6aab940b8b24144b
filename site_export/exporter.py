# === FILE: site_export/exporter.py ===
"""
Wrapper that runs one export pass from a configuration.
"""
from typing import Optional

from site_export.config import ExportConfig
from site_export.crawler.crawler import Crawler, RoutesOption
from site_export.crawler.models import CrawlResult
from site_export.logger import logger
from site_export.renderer import build_renderer
from site_export.writer import FileWriter


async def start_export(cfg: ExportConfig, routes: Optional[RoutesOption] = None) -> CrawlResult:
    """
    Crawl the site described by *cfg* and write every page below ``cfg.out_dir``.

    Parameters
    ----------
    cfg : ExportConfig
        Export configuration.
    routes
        Optional override of ``cfg.routes``: a list of routes or an async
        callable returning one.

    Returns
    -------
    CrawlResult
        Exported pages. Raises ``CrawlError`` when some routes failed.
    """
    logger.info("Exporting http://%s:%s to %s", cfg.hostname, cfg.port, cfg.out_dir)
    crawler = Crawler(cfg, build_renderer(cfg), FileWriter(cfg.out_dir), routes=routes)
    return await crawler.crawl()


__all__ = ["start_export"]
