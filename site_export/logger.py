# === FILE: site_export/logger.py ===
"""Logging setup for **SiteExport**.

All modules log through children of one project logger::

    from site_export.logger import get_logger
    log = get_logger("crawler")        # -> "SiteExport.crawler"
    log.info("Writing %s for %s", file, route)

:func:`configure` installs the console handler (and, optionally, a rotating
log file). It only ever replaces handlers it installed itself, so handlers
attached by an embedding application or by pytest's ``caplog`` survive a
reconfiguration from the CLI.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Iterable, TextIO, Union

LOGGER_NAME: Final[str] = "SiteExport"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

#: third-party loggers that follow the project level instead of the root one
THIRD_PARTY_LOGGERS: Final[tuple[str, ...]] = ("aiohttp.client", "aiohttp.access")

_LevelT = Union[int, str]

# marks handlers created by configure()
_OWNED = "_site_export_owned"


def _owned(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    setattr(handler, _OWNED, True)
    return handler


def _drop_owned_handlers(lg: logging.Logger) -> None:
    for handler in [h for h in lg.handlers if getattr(h, _OWNED, False)]:
        lg.removeHandler(handler)
        handler.close()


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    stream: TextIO | None = None,
    third_party: Iterable[str] = THIRD_PARTY_LOGGERS,
) -> logging.Logger:
    """(Re)configure the project logger.

    Parameters
    ----------
    level
        Numeric or textual level (e.g. ``"DEBUG"``), also applied to the
        loggers named in *third_party*.
    log_file
        Rotating logfile (5 MiB x 3); *None* means console only.
    log_format
        Format string for :class:`logging.Formatter`.
    stream
        Console stream, ``sys.stdout`` when omitted (resolved at call time).
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    _drop_owned_handlers(lg)

    lg.addHandler(_owned(logging.StreamHandler(stream or sys.stdout), log_format))
    if log_file is not None:
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        lg.addHandler(_owned(file_handler, log_format))

    for name in third_party:
        logging.getLogger(name).setLevel(level)

    lg.propagate = False
    return lg


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the project logger or its child ``SiteExport.<name>``."""
    return logging.getLogger(LOGGER_NAME if not name else f"{LOGGER_NAME}.{name}")


logger: logging.Logger = configure()

__all__ = ["DEFAULT_FORMAT", "LOGGER_NAME", "configure", "get_logger", "logger"]
