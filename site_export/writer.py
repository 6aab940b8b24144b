# File: site_export/writer.py
"""site_export.writer: persisting rendered pages below the output directory."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Union

from site_export.crawler.models import OutputFile
from site_export.logger import get_logger

__all__ = ["FileWriter"]


class FileWriter:
    """Writes :class:`OutputFile` objects below ``out_dir``."""

    def __init__(self, out_dir: Union[str, Path]) -> None:
        self.out_dir = Path(out_dir).expanduser().resolve()
        self.logger = get_logger("writer")

    def destination(self, file: OutputFile) -> Path:
        """Absolute path for *file*; refuses paths that escape ``out_dir``."""
        target = (self.out_dir / file.path.lstrip("/")).resolve()
        if target != self.out_dir and self.out_dir not in target.parents:
            raise ValueError(f"Refusing to write outside {self.out_dir}: {file.path}")
        return target

    async def write(self, file: OutputFile) -> Path:
        target = self.destination(file)
        await asyncio.to_thread(self._write_sync, target, file.content)
        self.logger.debug("Wrote %d chars to %s", len(file.content), target)
        return target

    @staticmethod
    def _write_sync(target: Path, content: str) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
