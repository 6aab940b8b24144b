# === FILE: site_export/config.py ===
"""
Loading and validation of the SiteExport configuration.
The schema is described with Pydantic, which also performs the checks.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Literal, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)


class ExportConfig(BaseModel):
    """Configuration for one export pass."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    hostname: str = Field("localhost", min_length=1, description="Host of the running site.")
    port: int = Field(..., ge=1, le=65535, description="Port of the running site.")
    routes: List[str] = Field(default_factory=lambda: ["/"], description="Seed routes.")
    out_dir: Path = Field(Path(".site_export"), description="Directory the pages are written to.")
    max_concurrent: int = Field(50, ge=1, description="Maximum number of routes rendered at once.")
    item_timeout: Optional[float] = Field(
        None, gt=0, description="Seconds one route may take before it counts as failed."
    )
    dedupe: bool = Field(True, description="Render each output file only once.")
    renderer: Literal["http", "browser"] = Field("http", description="Page renderer backend.")
    timeout: float = Field(30.0, gt=0, description="Timeout for a single request (seconds).")
    user_agent: str = Field("SiteExportBot/1.0", min_length=1, description="User-Agent header.")

    @field_validator("hostname", mode="before")
    def _strip_hostname(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @field_validator("routes")
    def _check_routes(cls, v: List[str]) -> List[str]:
        bad = [r for r in v if not r.startswith("/")]
        if bad:
            raise ValueError(f"routes must be absolute paths, got {bad[0]!r}")
        return v

    def url_for(self, route: str) -> str:
        """Fully-qualified fetch URL of *route* on the target site."""
        return f"http://{self.hostname}:{self.port}{route}"


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of the YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of the JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ExportConfig:
    """
    Read YAML or JSON and return a validated ExportConfig.
    Raises FileNotFoundError when the config file does not exist.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return ExportConfig(**data)


__all__ = ["ExportConfig", "ValidationError", "load_config"]
