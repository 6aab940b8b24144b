import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from site_export.config import ExportConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,expect_exc",
    [
        ("hostname: example.test\nport: 3000", None),
        (json.dumps({"hostname": "example.test", "port": 3000}), None),
        ("{}", ValidationError),
        ("not: a: mapping", ValueError),
        ("::invalid yaml", TypeError),
    ],
)
def test_load_config_variants(tmp_path, content, expect_exc):
    # Write YAML or JSON based on content
    suffix = ".yaml" if not content.strip().startswith("{") else ".json"
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, ExportConfig)
        assert cfg.url_for("/about") == "http://example.test:3000/about"
        assert cfg.routes == ["/"]
        assert cfg.max_concurrent == 50
        assert cfg.dedupe is True


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_config(None)


def test_load_config_default_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("port: 4173\n", encoding="utf-8")
    assert load_config(None).port == 4173


def test_unsupported_suffix(tmp_path):
    cfg_path = write_file(tmp_path, "port = 1", ".toml")
    with pytest.raises(ValueError):
        load_config(cfg_path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"port": 0},
        {"port": 70000},
        {"max_concurrent": 0},
        {"item_timeout": 0},
        {"routes": ["about"]},
        {"renderer": "curl"},
        {"unknown": True},
    ],
)
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ValidationError):
        ExportConfig(**{"port": 8080, **overrides})


def test_config_is_frozen():
    cfg = ExportConfig(port=8080, hostname=" localhost/ ")
    assert cfg.hostname == "localhost"
    with pytest.raises(ValidationError):
        cfg.port = 9090
