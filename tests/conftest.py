"""Shared fixtures for Statusboard tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pytest
import yaml

from statusboard.config.models import StatusboardConfig

SAMPLE_CONFIG: Dict[str, Any] = {
    "statusboard": {"name": "Statusboard", "title": "Test Status", "version": "0.1.0"},
    "server": {"host": "127.0.0.1", "port": 8123},
    "refresh": {"interval": 0, "concurrent": False, "on_startup": True},
    "services": [
        {
            "name": "Web",
            "description": "Public website",
            "url": "http://localhost:8080",
            "checker": {"type": "http", "timeout": 2},
        },
        {
            "name": "Gateway",
            "description": "Edge gateway",
            "checker": {"type": "ping", "host": "gateway.local"},
        },
        {
            "name": "Worker",
            "description": "Background worker",
            "checker": {"type": "command", "process_name": "worker", "timeout": 3},
        },
        {
            "name": "Docs",
            "description": "Static docs, never checked",
            "url": "https://docs.example.com",
        },
    ],
}


@pytest.fixture()
def sample_config() -> StatusboardConfig:
    """Return a parsed StatusboardConfig from sample data."""
    return StatusboardConfig(**SAMPLE_CONFIG)


@pytest.fixture()
def sample_config_dict() -> Dict[str, Any]:
    """Return raw sample config dict."""
    return dict(SAMPLE_CONFIG)


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    """Write sample config to a temp .statusboard.yaml and return the path."""
    path = tmp_path / ".statusboard.yaml"
    with path.open("w") as fh:
        yaml.dump(SAMPLE_CONFIG, fh)
    return path


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STATUSBOARD_CONFIG", raising=False)
