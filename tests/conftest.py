"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from microdot_labels.config.manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config file at a temp path and clear env overrides."""
    config_path = tmp_path / "config.toml"
    monkeypatch.setattr("microdot_labels.config.manager.CONFIG_FILE", config_path)
    monkeypatch.delenv("MICRODOT_LABELS_FORMAT", raising=False)
    return config_path


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_labels() -> list[str]:
    """Labels covering plain text, inner tags, trailing tags and subgraphs."""
    return [
        "no hashtags",
        "a #hashtag in the middle",
        "a #hashtag at the #end",
        "a #hashtag in the middle and a #SG_SUBGRAPH",
        "deploy $delay=4d $retries=3 #ops",
    ]
