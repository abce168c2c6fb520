"""Tests for AppConfig helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from dbjson import config as config_module
from dbjson.config import AppConfig, load_config, save_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "config.toml")

    result = load_config()

    assert result == AppConfig()
    assert result.last_path is None


def test_load_config_reads_values(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        """
theme = "nord"
default_db_type = "MySql"
last_path = "/srv/app/database.json"
"""
    )
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_path)

    result = load_config()

    assert result.theme == "nord"
    assert result.default_db_type == "MySql"
    assert result.last_path == "/srv/app/database.json"


def test_load_config_handles_toml_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("theme = [unterminated")
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_path)

    assert load_config() == AppConfig()


def test_load_config_ignores_wrong_types(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("theme = 3\nlast_path = \"\"\n")
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_path)

    assert load_config() == AppConfig()


def test_save_config_round_trips_paths_needing_escapes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "nested" / "config.toml"
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_path)
    windows_path = 'C:\\Users\\dev\\"configs"\\database.json'

    save_config(AppConfig().with_last_path(windows_path).with_theme("nord"))

    content = config_path.read_text(encoding="utf-8")
    assert 'theme = "nord"' in content
    assert load_config().last_path == windows_path


def test_with_last_path_returns_copy() -> None:
    config = AppConfig()

    updated = config.with_last_path("/tmp/db.json")

    assert updated.last_path == "/tmp/db.json"
    assert config.last_path is None
