"""App settings loading helpers."""

from __future__ import annotations

import json
from pathlib import Path

import tomllib

from pydantic import BaseModel

from .templates import DEFAULT_DB_TYPE

CONFIG_FILE = Path.home() / ".config" / "dbjson" / "config.toml"


class AppConfig(BaseModel):
    """Shape of the shell's settings file."""

    theme: str = "textual-dark"
    last_path: str | None = None
    default_db_type: str = DEFAULT_DB_TYPE

    def with_last_path(self, path: str) -> AppConfig:
        """Return a copy remembering the most recently applied document path."""

        return self.model_copy(update={"last_path": path})

    def with_theme(self, theme: str) -> AppConfig:
        return self.model_copy(update={"theme": theme})


def load_config() -> AppConfig:
    """Load settings from disk; fall back to defaults if missing or invalid."""

    try:
        data = _read_config_file()
    except FileNotFoundError:
        return AppConfig()
    except (tomllib.TOMLDecodeError, OSError):
        return AppConfig()
    return AppConfig(**data)


def save_config(config: AppConfig) -> None:
    """Persist settings to disk."""

    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    lines: list[str] = [
        f"theme = {_quote(config.theme)}",
        f"default_db_type = {_quote(config.default_db_type)}",
    ]
    if config.last_path:
        lines.append(f"last_path = {_quote(config.last_path)}")
    CONFIG_FILE.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _read_config_file() -> dict[str, object]:
    with CONFIG_FILE.open("rb") as handle:
        raw = tomllib.load(handle)
    data: dict[str, object] = {}
    for key in ("theme", "last_path", "default_db_type"):
        value = raw.get(key)
        if isinstance(value, str) and value.strip():
            data[key] = value
    return data


def _quote(value: str) -> str:
    # JSON string escapes are a subset of TOML basic-string escapes.
    return json.dumps(value, ensure_ascii=False)


__all__ = ["CONFIG_FILE", "AppConfig", "load_config", "save_config"]
