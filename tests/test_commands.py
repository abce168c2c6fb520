"""Tests for the caller-facing command layer."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from dbjson.commands import CommandError, DatabaseCommands, coerce_entry
from dbjson.errors import NoPathConfigured, ValidationError
from dbjson.models import DatabaseEntry


@pytest.fixture
def commands() -> DatabaseCommands:
    return DatabaseCommands()


def test_load_before_set_path_fails_with_message(commands: DatabaseCommands) -> None:
    assert commands.get_database_path() == ""

    with pytest.raises(CommandError) as info:
        commands.load_database_config()

    assert info.value.kind == "no_path_configured"
    assert isinstance(info.value.__cause__, NoPathConfigured)
    assert str(info.value) == "Set the configuration file path first."


def test_set_database_path_rejects_blank(commands: DatabaseCommands) -> None:
    with pytest.raises(CommandError) as info:
        commands.set_database_path("   ")

    assert info.value.kind == "invalid_argument"


def test_upsert_accepts_camel_case_payload(commands: DatabaseCommands, tmp_path: Path) -> None:
    path = commands.set_database_path(str(tmp_path / "cfg.json"))

    result = commands.upsert_database_entry(
        {
            "name": " db2 ",
            "connectionString": " c ",
            "dbType": " t ",
            "optimizationSettings": {"autoToLower": "TRUE"},
        }
    )

    expected = {
        "databases": [
            {
                "name": "db2",
                "connectionString": "c",
                "dbType": "t",
                "optimizationSettings": {"autoToLower": "true"},
            }
        ]
    }
    assert result == expected
    assert json.loads(Path(path).read_text(encoding="utf-8")) == expected
    assert commands.load_database_config() == expected


def test_upsert_reports_missing_payload_fields(commands: DatabaseCommands, tmp_path: Path) -> None:
    commands.set_database_path(str(tmp_path / "cfg.json"))

    with pytest.raises(CommandError) as info:
        commands.upsert_database_entry({"name": "db1", "dbType": "postgres"})

    assert info.value.kind == "validation_error"
    assert isinstance(info.value.error, ValidationError)
    assert info.value.error.field in {"connectionString", "connection_string"}
    assert not (tmp_path / "cfg.json").exists()


@pytest.mark.parametrize(
    ("field", "value"),
    [("isDefault", "yes"), ("isDefault", 1), ("name", 5), ("optimizationSettings", {"autoToLower": True})],
)
def test_upsert_rejects_mistyped_payload_values(
    commands: DatabaseCommands, tmp_path: Path, field: str, value: object
) -> None:
    commands.set_database_path(str(tmp_path / "cfg.json"))
    payload: dict[str, object] = {"name": "db1", "connectionString": "x", "dbType": "y"}
    payload[field] = value

    with pytest.raises(CommandError) as info:
        commands.upsert_database_entry(payload)

    assert info.value.kind == "validation_error"
    assert info.value.error.field.startswith(field)
    assert not (tmp_path / "cfg.json").exists()


def test_delete_unknown_entry_reports_not_found(commands: DatabaseCommands, tmp_path: Path) -> None:
    commands.set_database_path(str(tmp_path / "cfg.json"))
    commands.upsert_database_entry(DatabaseEntry(name="db1", connection_string="x", db_type="y"))

    assert commands.delete_database_entry("db1") == {"databases": []}
    with pytest.raises(CommandError) as info:
        commands.delete_database_entry("db1")

    assert info.value.kind == "not_found"
    assert "db1" in str(info.value)


def test_load_reports_missing_file_with_path(commands: DatabaseCommands, tmp_path: Path) -> None:
    path = commands.set_database_path(str(tmp_path / "absent.json"))

    with pytest.raises(CommandError) as info:
        commands.load_database_config()

    assert info.value.kind == "read_error"
    assert path in str(info.value)


def test_coerce_entry_passes_models_through() -> None:
    entry = DatabaseEntry(name="a", connection_string="b", db_type="c")

    assert coerce_entry(entry) is entry
