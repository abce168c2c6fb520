"""Tests for connection templates and draft helpers."""

from __future__ import annotations

from dbjson.models import DatabaseEntry
from dbjson.templates import (
    CONNECTION_TEMPLATES,
    DEFAULT_DB_TYPE,
    blank_entry,
    known_db_types,
    switch_db_type,
    template_for,
)


def test_catalogue_includes_default_engine() -> None:
    assert DEFAULT_DB_TYPE in known_db_types()
    assert template_for("MongoDb").startswith("mongodb://")
    assert template_for("NoSuchEngine") == ""


def test_blank_entry_uses_engine_template() -> None:
    entry = blank_entry("MySql")

    assert entry.name == ""
    assert entry.db_type == "MySql"
    assert entry.connection_string == CONNECTION_TEMPLATES["MySql"]
    assert entry.is_default is False


def test_switch_db_type_replaces_untouched_template() -> None:
    updated = switch_db_type(blank_entry(), "Sqlite")

    assert updated.db_type == "Sqlite"
    assert updated.connection_string == CONNECTION_TEMPLATES["Sqlite"]


def test_switch_db_type_fills_blank_connection_string() -> None:
    entry = DatabaseEntry(name="a", connection_string="  ", db_type="Custom")

    assert switch_db_type(entry, "DuckDB").connection_string == CONNECTION_TEMPLATES["DuckDB"]


def test_switch_db_type_keeps_edited_connection_string() -> None:
    entry = DatabaseEntry(name="a", connection_string="Host=prod", db_type="PostgreSQL")

    updated = switch_db_type(entry, "Oracle")

    assert updated.db_type == "Oracle"
    assert updated.connection_string == "Host=prod"
