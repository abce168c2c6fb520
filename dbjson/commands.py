"""Caller-facing operations that render typed failures as text."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Mapping

from pydantic import ValidationError as PydanticValidationError

from .errors import ConfigManagerError, ValidationError
from .manager import EntryManager
from .models import DatabaseEntry
from .registry import PathRegistry

EntryPayload = Mapping[str, object] | DatabaseEntry
DocumentPayload = dict[str, object]


class CommandError(RuntimeError):
    """Failure returned to the UI; `str()` is the message to display."""

    def __init__(self, error: ConfigManagerError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> str:
        return self.error.kind


class DatabaseCommands:
    """The five operations the shell invokes against the configuration file."""

    def __init__(self, manager: EntryManager | None = None) -> None:
        self._manager = manager or EntryManager(PathRegistry())

    @property
    def manager(self) -> EntryManager:
        return self._manager

    def get_database_path(self) -> str:
        with _rendered():
            return self._manager.registry.get_path()

    def set_database_path(self, path: str) -> str:
        with _rendered():
            return self._manager.registry.set_path(path)

    def load_database_config(self) -> DocumentPayload:
        with _rendered():
            return self._manager.load_config().to_payload()

    def upsert_database_entry(self, entry: EntryPayload) -> DocumentPayload:
        with _rendered():
            return self._manager.upsert_entry(coerce_entry(entry)).to_payload()

    def delete_database_entry(self, name: str) -> DocumentPayload:
        with _rendered():
            return self._manager.delete_entry(name).to_payload()


def coerce_entry(entry: EntryPayload) -> DatabaseEntry:
    """Build a DatabaseEntry from a camelCase payload (or pass one through)."""

    if isinstance(entry, DatabaseEntry):
        return entry
    try:
        return DatabaseEntry.model_validate(entry)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "entry"
        raise ValidationError(field, f"'{field}': {first.get('msg', 'invalid value')}") from exc


@contextmanager
def _rendered() -> Iterator[None]:
    try:
        yield
    except ConfigManagerError as exc:
        raise CommandError(exc) from exc


__all__ = ["CommandError", "DatabaseCommands", "coerce_entry"]
