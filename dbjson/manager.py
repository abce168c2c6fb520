"""Load/upsert/delete operations over the configuration document."""

from __future__ import annotations

import logging
from pathlib import Path

from .codec import read_document, write_document
from .errors import NotFound, ParseError, ReadError, ValidationError
from .models import ConfigDocument, DatabaseEntry
from .registry import PathRegistry

LOG = logging.getLogger(__name__)

_REQUIRED_FIELDS = (
    ("name", "name"),
    ("connection_string", "connectionString"),
    ("db_type", "dbType"),
)


class EntryManager:
    """Reads the document fresh for every call and rewrites it on every mutation.

    Overlapping mutations against the same file are not serialized; the last
    writer wins.
    """

    def __init__(self, registry: PathRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> PathRegistry:
        return self._registry

    def load_config(self) -> ConfigDocument:
        """Read the document at the current path; a missing file is an error."""

        path = self._registry.require_path()
        return read_document(path)

    def upsert_entry(self, entry: DatabaseEntry) -> ConfigDocument:
        """Replace the entry sharing `entry`'s trimmed name, or append it."""

        for attribute, field in _REQUIRED_FIELDS:
            if not getattr(entry, attribute).strip():
                raise ValidationError(field)
        normalized = entry.normalized()
        path = self._registry.require_path()
        document = self._load_for_update(path).with_entry(normalized)
        write_document(path, document)
        LOG.info("Saved entry", extra={"entry": normalized.name, "path": str(path)})
        return document

    def delete_entry(self, name: str) -> ConfigDocument:
        """Remove every entry named exactly `name`."""

        if not name.strip():
            raise ValidationError("name", "Name of the entry to delete must not be empty.")
        path = self._registry.require_path()
        current = self._load_for_update(path)
        document = current.without(name)
        if len(document.databases) == len(current.databases):
            raise NotFound(name)
        write_document(path, document)
        LOG.info("Deleted entry", extra={"entry": name, "path": str(path)})
        return document

    def entry_names(self) -> tuple[str, ...]:
        return self.load_config().names()

    def find_entry(self, name: str) -> DatabaseEntry | None:
        return self.load_config().find(name)

    def _load_for_update(self, path: Path) -> ConfigDocument:
        try:
            return read_document(path)
        except (ReadError, ParseError) as exc:
            LOG.warning(
                "Treating unusable configuration as empty",
                extra={"path": str(exc.path), "cause": str(exc.cause)},
            )
            return ConfigDocument(databases=[])


__all__ = ["EntryManager"]
