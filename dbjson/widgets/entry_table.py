"""Table listing the entries of the loaded document."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import DataTable

from dbjson.models import ConfigDocument

COLUMNS = ("Name", "Type", "Default")


class EntryTable(DataTable):
    """Row-per-entry view; rows keep file order."""

    DEFAULT_CSS = """
    EntryTable {
        height: 1fr;
        border: round $primary 30%;
    }
    """

    def __init__(self) -> None:
        super().__init__(id="entry-table", cursor_type="row", zebra_stripes=True)
        self._names: list[str] = []

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    def show_document(self, document: ConfigDocument, *, selected: str | None = None) -> None:
        """Replace the rows with the document's entries and restore the cursor."""

        self.clear(columns=True)
        self.add_columns(*COLUMNS)
        self._names = [entry.name for entry in document.databases]
        for entry in document.databases:
            self.add_row(Text(entry.name), Text(entry.db_type), "yes" if entry.is_default else "-")
        if selected is not None and selected in self._names:
            self.move_cursor(row=self._names.index(selected))

    def name_at(self, row: int) -> str | None:
        if 0 <= row < len(self._names):
            return self._names[row]
        return None


__all__ = ["EntryTable"]
