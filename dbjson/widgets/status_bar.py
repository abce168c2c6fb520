"""Status bar widget that mirrors the loaded document."""

from __future__ import annotations

from textual.widgets import Static

from dbjson.models import ConfigDocument


class StatusBar(Static):
    """Compact status strip rendered above Textual's footer."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        padding: 0 1;
        background: $surface-darken-3;
        color: $text;
    }
    """

    def __init__(self) -> None:
        super().__init__("No configuration file selected.", id="status-bar", markup=False)

    def update_status(self, path: str, document: ConfigDocument | None) -> None:
        parts = [f"File: {path or '—'}"]
        if document is None:
            parts.append("Not loaded")
        else:
            defaults = sum(1 for entry in document.databases if entry.is_default)
            parts.append(f"Entries: {len(document.databases)}")
            parts.append(f"Defaults: {defaults}")
        self.update(" | ".join(parts))


__all__ = ["StatusBar"]
