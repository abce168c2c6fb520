"""Widget library for the Textual UI."""

from __future__ import annotations

from .entry_form import EntryForm
from .entry_table import EntryTable
from .status_bar import StatusBar

__all__ = ["EntryForm", "EntryTable", "StatusBar"]
