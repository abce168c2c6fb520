"""Editor form for a single database entry."""

from __future__ import annotations

import json

from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Input, Label, Select, Static, Switch, TextArea

from dbjson.codec import parse_optimization_text
from dbjson.models import DatabaseEntry
from dbjson.templates import DEFAULT_DB_TYPE, blank_entry, known_db_types, switch_db_type


class EntryForm(Container):
    """Fields for the entry being edited; `read_entry` builds the model to save."""

    DEFAULT_CSS = """
    EntryForm {
        layout: vertical;
        border: round $primary 40%;
        padding: 1 2;
        height: 1fr;
        background: $surface;
    }

    EntryForm .panel-title {
        text-style: bold;
        margin-bottom: 1;
    }

    EntryForm .field-label {
        color: $text-muted;
    }

    EntryForm .switch-row {
        height: auto;
    }

    EntryForm .switch-row Label {
        padding: 1 1 0 0;
    }

    #entry-optimization {
        height: 8;
    }
    """

    def __init__(self, *, default_db_type: str = DEFAULT_DB_TYPE) -> None:
        super().__init__(id="entry-form")
        self._default_db_type = default_db_type
        self._db_type = default_db_type

    def compose(self) -> ComposeResult:
        draft = blank_entry(self._default_db_type)
        yield Static("Entry", classes="panel-title")
        yield Input(value=draft.name, placeholder="Name", id="entry-name")
        yield Select(
            self._type_options(draft.db_type),
            value=draft.db_type,
            allow_blank=False,
            id="entry-type",
        )
        yield Input(
            value=draft.connection_string,
            placeholder="Host=...;User ID=...;Password=...",
            id="entry-connection",
        )
        yield Input(value="", placeholder="Description", id="entry-description")
        with Horizontal(classes="switch-row"):
            yield Label("Default")
            yield Switch(value=False, id="entry-default")
        yield Static("Optimization settings (JSON)", classes="field-label")
        yield TextArea("", id="entry-optimization")

    @property
    def current_name(self) -> str:
        return self.query_one("#entry-name", Input).value

    def load_entry(self, entry: DatabaseEntry) -> None:
        """Populate every field from `entry`."""

        self._db_type = entry.db_type
        self.query_one("#entry-name", Input).value = entry.name
        select = self.query_one("#entry-type", Select)
        select.set_options(self._type_options(entry.db_type))
        select.value = entry.db_type
        self.query_one("#entry-connection", Input).value = entry.connection_string
        self.query_one("#entry-description", Input).value = entry.description or ""
        self.query_one("#entry-default", Switch).value = bool(entry.is_default)
        settings = entry.optimization_settings
        text = json.dumps(settings.to_payload(), indent=2) if settings else ""
        self.query_one("#entry-optimization", TextArea).load_text(text)

    def reset(self) -> None:
        self.load_entry(blank_entry(self._default_db_type))

    def apply_db_type(self, db_type: str) -> None:
        """Switch engine, refreshing the connection string if it is still a template."""

        connection = self.query_one("#entry-connection", Input)
        draft = DatabaseEntry(
            name=self.current_name,
            connection_string=connection.value,
            db_type=self._db_type,
        )
        updated = switch_db_type(draft, db_type)
        self._db_type = updated.db_type
        connection.value = updated.connection_string
        select = self.query_one("#entry-type", Select)
        if select.value != db_type:
            select.set_options(self._type_options(db_type))
            select.value = db_type

    def read_entry(self) -> DatabaseEntry:
        """Build the entry to save; raises InvalidArgument for bad settings JSON."""

        optimization = parse_optimization_text(self.query_one("#entry-optimization", TextArea).text)
        description = self.query_one("#entry-description", Input).value
        return DatabaseEntry(
            name=self.current_name,
            connection_string=self.query_one("#entry-connection", Input).value,
            db_type=self._db_type,
            description=description if description.strip() else None,
            is_default=self.query_one("#entry-default", Switch).value,
            optimization_settings=optimization,
        )

    @on(Select.Changed, "#entry-type")
    def _handle_type_changed(self, event: Select.Changed) -> None:
        # Events queued by load_entry carry stale values; trust the widget's current one.
        value = event.select.value
        if not isinstance(value, str) or value == self._db_type:
            return
        self.apply_db_type(value)

    @staticmethod
    def _type_options(current: str) -> list[tuple[str, str]]:
        types = list(known_db_types())
        if current and current not in types:
            types.append(current)
        return [(db_type, db_type) for db_type in types]


__all__ = ["EntryForm"]
