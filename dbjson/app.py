"""Textual application entry point for dbjson."""

from __future__ import annotations

import argparse
import logging
import sys

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, DataTable, Footer, Header, Input, Static, TextArea

from .codec import encode
from .commands import CommandError, DatabaseCommands
from .config import AppConfig, load_config, save_config
from .errors import InvalidArgument
from .models import ConfigDocument
from .providers import EntrySelectProvider, TemplateProvider
from .widgets import EntryForm, EntryTable, StatusBar

LOG = logging.getLogger(__name__)


def _load_app_config() -> AppConfig:
    """Load configuration with a small wrapper for future overrides."""

    return load_config()


class DbJsonApp(App[None]):
    """Editor for the database connection JSON document."""

    TITLE = "Database JSON Manager"
    COMMANDS = App.COMMANDS | {EntrySelectProvider, TemplateProvider}
    CSS = """
    Screen {
        layout: vertical;
    }
    #path-bar {
        height: auto;
        padding: 0 1;
    }
    #path-input {
        width: 1fr;
    }
    #content {
        layout: horizontal;
        height: 1fr;
    }
    #list-column {
        width: 2fr;
        padding: 0 1;
    }
    #editor-column {
        width: 3fr;
        padding: 0 1;
    }
    .panel-title {
        text-style: bold;
    }
    .actions {
        height: auto;
    }
    .actions > Button {
        margin-right: 1;
    }
    #preview {
        height: 12;
        border: round $surface-darken-1;
    }
    """

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+s", "save", "Save Entry"),
        ("ctrl+n", "new_entry", "New Entry"),
        ("ctrl+r", "reload", "Reload"),
        ("ctrl+p", "command_palette", "Command Palette"),
    ]

    def __init__(
        self,
        *,
        commands: DatabaseCommands | None = None,
        initial_path: str | None = None,
    ) -> None:
        super().__init__()
        self._config = _load_app_config()
        self._db_commands = commands or DatabaseCommands()
        self._initial_path = initial_path if initial_path is not None else self._config.last_path
        self._document: ConfigDocument | None = None
        self._selected: str | None = None

    def compose(self) -> ComposeResult:
        """Compose the root layout."""

        yield Header()
        with Horizontal(id="path-bar"):
            yield Input(
                value=self._initial_path or "",
                placeholder="Path to the database JSON file (relative or absolute)",
                id="path-input",
            )
            yield Button("Apply", id="apply-path", variant="primary")
        with Horizontal(id="content"):
            with Vertical(id="list-column"):
                yield Static("Databases", classes="panel-title")
                yield EntryTable()
                with Horizontal(classes="actions"):
                    yield Button("New", id="new-entry")
                    yield Button("Delete", id="delete-entry", variant="error")
                    yield Button("Reload", id="reload")
            with Vertical(id="editor-column"):
                yield EntryForm(default_db_type=self._config.default_db_type)
                with Horizontal(classes="actions"):
                    yield Button("Save", id="save-entry", variant="success")
        yield TextArea("", read_only=True, id="preview")
        yield StatusBar()
        yield Footer()

    async def on_mount(self) -> None:
        if self._config.theme in self.available_themes:
            self.theme = self._config.theme
        if self._initial_path and self._initial_path.strip():
            self.apply_path(self._initial_path)

    @property
    def database_commands(self) -> DatabaseCommands:
        return self._db_commands

    @property
    def document(self) -> ConfigDocument | None:
        """The most recently loaded or saved document."""

        return self._document

    @property
    def selected_entry(self) -> str | None:
        return self._selected

    def entry_names(self) -> tuple[str, ...]:
        if self._document is None:
            return ()
        return self._document.names()

    def apply_path(self, raw_path: str) -> bool:
        """Point the manager at `raw_path`, remember it and load the document."""

        try:
            path = self._db_commands.set_database_path(raw_path)
        except CommandError as exc:
            self._safe_notify(f"Could not apply path: {exc}", severity="error")
            return False
        self.query_one("#path-input", Input).value = path
        self._remember_path(path)
        return self.reload_config(notice="Path applied and configuration loaded.")

    def reload_config(self, *, notice: str | None = "Configuration loaded.") -> bool:
        try:
            payload = self._db_commands.load_database_config()
        except CommandError as exc:
            self._document = None
            self._render_status()
            self._safe_notify(f"Could not load configuration: {exc}", severity="error")
            return False
        self._show_document(ConfigDocument.model_validate(payload))
        if notice:
            self._safe_notify(notice)
        return True

    def save_entry(self) -> bool:
        """Upsert the entry currently in the editor."""

        form = self.query_one(EntryForm)
        try:
            entry = form.read_entry()
            payload = self._db_commands.upsert_database_entry(entry)
        except InvalidArgument as exc:
            self._safe_notify(str(exc), severity="error")
            return False
        except CommandError as exc:
            self._safe_notify(f"Save failed: {exc}", severity="error")
            return False
        self._show_document(ConfigDocument.model_validate(payload), select=entry.name.strip())
        self._safe_notify("Saved.")
        return True

    def delete_selected(self) -> bool:
        name = self._selected
        if not name:
            self._safe_notify("Select an entry to delete.", severity="error")
            return False
        try:
            payload = self._db_commands.delete_database_entry(name)
        except CommandError as exc:
            self._safe_notify(f"Delete failed: {exc}", severity="error")
            return False
        self._selected = None
        self._show_document(ConfigDocument.model_validate(payload))
        self._safe_notify("Deleted.")
        return True

    def new_entry(self) -> None:
        self._selected = None
        self.query_one(EntryForm).reset()

    def select_entry(self, name: str) -> None:
        """Load the named entry into the editor."""

        if self._document is None:
            return
        entry = self._document.find(name)
        if entry is None:
            return
        self._selected = entry.name
        self.query_one(EntryForm).load_entry(entry)

    def apply_db_type(self, db_type: str) -> None:
        self.query_one(EntryForm).apply_db_type(db_type)

    def action_save(self) -> None:
        self.save_entry()

    def action_new_entry(self) -> None:
        self.new_entry()

    def action_reload(self) -> None:
        self.reload_config()

    @on(Button.Pressed, "#apply-path")
    def _handle_apply_pressed(self) -> None:
        self.apply_path(self.query_one("#path-input", Input).value)

    @on(Input.Submitted, "#path-input")
    def _handle_path_submitted(self, event: Input.Submitted) -> None:
        self.apply_path(event.value)

    @on(Button.Pressed, "#save-entry")
    def _handle_save_pressed(self) -> None:
        self.save_entry()

    @on(Button.Pressed, "#new-entry")
    def _handle_new_pressed(self) -> None:
        self.new_entry()

    @on(Button.Pressed, "#delete-entry")
    def _handle_delete_pressed(self) -> None:
        self.delete_selected()

    @on(Button.Pressed, "#reload")
    def _handle_reload_pressed(self) -> None:
        self.reload_config()

    @on(DataTable.RowSelected, "#entry-table")
    def _handle_row_selected(self, event: DataTable.RowSelected) -> None:
        name = self.query_one(EntryTable).name_at(event.cursor_row)
        if name is not None:
            self.select_entry(name)

    def _show_document(self, document: ConfigDocument, *, select: str | None = None) -> None:
        self._document = document
        form = self.query_one(EntryForm)
        if not document.databases:
            self._selected = None
            form.reset()
        else:
            target = select or self._selected or document.databases[0].name
            entry = document.find(target) or document.databases[0]
            self._selected = entry.name
            form.load_entry(entry)
        self.query_one(EntryTable).show_document(document, selected=self._selected)
        self.query_one("#preview", TextArea).load_text(encode(document))
        self._render_status()

    def _render_status(self) -> None:
        try:
            path = self._db_commands.get_database_path()
        except CommandError:
            LOG.warning("Could not read the configured path for the status bar", exc_info=True)
            path = ""
        self.query_one(StatusBar).update_status(path, self._document)

    def _remember_path(self, path: str) -> None:
        if self._config.last_path == path:
            return
        self._config = self._config.with_last_path(path)
        try:
            save_config(self._config)
        except OSError:
            LOG.exception("Failed to persist settings", extra={"last_path": path})

    def _safe_notify(self, message: str, *, severity: str = "information") -> None:
        # Notifications need a running screen stack; before that they only reach the log.
        if not self.is_running:
            LOG.info("Notification before startup: %s", message)
            return
        self.notify(message, severity=severity)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dbjson", description="Edit a database connection JSON file.")
    parser.add_argument("--path", help="Configuration file to open (defaults to the last one used)")
    parser.add_argument("--log-file", help="Write diagnostic logs to this file")
    parser.add_argument("--log-level", default="INFO", help="Log level for --log-file (default: INFO)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Invoke the Textual application."""

    args = parse_args(sys.argv[1:] if argv is None else argv)
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level.upper(), logging.INFO),
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        )
    DbJsonApp(initial_path=args.path).run()


if __name__ == "__main__":
    main()
