"""Command palette providers for core app features."""

from __future__ import annotations

from typing import Callable

from textual.command import DiscoveryHit, Hit, Hits, Provider
from textual.types import IgnoreReturnCallbackType

from .templates import known_db_types


class EntrySelectProvider(Provider):
    """Expose the loaded entries to the command palette."""

    async def search(self, query: str) -> Hits:
        matcher = self.matcher(query)
        for name in self._entry_names():
            match = matcher.match(name)
            if match > 0:
                yield Hit(
                    score=match,
                    match_display=f"Edit entry: {matcher.highlight(name)}",
                    command=self._build_callback(name),
                    help="Load the entry into the editor.",
                )

    async def discover(self) -> Hits:
        for name in self._entry_names():
            yield DiscoveryHit(
                display=f"Edit entry: {name}",
                command=self._build_callback(name),
                help="Load the entry into the editor.",
            )

    def _entry_names(self) -> tuple[str, ...]:
        return getattr(self.app, "entry_names", lambda: ())()

    def _build_callback(self, name: str) -> IgnoreReturnCallbackType:
        def _run() -> None:
            select = getattr(self.app, "select_entry", None)
            if select is not None:
                select(name)

        return _run


class TemplateProvider(Provider):
    """Switch the editor's engine (and connection template) from the palette."""

    async def search(self, query: str) -> Hits:
        matcher = self.matcher(query)
        for db_type in known_db_types():
            label = f"Use template: {db_type}"
            if (score := matcher.match(label)) > 0:
                yield Hit(score, matcher.highlight(label), self._build_callback(db_type), help="Change the engine type.")

    async def discover(self) -> Hits:
        for db_type in known_db_types():
            yield DiscoveryHit(
                display=f"Use template: {db_type}",
                command=self._build_callback(db_type),
                help="Change the engine type.",
            )

    def _build_callback(self, db_type: str) -> IgnoreReturnCallbackType:
        def _run() -> None:
            apply: Callable[[str], None] | None = getattr(self.app, "apply_db_type", None)
            if apply is not None:
                apply(db_type)

        return _run


__all__ = ["EntrySelectProvider", "TemplateProvider"]
