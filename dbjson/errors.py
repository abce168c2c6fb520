"""Typed failures raised by the configuration core."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar


class ConfigManagerError(RuntimeError):
    """Base class for every failure surfaced by the core operations."""

    kind: ClassVar[str] = "error"


class StateUnavailable(ConfigManagerError):
    """Raised when the path registry lock cannot be acquired."""

    kind = "state_unavailable"

    def __init__(self) -> None:
        super().__init__("Path state is unavailable; try again.")


class NoPathConfigured(ConfigManagerError):
    """Raised when an operation needs a path before one has been set."""

    kind = "no_path_configured"

    def __init__(self) -> None:
        super().__init__("Set the configuration file path first.")


class InvalidArgument(ConfigManagerError):
    """Caller input failed a precondition."""

    kind = "invalid_argument"


class ValidationError(ConfigManagerError):
    """An entry field failed validation."""

    kind = "validation_error"

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"'{field}' must not be empty.")


class _FileError(ConfigManagerError):
    action: ClassVar[str] = "access"

    def __init__(self, path: Path | None, cause: BaseException | str) -> None:
        self.path = path
        self.cause = cause
        location = path if path is not None else "<text>"
        super().__init__(f"Failed to {self.action} configuration file: {location} ({cause})")


class ReadError(_FileError):
    kind = "read_error"
    action = "read"


class ParseError(_FileError):
    kind = "parse_error"
    action = "parse"


class WriteError(_FileError):
    kind = "write_error"
    action = "write"


class NotFound(ConfigManagerError):
    """Raised when a delete targets a name missing from the document."""

    kind = "not_found"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No entry named '{name}' was found.")


__all__ = [
    "ConfigManagerError",
    "InvalidArgument",
    "NoPathConfigured",
    "NotFound",
    "ParseError",
    "ReadError",
    "StateUnavailable",
    "ValidationError",
    "WriteError",
]
