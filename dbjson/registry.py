"""Lock-protected holder for the current configuration file path."""

from __future__ import annotations

from contextlib import contextmanager
import logging
import os
from pathlib import Path
import threading
from typing import Iterator

from .errors import InvalidArgument, NoPathConfigured, StateUnavailable

LOG = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT = 1.0


class PathRegistry:
    """Single-slot container for the path every entry operation targets.

    The slot starts unset and can only be overwritten, never cleared. The lock
    is held for the duration of a get or set and never across file I/O.
    """

    def __init__(self, *, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> None:
        self._lock = threading.Lock()
        self._lock_timeout = lock_timeout
        self._path: Path | None = None

    def get_path(self) -> str:
        """Return the stored path, or an empty string when unset."""

        with self._guard():
            return str(self._path) if self._path is not None else ""

    def set_path(self, raw_path: str) -> str:
        """Store `raw_path` as an absolute path and return it."""

        trimmed = raw_path.strip()
        if not trimmed:
            raise InvalidArgument("Path must not be empty.")
        path = Path(trimmed)
        if not path.is_absolute():
            path = _working_directory() / path
        with self._guard():
            self._path = path
        LOG.info("Configuration path set", extra={"path": str(path)})
        return str(path)

    def require_path(self) -> Path:
        """Return the stored path or raise NoPathConfigured."""

        with self._guard():
            path = self._path
        if path is None:
            raise NoPathConfigured()
        return path

    @contextmanager
    def _guard(self) -> Iterator[None]:
        if not self._lock.acquire(timeout=self._lock_timeout):
            raise StateUnavailable()
        try:
            yield
        finally:
            self._lock.release()


def _working_directory() -> Path:
    try:
        return Path(os.getcwd())
    except OSError:
        return Path(".")


__all__ = ["DEFAULT_LOCK_TIMEOUT", "PathRegistry"]
