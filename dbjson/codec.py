"""JSON encoding and file helpers for the configuration document."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from .errors import InvalidArgument, ParseError, ReadError, WriteError
from .models import ConfigDocument, OptimizationSettings

LOG = logging.getLogger(__name__)

INDENT = 2


def decode(text: str, path: Path | None = None) -> ConfigDocument:
    """Parse document text, raising ParseError on bad JSON or a shape mismatch."""

    try:
        return ConfigDocument.model_validate_json(text, strict=True)
    except PydanticValidationError as exc:
        raise ParseError(path, _first_error(exc)) from exc


def encode(document: ConfigDocument) -> str:
    """Render the document as indented JSON, omitting absent optional fields."""

    return document.model_dump_json(by_alias=True, exclude_none=True, indent=INDENT) + "\n"


def parse_optimization_text(text: str) -> OptimizationSettings | None:
    """Parse the free-form optimization settings editor text."""

    if not text.strip():
        return None
    try:
        return OptimizationSettings.model_validate_json(text, strict=True)
    except PydanticValidationError as exc:
        raise InvalidArgument(f"Optimization settings must be a JSON object: {_first_error(exc)}") from exc


def read_document(path: Path) -> ConfigDocument:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(path, exc) from exc
    LOG.debug("Read configuration document", extra={"path": str(path)})
    return decode(text, path)


def write_document(path: Path, document: ConfigDocument) -> None:
    """Write the document next to `path` and swap it into place."""

    content = encode(document)
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:  # pragma: no cover - best effort cleanup
            pass
        raise WriteError(path, exc) from exc
    LOG.info(
        "Wrote configuration document",
        extra={"path": str(path), "entries": len(document.databases)},
    )


def _first_error(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


__all__ = [
    "decode",
    "encode",
    "parse_optimization_text",
    "read_document",
    "write_document",
]
