"""Loading structured values from JSON and TOML documents.

Documents are a convenient stand-in for an evaluated configuration:

- objects/tables become records,
- lists of ``{"mapKey": ..., "mapValue": ...}`` objects become ordered
  key/value lists (an empty list is an empty key/value list),
- strings become text and JSON ``null`` an absent optional,
- everything else is kept as an unsupported value.
"""

import json
import tomllib
from pathlib import Path
from typing import Any

from dirtree.models.value import (
    OptionalNone,
    OrderedPairs,
    Record,
    StructuredValue,
    Text,
    Unsupported,
)

MAP_KEY = "mapKey"
MAP_VALUE = "mapValue"


class DocumentError(Exception):
    """Base exception for document loading errors."""


class DocumentNotFoundError(DocumentError):
    """Raised when a document file does not exist."""


class DocumentParseError(DocumentError):
    """Raised when a document cannot be parsed."""


def to_structured_value(data: Any) -> StructuredValue:
    """Convert parsed JSON/TOML data into a structured value.

    Args:
        data: Output of ``json.load`` or ``tomllib.load``.

    Returns:
        The corresponding structured value.
    """
    if isinstance(data, dict):
        return Record({key: to_structured_value(value) for key, value in data.items()})

    if isinstance(data, list):
        pairs = _extract_pairs(data)
        if pairs is not None:
            return OrderedPairs(pairs)
        return Unsupported(data)

    if isinstance(data, str):
        return Text(data)

    if data is None:
        return OptionalNone()

    return Unsupported(data)


def _extract_pairs(items: list[Any]) -> tuple[tuple[str, StructuredValue], ...] | None:
    """Return key/value pairs if every item is a map entry, else None."""
    pairs: list[tuple[str, StructuredValue]] = []
    for item in items:
        if not isinstance(item, dict) or set(item) != {MAP_KEY, MAP_VALUE}:
            return None
        if not isinstance(item[MAP_KEY], str):
            return None
        pairs.append((item[MAP_KEY], to_structured_value(item[MAP_VALUE])))
    return tuple(pairs)


def load_document(path: Path) -> StructuredValue:
    """Load a JSON or TOML document as a structured value.

    The format is chosen by file extension: ``.toml`` is parsed as TOML,
    everything else as JSON.

    Args:
        path: Document to load.

    Returns:
        The document as a structured value.

    Raises:
        DocumentNotFoundError: If the file does not exist.
        DocumentParseError: If the file is not valid JSON/TOML.
        DocumentError: If the file cannot be read.
    """
    if not path.exists():
        raise DocumentNotFoundError(f"Document not found: {path}")

    try:
        if path.suffix.lower() == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
    except tomllib.TOMLDecodeError as e:
        raise DocumentParseError(f"Invalid TOML syntax: {e}") from e
    except json.JSONDecodeError as e:
        raise DocumentParseError(f"Invalid JSON syntax: {e}") from e
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"Document is not valid UTF-8: {e}") from e
    except OSError as e:
        raise DocumentError(f"Failed to read document: {e}") from e

    return to_structured_value(data)
