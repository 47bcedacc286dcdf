"""Conversion of structured values into a directory tree.

The shape of a value decides what is written:

- ``Record`` and ``OrderedPairs`` become directories, one entry per key.
- ``Text`` becomes file content.
- ``OptionalSome`` and ``TaggedUnion`` are unwrapped, ``OptionalNone`` is
  skipped.
- ``FixpointCandidate`` is decoded into explicit entries, which may carry
  ownership and permission metadata.

Example:
    The value ``{ dir = { `hello.txt` = "Hello\\n" }, `goodbye.txt` =
    Some "Goodbye\\n", `missing.txt` = None Text }`` produces::

        result
        ├── dir
        │   └── hello.txt
        └── goodbye.txt

Existing files are overwritten. Nothing that the value does not mention is
ever removed, and nothing written before a failure is rolled back.
"""

import logging
from pathlib import Path

from dirtree.core.errors import UnconvertibleValue
from dirtree.core.safety import validate_key
from dirtree.core.writer import create_directory, write_file
from dirtree.fixpoint.decoder import decode_directory_tree
from dirtree.fixpoint.walker import materialize_entries
from dirtree.models.options import TreeOptions
from dirtree.models.value import (
    FixpointCandidate,
    OptionalNone,
    OptionalSome,
    OrderedPairs,
    Record,
    StructuredValue,
    TaggedUnion,
    Text,
)

logger = logging.getLogger(__name__)


def to_directory_tree(options: TreeOptions, path: Path | str, value: StructuredValue) -> None:
    """Materialize ``value`` at ``path``.

    Args:
        options: Path relaxations applied to every key.
        path: Destination path. For ``Text`` this is the file to write, for
            records and key/value lists the directory to populate.
        value: Value to materialize.

    Raises:
        PathSafetyViolation: If a key violates ``options``.
        UnconvertibleValue: If a value has no directory tree interpretation.
        SchemaTypeError: If a fixpoint expression has the wrong type.
        StructuralDecodeError: If a fixpoint expression cannot be decoded.
        AccountLookupFailure: If a named user or group does not exist.
        OSError: If writing to the filesystem fails.
    """
    path = Path(path)

    if isinstance(value, Record):
        for key, child in value.fields.items():
            _process(options, path, key, child)

    elif isinstance(value, OrderedPairs):
        for key, child in value.pairs:
            _process(options, path, key, child)

    elif isinstance(value, Text):
        write_file(path, value.value)

    elif isinstance(value, OptionalSome):
        to_directory_tree(options, path, value.value)

    elif isinstance(value, OptionalNone):
        logger.debug("Skipping absent value at %s", path)

    elif isinstance(value, TaggedUnion):
        to_directory_tree(options, path, value.payload)

    elif isinstance(value, FixpointCandidate):
        entries = decode_directory_tree(value.expression)
        materialize_entries(options, path, entries)

    else:
        raise UnconvertibleValue(value)


def _process(options: TreeOptions, path: Path, key: str, value: StructuredValue) -> None:
    """Validate ``key`` and materialize ``value`` below ``path``."""
    validate_key(key, options)

    target = path / key
    create_directory(target.parent, parents=options.allow_separators)
    to_directory_tree(options, target, value)
