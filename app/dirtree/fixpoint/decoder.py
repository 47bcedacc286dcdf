"""Decoding of fixpoint directory tree expressions.

Decoding happens in two steps, mirroring a type-check followed by value
extraction:

1. The expression is instantiated at a fresh representation and applied to
   a ``make`` record whose constructors type-check every argument. The
   body's result must be a list of nodes built by those constructors.
2. The collected nodes are decoded into ``FilesystemEntry`` models, which
   adds the value-level constraints (e.g. usable entry names).
"""

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from dirtree.core.errors import SchemaTypeError, StructuralDecodeError, UnconvertibleValue
from dirtree.fixpoint.schema import DirectoryTreeSchema, TreeNode, directory_tree_schema
from dirtree.models.entry import FilesystemEntry

logger = logging.getLogger(__name__)

_ENTRIES_ADAPTER: TypeAdapter[list[FilesystemEntry]] = TypeAdapter(list[FilesystemEntry])


class MakeRecord:
    """The ``make`` argument passed to a fixpoint expression.

    Only ``directory`` and ``file`` exist, and each takes exactly one entry.
    Anything else is a type error of the expression.

    Example:
        >>> def tree(t):
        ...     def body(make):
        ...         return [make.file({"name": "motd", "content": "hi\\n"})]
        ...     return body
    """

    __slots__ = ("_schema",)

    def __init__(self, schema: DirectoryTreeSchema) -> None:
        self._schema = schema

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        raise SchemaTypeError(f"make has no field {name!r}, expected 'directory' or 'file'")

    def directory(self, *args: Any) -> TreeNode:
        """Build a directory node from an ``Entry (List tree)``."""
        return self._schema.check_directory(_single_argument("directory", args))

    def file(self, *args: Any) -> TreeNode:
        """Build a file node from an ``Entry Text``."""
        return self._schema.check_file(_single_argument("file", args))


def _single_argument(constructor: str, args: tuple[Any, ...]) -> Any:
    if len(args) != 1:
        raise SchemaTypeError(f"make.{constructor} takes one entry, got {len(args)} arguments")
    return args[0]


def decode_directory_tree(expression: Any) -> list[FilesystemEntry]:
    """Type-check and decode a fixpoint directory tree expression.

    Args:
        expression: Curried function ``tree -> make -> list[tree]``.

    Returns:
        Top-level filesystem entries in the order the expression lists them.

    Raises:
        UnconvertibleValue: If the expression is not a function of two
            curried parameters.
        SchemaTypeError: If the expression does not have the directory tree
            type.
        StructuralDecodeError: If the entries cannot be decoded.
    """
    if not callable(expression):
        raise UnconvertibleValue(expression)

    schema = directory_tree_schema()
    body = expression(schema.representation)
    if not callable(body):
        raise UnconvertibleValue(expression)

    nodes = schema.check_result(body(MakeRecord(schema)))

    try:
        entries = _ENTRIES_ADAPTER.validate_python([node.to_payload() for node in nodes])
    except ValidationError as e:
        raise StructuralDecodeError(str(e)) from e

    logger.debug("Decoded %d top-level entries", len(entries))
    return entries
