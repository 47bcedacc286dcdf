"""Structured values handed over by the configuration engine.

A structured value is the type-erased, already normalized result of
evaluating a configuration expression. Its shape decides what ends up on
disk: records and key/value lists become directories, text becomes file
content, optionals and union alternatives are unwrapped.

The set of shapes is closed. ``to_directory_tree`` dispatches over exactly
these classes; anything the engine cannot express with them is wrapped in
``Unsupported`` so it can be reported back to the caller.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Record:
    """A record literal. Each field becomes a directory entry.

    Attributes:
        fields: Mapping of field name to value. Iteration order carries no
            meaning.
    """

    fields: Mapping[str, "StructuredValue"] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class OrderedPairs:
    """A list of ``{mapKey, mapValue}`` pairs, processed in sequence.

    Attributes:
        pairs: Key/value tuples in the order they must be materialized.
    """

    pairs: tuple[tuple[str, "StructuredValue"], ...] = ()


@dataclass(frozen=True, slots=True)
class Text:
    """A text literal without interpolation. Becomes file content."""

    value: str


@dataclass(frozen=True, slots=True)
class OptionalSome:
    """A present optional value."""

    value: "StructuredValue"


@dataclass(frozen=True, slots=True)
class OptionalNone:
    """An absent optional value. Produces nothing on disk."""


@dataclass(frozen=True, slots=True)
class TaggedUnion:
    """A union alternative carrying exactly one payload.

    Attributes:
        tag: Name of the alternative. Not used for materialization.
        payload: The wrapped value.
    """

    tag: str
    payload: "StructuredValue"


@dataclass(frozen=True, slots=True)
class FixpointCandidate:
    """An expression using the fixpoint directory tree encoding.

    The expression is a curried function ``tree -> make -> list[tree]``:
    it is first applied to an opaque representation type and then to a
    record of constructors (``make.directory`` and ``make.file``), and
    returns the top-level entries built with those constructors.

    Attributes:
        expression: The curried function.
    """

    expression: Callable[[Any], Any]

    def __post_init__(self) -> None:
        """Reject expressions that cannot be applied at all."""
        if not callable(self.expression):
            msg = f"Fixpoint expression must be callable, got {type(self.expression).__name__}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Unsupported:
    """Any value without a directory tree interpretation.

    Attributes:
        value: The original value, kept for diagnostics.
    """

    value: Any


StructuredValue = (
    Record
    | OrderedPairs
    | Text
    | OptionalSome
    | OptionalNone
    | TaggedUnion
    | FixpointCandidate
    | Unsupported
)
