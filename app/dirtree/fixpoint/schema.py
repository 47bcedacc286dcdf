"""Expected type of a fixpoint directory tree expression.

The expression must have the type::

    forall (tree : Type) ->
    forall (make : { directory : Entry (List tree) -> tree
                   , file : Entry Text -> tree
                   }) ->
      List tree

where ``Entry content`` is ``{ name : Text, content : content,
user : Optional User, group : Optional Group, mode : Optional Mode }``.

``tree`` is represented by a fresh ``Representation`` per decode and its
values by ``TreeNode``. ``Entry`` is a generic Pydantic model checked on
every constructor call.
"""

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError, field_validator

from dirtree.core.errors import SchemaTypeError
from dirtree.models.entry import Group, PartialMode, User, coerce_account

ContentT = TypeVar("ContentT")

TYPE_SIGNATURE = (
    "forall (tree : Type) -> "
    "forall (make : { directory : Entry (List tree) -> tree, file : Entry Text -> tree }) -> "
    "List tree"
)


class Representation:
    """Opaque stand-in for the ``tree`` type variable of one decode run."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"<tree representation {id(self):#x}>"


class Entry(BaseModel, Generic[ContentT]):
    """Argument accepted by the ``make`` constructors.

    Attributes:
        name: Entry name.
        content: Children (directories) or text (files).
        user: Optional owner.
        group: Optional group.
        mode: Optional permission overrides.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    name: StrictStr
    content: ContentT
    user: User | None = None
    group: Group | None = None
    mode: PartialMode | None = None

    @field_validator("user", mode="before")
    @classmethod
    def coerce_user(cls, v: object) -> object:
        return coerce_account(v, "user")

    @field_validator("group", mode="before")
    @classmethod
    def coerce_group(cls, v: object) -> object:
        return coerce_account(v, "group")


class TreeNode:
    """A value of the ``tree`` type, built by one of the constructors.

    Attributes:
        representation: Representation the node was built for.
        kind: Constructor that built the node.
        entry: Type-checked constructor argument.
    """

    __slots__ = ("entry", "kind", "representation")

    def __init__(
        self,
        representation: Representation,
        kind: Literal["directory", "file"],
        entry: Entry[Any],
    ) -> None:
        self.representation = representation
        self.kind = kind
        self.entry = entry

    def __repr__(self) -> str:
        return f"<{self.kind} {self.entry.name!r}>"

    def to_payload(self) -> dict[str, Any]:
        """Convert the node into input for the entry decoder."""
        content = self.entry.content
        if self.kind == "directory":
            content = [child.to_payload() for child in content]
        return {
            "kind": self.kind,
            "name": self.entry.name,
            "content": content,
            "user": self.entry.user,
            "group": self.entry.group,
            "mode": self.entry.mode,
        }


@dataclass(frozen=True, slots=True)
class DirectoryTreeSchema:
    """The directory tree type instantiated at one representation.

    Attributes:
        representation: The ``tree`` type of this instantiation.
        directory: Argument type of ``make.directory``.
        file: Argument type of ``make.file``.
    """

    representation: Representation
    directory: type[Entry[Any]]
    file: type[Entry[Any]]

    def check_directory(self, raw: Any) -> TreeNode:
        """Type-check a ``make.directory`` argument and build its node.

        Raises:
            SchemaTypeError: If the argument is not an ``Entry (List tree)``.
        """
        entry = self._validate(self.directory, raw, "directory")
        for child in entry.content:
            self._check_node(child, "directory content")
        return TreeNode(self.representation, "directory", entry)

    def check_file(self, raw: Any) -> TreeNode:
        """Type-check a ``make.file`` argument and build its node.

        Raises:
            SchemaTypeError: If the argument is not an ``Entry Text``.
        """
        entry = self._validate(self.file, raw, "file")
        return TreeNode(self.representation, "file", entry)

    def check_result(self, result: Any) -> list[TreeNode]:
        """Type-check the value returned by the expression body.

        Raises:
            SchemaTypeError: If the result is not a ``List tree``.
        """
        if not isinstance(result, list | tuple):
            msg = (
                f"expected List tree as result, got {type(result).__name__} "
                f"(expected type: {TYPE_SIGNATURE})"
            )
            raise SchemaTypeError(msg)
        return [self._check_node(node, "result") for node in result]

    def _check_node(self, node: Any, where: str) -> TreeNode:
        if not isinstance(node, TreeNode) or node.representation is not self.representation:
            msg = f"{where}: expected a tree built by make.directory or make.file, got {node!r}"
            raise SchemaTypeError(msg)
        return node

    @staticmethod
    def _validate(model: type[Entry[Any]], raw: Any, constructor: str) -> Entry[Any]:
        try:
            return model.model_validate(raw)
        except ValidationError as e:
            raise SchemaTypeError(f"make.{constructor}: {e}") from e


def directory_tree_schema(representation: Representation | None = None) -> DirectoryTreeSchema:
    """Build the expected directory tree type for a representation.

    Args:
        representation: The ``tree`` type. A fresh one is created if None.

    Returns:
        Schema with the constructor argument types for that representation.
    """
    representation = representation or Representation()
    return DirectoryTreeSchema(
        representation=representation,
        directory=Entry[list[TreeNode]],
        file=Entry[StrictStr],
    )
