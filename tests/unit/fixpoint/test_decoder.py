"""Unit tests for fixpoint expression decoding."""

from collections.abc import Callable
from typing import Any

import pytest
from dirtree.core.errors import SchemaTypeError, StructuralDecodeError, UnconvertibleValue
from dirtree.fixpoint.decoder import decode_directory_tree
from dirtree.models.entry import (
    DirectoryEntry,
    FileEntry,
    GroupName,
    PartialAccess,
    PartialMode,
    UserId,
    UserName,
)


def _expression(build: Callable[[Any], Any]) -> Callable[[Any], Callable[[Any], Any]]:
    """Wrap build(make) as a curried tree -> make -> list expression."""

    def expression(tree: Any) -> Callable[[Any], Any]:
        return build

    return expression


class TestDecodeDirectoryTree:
    """Tests for decode_directory_tree() on well-typed expressions."""

    def test_empty_list(self) -> None:
        """An expression returning no entries decodes to an empty list."""
        assert decode_directory_tree(_expression(lambda make: [])) == []

    def test_single_file(self) -> None:
        """A file constructor call decodes to a FileEntry."""
        entries = decode_directory_tree(
            _expression(lambda make: [make.file({"name": "a.txt", "content": "A"})])
        )

        assert entries == [FileEntry(name="a.txt", content="A")]

    def test_nested_directories_keep_order(self) -> None:
        """Children are decoded in the order they were listed."""

        def build(make: Any) -> list[Any]:
            return [
                make.directory(
                    {
                        "name": "dir",
                        "content": [
                            make.file({"name": "z", "content": "1"}),
                            make.file({"name": "a", "content": "2"}),
                            make.directory({"name": "m", "content": []}),
                        ],
                    }
                ),
                make.file({"name": "top", "content": "3"}),
            ]

        entries = decode_directory_tree(_expression(build))

        assert len(entries) == 2
        directory = entries[0]
        assert isinstance(directory, DirectoryEntry)
        assert [child.name for child in directory.content] == ["z", "a", "m"]
        assert isinstance(directory.content[2], DirectoryEntry)
        assert isinstance(entries[1], FileEntry)

    def test_metadata_decoded(self) -> None:
        """User, group and mode are carried over to the entry."""

        def build(make: Any) -> list[Any]:
            return [
                make.file(
                    {
                        "name": "secret",
                        "content": "s",
                        "user": {"UserName": "alice"},
                        "group": "staff",
                        "mode": {"other": {"read": False}},
                    }
                )
            ]

        (entry,) = decode_directory_tree(_expression(build))

        assert entry.user == UserName(name="alice")
        assert entry.group == GroupName(name="staff")
        assert entry.mode == PartialMode(other=PartialAccess(read=False))

    def test_numeric_user(self) -> None:
        """An integer user is a user id."""
        (entry,) = decode_directory_tree(
            _expression(lambda make: [make.file({"name": "f", "content": "", "user": 0})])
        )

        assert entry.user == UserId(id=0)

    def test_tuple_result_accepted(self) -> None:
        """Any sequence type works as the result list."""
        entries = decode_directory_tree(
            _expression(lambda make: (make.file({"name": "f", "content": ""}),))
        )

        assert [e.name for e in entries] == ["f"]


class TestDecodeShape:
    """Tests for expressions that are not two-parameter functions."""

    def test_not_callable(self) -> None:
        """A non-function is not a fixpoint tree."""
        with pytest.raises(UnconvertibleValue):
            decode_directory_tree("tree")

    def test_one_parameter(self) -> None:
        """The outer function must return another function."""
        with pytest.raises(UnconvertibleValue):
            decode_directory_tree(lambda tree: [])


class TestSchemaTypeErrors:
    """Tests for expressions that do not have the directory tree type."""

    def test_result_not_a_list(self) -> None:
        """The body must return a list of trees."""
        with pytest.raises(SchemaTypeError, match="List tree"):
            decode_directory_tree(_expression(lambda make: make.file({"name": "f", "content": ""})))

    def test_result_contains_plain_values(self) -> None:
        """Only values built with make count as trees."""
        with pytest.raises(SchemaTypeError):
            decode_directory_tree(_expression(lambda make: ["not a tree"]))

    def test_file_content_must_be_text(self) -> None:
        """File content is Text, not a number."""
        with pytest.raises(SchemaTypeError, match="make.file"):
            decode_directory_tree(
                _expression(lambda make: [make.file({"name": "f", "content": 1})])
            )

    def test_directory_content_must_be_trees(self) -> None:
        """Directory content is a list of trees."""
        with pytest.raises(SchemaTypeError, match="make.directory"):
            decode_directory_tree(
                _expression(lambda make: [make.directory({"name": "d", "content": ["x"]})])
            )

    def test_missing_name(self) -> None:
        """Every entry needs a name."""
        with pytest.raises(SchemaTypeError):
            decode_directory_tree(_expression(lambda make: [make.file({"content": "x"})]))

    def test_unknown_field(self) -> None:
        """Entries are closed records."""
        with pytest.raises(SchemaTypeError):
            decode_directory_tree(
                _expression(
                    lambda make: [make.file({"name": "f", "content": "", "owner": "root"})]
                )
            )

    def test_mode_bits_must_be_bool(self) -> None:
        """Permission slots are booleans."""
        with pytest.raises(SchemaTypeError):
            decode_directory_tree(
                _expression(
                    lambda make: [
                        make.file({"name": "f", "content": "", "mode": {"user": {"read": 1}}})
                    ]
                )
            )

    def test_unknown_constructor(self) -> None:
        """make only offers directory and file."""
        with pytest.raises(SchemaTypeError, match="symlink"):
            decode_directory_tree(
                _expression(lambda make: [make.symlink({"name": "l", "content": "f"})])
            )

    def test_constructor_without_entry(self) -> None:
        """A constructor called with no entry does not type-check."""
        with pytest.raises(SchemaTypeError, match="make.file"):
            decode_directory_tree(_expression(lambda make: [make.file()]))

    def test_constructor_with_extra_argument(self) -> None:
        """A constructor takes exactly one entry."""
        with pytest.raises(SchemaTypeError, match="make.directory"):
            decode_directory_tree(
                _expression(
                    lambda make: [make.directory({"name": "d", "content": []}, "extra")]
                )
            )

    def test_tree_from_another_representation(self) -> None:
        """Trees cannot be smuggled in from a different instantiation."""
        leaked: list[Any] = []

        def first(make: Any) -> list[Any]:
            leaked.append(make.file({"name": "f", "content": ""}))
            return []

        decode_directory_tree(_expression(first))

        with pytest.raises(SchemaTypeError):
            decode_directory_tree(_expression(lambda make: leaked))


class TestStructuralDecodeErrors:
    """Tests for well-typed expressions that cannot be decoded."""

    def test_empty_name(self) -> None:
        """An empty name type-checks but is not a usable entry."""
        with pytest.raises(StructuralDecodeError):
            decode_directory_tree(
                _expression(lambda make: [make.file({"name": "", "content": ""})])
            )

    def test_nul_in_nested_name(self) -> None:
        """Names with NUL characters are rejected at any depth."""

        def build(make: Any) -> list[Any]:
            return [
                make.directory(
                    {"name": "d", "content": [make.file({"name": "bad\0name", "content": ""})]}
                )
            ]

        with pytest.raises(StructuralDecodeError):
            decode_directory_tree(_expression(build))
