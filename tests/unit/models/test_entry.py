"""Tests for filesystem entry models."""

import pytest
from dirtree.models.entry import (
    Access,
    DirectoryEntry,
    FileEntry,
    GroupId,
    GroupName,
    PartialAccess,
    PartialMode,
    UserId,
    UserName,
    coerce_account,
)
from pydantic import ValidationError


class TestCoerceAccount:
    """Tests for coerce_account()."""

    def test_int_is_id(self) -> None:
        """Integers become ids."""
        assert coerce_account(0, "user") == {"id": 0}

    def test_str_is_name(self) -> None:
        """Strings become names."""
        assert coerce_account("wheel", "group") == {"name": "wheel"}

    def test_tagged_mapping(self) -> None:
        """Alternative names map to id or name."""
        assert coerce_account({"UserId": 5}, "user") == {"id": 5}
        assert coerce_account({"GroupName": "adm"}, "group") == {"name": "adm"}

    def test_mismatched_tag_untouched(self) -> None:
        """A group tag on a user is left for validation to reject."""
        assert coerce_account({"GroupId": 5}, "user") == {"GroupId": 5}

    def test_bool_untouched(self) -> None:
        """Booleans are not treated as ids."""
        assert coerce_account(True, "user") is True


class TestEntryModels:
    """Tests for DirectoryEntry and FileEntry."""

    def test_file_defaults(self) -> None:
        """Metadata is optional."""
        entry = FileEntry(name="f", content="x")

        assert entry.kind == "file"
        assert entry.user is None
        assert entry.group is None
        assert entry.mode is None

    def test_directory_defaults(self) -> None:
        """A directory defaults to no children."""
        entry = DirectoryEntry(name="d")

        assert entry.kind == "directory"
        assert entry.content == []

    def test_user_shorthand(self) -> None:
        """Users and groups accept ids and names directly."""
        entry = FileEntry(name="f", content="", user=1000, group="staff")

        assert entry.user == UserId(id=1000)
        assert entry.group == GroupName(name="staff")

    def test_group_models_accepted(self) -> None:
        """Model instances are accepted unchanged."""
        entry = FileEntry(name="f", content="", user=UserName(name="root"), group=GroupId(id=0))

        assert entry.user == UserName(name="root")
        assert entry.group == GroupId(id=0)

    def test_negative_id_rejected(self) -> None:
        """Ids are natural numbers."""
        with pytest.raises(ValidationError):
            FileEntry(name="f", content="", user=-1)

    def test_bool_user_rejected(self) -> None:
        """A boolean is neither an id nor a name."""
        with pytest.raises(ValidationError):
            FileEntry(name="f", content="", user=True)

    def test_empty_name_rejected(self) -> None:
        """Entries need a usable name."""
        with pytest.raises(ValidationError):
            FileEntry(name="", content="")

    def test_nul_name_rejected(self) -> None:
        """NUL characters cannot appear in a path."""
        with pytest.raises(ValidationError):
            DirectoryEntry(name="a\0b")

    def test_extra_fields_rejected(self) -> None:
        """Entries are closed records."""
        with pytest.raises(ValidationError):
            FileEntry(name="f", content="", owner="root")

    def test_entries_are_frozen(self) -> None:
        """Decoded entries cannot be modified."""
        entry = FileEntry(name="f", content="")

        with pytest.raises(ValidationError):
            entry.name = "g"  # type: ignore[misc]


class TestModes:
    """Tests for Access, PartialAccess and PartialMode."""

    def test_access_requires_all_slots(self) -> None:
        """Resolved access has no optional slots."""
        with pytest.raises(ValidationError):
            Access(execute=True, read=True)  # type: ignore[call-arg]

    def test_partial_access_defaults(self) -> None:
        """Partial access slots default to unspecified."""
        access = PartialAccess()

        assert (access.execute, access.read, access.write) == (None, None, None)

    def test_partial_mode_from_mapping(self) -> None:
        """Partial modes validate from nested mappings."""
        mode = PartialMode.model_validate({"user": {"execute": True}})

        assert mode.user == PartialAccess(execute=True)
        assert mode.group is None

    def test_strict_bools(self) -> None:
        """Permission slots do not accept truthy non-booleans."""
        with pytest.raises(ValidationError):
            PartialAccess(read="yes")  # type: ignore[arg-type]
