"""Filesystem entry models produced by the fixpoint decoder.

These Pydantic models describe what a fixpoint directory tree expression
asks for: directories and files with a name, content and optional POSIX
metadata. Permission bits come in two flavours:

- ``Mode``/``Access``: fully resolved, all nine bits present.
- ``PartialMode``/``PartialAccess``: overrides where ``None`` means
  "keep whatever the path currently has".
"""

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
)


class UserId(BaseModel):
    """A user given by numeric id."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: Annotated[StrictInt, Field(ge=0, description="Numeric user id")]


class UserName(BaseModel):
    """A user given by account name."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[StrictStr, Field(min_length=1, description="Account name")]


class GroupId(BaseModel):
    """A group given by numeric id."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: Annotated[StrictInt, Field(ge=0, description="Numeric group id")]


class GroupName(BaseModel):
    """A group given by group name."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[StrictStr, Field(min_length=1, description="Group name")]


User = UserId | UserName
Group = GroupId | GroupName


class Access(BaseModel):
    """Resolved permissions of one class (user, group or other)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    execute: StrictBool
    read: StrictBool
    write: StrictBool


class PartialAccess(BaseModel):
    """Permission overrides of one class. ``None`` keeps the current bit."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    execute: StrictBool | None = None
    read: StrictBool | None = None
    write: StrictBool | None = None


class Mode(BaseModel):
    """Resolved permission bits of a path."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    user: Access
    group: Access
    other: Access


class PartialMode(BaseModel):
    """Permission overrides of a path. Only merged, never applied as is."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    user: PartialAccess | None = None
    group: PartialAccess | None = None
    other: PartialAccess | None = None


def coerce_account(value: Any, kind: Literal["user", "group"]) -> Any:
    """Normalize the shorthand forms accepted for users and groups.

    Accepts an ``int`` (id), a ``str`` (name), or a single-key mapping such
    as ``{"UserId": 0}`` / ``{"GroupName": "wheel"}``. Anything else is
    returned unchanged for Pydantic to reject.

    Args:
        value: Raw user or group value.
        kind: Either "user" or "group".

    Returns:
        A mapping Pydantic can validate into the id or name model.
    """
    prefix = "User" if kind == "user" else "Group"
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return {"id": value}
    if isinstance(value, str):
        return {"name": value}
    if isinstance(value, dict) and len(value) == 1:
        ((key, inner),) = value.items()
        if key == f"{prefix}Id":
            return {"id": inner}
        if key == f"{prefix}Name":
            return {"name": inner}
    return value


class EntryMetadata(BaseModel):
    """Name and POSIX metadata shared by every filesystem entry.

    Attributes:
        name: Path of the entry relative to its parent directory.
        user: Desired owner, None keeps the current owner.
        group: Desired group, None keeps the current group.
        mode: Permission overrides, None keeps the current mode.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: StrictStr
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

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names that cannot be used as a path component."""
        if not v:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)
        if "\0" in v:
            msg = f"Entry name cannot contain NUL characters: {v!r}"
            raise ValueError(msg)
        return v


class DirectoryEntry(EntryMetadata):
    """A directory and the entries inside it, in creation order."""

    kind: Literal["directory"] = "directory"
    content: list["FilesystemEntry"] = Field(default_factory=list)


class FileEntry(EntryMetadata):
    """A file and its text content."""

    kind: Literal["file"] = "file"
    content: StrictStr


FilesystemEntry = Annotated[DirectoryEntry | FileEntry, Field(discriminator="kind")]

DirectoryEntry.model_rebuild()
