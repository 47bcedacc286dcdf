"""Data models for dirtree.

This package contains the traversal options, the structured values handed
over by the configuration engine and the decoded filesystem entries.
"""

from dirtree.models.entry import (
    Access,
    DirectoryEntry,
    EntryMetadata,
    FileEntry,
    FilesystemEntry,
    Group,
    GroupId,
    GroupName,
    Mode,
    PartialAccess,
    PartialMode,
    User,
    UserId,
    UserName,
)
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
    Unsupported,
)

__all__ = [
    "Access",
    "DirectoryEntry",
    "EntryMetadata",
    "FileEntry",
    "FilesystemEntry",
    "FixpointCandidate",
    "Group",
    "GroupId",
    "GroupName",
    "Mode",
    "OptionalNone",
    "OptionalSome",
    "OrderedPairs",
    "PartialAccess",
    "PartialMode",
    "Record",
    "StructuredValue",
    "TaggedUnion",
    "Text",
    "TreeOptions",
    "Unsupported",
    "User",
    "UserId",
    "UserName",
]
