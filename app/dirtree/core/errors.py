"""Exceptions raised while materializing a directory tree.

Every failure of ``to_directory_tree`` is a ``FilesystemError`` subclass
carrying the offending key, value or expression. Rendering a message for
humans is left to the caller. OS-level failures (permission denied, a file
where a directory is expected) propagate as plain ``OSError``.
"""

from typing import Any, Literal


class FilesystemError(Exception):
    """Base exception for directory tree materialization errors."""


class PathSafetyViolation(FilesystemError):
    """Raised when a key does not satisfy the enabled path relaxations.

    Attributes:
        key: The rejected key.
    """

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class AbsolutePathRejected(PathSafetyViolation):
    """Raised for an absolute key while absolute paths are not allowed."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Absolute path not allowed: {key!r}")


class ParentSegmentRejected(PathSafetyViolation):
    """Raised for a key with a '..' segment while parents are not allowed."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Parent directory segment not allowed: {key!r}")


class SeparatorRejected(PathSafetyViolation):
    """Raised for a multi-segment key while separators are not allowed."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Path separator not allowed: {key!r}")


class UnconvertibleValue(FilesystemError):
    """Raised when a value has no directory tree interpretation.

    Attributes:
        value: The value that could not be converted.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(f"Not a valid directory tree expression: {value!r}")
        self.value = value


class SchemaTypeError(FilesystemError):
    """Raised when a fixpoint expression does not have the expected type.

    Attributes:
        mismatch: Description of where the expression deviates.
    """

    def __init__(self, mismatch: str) -> None:
        super().__init__(f"Fixpoint expression does not match the directory tree type: {mismatch}")
        self.mismatch = mismatch


class StructuralDecodeError(FilesystemError):
    """Raised when a well-typed fixpoint expression cannot be decoded.

    Attributes:
        details: Decoder error details.
    """

    def __init__(self, details: str) -> None:
        super().__init__(f"Failed to decode directory tree entries: {details}")
        self.details = details


class AccountLookupFailure(FilesystemError):
    """Raised when a named user or group does not exist on this system.

    Attributes:
        kind: Either "user" or "group".
        name: The name that could not be resolved.
    """

    def __init__(self, kind: Literal["user", "group"], name: str) -> None:
        super().__init__(f"Unknown {kind}: {name!r}")
        self.kind = kind
        self.name = name
