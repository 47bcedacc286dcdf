"""Path safety checks for keys used as relative paths.

Keys of records and key/value lists end up as paths below the destination
directory. Absolute paths and ".." segments could escape it, and keys with
separators create nested directories, so all three are rejected unless
explicitly allowed.
"""

from pathlib import PurePath

from dirtree.core.errors import AbsolutePathRejected, ParentSegmentRejected, SeparatorRejected
from dirtree.models.options import TreeOptions

PARENT_SEGMENT = ".."


def split_segments(key: str) -> tuple[str, ...]:
    """Split a key into filesystem path segments.

    An absolute key keeps its root as the first segment, so "/etc" yields
    ("/", "etc").

    Args:
        key: Raw key as given in the configuration value.

    Returns:
        Tuple of path segments.
    """
    return PurePath(key).parts


def validate_key(key: str, options: TreeOptions) -> None:
    """Check a key against the path relaxations in ``options``.

    Args:
        key: Raw key as given in the configuration value.
        options: Enabled relaxations.

    Raises:
        AbsolutePathRejected: If the key is absolute and absolute paths
            are not allowed.
        ParentSegmentRejected: If a segment is ".." and parent segments
            are not allowed.
        SeparatorRejected: If the key has more than one segment and
            separators are not allowed.
    """
    segments = split_segments(key)

    if not options.allow_absolute and PurePath(key).is_absolute():
        raise AbsolutePathRejected(key)

    if not options.allow_parent and PARENT_SEGMENT in segments:
        raise ParentSegmentRejected(key)

    if not options.allow_separators and len(segments) > 1:
        raise SeparatorRejected(key)
