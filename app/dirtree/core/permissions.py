"""Conversion and merging of POSIX permission bits.

The nine permission bits are modelled as a fixed 3x3 table of
(class, permission) slots. ``merge_mode`` applies a partial override on top
of a resolved mode slot by slot.
"""

import stat

from dirtree.models.entry import Access, Mode, PartialAccess, PartialMode

CLASSES: tuple[str, ...] = ("user", "group", "other")
PERMISSIONS: tuple[str, ...] = ("execute", "read", "write")

# (class, permission) -> permission bit
PERMISSION_BITS: dict[tuple[str, str], int] = {
    ("user", "execute"): stat.S_IXUSR,
    ("user", "read"): stat.S_IRUSR,
    ("user", "write"): stat.S_IWUSR,
    ("group", "execute"): stat.S_IXGRP,
    ("group", "read"): stat.S_IRGRP,
    ("group", "write"): stat.S_IWGRP,
    ("other", "execute"): stat.S_IXOTH,
    ("other", "read"): stat.S_IROTH,
    ("other", "write"): stat.S_IWOTH,
}

PERMISSION_MASK = 0o777


def mode_from_bits(bits: int) -> Mode:
    """Build a resolved ``Mode`` from a ``st_mode`` style bitmask.

    Bits outside the nine permission bits are ignored.
    """
    classes = {
        cls: Access(**{perm: bool(bits & PERMISSION_BITS[(cls, perm)]) for perm in PERMISSIONS})
        for cls in CLASSES
    }
    return Mode(**classes)


def mode_to_bits(mode: Mode) -> int:
    """Convert a resolved ``Mode`` to its nine permission bits."""
    bits = 0
    for (cls, perm), bit in PERMISSION_BITS.items():
        if getattr(getattr(mode, cls), perm):
            bits |= bit
    return bits


def merge_access(current: Access, override: PartialAccess | None) -> Access:
    """Apply the specified slots of ``override`` to ``current``."""
    if override is None:
        return current
    return current.model_copy(update=override.model_dump(exclude_none=True))


def merge_mode(current: Mode, override: PartialMode) -> Mode:
    """Merge a partial permission override into a resolved mode.

    Each of the nine slots is taken from ``override`` when it specifies a
    value and from ``current`` otherwise.

    Args:
        current: Resolved mode of the path.
        override: Partial override requested by the entry.

    Returns:
        The new resolved mode.
    """
    return Mode(
        user=merge_access(current.user, override.user),
        group=merge_access(current.group, override.group),
        other=merge_access(current.other, override.other),
    )


def format_mode(mode: Mode) -> str:
    """Render a mode in ``ls -l`` notation, e.g. ``rw-r--r--``."""
    chars = []
    for cls in CLASSES:
        access = getattr(mode, cls)
        chars.append("r" if access.read else "-")
        chars.append("w" if access.write else "-")
        chars.append("x" if access.execute else "-")
    return "".join(chars)
