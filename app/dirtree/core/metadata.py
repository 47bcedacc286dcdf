"""Ownership and permission handling for materialized entries.

Metadata is applied after an entry's content has been written. Users and
groups given by name are resolved through the system account database;
ownership and mode are only changed when they differ from what the path
already has.
"""

import grp
import logging
import pwd
import stat
from pathlib import Path

from dirtree.core.errors import AccountLookupFailure
from dirtree.core.permissions import (
    PERMISSION_MASK,
    format_mode,
    merge_mode,
    mode_from_bits,
    mode_to_bits,
)
from dirtree.core.writer import change_mode, change_owner, read_status
from dirtree.models.entry import EntryMetadata, Group, GroupId, User, UserId

logger = logging.getLogger(__name__)


def resolve_user(user: User | None, current_uid: int) -> int:
    """Resolve a desired owner to a numeric user id.

    Args:
        user: Requested user, or None to keep the current owner.
        current_uid: Current owner of the path.

    Returns:
        Numeric user id.

    Raises:
        AccountLookupFailure: If a user name is not known to the system.
    """
    if user is None:
        return current_uid
    if isinstance(user, UserId):
        return user.id
    try:
        return pwd.getpwnam(user.name).pw_uid
    except KeyError:
        raise AccountLookupFailure("user", user.name) from None


def resolve_group(group: Group | None, current_gid: int) -> int:
    """Resolve a desired group to a numeric group id.

    Args:
        group: Requested group, or None to keep the current group.
        current_gid: Current group of the path.

    Returns:
        Numeric group id.

    Raises:
        AccountLookupFailure: If a group name is not known to the system.
    """
    if group is None:
        return current_gid
    if isinstance(group, GroupId):
        return group.id
    try:
        return grp.getgrnam(group.name).gr_gid
    except KeyError:
        raise AccountLookupFailure("group", group.name) from None


def apply_metadata(entry: EntryMetadata, path: Path) -> None:
    """Apply the owner, group and mode requested by ``entry`` to ``path``.

    Must only be called once the entry's content is complete: restricting
    ownership or permissions first could prevent writing it.

    Args:
        entry: Entry carrying the requested metadata.
        path: Path the entry was materialized at.

    Raises:
        AccountLookupFailure: If a user or group name cannot be resolved.
        OSError: If changing ownership or mode fails.
    """
    status = read_status(path)

    uid = resolve_user(entry.user, status.uid)
    gid = resolve_group(entry.group, status.gid)
    if (uid, gid) != (status.uid, status.gid):
        change_owner(path, uid, gid)

    if entry.mode is None:
        return

    current = mode_from_bits(status.mode)
    desired = merge_mode(current, entry.mode)
    if desired != current:
        # setuid, setgid and sticky bits are kept as they are
        special = stat.S_IMODE(status.mode) & ~PERMISSION_MASK
        change_mode(path, special | mode_to_bits(desired))
        logger.debug("Mode of %s: %s -> %s", path, format_mode(current), format_mode(desired))
