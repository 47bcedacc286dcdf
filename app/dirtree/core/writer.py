"""Filesystem writer.

Thin layer over the OS calls used during materialization. Keeping them in
one place gives a single spot for debug logging and for patching in tests.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PathStatus:
    """Ownership and mode of a path.

    Attributes:
        uid: Owning user id.
        gid: Owning group id.
        mode: Full ``st_mode`` value, including file type bits.
    """

    uid: int
    gid: int
    mode: int


def create_directory(path: Path, *, parents: bool) -> None:
    """Create a directory if it does not exist yet.

    Args:
        path: Directory to create.
        parents: Also create missing parent directories.

    Raises:
        FileNotFoundError: If a parent is missing and ``parents`` is False.
        FileExistsError: If ``path`` exists but is not a directory.
    """
    if path.is_dir():
        return
    path.mkdir(parents=parents, exist_ok=True)
    logger.debug("Created directory %s", path)


def write_file(path: Path, content: str) -> None:
    """Write text to a file, replacing any previous content.

    The text is written as UTF-8 without newline translation, so the file
    holds exactly ``content``.
    """
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    logger.debug("Wrote %d characters to %s", len(content), path)


def read_status(path: Path) -> PathStatus:
    """Return owner, group and mode of ``path``, following symlinks."""
    st = os.stat(path)
    return PathStatus(uid=st.st_uid, gid=st.st_gid, mode=st.st_mode)


def change_owner(path: Path, uid: int, gid: int) -> None:
    """Set owner and group of ``path``."""
    os.chown(path, uid, gid)
    logger.debug("Changed owner of %s to %d:%d", path, uid, gid)


def change_mode(path: Path, mode: int) -> None:
    """Set the mode bits of ``path``."""
    os.chmod(path, mode)
    logger.debug("Changed mode of %s to %o", path, mode)
