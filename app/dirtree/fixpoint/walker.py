"""Materialization of decoded fixpoint entries.

Entries are written depth-first in list order. Each entry goes through
two phases: its content is written first (for directories: every child),
then its metadata is applied. Applying metadata earlier could lock the
process out of the path it still has to fill.
"""

from collections.abc import Iterable
from pathlib import Path

from dirtree.core.metadata import apply_metadata
from dirtree.core.writer import create_directory, write_file
from dirtree.models.entry import DirectoryEntry, FilesystemEntry
from dirtree.models.options import TreeOptions


def materialize_entries(
    options: TreeOptions,
    path: Path,
    entries: Iterable[FilesystemEntry],
) -> None:
    """Write a sequence of entries below ``path``, preserving order.

    Entry names are joined to ``path`` as given; they are not subject to
    the key checks of ``validate_key``.

    Args:
        options: Traversal options. Only ``allow_separators`` is used, to
            allow recursive directory creation.
        path: Directory the entries are created in.
        entries: Decoded entries.
    """
    for entry in entries:
        materialize_entry(options, path, entry)


def materialize_entry(options: TreeOptions, path: Path, entry: FilesystemEntry) -> None:
    """Write a single entry and then apply its metadata."""
    target = path / entry.name

    if isinstance(entry, DirectoryEntry):
        create_directory(target, parents=options.allow_separators)
        materialize_entries(options, target, entry.content)
    else:
        write_file(target, entry.content)

    apply_metadata(entry, target)
