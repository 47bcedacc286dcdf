"""Fixpoint encoded directory trees.

A fixpoint directory tree is a function generic over its result
representation: given constructors for directories and files it returns
the list of top-level entries. This package type-checks and decodes such
expressions into ``FilesystemEntry`` values and writes them to disk.
"""

from dirtree.fixpoint.decoder import MakeRecord, decode_directory_tree
from dirtree.fixpoint.schema import DirectoryTreeSchema, Entry, directory_tree_schema
from dirtree.fixpoint.walker import materialize_entries

__all__ = [
    "DirectoryTreeSchema",
    "Entry",
    "MakeRecord",
    "decode_directory_tree",
    "directory_tree_schema",
    "materialize_entries",
]
