"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
import stat
from collections.abc import Iterator
from pathlib import Path

import pytest
from dirtree.models.options import TreeOptions


@pytest.fixture
def options() -> TreeOptions:
    """Most restrictive traversal options."""
    return TreeOptions()


@pytest.fixture
def permissive_options() -> TreeOptions:
    """Traversal options with every relaxation enabled."""
    return TreeOptions(allow_absolute=True, allow_parent=True, allow_separators=True)


@pytest.fixture
def restore_permissions(tmp_path: Path) -> Iterator[None]:
    """Make everything below tmp_path writable again after the test."""
    yield
    for root, dirs, _files in os.walk(tmp_path):
        for name in dirs:
            path = Path(root) / name
            path.chmod(stat.S_IMODE(path.stat().st_mode) | stat.S_IRWXU)
