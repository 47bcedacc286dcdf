"""Utility modules for dirtree.

This module exports commonly used utility functions.
"""

from dirtree.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
]
