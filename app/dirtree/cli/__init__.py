"""CLI package for dirtree.

This package contains the Typer application and all subcommands.
"""

from dirtree.cli.main import app

__all__ = ["app"]
