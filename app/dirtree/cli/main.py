"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from dirtree import __version__
from dirtree.cli.commands import build, config
from dirtree.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="dirtree",
    help="Materialize configuration values as directory trees.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dirtree version {__version__}")
        raise typer.Exit()


def configure_logging() -> None:
    """Log every filesystem operation to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every filesystem operation.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """dirtree - Materialize configuration values as directory trees.

    Records become directories, text becomes files, and fixpoint
    encoded trees can additionally set owners and permissions.
    """
    if verbose:
        configure_logging()

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.command(name="build")(build.build)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
