"""Settings commands.

Provides commands to show and create the dirtree settings file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from dirtree.core.config import ConfigError, DirtreeConfig, load_config_or_default, save_config
from dirtree.core.paths import get_config_path
from dirtree.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and create the settings file.",
    no_args_is_help=True,
)


@app.command()
def show(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file to read."),
    ] = None,
) -> None:
    """Show the effective default options."""
    path = config_path or get_config_path()
    try:
        settings = load_config_or_default(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(title="Default Options", show_header=True, header_style="header")
    table.add_column("Option", style="bold")
    table.add_column("Value", justify="right")
    for name, value in settings.options.model_dump().items():
        table.add_row(name, "[success]yes[/]" if value else "[muted]no[/]")

    console.print(table)
    if not path.exists():
        print_info(f"No settings file at {path}, showing defaults.")


@app.command()
def init(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file to create."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Create a settings file with the default options."""
    path = config_path or get_config_path()

    if path.exists() and not force:
        print_error(f"Settings file already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(DirtreeConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Created settings file: {saved}")
