"""Build command.

Loads a JSON or TOML document and materializes it as a directory tree.
"""

from pathlib import Path
from typing import Annotated

import typer

from dirtree.core.config import ConfigError, load_config_or_default
from dirtree.core.document import DocumentError, load_document
from dirtree.core.errors import FilesystemError
from dirtree.core.materialize import to_directory_tree
from dirtree.utils.formatting import console, print_error


def build(
    ctx: typer.Context,
    source: Annotated[
        Path,
        typer.Argument(help="JSON or TOML document describing the tree."),
    ],
    output: Annotated[
        Path,
        typer.Argument(help="Destination path."),
    ],
    allow_absolute: Annotated[
        bool,
        typer.Option(
            "--allow-absolute",
            help="Allow absolute paths as keys. The root counts as a segment, "
            "so --allow-separators is needed as well.",
        ),
    ] = False,
    allow_parent: Annotated[
        bool,
        typer.Option("--allow-parent", help="Allow '..' segments in keys."),
    ] = False,
    allow_separators: Annotated[
        bool,
        typer.Option("--allow-separators", help="Allow path separators in keys."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file with default options."),
    ] = None,
) -> None:
    """Write a document to disk as a directory tree.

    Objects become directories, strings become files, and null values
    are skipped. Lists of {"mapKey", "mapValue"} objects are written in
    order.

    Examples:
        dirtree build tree.json result
        dirtree build tree.toml result --allow-separators
    """
    try:
        settings = load_config_or_default(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    options = settings.options.relaxed(
        allow_absolute=allow_absolute,
        allow_parent=allow_parent,
        allow_separators=allow_separators,
    )

    try:
        value = load_document(source)
    except DocumentError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        to_directory_tree(options, output, value)
    except FilesystemError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(f"Failed to write directory tree: {e}")
        raise typer.Exit(code=1) from e

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    if not quiet:
        console.print(f"[success]Wrote directory tree to[/] [path]{output}[/]")
