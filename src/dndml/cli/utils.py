"""
DNDML CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer

from dndml._version import get_version
from dndml.core.errors import DndmlError, ParseError

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"DNDML version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(debug: bool) -> None:
    """Route library logging to stderr; DEBUG traces every token and rule."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def print_parse_error(error: DndmlError, root: Path, format: str = "human") -> None:
    """Print a parse error in 'human' or 'vscode' format."""
    if format == "vscode":
        _print_vscode_parse_error(error, root)
    elif isinstance(error, ParseError):
        typer.echo(f"Parse error: {error}", err=True)
    else:
        typer.echo(f"Error: {error}", err=True)


def _print_vscode_parse_error(error: DndmlError, root: Path) -> None:
    """Print parse error in VS Code format with location info."""
    if error.context:
        try:
            rel_path = Path(error.context.file).relative_to(root)
        except ValueError:
            rel_path = Path(error.context.file)

        line = error.context.line or 1
        col = error.context.column or 1
        typer.echo(f"{rel_path}:{line}:{col}: error: {error.message}", err=True)
    else:
        typer.echo(f"::error: {error.message}", err=True)


def write_error_report(path: Path, error: DndmlError) -> None:
    """
    Overwrite path with the text of the most recent error.

    Editors and bots can poll this file instead of scraping console output.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"{type(error).__name__}: {error}\n", encoding="utf-8")
    logger.debug("wrote error report to %s", path)
