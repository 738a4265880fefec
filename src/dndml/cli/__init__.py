"""
DNDML CLI Package.

- sheets.py: check, inspect, and tokens commands
- utils.py: Shared utilities (version, logging, error output)
"""

import sys

import typer

from dndml._version import get_version
from dndml.cli.sheets import check_command, inspect_command, tokens_command
from dndml.cli.utils import configure_logging, version_callback

__version__ = get_version()

# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""DNDML – character sheet markup tools

Commands:
  • check: parse sheets and report syntax errors
  • inspect: show a parsed sheet as a tree or JSON
  • tokens: dump a sheet's token stream
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    debug: bool = typer.Option(False, "--debug", help="Log lexer and parser activity"),
) -> None:
    """DNDML CLI main callback for global options."""
    configure_logging(debug)


app.command(name="check")(check_command)
app.command(name="inspect")(inspect_command)
app.command(name="tokens")(tokens_command)


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])

__all__ = [
    "__version__",
    "app",
    "main",
    "get_version",
    "version_callback",
]
