"""
Sheet commands for DNDML CLI.

Commands for checking and inspecting character sheets:
- check: Parse sheets and report syntax errors
- inspect: Show a parsed sheet as a tree or JSON
- tokens: Dump the token stream of a sheet
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from dndml.core import ir
from dndml.core.errors import DndmlError, ManifestError, ParseError
from dndml.core.fileset import discover_sheet_files
from dndml.core.lexer import tokenize
from dndml.core.manifest import load_manifest
from dndml.core.parser import parse_file

from .utils import print_parse_error, write_error_report

# =============================================================================
# Helper Functions
# =============================================================================

CHECK_FORMATS = ("human", "vscode")
INSPECT_FORMATS = ("tree", "json")


def _require_format(format: str, allowed: tuple[str, ...]) -> None:
    if format not in allowed:
        typer.echo(f"Unknown format: {format}", err=True)
        typer.echo(f"Use one of: {', '.join(allowed)}", err=True)
        raise typer.Exit(code=1)


def _fmt(value: int | str | None) -> str:
    """Format an optional slot, showing NULL for None."""
    if value is None:
        return "NULL"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def describe_value(value: ir.FieldValue) -> str:
    """One-line human description of a field value."""
    if isinstance(value, ir.StatValue):
        return f"ability {_fmt(value.ability)}, mod {_fmt(value.mod)}"
    if isinstance(value, ir.StringValue | ir.IntValue):
        return _fmt(value.value)
    if isinstance(value, ir.DiceValue):
        return f"{_fmt(value.count)}d{_fmt(value.faces)}+{_fmt(value.modifier)}"
    if isinstance(value, ir.DeathSaveValue):
        return f"succ {_fmt(value.succ)}, fail {_fmt(value.fail)}"
    if isinstance(value, ir.ItemValue):
        return f"{_fmt(value.value)} x{_fmt(value.qty)} (weight {_fmt(value.weight)})"
    return f"{len(value.items)} items"


def build_sheet_tree(sheet: ir.CharSheet, section: str | None = None) -> Tree:
    """Build a rich Tree of sections and fields."""
    tree = Tree(f"📜 {escape(sheet.source_name)}")
    for sec in sheet.sections:
        if section and sec.identifier != section:
            continue
        branch = tree.add(f"[bold]{escape(sec.identifier)}[/bold] ({len(sec.fields)} fields)")
        for field in sec.fields:
            node = branch.add(
                f"{escape(field.identifier)} [dim]{field.value.kind}[/dim] "
                f"{escape(describe_value(field.value))}"
            )
            if isinstance(field.value, ir.ItemListValue):
                for item in field.value.items:
                    node.add(escape(describe_value(item)))
    return tree


def _resolve_sheets(
    files: list[Path] | None, manifest: str
) -> tuple[list[Path], Path, str | None]:
    """
    Work out which sheets to check.

    Returns:
        Tuple of (sheet files, project root, configured error file or None)
    """
    if files:
        return list(files), Path.cwd(), None

    manifest_path = Path(manifest).resolve()
    root = manifest_path.parent
    mf = load_manifest(manifest_path)
    return discover_sheet_files(root, mf), root, mf.diagnostics.error_file


# =============================================================================
# Commands
# =============================================================================


def check_command(
    files: list[Path] | None = typer.Argument(  # noqa: B008
        None, help="Sheets to check (default: every sheet listed by the manifest)"
    ),
    manifest: str = typer.Option("dndml.toml", "--manifest", "-m", help="Path to dndml.toml"),
    format: str = typer.Option(
        "human", "--format", "-f", help="Output format: 'human' or 'vscode'"
    ),
    error_file: Path | None = typer.Option(  # noqa: B008
        None, "--error-file", help="Write the last parse error to this file"
    ),
) -> None:
    """
    Parse character sheets and report the first syntax error in each.

    With no FILES, checks every sheet found under the manifest's [sheets] paths.
    """
    _require_format(format, CHECK_FORMATS)

    try:
        sheet_files, root, configured_error_file = _resolve_sheets(files, manifest)
    except ManifestError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if error_file is None and configured_error_file:
        error_file = root / configured_error_file

    if not sheet_files:
        typer.echo("No sheets found", err=True)
        raise typer.Exit(code=1)

    failures = 0
    for path in sheet_files:
        try:
            sheet = parse_file(path)
        except ParseError as e:
            failures += 1
            print_parse_error(e, root, format)
            if error_file:
                write_error_report(error_file, e)
            continue
        except OSError as e:
            failures += 1
            typer.echo(f"Error: cannot read {path}: {e}", err=True)
            continue

        if format != "vscode":
            typer.echo(
                f"✓ {path}: {len(sheet.sections)} sections, {sheet.field_count} fields"
            )

    if failures:
        if format != "vscode":
            typer.echo(f"\n{failures} of {len(sheet_files)} sheets failed to parse", err=True)
        raise typer.Exit(code=1)


def inspect_command(
    file: Path = typer.Argument(..., help="Sheet to inspect"),  # noqa: B008
    section: str | None = typer.Option(None, "--section", "-s", help="Show only this section"),
    format: str = typer.Option("tree", "--format", "-f", help="Output format: 'tree' or 'json'"),
) -> None:
    """
    Show the sections and fields of a parsed sheet.
    """
    _require_format(format, INSPECT_FORMATS)

    try:
        sheet = parse_file(file)
    except DndmlError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: cannot read {file}: {e}", err=True)
        raise typer.Exit(code=1)

    if section and sheet.get_section(section) is None:
        typer.echo(f"Section not found: {section}", err=True)
        raise typer.Exit(code=1)

    if format == "json":
        data = sheet.get_section(section) if section else sheet
        typer.echo(json.dumps(data.model_dump(), indent=2, default=str))
    else:
        Console().print(build_sheet_tree(sheet, section))


def tokens_command(
    file: Path = typer.Argument(..., help="Sheet to tokenize"),  # noqa: B008
) -> None:
    """
    Print the token stream of a sheet (type, span, text).
    """
    try:
        text = file.read_text(encoding="utf-8")
        buffer = tokenize(text, file)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: cannot read {file}: {e}", err=True)
        raise typer.Exit(code=1)

    table = Table(title=escape(str(file)))
    table.add_column("Span", justify="right")
    table.add_column("Type")
    table.add_column("Text")
    for token in buffer:
        table.add_row(
            f"{token.span.start}-{token.span.end}",
            escape(token.type.value),
            escape(buffer.text(token)),
        )
    Console().print(table)
