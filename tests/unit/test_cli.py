"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from dndml.cli import app

GOOD_SHEET = """\
@section Combat:
  @field hp: %int[12];
  @field hit_dice: %dice[1d8+NULL];
@end-section
"""

BAD_SHEET = """\
@section Combat:
  @field hp: %int[];
@end-section
"""


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def test_project(tmp_path: Path):
    """Create a temporary project with one good and one broken sheet."""
    sheets = tmp_path / "sheets"
    sheets.mkdir()
    (sheets / "good.dndml").write_text(GOOD_SHEET)
    (sheets / "bad.dndml").write_text(BAD_SHEET)

    (tmp_path / "dndml.toml").write_text(
        """
[project]
name = "test_party"

[sheets]
paths = ["sheets/"]

[diagnostics]
error_file = "last_parser_err.txt"
"""
    )
    return tmp_path


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "DNDML version" in result.output


def test_check_valid_file(cli_runner: CliRunner, test_project: Path):
    good = test_project / "sheets" / "good.dndml"
    result = cli_runner.invoke(app, ["check", str(good)])
    assert result.exit_code == 0
    assert "1 sections, 2 fields" in result.output


def test_check_invalid_file(cli_runner: CliRunner, test_project: Path):
    bad = test_project / "sheets" / "bad.dndml"
    result = cli_runner.invoke(app, ["check", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output
    assert "Expected integer or NULL, got ']'" in result.output
    assert "1 of 1 sheets failed to parse" in result.output


def test_check_vscode_format(cli_runner: CliRunner, test_project: Path):
    bad = test_project / "sheets" / "bad.dndml"
    result = cli_runner.invoke(app, ["check", str(bad), "--format", "vscode"])
    assert result.exit_code == 1
    assert "bad.dndml:2:19: error: Expected integer or NULL, got ']'" in result.output


def test_check_manifest_writes_error_file(cli_runner: CliRunner, test_project: Path):
    result = cli_runner.invoke(app, ["check", "--manifest", str(test_project / "dndml.toml")])
    assert result.exit_code == 1
    assert "good.dndml: 1 sections, 2 fields" in result.output
    assert "1 of 2 sheets failed to parse" in result.output

    report = (test_project / "last_parser_err.txt").read_text()
    assert report.startswith("SheetSyntaxError: ")
    assert "Expected integer or NULL" in report


def test_check_explicit_error_file(cli_runner: CliRunner, test_project: Path, tmp_path: Path):
    bad = test_project / "sheets" / "bad.dndml"
    target = tmp_path / "reports" / "err.txt"
    result = cli_runner.invoke(app, ["check", str(bad), "--error-file", str(target)])
    assert result.exit_code == 1
    assert target.read_text().startswith("SheetSyntaxError: ")


def test_check_missing_manifest(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(app, ["check", "--manifest", str(tmp_path / "dndml.toml")])
    assert result.exit_code == 1
    assert "Manifest not found" in result.output


def test_check_ill_typed_manifest(cli_runner: CliRunner, tmp_path: Path):
    manifest = tmp_path / "dndml.toml"
    manifest.write_text("[sheets]\nsuffix = 5\n")
    result = cli_runner.invoke(app, ["check", "--manifest", str(manifest)])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "suffix must be a string" in result.output


def test_check_unknown_format(cli_runner: CliRunner, test_project: Path):
    good = test_project / "sheets" / "good.dndml"
    result = cli_runner.invoke(app, ["check", str(good), "--format", "xml"])
    assert result.exit_code == 1
    assert "Unknown format: xml" in result.output
    assert "sections" not in result.output


def test_check_example_project(cli_runner: CliRunner, examples_dir: Path):
    manifest = examples_dir / "party" / "dndml.toml"
    result = cli_runner.invoke(app, ["check", "--manifest", str(manifest)])
    assert result.exit_code == 0
    assert "fighter.dndml: 4 sections, 16 fields" in result.output
    assert "wizard.dndml: 4 sections, 10 fields" in result.output


def test_inspect_tree(cli_runner: CliRunner, test_project: Path):
    good = test_project / "sheets" / "good.dndml"
    result = cli_runner.invoke(app, ["inspect", str(good)])
    assert result.exit_code == 0
    assert "Combat" in result.output
    assert "1d8+NULL" in result.output


def test_inspect_json(cli_runner: CliRunner, test_project: Path):
    good = test_project / "sheets" / "good.dndml"
    result = cli_runner.invoke(app, ["inspect", str(good), "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    fields = data["sections"][0]["fields"]
    assert fields[0]["value"] == {"kind": "int", "value": 12}
    assert fields[1]["value"]["modifier"] is None


def test_inspect_unknown_format(cli_runner: CliRunner, test_project: Path):
    good = test_project / "sheets" / "good.dndml"
    result = cli_runner.invoke(app, ["inspect", str(good), "--format", "yaml"])
    assert result.exit_code == 1
    assert "Unknown format: yaml" in result.output
    assert "Use one of: tree, json" in result.output


def test_inspect_section_not_found(cli_runner: CliRunner, test_project: Path):
    good = test_project / "sheets" / "good.dndml"
    result = cli_runner.invoke(app, ["inspect", str(good), "--section", "Spells"])
    assert result.exit_code == 1
    assert "Section not found: Spells" in result.output


def test_inspect_invalid_sheet(cli_runner: CliRunner, test_project: Path):
    bad = test_project / "sheets" / "bad.dndml"
    result = cli_runner.invoke(app, ["inspect", str(bad)])
    assert result.exit_code == 1
    assert "Expected integer or NULL" in result.output


def test_tokens(cli_runner: CliRunner, test_project: Path):
    good = test_project / "sheets" / "good.dndml"
    result = cli_runner.invoke(app, ["tokens", str(good)])
    assert result.exit_code == 0
    assert "@section" in result.output
    assert "end-of-input" in result.output


def test_tokens_lex_error(cli_runner: CliRunner, tmp_path: Path):
    sheet = tmp_path / "broken.dndml"
    sheet.write_text('@section A: @field n: %string["open; @end-section')
    result = cli_runner.invoke(app, ["tokens", str(sheet)])
    assert result.exit_code == 1
    assert "Unterminated string literal" in result.output
