import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ManifestError

DEFAULT_SHEET_SUFFIX = ".dndml"


@dataclass
class DiagnosticsConfig:
    """Where parse failures are reported besides the console."""

    error_file: str | None = None  # e.g. "last_parser_err.txt", relative to the project root


@dataclass
class ProjectManifest:
    """
    Project manifest loaded from dndml.toml.

    Examples in dndml.toml:

        [project]
        name = "party"
        version = "0.1.0"

        [sheets]
        paths = ["sheets/"]
        suffix = ".dndml"

        [diagnostics]
        error_file = "last_parser_err.txt"
    """

    name: str
    version: str
    sheet_paths: list[str]
    sheet_suffix: str = DEFAULT_SHEET_SUFFIX
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def load_manifest(path: Path) -> ProjectManifest:
    """
    Load dndml.toml.

    Raises:
        ManifestError: If the file is missing, is not valid TOML, or a
            setting has the wrong type
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ManifestError(f"Manifest not found: {path}")
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid manifest {path}: {e}")

    project = _table(data, "project", path)
    sheets = _table(data, "sheets", path)
    diagnostics_data = _table(data, "diagnostics", path)

    paths = sheets.get("paths", ["./"])
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise ManifestError(f"Invalid manifest {path}: [sheets] paths must be a list of strings")

    suffix = _string(sheets, "sheets", "suffix", path) or DEFAULT_SHEET_SUFFIX
    if not suffix.startswith("."):
        suffix = f".{suffix}"

    return ProjectManifest(
        name=_string(project, "project", "name", path) or path.parent.name,
        version=_string(project, "project", "version", path) or "0.0.0",
        sheet_paths=paths,
        sheet_suffix=suffix,
        diagnostics=DiagnosticsConfig(
            error_file=_string(diagnostics_data, "diagnostics", "error_file", path),
        ),
    )


def _table(data: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ManifestError(f"Invalid manifest {path}: [{key}] must be a table")
    return value


def _string(table: dict[str, Any], section: str, key: str, path: Path) -> str | None:
    value = table.get(key)
    if value is not None and not isinstance(value, str):
        raise ManifestError(f"Invalid manifest {path}: [{section}] {key} must be a string")
    return value
