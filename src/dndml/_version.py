"""Single source of truth for the DNDML version."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).parent.parent.parent / "pyproject.toml"


def get_version() -> str:
    """Version from a source checkout's pyproject.toml, else the installed metadata."""
    if _PYPROJECT.exists():
        project = tomllib.loads(_PYPROJECT.read_text(encoding="utf-8")).get("project", {})
        if project.get("name") == "dndml" and "version" in project:
            return str(project["version"])
    try:
        return _metadata_version("dndml")
    except PackageNotFoundError:
        return "0.0.0"
