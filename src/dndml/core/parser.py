import logging
from pathlib import Path

from . import ir
from .dsl_parser_impl import parse_dsl

logger = logging.getLogger(__name__)


def parse_file(path: Path) -> ir.CharSheet:
    """
    Read and parse one DNDML file.

    The sheet's source_name is the path as given.

    Raises:
        OSError: If the file cannot be read
        ParseError: If the file is not valid DNDML
    """
    text = path.read_text(encoding="utf-8")
    logger.info("Parsing %s", path)
    return parse_dsl(text, path)


def parse_sheets(files: list[Path]) -> list[ir.CharSheet]:
    """
    Parse DNDML files into CharSheet structures.

    Stops at the first file that fails to parse.

    Args:
        files: List of .dndml file paths to parse

    Returns:
        One CharSheet per file, in the order given
    """
    return [parse_file(f) for f in files]
