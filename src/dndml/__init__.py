"""
DNDML - a markup language for tabletop character sheets.

Tokenizes and parses DNDML text into a typed CharSheet of sections and fields.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.dsl_parser_impl import parse_dsl
from .core.errors import (
    DndmlError,
    LexError,
    ManifestError,
    MissingIdentifierError,
    ParseError,
    SheetSyntaxError,
    UnknownValueKindError,
)
from .core.parser import parse_file

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "parse_dsl",
    "parse_file",
    "DndmlError",
    "ParseError",
    "LexError",
    "SheetSyntaxError",
    "MissingIdentifierError",
    "UnknownValueKindError",
    "ManifestError",
]
