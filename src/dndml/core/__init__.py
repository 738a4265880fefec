"""Core DNDML functionality: source reader, lexer, token buffer, parser, IR, manifest."""

from . import ir
from .dsl_parser_impl import Parser, parse_dsl
from .errors import (
    DndmlError,
    ErrorContext,
    LexError,
    ManifestError,
    MissingIdentifierError,
    ParseError,
    SheetSyntaxError,
    UnknownValueKindError,
)
from .fileset import discover_sheet_files
from .lexer import Lexer, Span, Token, TokenType, tokenize
from .manifest import ProjectManifest, load_manifest
from .parser import parse_file, parse_sheets
from .source import SourceReader
from .token_buffer import TokenBuffer

__all__ = [
    "ir",
    # Errors
    "DndmlError",
    "ParseError",
    "LexError",
    "SheetSyntaxError",
    "MissingIdentifierError",
    "UnknownValueKindError",
    "ManifestError",
    "ErrorContext",
    # Tokenizing
    "SourceReader",
    "Lexer",
    "Token",
    "TokenType",
    "Span",
    "TokenBuffer",
    "tokenize",
    # Parsing
    "Parser",
    "parse_dsl",
    "parse_file",
    "parse_sheets",
    # Project
    "ProjectManifest",
    "load_manifest",
    "discover_sheet_files",
]
