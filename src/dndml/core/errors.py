"""
Error types for DNDML tokenizing, parsing, and project loading.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .lexer import Span, TokenType
    from .source import SourceReader


class DndmlError(Exception):
    """Base exception for all DNDML errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(DndmlError):
    """
    Raised when a character sheet cannot be parsed.

    Every failure raised by the lexer, token buffer, or parser derives from
    this class, so callers that only care about "did it parse" catch this.
    """

    pass


class LexError(ParseError):
    """
    Raised when the source text cannot be tokenized.

    Examples:
    - Unrecognized character (e.g. ``$``)
    - Unterminated string literal
    """

    def __init__(
        self,
        message: str,
        span: "Span | None" = None,
        context: Optional["ErrorContext"] = None,
    ):
        self.span = span
        super().__init__(message, context)


class SheetSyntaxError(ParseError):
    """
    Raised when the token stream does not match the grammar.

    Attributes:
        expected: Description of the construct the parser wanted
        found: Token type found instead (None when unknown)
        span: Source span of the offending token
    """

    def __init__(
        self,
        message: str,
        expected: str,
        found: "TokenType | None" = None,
        span: "Span | None" = None,
        context: Optional["ErrorContext"] = None,
    ):
        self.expected = expected
        self.found = found
        self.span = span
        super().__init__(message, context)


class MissingIdentifierError(SheetSyntaxError):
    """Raised when a section or field has no name."""

    pass


class UnknownValueKindError(SheetSyntaxError):
    """Raised when a field's value keyword is not one of the seven value kinds."""

    pass


class ManifestError(DndmlError):
    """
    Raised when the project manifest (dndml.toml) is missing or malformed.
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path (or source name) where the error occurred
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source lines surrounding the error
    """

    file: Path
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "fighter.dndml:10:5"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippets start up to 2 lines before the error line
        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def make_context(source: "SourceReader", offset: int) -> ErrorContext:
    """
    Build an ErrorContext for a character offset in a source.

    Args:
        source: Source the offset points into
        offset: Character offset (clamped to the source length)

    Returns:
        ErrorContext with line, column and snippet filled in
    """
    line, column = source.location(offset)
    return ErrorContext(
        file=Path(source.name),
        line=line,
        column=column,
        snippet=source.snippet(line),
    )


def make_lex_error(message: str, source: "SourceReader", span: "Span") -> LexError:
    """
    Helper to create a LexError located at a span.

    Args:
        message: Error description
        source: Source being tokenized
        span: Span of the offending characters

    Returns:
        LexError with context attached
    """
    return LexError(message, span=span, context=make_context(source, span.start))


def make_syntax_error(
    expected: str,
    source: "SourceReader",
    found: "TokenType | None",
    span: "Span",
    error_cls: type[SheetSyntaxError] = SheetSyntaxError,
) -> SheetSyntaxError:
    """
    Helper to create a SheetSyntaxError (or subclass) located at a span.

    Args:
        expected: Description of the expected construct
        source: Source being parsed
        found: Type of the token actually found
        span: Span of the offending token
        error_cls: Concrete error class to instantiate

    Returns:
        Error with message "Expected <expected>, got <found>" and context
    """
    found_desc = _describe_found(source, found, span)
    return error_cls(
        f"Expected {expected}, got {found_desc}",
        expected=expected,
        found=found,
        span=span,
        context=make_context(source, span.start),
    )


def _describe_found(source: "SourceReader", found: "TokenType | None", span: "Span") -> str:
    from .lexer import TokenType

    if found is None:
        return "nothing"
    if found == TokenType.EOF:
        return "end of input"
    text = source.slice(span)
    if found in (TokenType.IDENTIFIER, TokenType.INT_LITERAL, TokenType.STRING_LITERAL):
        return f"{found.value} {text!r}"
    return repr(text)
