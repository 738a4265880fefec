"""
Lexer/Tokenizer for the DNDML character sheet language.

Converts raw DNDML text into tokens one at a time. Tokens carry spans into
the source rather than copies of its text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from .source import SourceReader

if TYPE_CHECKING:
    from .token_buffer import TokenBuffer

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types in the DNDML language."""

    # Reserved words
    SECTION = "@section"
    END_SECTION = "@end-section"
    FIELD = "@field"
    STAT = "%stat"
    STRING = "%string"
    INT = "%int"
    DICE = "%dice"
    DEATHSAVES = "%deathsaves"
    ITEMLIST = "%itemlist"
    ITEM = "%item"

    IDENTIFIER = "identifier"

    # Punctuation
    COLON = ":"
    SEMICOLON = ";"
    LBRACKET = "["
    RBRACKET = "]"
    PLUS = "+"

    # Literals
    INT_LITERAL = "int-literal"
    STRING_LITERAL = "string-literal"
    NULL = "NULL"

    EOF = "end-of-input"
    SYNTAX_ERROR = "syntax-error"


# Checked in order; %itemlist must come before %item.
RESERVED_WORDS: tuple[tuple[str, TokenType], ...] = (
    ("@section", TokenType.SECTION),
    ("@end-section", TokenType.END_SECTION),
    ("@field", TokenType.FIELD),
    ("%stat", TokenType.STAT),
    ("%string", TokenType.STRING),
    ("%int", TokenType.INT),
    ("%dice", TokenType.DICE),
    ("%deathsaves", TokenType.DEATHSAVES),
    ("%itemlist", TokenType.ITEMLIST),
    ("%item", TokenType.ITEM),
)

PUNCTUATION = {
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "+": TokenType.PLUS,
}

SIGILS = ("@", "%")
WHITESPACE = (" ", "\t", "\r", "\n")


@dataclass(frozen=True)
class Span:
    """Half-open [start, end) character range in the source."""

    start: int
    end: int


@dataclass(frozen=True)
class Token:
    """
    A single token in the DNDML source.

    Attributes:
        type: Type of token
        span: Location of the token's text in the source
    """

    type: TokenType
    span: Span

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.span.start}:{self.span.end})"


def _is_digit(ch: str | None) -> bool:
    return ch is not None and "0" <= ch <= "9"


def _is_letter(ch: str | None) -> bool:
    return ch is not None and ch.isalpha()


def _is_identifier_char(ch: str | None) -> bool:
    # Digits end an identifier: "2d6" lexes as 2, d, 6.
    return ch is not None and (ch.isalpha() or ch == "_")


def _is_word_char(ch: str | None) -> bool:
    return ch is not None and (ch.isalnum() or ch in ("_", "-"))


class Lexer:
    """
    Pull-based lexer for DNDML.

    Each call to next_token() returns the next token. Once the end of input
    is reached, every further call returns another EOF token at the same
    position, so callers may stop at the first EOF or keep pulling safely.
    """

    def __init__(self, source: SourceReader | str, file: Path | str = "<string>"):
        """
        Initialize lexer.

        Args:
            source: SourceReader, or raw text to wrap in one
            file: Source name when source is raw text (for error reporting)
        """
        if isinstance(source, str):
            source = SourceReader(source, str(file))
        self.source = source
        self.pos = 0

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        return self.source.char_at(self.pos)

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        return self.source.char_at(self.pos + offset)

    def skip_whitespace(self) -> None:
        """Skip whitespace characters, newlines included."""
        while self.current_char() in WHITESPACE:
            self.pos += 1

    def match_reserved_word(self) -> TokenType | None:
        """Return the reserved word at the cursor, if any."""
        for text, token_type in RESERVED_WORDS:
            if self.source.startswith(text, self.pos) and not _is_word_char(
                self.source.char_at(self.pos + len(text))
            ):
                return token_type
        return None

    def read_while(self, predicate) -> None:
        """Advance while predicate holds for the current character."""
        while predicate(self.current_char()):
            self.pos += 1

    def read_string(self) -> TokenType:
        """
        Read a double-quoted string. The span keeps both quotes.

        Returns SYNTAX_ERROR (spanning to the end of input) when unterminated.
        """
        self.pos += 1  # opening quote
        while self.current_char() is not None and self.current_char() != '"':
            self.pos += 1

        if self.current_char() is None:
            return TokenType.SYNTAX_ERROR

        self.pos += 1  # closing quote
        return TokenType.STRING_LITERAL

    def next_token(self) -> Token:
        """
        Produce the next token.

        Returns:
            The next token, an EOF token at the end of input, or a
            SYNTAX_ERROR token covering the offending text
        """
        self.skip_whitespace()

        start = self.pos
        ch = self.current_char()

        if ch is None:
            return Token(TokenType.EOF, Span(start, start))

        reserved = self.match_reserved_word()
        if reserved is not None:
            self.pos += len(reserved.value)
            token_type = reserved

        # Unknown @word / %word: hand it to the parser as an identifier so it
        # can report what it expected there
        elif ch in SIGILS and _is_letter(self.peek_char()):
            self.pos += 1
            self.read_while(_is_word_char)
            token_type = TokenType.IDENTIFIER

        elif _is_letter(ch):
            self.read_while(_is_identifier_char)
            if self.source.text[start : self.pos] == "NULL":
                token_type = TokenType.NULL
            else:
                token_type = TokenType.IDENTIFIER

        elif _is_digit(ch):
            self.read_while(_is_digit)
            token_type = TokenType.INT_LITERAL

        elif ch == '"':
            token_type = self.read_string()

        elif ch in PUNCTUATION:
            self.pos += 1
            token_type = PUNCTUATION[ch]

        else:
            self.pos += 1
            token_type = TokenType.SYNTAX_ERROR

        token = Token(token_type, Span(start, self.pos))
        logger.debug("lexed %s %r", token_type.value, self.source.slice(token.span))
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF or the first SYNTAX_ERROR."""
        while True:
            token = self.next_token()
            yield token
            if token.type in (TokenType.EOF, TokenType.SYNTAX_ERROR):
                return


def tokenize(text: str, file: Path | str = "<string>") -> "TokenBuffer":
    """
    Convenience function to tokenize DNDML text.

    Args:
        text: Source text
        file: Source file path

    Returns:
        TokenBuffer holding every token through EOF

    Raises:
        LexError: If the text contains an invalid character or unterminated string
    """
    from .token_buffer import TokenBuffer

    return TokenBuffer.from_lexer(Lexer(text, file))
