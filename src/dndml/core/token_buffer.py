"""
Token buffer for the DNDML parser.

The lexer is drained once, up front, into an ordered token list. Parsing is
then a forward walk over this list with a cursor index.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .errors import SheetSyntaxError, make_lex_error, make_syntax_error
from .lexer import Lexer, Token, TokenType
from .source import SourceReader

logger = logging.getLogger(__name__)


class TokenBuffer:
    """
    Buffered token sequence with a forward-only cursor.

    Attributes:
        tokens: All tokens, ending with exactly one EOF
        source: Source the token spans point into
        pos: Index of the token under the cursor
    """

    def __init__(self, tokens: list[Token], source: SourceReader):
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("Token buffer must end with an EOF token")
        self.tokens = tokens
        self.source = source
        self.pos = 0

    @classmethod
    def from_lexer(cls, lexer: Lexer) -> "TokenBuffer":
        """
        Drain a lexer into a buffer.

        Raises:
            LexError: On the first SYNTAX_ERROR token; no buffer is built
        """
        tokens: list[Token] = []
        source = lexer.source
        for token in lexer:
            if token.type == TokenType.SYNTAX_ERROR:
                if source.char_at(token.span.start) == '"':
                    message = "Unterminated string literal"
                else:
                    message = f"Unexpected character: {source.slice(token.span)!r}"
                raise make_lex_error(message, source, token.span)
            tokens.append(token)

        logger.debug("buffered %d tokens from %s", len(tokens), source.name)
        return cls(tokens, source)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def peek(self, offset: int = 0) -> Token:
        """Get the token offset places past the cursor without consuming it."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[pos]

    def advance(self) -> Token:
        """Consume and return the current token. The cursor never moves past EOF."""
        token = self.peek()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def match(self, *token_types: TokenType) -> bool:
        """Check if the current token matches any of the given types."""
        return self.peek().type in token_types

    def at_end(self) -> bool:
        """Check whether the cursor is on the EOF token."""
        return self.match(TokenType.EOF)

    def consume(self, token_type: TokenType, expected: str | None = None) -> Token:
        """
        Consume the current token if it has the given type.

        Args:
            token_type: Required token type
            expected: Description for the error message (defaults to the
                token type's text)

        Raises:
            SheetSyntaxError: If the current token has a different type
        """
        token = self.peek()
        if token.type != token_type:
            raise self.error(expected or f"'{token_type.value}'", token)
        if token.type == TokenType.EOF:
            self.pos = len(self.tokens)
            return token
        return self.advance()

    def text(self, token: Token) -> str:
        """Return the source text of a token."""
        return self.source.text_of(token)

    def error(
        self,
        expected: str,
        token: Token | None = None,
        error_cls: type[SheetSyntaxError] = SheetSyntaxError,
    ) -> SheetSyntaxError:
        """Build a located syntax error for token (default: current token)."""
        token = token or self.peek()
        return make_syntax_error(expected, self.source, token.type, token.span, error_cls)
