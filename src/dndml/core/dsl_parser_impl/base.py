"""
Base parser class for DNDML.

Provides the token navigation and error helpers shared by all parser mixins.
"""

from ..errors import MissingIdentifierError, SheetSyntaxError
from ..ir import SourceLocation
from ..lexer import SIGILS, Token, TokenType
from ..token_buffer import TokenBuffer


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    The token buffer is owned by the caller; the parser only moves its cursor.
    """

    def __init__(self, tokens: TokenBuffer):
        """
        Initialize parser.

        Args:
            tokens: Fully buffered tokens (see TokenBuffer.from_lexer)
        """
        self.tokens = tokens

    @property
    def pos(self) -> int:
        """Index of the token under the cursor."""
        return self.tokens.pos

    @property
    def source_name(self) -> str:
        return self.tokens.source.name

    def current_token(self) -> Token:
        """Get current token."""
        return self.tokens.peek()

    def peek_token(self, offset: int = 1) -> Token:
        """Peek ahead at token."""
        return self.tokens.peek(offset)

    def advance(self) -> Token:
        """Consume and return current token."""
        return self.tokens.advance()

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.tokens.match(*token_types)

    def expect(self, token_type: TokenType, expected: str | None = None) -> Token:
        """
        Expect a specific token type and consume it.

        Raises:
            SheetSyntaxError: If token doesn't match
        """
        return self.tokens.consume(token_type, expected)

    def expect_word(self, word: str) -> Token:
        """
        Expect an identifier whose text is exactly word.

        Attribute names inside brackets (``ability``, ``qty``, the dice ``d``)
        are plain identifiers compared by text.

        Raises:
            SheetSyntaxError: If the token is not that exact identifier
        """
        token = self.current_token()
        if token.type != TokenType.IDENTIFIER or self.text(token) != word:
            raise self.error(f"'{word}'", token)
        return self.advance()

    def match_word(self, word: str) -> bool:
        """Consume the current token if it is an identifier whose text is exactly word."""
        token = self.current_token()
        if token.type == TokenType.IDENTIFIER and self.text(token) == word:
            self.advance()
            return True
        return False

    def expect_name(self, what: str) -> str:
        """
        Expect a section or field name and return its text.

        Raises:
            MissingIdentifierError: If the current token is not a plain identifier
        """
        token = self.current_token()
        if token.type != TokenType.IDENTIFIER or self.text(token)[0] in SIGILS:
            raise self.error(what, token, MissingIdentifierError)
        self.advance()
        return self.text(token)

    def text(self, token: Token) -> str:
        """Return the source text of a token."""
        return self.tokens.text(token)

    def location(self, token: Token) -> SourceLocation:
        """Source location of a token's first character."""
        line, column = self.tokens.source.location(token.span.start)
        return SourceLocation(file=self.source_name, line=line, column=column)

    def error(
        self,
        expected: str,
        token: Token | None = None,
        error_cls: type[SheetSyntaxError] = SheetSyntaxError,
    ) -> SheetSyntaxError:
        """Build a located syntax error at token (default: current token)."""
        return self.tokens.error(expected, token, error_cls)
