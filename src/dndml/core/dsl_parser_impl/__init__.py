"""
DNDML Parser Package.

The parser is built from mixins that separate parsing logic by construct:

- BaseParser: cursor navigation over a TokenBuffer and error helpers
- SheetParserMixin: document, section and field rules
- ValueParserMixin: the seven bracketed value kinds

The main exports are:
- Parser: The complete parser class
- parse_dsl: Convenience function to parse DNDML text

Usage:
    from dndml.core.dsl_parser_impl import parse_dsl

    sheet = parse_dsl(text, "fighter.dndml")
"""

import logging
from pathlib import Path

from .. import ir
from ..lexer import tokenize
from .base import BaseParser
from .sheet import SheetParserMixin
from .values import ValueParserMixin

logger = logging.getLogger(__name__)


class Parser(
    BaseParser,
    SheetParserMixin,
    ValueParserMixin,
):
    """
    Complete DNDML parser.

    Each rule raises a ParseError subclass on the first mismatch. Nothing is
    retried and no partial CharSheet is ever returned.
    """

    def parse(self) -> ir.CharSheet:
        """
        Parse the whole token buffer.

        Returns:
            CharSheet with all sections and fields
        """
        return self.parse_sheet()


def parse_dsl(text: str, file: Path | str = "<string>") -> ir.CharSheet:
    """
    Parse complete DNDML text.

    Args:
        text: DNDML source text
        file: Source name, stamped on the sheet and used in errors

    Returns:
        Parsed CharSheet

    Raises:
        ParseError: LexError, SheetSyntaxError, MissingIdentifierError or
            UnknownValueKindError on the first failure
    """
    tokens = tokenize(text, file)
    logger.debug("parsing %s (%d tokens)", file, len(tokens))

    parser = Parser(tokens)
    return parser.parse()


__all__ = [
    "Parser",
    "parse_dsl",
    "BaseParser",
    "SheetParserMixin",
    "ValueParserMixin",
]
