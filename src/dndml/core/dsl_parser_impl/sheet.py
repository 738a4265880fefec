"""
Sheet structure parsing for DNDML.

Handles the document, section, and field rules:

    @section Abilities:
      @field str: %stat[ability: 16; mod: 3];
    @end-section
"""

import logging
from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import UnknownValueKindError
from ..lexer import TokenType

logger = logging.getLogger(__name__)

VALUE_PARSERS = {
    TokenType.STAT: "parse_stat_value",
    TokenType.STRING: "parse_string_value",
    TokenType.INT: "parse_int_value",
    TokenType.DICE: "parse_dice_value",
    TokenType.DEATHSAVES: "parse_deathsave_value",
    TokenType.ITEM: "parse_item_value",
    TokenType.ITEMLIST: "parse_itemlist_value",
}


class SheetParserMixin:
    """
    Parser mixin for sections and fields.

    Note: This mixin expects to be combined with BaseParser and
    ValueParserMixin via multiple inheritance.
    """

    if TYPE_CHECKING:
        expect: Any
        expect_name: Any
        advance: Any
        match: Any
        current_token: Any
        location: Any
        error: Any
        source_name: Any
        tokens: Any

    def parse_sheet(self) -> ir.CharSheet:
        """
        Parse ``section* EOF``.

        Returns:
            CharSheet holding every section in document order
        """
        sections: list[ir.SectionSpec] = []

        while not self.match(TokenType.EOF):
            if not self.match(TokenType.SECTION):
                raise self.error("'@section'")
            sections.append(self.parse_section())

        self.expect(TokenType.EOF, "end of input")

        logger.debug("parsed %d sections from %s", len(sections), self.source_name)
        return ir.CharSheet(
            source_name=self.source_name,
            sections=sections,
            source_text=self.tokens.source.text,
        )

    def parse_section(self) -> ir.SectionSpec:
        """Parse ``'@section' <identifier> ':' field* '@end-section'``."""
        start = self.expect(TokenType.SECTION)
        identifier = self.expect_name("section identifier")
        self.expect(TokenType.COLON)

        logger.debug("section %s", identifier)

        fields: list[ir.FieldSpec] = []
        while not self.match(TokenType.END_SECTION):
            if self.match(TokenType.EOF):
                raise self.error("'@end-section'")
            if not self.match(TokenType.FIELD):
                raise self.error("'@field' or '@end-section'")
            fields.append(self.parse_field())

        self.expect(TokenType.END_SECTION)

        return ir.SectionSpec(
            identifier=identifier,
            fields=fields,
            location=self.location(start),
        )

    def parse_field(self) -> ir.FieldSpec:
        """Parse ``'@field' <identifier> ':' value ';'``."""
        start = self.expect(TokenType.FIELD)
        identifier = self.expect_name("field identifier")
        self.expect(TokenType.COLON)

        value = self.parse_value()
        self.expect(TokenType.SEMICOLON)

        logger.debug("  field %s: %s", identifier, value.kind)
        return ir.FieldSpec(
            identifier=identifier,
            value=value,
            location=self.location(start),
        )

    def parse_value(self) -> ir.FieldValue:
        """
        Dispatch on the value keyword.

        Raises:
            UnknownValueKindError: If the current token is not a value keyword;
                the token is left unconsumed
        """
        token = self.current_token()
        method = VALUE_PARSERS.get(token.type)
        if method is None:
            raise self.error("value kind", token, UnknownValueKindError)
        value: ir.FieldValue = getattr(self, method)()
        return value
