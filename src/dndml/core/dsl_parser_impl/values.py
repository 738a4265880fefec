"""
Field value parsing for DNDML.

Handles the seven bracketed value kinds:

    %stat[ability: 16; mod: 3]
    %string["Halfling"]
    %int[10]
    %dice[2d6+1]
    %deathsaves[succ: 0; fail: 1]
    %item[val: "Rope"; qty: 1; weight: 5]
    %itemlist[%item[...]; %item[...];]

Any integer slot accepts NULL; string slots accept NULL as well.
"""

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import TokenType


class ValueParserMixin:
    """
    Parser mixin for field values.

    Every rule starts on its value keyword and finishes just past the
    closing ``]``. The terminating ``;`` belongs to the enclosing rule.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        expect: Any
        expect_word: Any
        match_word: Any
        advance: Any
        match: Any
        current_token: Any
        text: Any
        error: Any

    def parse_int_or_null(self) -> int | None:
        """Parse an integer literal or NULL."""
        token = self.current_token()
        if token.type == TokenType.INT_LITERAL:
            self.advance()
            return int(self.text(token))
        if token.type == TokenType.NULL:
            self.advance()
            return None
        raise self.error("integer or NULL", token)

    def parse_string_or_null(self) -> str | None:
        """Parse a string literal (quotes stripped) or NULL."""
        token = self.current_token()
        if token.type == TokenType.STRING_LITERAL:
            self.advance()
            return self.text(token)[1:-1]
        if token.type == TokenType.NULL:
            self.advance()
            return None
        raise self.error("string or NULL", token)

    def parse_attribute_int(self, name: str) -> int | None:
        """Parse ``name : int_or_null``."""
        self.expect_word(name)
        self.expect(TokenType.COLON)
        return self.parse_int_or_null()

    def parse_stat_value(self) -> ir.StatValue:
        """Parse ``%stat[ability: N; mod: N]``."""
        self.expect(TokenType.STAT)
        self.expect(TokenType.LBRACKET)
        ability = self.parse_attribute_int("ability")
        self.expect(TokenType.SEMICOLON)
        mod = self.parse_attribute_int("mod")
        self.expect(TokenType.RBRACKET)
        return ir.StatValue(ability=ability, mod=mod)

    def parse_string_value(self) -> ir.StringValue:
        """Parse ``%string["text"]``."""
        self.expect(TokenType.STRING)
        self.expect(TokenType.LBRACKET)
        value = self.parse_string_or_null()
        self.expect(TokenType.RBRACKET)
        return ir.StringValue(value=value)

    def parse_int_value(self) -> ir.IntValue:
        """Parse ``%int[N]``."""
        self.expect(TokenType.INT)
        self.expect(TokenType.LBRACKET)
        value = self.parse_int_or_null()
        self.expect(TokenType.RBRACKET)
        return ir.IntValue(value=value)

    def parse_dice_value(self) -> ir.DiceValue:
        """Parse ``%dice[COUNT d FACES + MODIFIER]``."""
        self.expect(TokenType.DICE)
        self.expect(TokenType.LBRACKET)
        count, faces = self.parse_dice_head()
        self.expect(TokenType.PLUS)
        modifier = self.parse_int_or_null()
        self.expect(TokenType.RBRACKET)
        return ir.DiceValue(count=count, faces=faces, modifier=modifier)

    def parse_dice_head(self) -> tuple[int | None, int | None]:
        """
        Parse ``COUNT d FACES``.

        Written without spaces, NULL runs into the separator and lexes as a
        single identifier (``NULLd``, ``dNULL``, ``NULLdNULL``); those words
        are split back into their slots here.
        """
        if self.match_word("NULLdNULL"):
            return None, None
        if self.match_word("NULLd"):
            return None, self.parse_int_or_null()

        count = self.parse_int_or_null()
        if self.match_word("dNULL"):
            return count, None
        self.expect_word("d")
        return count, self.parse_int_or_null()

    def parse_deathsave_value(self) -> ir.DeathSaveValue:
        """Parse ``%deathsaves[succ: N; fail: N]``."""
        self.expect(TokenType.DEATHSAVES)
        self.expect(TokenType.LBRACKET)
        succ = self.parse_attribute_int("succ")
        self.expect(TokenType.SEMICOLON)
        fail = self.parse_attribute_int("fail")
        self.expect(TokenType.RBRACKET)
        return ir.DeathSaveValue(succ=succ, fail=fail)

    def parse_item_value(self) -> ir.ItemValue:
        """Parse ``%item[val: "name"; qty: N; weight: N]``."""
        self.expect(TokenType.ITEM)
        self.expect(TokenType.LBRACKET)
        self.expect_word("val")
        self.expect(TokenType.COLON)
        value = self.parse_string_or_null()
        self.expect(TokenType.SEMICOLON)
        qty = self.parse_attribute_int("qty")
        self.expect(TokenType.SEMICOLON)
        weight = self.parse_attribute_int("weight")
        self.expect(TokenType.RBRACKET)
        return ir.ItemValue(value=value, qty=qty, weight=weight)

    def parse_itemlist_value(self) -> ir.ItemListValue:
        """
        Parse ``%itemlist[(item ;)*]``.

        The closing bracket is checked before each item, so ``%itemlist[]``
        is an empty list.
        """
        self.expect(TokenType.ITEMLIST)
        self.expect(TokenType.LBRACKET)

        items: list[ir.ItemValue] = []
        while not self.match(TokenType.RBRACKET):
            if self.match(TokenType.EOF):
                raise self.error("']'")
            if not self.match(TokenType.ITEM):
                raise self.error("'%item' or ']'")
            items.append(self.parse_item_value())
            self.expect(TokenType.SEMICOLON)

        self.expect(TokenType.RBRACKET)
        return ir.ItemListValue(items=items)
