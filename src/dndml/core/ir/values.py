"""
Field value types for DNDML IR.

Each field holds exactly one of seven value kinds. The kinds form a
discriminated union on ``kind``; every integer slot is either a parsed
integer or None for an explicit ``NULL``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ValueKind(str, Enum):
    """The seven value kinds a field can hold."""

    STAT = "stat"
    STRING = "string"
    INT = "int"
    DICE = "dice"
    DEATHSAVES = "deathsaves"
    ITEM = "item"
    ITEMLIST = "itemlist"


class StatValue(BaseModel):
    """
    Ability score with its modifier.

    DSL: ``%stat[ability: 16; mod: 3]``
    """

    kind: Literal["stat"] = "stat"
    ability: int | None = None
    mod: int | None = None

    model_config = ConfigDict(frozen=True)


class StringValue(BaseModel):
    """DSL: ``%string["Halfling"]`` (quotes stripped) or ``%string[NULL]``."""

    kind: Literal["string"] = "string"
    value: str | None = None

    model_config = ConfigDict(frozen=True)


class IntValue(BaseModel):
    """DSL: ``%int[10]`` or ``%int[NULL]``."""

    kind: Literal["int"] = "int"
    value: int | None = None

    model_config = ConfigDict(frozen=True)


class DiceValue(BaseModel):
    """
    Dice expression ``count d faces + modifier``.

    DSL: ``%dice[2d6+1]``. Only the expression is stored; rolling it is up
    to the consumer.
    """

    kind: Literal["dice"] = "dice"
    count: int | None = None
    faces: int | None = None
    modifier: int | None = None

    model_config = ConfigDict(frozen=True)


class DeathSaveValue(BaseModel):
    """DSL: ``%deathsaves[succ: 1; fail: 0]``."""

    kind: Literal["deathsaves"] = "deathsaves"
    succ: int | None = None
    fail: int | None = None

    model_config = ConfigDict(frozen=True)


class ItemValue(BaseModel):
    """
    Inventory item.

    DSL: ``%item[val: "Rope"; qty: 1; weight: 5]``. ``value`` holds the
    ``val`` attribute.
    """

    kind: Literal["item"] = "item"
    value: str | None = None
    qty: int | None = None
    weight: int | None = None

    model_config = ConfigDict(frozen=True)


class ItemListValue(BaseModel):
    """
    Ordered list of items, possibly empty.

    DSL: ``%itemlist[%item[val: "Rope"; qty: 1; weight: 5];]``
    """

    kind: Literal["itemlist"] = "itemlist"
    items: list[ItemValue] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


FieldValue = Annotated[
    StatValue | StringValue | IntValue | DiceValue | DeathSaveValue | ItemValue | ItemListValue,
    Field(discriminator="kind"),
]
