"""
DNDML Intermediate Representation (IR) types.

The IR is the parser's output: a CharSheet of sections and typed fields.
All types are re-exported from this package.
"""

from .location import SourceLocation
from .sheet import CharSheet, FieldSpec, SectionSpec
from .values import (
    DeathSaveValue,
    DiceValue,
    FieldValue,
    IntValue,
    ItemListValue,
    ItemValue,
    StatValue,
    StringValue,
    ValueKind,
)

__all__ = [
    "SourceLocation",
    # Sheet structure
    "CharSheet",
    "SectionSpec",
    "FieldSpec",
    # Values
    "ValueKind",
    "FieldValue",
    "StatValue",
    "StringValue",
    "IntValue",
    "DiceValue",
    "DeathSaveValue",
    "ItemValue",
    "ItemListValue",
]
