"""
Character sheet IR types.

A CharSheet is the output of parsing one DNDML source: an ordered list of
sections, each an ordered list of typed fields. Order is document order.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .location import SourceLocation
from .values import FieldValue


class FieldSpec(BaseModel):
    """
    A named, typed field inside a section.

    DSL: ``@field hp: %int[10];``

    Attributes:
        identifier: Field name
        value: Parsed value (one of the seven value kinds)
        location: Where the field was declared
    """

    identifier: str
    value: FieldValue
    location: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("identifier")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        if not v:
            raise ValueError("Field identifier must not be empty")
        return v


class SectionSpec(BaseModel):
    """
    A named block of fields.

    DSL::

        @section Abilities:
          @field str: %stat[ability: 16; mod: 3];
        @end-section

    Attributes:
        identifier: Section name
        fields: Fields in document order
        location: Where the section was declared
    """

    identifier: str
    fields: list[FieldSpec] = Field(default_factory=list)
    location: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("identifier")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        if not v:
            raise ValueError("Section identifier must not be empty")
        return v

    def get_field(self, identifier: str) -> FieldSpec | None:
        """Get the first field with this identifier, in document order."""
        for field in self.fields:
            if field.identifier == identifier:
                return field
        return None


class CharSheet(BaseModel):
    """
    A parsed character sheet.

    Attributes:
        source_name: Name of the source the sheet was parsed from
        sections: Sections in document order
        source_text: The source text all parsed spans refer to (not dumped)
    """

    source_name: str
    sections: list[SectionSpec] = Field(default_factory=list)
    source_text: str = Field(default="", exclude=True, repr=False)

    model_config = ConfigDict(frozen=True)

    def get_section(self, identifier: str) -> SectionSpec | None:
        """Get the first section with this identifier, in document order."""
        for section in self.sections:
            if section.identifier == identifier:
                return section
        return None

    @property
    def field_count(self) -> int:
        """Total number of fields across all sections."""
        return sum(len(section.fields) for section in self.sections)
