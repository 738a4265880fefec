"""Source location tracking for IR nodes.

Records the file, line, and column where a section or field was declared,
enabling source-mapped messages in tools that consume a parsed sheet.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SourceLocation(BaseModel):
    """Source position where a DNDML construct was declared.

    Attributes:
        file: Source name of the sheet
        line: 1-indexed line number
        column: 1-indexed column number
    """

    file: str
    line: int
    column: int

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
