"""
Source buffer access for the DNDML lexer.

Tokens never copy text; they carry spans into a SourceReader, which also
maps offsets back to line/column positions for error messages.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lexer import Span, Token


class SourceReader:
    """
    Read-only view over a DNDML source text.

    Attributes:
        text: The complete source text
        name: Source name (usually a file path), used in errors
    """

    def __init__(self, text: str, name: str = "<string>"):
        self.text = text
        self.name = name
        self._line_starts: list[int] | None = None

    def __len__(self) -> int:
        return len(self.text)

    def char_at(self, offset: int) -> str | None:
        """Get the character at offset or None past the end."""
        if offset >= len(self.text):
            return None
        return self.text[offset]

    def startswith(self, prefix: str, offset: int) -> bool:
        """Check whether the text at offset starts with prefix."""
        return self.text.startswith(prefix, offset)

    def slice(self, span: "Span") -> str:
        """Return the text covered by a span."""
        return self.text[span.start : span.end]

    def text_of(self, token: "Token") -> str:
        """Return the raw source text of a token."""
        return self.slice(token.span)

    def location(self, offset: int) -> tuple[int, int]:
        """
        Map a character offset to a 1-indexed (line, column) pair.

        Offsets past the end map to the position just after the last character.
        """
        offset = max(0, min(offset, len(self.text)))
        starts = self._get_line_starts()
        index = bisect_right(starts, offset) - 1
        return index + 1, offset - starts[index] + 1

    def snippet(self, line: int, context: int = 2) -> str:
        """Return source lines around line (context lines either side)."""
        lines = self.text.split("\n")
        start = max(1, line - context)
        end = min(len(lines), line + context)
        return "\n".join(lines[start - 1 : end])

    def _get_line_starts(self) -> list[int]:
        if self._line_starts is None:
            starts = [0]
            for i, ch in enumerate(self.text):
                if ch == "\n":
                    starts.append(i + 1)
            self._line_starts = starts
        return self._line_starts
