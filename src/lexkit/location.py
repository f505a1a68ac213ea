"""Source positions for tokens and error messages.

Provides the Position dataclass shared by every lexer implementation.

Thread Safety:
Position is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

# Rendered in place of an empty filename.
UNNAMED_SOURCE = "<source>"


@dataclass(frozen=True, slots=True)
class Position:
    """Position of a token in its source.

    Attributes:
        filename: Display name of the source ("" when the source is unnamed)
        offset: UTF-8 byte offset from the start of the source (0-indexed)
        line: Line number (1-indexed, 0 when unknown)
        column: Character column within the line (1-indexed, 0 when unknown)

    Examples:
            >>> str(Position("grammar.txt", 10, 2, 4))
            'grammar.txt:2:4'
            >>> str(Position(offset=0, line=1, column=1))
            '<source>:1:1'

    """

    filename: str = ""
    offset: int = 0
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        filename = self.filename or UNNAMED_SOURCE
        return f"{filename}:{self.line}:{self.column}"

    @property
    def is_valid(self) -> bool:
        """True if the position refers to a real line."""
        return self.line > 0
