"""Exception classes for lexkit.

Lexers report malformed input by raising LexError from peek() or next().
There is no recovery mode: callers catch the error at the parse boundary
and start again with a fresh lexer.
"""

from __future__ import annotations

from lexkit.location import Position


class LexkitError(Exception):
    """Base exception for all lexkit errors."""

    pass


class LexError(LexkitError):
    """Error during lexing.

    Raised when the scanner rejects the input or a literal cannot be
    unescaped.
    """

    def __init__(self, position: Position, message: str) -> None:
        """Initialize lex error.

        Args:
            position: Where the error occurred
            message: Error description
        """
        self.position = position
        self.message = message
        super().__init__(f"{position}: {message}")
