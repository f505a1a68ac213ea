"""Token definitions shared by all lexer implementations.

A lexer produces a stream of Token objects that the parser consumes.
Each Token has an integer type, a string value and a source position.

Token types are "pseudo-runes": negative values name symbolic categories
(identifiers, integers, ...), non-negative values are single-character
tokens whose type is the character's code point.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from lexkit.location import Position

# End of input. Every lexer returns this type once its source is exhausted.
EOF: Final[int] = -1


@dataclass(frozen=True, slots=True)
class Token:
    """A token returned by a Lexer.

    Attributes:
        type: Token type; negative for symbolic categories, otherwise the
            code point of a single-character token
        value: Token text, after literal normalization
        pos: Where the token starts in its source

    """

    type: int
    value: str
    pos: Position = Position()

    @property
    def is_eof(self) -> bool:
        """True if this token marks the end of input."""
        return self.type == EOF

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        name = getattr(self.type, "name", None)
        if name is None:
            if 0 <= self.type <= 0x10FFFF:
                name = repr(chr(self.type))
            else:
                name = str(self.type)
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({name}, {val!r}, {self.pos})"


def rune_token(ch: str) -> Token:
    """Build a single-character token whose type is the character's code point.

    Raises:
        ValueError: If ch is not exactly one character.
    """
    if len(ch) != 1:
        raise ValueError(f"rune_token expects a single character, got {ch!r}")
    return Token(type=ord(ch), value=ch)


# Sentinel for callers composing token streams by hand.
EOF_TOKEN: Final[Token] = Token(type=EOF, value="<<EOF>>")
