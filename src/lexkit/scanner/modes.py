"""Scanner token categories, mode flags and error kinds."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, auto
from typing import Final


class Category(IntEnum):
    """Symbolic token categories returned by Scanner.scan().

    Values are negative so they never collide with the code point of a
    single-character token.
    """

    EOF = -1
    IDENT = -2
    INT = -3
    FLOAT = -4
    CHAR = -5
    STRING = -6
    RAW_STRING = -7
    COMMENT = -8


class ScanMode(IntFlag):
    """Which categories the scanner recognizes.

    A character that starts a disabled category is returned as a plain
    single-character token instead.
    """

    IDENTS = 1 << 0
    INTS = 1 << 1
    FLOATS = 1 << 2  # Also accepts integers
    CHARS = 1 << 3
    STRINGS = 1 << 4
    RAW_STRINGS = 1 << 5
    COMMENTS = 1 << 6
    SKIP_COMMENTS = 1 << 7  # Comments are treated as whitespace

    GO_TOKENS = IDENTS | FLOATS | CHARS | STRINGS | RAW_STRINGS | COMMENTS | SKIP_COMMENTS


class ScanErrorKind(Enum):
    """Classification of malformed input reported to the error callback."""

    LITERAL_NOT_TERMINATED = auto()
    ILLEGAL_CHAR_LITERAL = auto()  # Char literal without exactly one character
    INVALID_ESCAPE = auto()
    COMMENT_NOT_TERMINATED = auto()
    INVALID_NUMBER = auto()
    INVALID_ENCODING = auto()


DEFAULT_WHITESPACE: Final[frozenset[str]] = frozenset({"\t", "\n", "\r", " "})

DEFAULT_CHUNK_SIZE: Final[int] = 4096
