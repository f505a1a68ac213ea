"""Character scanning primitive for the default lexer.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner and the mode types
├── core.py              # Scanner class (source reading, positions, dispatch)
├── modes.py             # Category, ScanMode, ScanErrorKind, defaults
├── numbers.py           # Numeric literal mixin
└── literals.py          # String, char, raw string and comment mixin

Usage:
    >>> import io
    >>> from lexkit.scanner import Category, Scanner
    >>> s = Scanner(io.StringIO("a // note"))
    >>> s.scan() == Category.IDENT, s.scan() == Category.EOF
    (True, True)

"""

from lexkit.scanner.core import ErrorCallback, Scanner
from lexkit.scanner.modes import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_WHITESPACE,
    Category,
    ScanErrorKind,
    ScanMode,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_WHITESPACE",
    "Category",
    "ErrorCallback",
    "ScanErrorKind",
    "ScanMode",
    "Scanner",
]
