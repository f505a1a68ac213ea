"""The default lexer definition.

DEFAULT_DEFINITION builds TextScannerLexer instances and publishes the
scanner's categories under the names grammars use for them.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from lexkit.definition import Definition, Readable
from lexkit.lexer.core import TextScannerLexer
from lexkit.scanner.modes import Category

# Must name every category the scanner can return.
_SYMBOLS: Final[Mapping[str, int]] = MappingProxyType(
    {
        "EOF": Category.EOF,
        "Char": Category.CHAR,
        "Ident": Category.IDENT,
        "Int": Category.INT,
        "Float": Category.FLOAT,
        "String": Category.STRING,
        "RawString": Category.RAW_STRING,
        "Comment": Category.COMMENT,
    }
)


class DefaultDefinition:
    """Definition for the scanner-based lexer.

    Holds no state, so one instance is shared by every caller.
    """

    __slots__ = ()

    def lex(self, source: Readable) -> TextScannerLexer:
        return TextScannerLexer(source)

    def symbols(self) -> Mapping[str, int]:
        return _SYMBOLS

    def __repr__(self) -> str:
        return "DefaultDefinition()"


DEFAULT_DEFINITION: Final[Definition] = DefaultDefinition()
