"""Default lexer for lexkit.

Wraps the scanner with one token of lookahead and literal normalization.

Architecture:
lexer/
├── __init__.py          # Re-exports TextScannerLexer and constructors
├── core.py              # TextScannerLexer, lex, lex_bytes, lex_string
└── unquote.py           # Double-quoted literal unescaping

Usage:
    >>> from lexkit.lexer import lex_string
    >>> lexer = lex_string('greet "hi\\\\n"')
    >>> lexer.next().value
    'greet'
    >>> lexer.next().value
    'hi\\n'

"""

from lexkit.lexer.core import TextScannerLexer, lex, lex_bytes, lex_string
from lexkit.lexer.unquote import unquote

__all__ = ["TextScannerLexer", "lex", "lex_bytes", "lex_string", "unquote"]
