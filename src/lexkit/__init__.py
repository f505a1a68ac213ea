"""
lexkit: pluggable tokenizer contract for parsing toolkits

Converts a stream of characters into positioned tokens that a parser
consumes one at a time, with one token of lookahead. Parsers depend only on
the Definition and Lexer protocols, so any lexer implementing them can
replace the default scanner-based one.

Quick Start:
    >>> from lexkit import consume_all, lex_string
    >>> [t.value for t in consume_all(lex_string('let x = "a\\\\tb"'))]
    ['let', 'x', '=', 'a\\tb', '']

    >>> # Resolve grammar token names through a definition
    >>> from lexkit import DEFAULT_DEFINITION
    >>> DEFAULT_DEFINITION.symbols()["Ident"]
    <Category.IDENT: -2>

Errors:
    >>> from lexkit import LexError
    >>> try:
    ...     consume_all(lex_string('"open', filename="demo.txt"))
    ... except LexError as err:
    ...     print(err)
    demo.txt:1:6: literal not terminated
"""

from lexkit.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from lexkit.default import DEFAULT_DEFINITION, DefaultDefinition
from lexkit.definition import (
    Definition,
    Lexer,
    Readable,
    consume_all,
    name_of_reader,
    symbols_by_type,
)
from lexkit.errors import LexError, LexkitError
from lexkit.lexer import TextScannerLexer, lex, lex_bytes, lex_string, unquote
from lexkit.location import Position
from lexkit.scanner import Category, ScanErrorKind, Scanner, ScanMode
from lexkit.tokens import EOF, EOF_TOKEN, Token, rune_token

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DEFINITION",
    "EOF",
    "EOF_TOKEN",
    "Category",
    "DefaultDefinition",
    "Definition",
    "LexError",
    "Lexer",
    "LexerConfig",
    "LexkitError",
    "Position",
    "Readable",
    "ScanErrorKind",
    "ScanMode",
    "Scanner",
    "TextScannerLexer",
    "Token",
    "__version__",
    "consume_all",
    "get_lexer_config",
    "lex",
    "lex_bytes",
    "lex_string",
    "lexer_config_context",
    "name_of_reader",
    "reset_lexer_config",
    "rune_token",
    "set_lexer_config",
    "symbols_by_type",
    "unquote",
]
