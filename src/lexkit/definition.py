"""Protocols every lexer implementation satisfies.

A Definition builds lexers and publishes the symbol table that maps token
names used in grammars ("Ident", "String", ...) to the integer types its
lexers emit. A Lexer yields tokens one at a time with one token of
lookahead. Any pair of classes providing these methods plugs into a parser,
so the default scanner-based lexer and a grammar-driven one are
interchangeable.

Errors are raised, not returned: peek() and next() raise LexError on
malformed input.

Thread Safety:
    Protocols are purely structural. Definitions are expected to be
    stateless; lexers are single-consumer.
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from lexkit.tokens import Token


@runtime_checkable
class Readable(Protocol):
    """A text or byte stream."""

    def read(self, size: int = -1, /) -> str | bytes: ...


@runtime_checkable
class Lexer(Protocol):
    """Returns tokens from a source."""

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        ...

    def next(self) -> Token:
        """Consume and return the next token."""
        ...


@runtime_checkable
class Definition(Protocol):
    """Provides the parser with metadata for a lexer."""

    def lex(self, source: Readable) -> Lexer:
        """Create a lexer over source."""
        ...

    def symbols(self) -> Mapping[str, int]:
        """Map symbolic token names to the types this definition's lexers emit.

        For example "EOF" might map to -1 and "Ident" to -2.
        """
        ...


def consume_all(lexer: Lexer) -> list[Token]:
    """Drain a lexer.

    Returns:
        Every remaining token, ending with the EOF token.

    Raises:
        LexError: If the source is malformed.
    """
    tokens: list[Token] = []
    while True:
        token = lexer.next()
        tokens.append(token)
        if token.is_eof:
            return tokens


def name_of_reader(source: object) -> str:
    """Return the stream's name, or "" if it has none.

    File objects expose the path they were opened with as `name`; file
    descriptors and in-memory streams do not have a usable one.
    """
    name = getattr(source, "name", None)
    if isinstance(name, str):
        return name
    return ""


def symbols_by_type(definition: Definition) -> dict[int, str]:
    """Invert a definition's symbol table, mapping token types to their names."""
    return {value: name for name, value in definition.symbols().items()}
