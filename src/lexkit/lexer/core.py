"""Lexer built on the lexkit scanner.

Adds what the scanner does not provide: one token of lookahead, source
names in positions, and literal normalization. String tokens carry their
unescaped value, raw strings lose their backticks, and single-quoted
literals are accepted as strings.

Token positions are token starts, read from the scanner after each scan.

Thread Safety:
Lexer instances are single-use and single-consumer. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import io
from dataclasses import replace

from lexkit.config import LexerConfig, get_lexer_config
from lexkit.definition import Readable, name_of_reader
from lexkit.errors import LexError
from lexkit.lexer.unquote import unquote
from lexkit.location import Position
from lexkit.scanner import Category, Scanner, ScanErrorKind
from lexkit.tokens import Token
from lexkit.utils.logger import get_logger

logger = get_logger(__name__)


class TextScannerLexer:
    """Lexer over a text or byte stream.

    Usage:
            >>> lexer = lex_string("name = 'hi'")
            >>> lexer.peek()
            Token(IDENT, 'name', <source>:1:1)
            >>> lexer.next().value, lexer.next().value
            ('name', '=')

    Raises:
        LexError: From peek() and next(), on malformed input.

    """

    __slots__ = ("_scanner", "_peek", "_filename")

    def __init__(
        self,
        source: Readable,
        *,
        filename: str | None = None,
        config: LexerConfig | None = None,
    ) -> None:
        """Initialize lexer. The source is read lazily and never closed.

        Args:
            source: Stream with a read(size) method returning str or bytes
            filename: Name for positions; defaults to the stream's name
            config: Scanner settings; defaults to the active LexerConfig
        """
        self._filename = filename if filename is not None else name_of_reader(source)
        cfg = config if config is not None else get_lexer_config()
        self._scanner = Scanner(
            source,
            mode=cfg.mode,
            whitespace=cfg.whitespace,
            chunk_size=cfg.chunk_size,
            filename=self._filename,
        )
        self._scanner.error = self._on_scan_error
        self._peek: Token | None = None

    @property
    def filename(self) -> str:
        return self._filename

    def _on_scan_error(self, scanner: Scanner, kind: ScanErrorKind, message: str) -> None:
        # Single-quoted strings: the scanner only allows one character
        # between single quotes, normalization handles the rest.
        if kind is ScanErrorKind.ILLEGAL_CHAR_LITERAL:
            logger.debug("%s: accepting multi-character quoted literal", scanner.pos())
            return
        raise LexError(replace(scanner.pos(), filename=self._filename), message)

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        if self._peek is not None:
            return self._peek
        token_type = self._scanner.scan()
        pos = replace(self._scanner.position, filename=self._filename)
        self._peek = self._normalize(token_type, self._scanner.token_text(), pos)
        return self._peek

    def next(self) -> Token:
        """Consume and return the next token."""
        token = self._peek if self._peek is not None else self.peek()
        self._peek = None
        return token

    def _normalize(self, token_type: int, text: str, pos: Position) -> Token:
        value = text
        if token_type == Category.CHAR or token_type == Category.STRING:
            if token_type == Category.CHAR:
                value = f'"{text[1:-1]}"'
            try:
                value = unquote(value)
            except ValueError as exc:
                raise LexError(pos, str(exc)) from exc
            if token_type == Category.CHAR and len(value) > 1:
                token_type = Category.STRING
        elif token_type == Category.RAW_STRING:
            value = text[1:-1]
        return Token(type=token_type, value=value, pos=pos)


def lex(source: Readable, *, filename: str | None = None) -> TextScannerLexer:
    """Lex a text or byte stream with the default lexer.

    String tokens are unquoted, unlike the scanner's raw output.
    """
    return TextScannerLexer(source, filename=filename)


def lex_bytes(data: bytes, *, filename: str | None = None) -> TextScannerLexer:
    """Lex UTF-8 encoded bytes."""
    return lex(io.BytesIO(data), filename=filename)


def lex_string(text: str, *, filename: str | None = None) -> TextScannerLexer:
    """Lex a string."""
    return lex(io.StringIO(text), filename=filename)
