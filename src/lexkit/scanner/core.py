"""Character scanner that classifies source text into raw tokens.

The scanner is the primitive underneath TextScannerLexer. It reads its
source lazily in chunks, skips whitespace and (optionally) comments, and
returns one category or character code per scan() call. Quoted literals are
returned verbatim, quotes and escapes included; unescaping is the lexer's job.

Malformed input is reported through the `error` callback and scanning
continues. Without a callback, errors are logged as warnings.

Thread Safety:
Scanner instances are single-use and not thread-safe. Create one per source.

"""

from __future__ import annotations

import codecs
from collections.abc import Callable
from typing import TYPE_CHECKING

from lexkit.location import Position
from lexkit.scanner.literals import LiteralScannerMixin
from lexkit.scanner.modes import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_WHITESPACE,
    Category,
    ScanErrorKind,
    ScanMode,
)
from lexkit.scanner.numbers import NumberScannerMixin, is_decimal
from lexkit.utils.logger import get_logger

if TYPE_CHECKING:
    from lexkit.definition import Readable

logger = get_logger(__name__)

ErrorCallback = Callable[["Scanner", ScanErrorKind, str], None]

_REPLACEMENT = "\ufffd"


def _utf8_len(ch: str) -> int:
    cp = ord(ch)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


def is_ident_char(ch: str, index: int) -> bool:
    """True if ch may appear at position index of an identifier."""
    return ch == "_" or ch.isalpha() or (index > 0 and ch.isdecimal())


class Scanner(NumberScannerMixin, LiteralScannerMixin):
    """Scanner over a readable text or byte stream.

    Usage:
            >>> import io
            >>> s = Scanner(io.StringIO("x = 42"))
            >>> s.scan(), s.token_text()
            (<Category.IDENT: -2>, 'x')
            >>> s.scan(), s.token_text()
            (61, '=')
            >>> s.scan(), s.token_text()
            (<Category.INT: -3>, '42')
            >>> s.scan()
            <Category.EOF: -1>

    Attributes:
        mode: Categories to recognize
        whitespace: Characters skipped between tokens
        filename: Name recorded in positions
        error: Callback invoked with (scanner, kind, message) on malformed input
        error_count: Number of errors reported so far
        position: Start of the most recently scanned token

    """

    __slots__ = (
        "mode",
        "whitespace",
        "filename",
        "error",
        "error_count",
        "position",
        "_src",
        "_chunk_size",
        "_decoder",
        "_pending",  # Undecoded bytes left over after an invalid sequence
        "_exhausted",
        "_buf",
        "_buf_pos",
        "_invalid_at",  # Buffer index of a U+FFFD standing in for bad bytes
        "_invalid_size",  # Number of bad bytes behind that U+FFFD
        "_bad_char",
        "_ch",  # Current (next unconsumed) character, "" at EOF, None before the first read
        "_ch_size",  # Encoded size of _ch in bytes
        "_offset",
        "_line",
        "_column",
        "_tok",  # Characters of the token being scanned, None when not collecting
        "_text",
    )

    def __init__(
        self,
        source: Readable,
        *,
        mode: ScanMode = ScanMode.GO_TOKENS,
        whitespace: frozenset[str] = DEFAULT_WHITESPACE,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        filename: str = "",
    ) -> None:
        """Initialize scanner. Nothing is read until the first scan().

        Args:
            source: Stream with a read(size) method returning str or bytes
            mode: Categories to recognize
            whitespace: Characters skipped between tokens
            chunk_size: Number of characters or bytes to read at a time
            filename: Name recorded in positions
        """
        self.mode = mode
        self.whitespace = whitespace
        self.filename = filename
        self.error: ErrorCallback | None = None
        self.error_count = 0
        self.position = Position(filename=filename)

        self._src = source
        self._chunk_size = chunk_size
        self._decoder = codecs.getincrementaldecoder("utf-8")()
        self._pending = b""
        self._exhausted = False
        self._buf = ""
        self._buf_pos = 0
        self._invalid_at = -1
        self._invalid_size = 1
        self._bad_char = False

        self._ch: str | None = None
        self._ch_size = 0
        self._offset = 0
        self._line = 1
        self._column = 1
        self._tok: list[str] | None = None
        self._text = ""

    # =========================================================================
    # Source reading
    # =========================================================================

    def _fill(self) -> bool:
        """Refill the character buffer from the source.

        Returns:
            False once the source is exhausted.
        """
        self._buf = ""
        self._buf_pos = 0
        self._invalid_at = -1
        while True:
            if self._pending:
                chunk, self._pending = self._pending, b""
            elif self._exhausted:
                return False
            else:
                chunk = self._src.read(self._chunk_size)

            if isinstance(chunk, str):
                if not chunk:
                    self._exhausted = True
                    return False
                self._buf = chunk
                return True

            final = not chunk
            try:
                self._buf = self._decoder.decode(chunk, final)
            except UnicodeDecodeError as exc:
                # Keep the valid prefix, stand in for the bad bytes and
                # decode the remainder on the next fill.
                self._decoder.reset()
                self._buf = bytes(exc.object[: exc.start]).decode("utf-8") + _REPLACEMENT
                self._invalid_at = len(self._buf) - 1
                self._invalid_size = exc.end - exc.start
                self._pending = bytes(exc.object[exc.end :])
                return True
            if final:
                self._exhausted = True
            if self._buf:
                return True
            if final:
                return False

    def _read_char(self) -> str:
        if self._buf_pos >= len(self._buf) and not self._fill():
            self._ch_size = 0
            return ""
        index = self._buf_pos
        self._buf_pos += 1
        ch = self._buf[index]
        if index == self._invalid_at:
            self._bad_char = True
            self._ch_size = self._invalid_size
        else:
            self._ch_size = _utf8_len(ch)
        return ch

    def _next(self) -> str:
        """Consume the current character and return the one after it."""
        ch = self._ch
        if ch:
            if self._tok is not None:
                self._tok.append(ch)
            self._offset += self._ch_size
            if ch == "\n":
                self._line += 1
                self._column = 1
            else:
                self._column += 1
        self._ch = self._read_char()
        if self._bad_char:
            self._bad_char = False
            self._error(ScanErrorKind.INVALID_ENCODING, "invalid UTF-8 encoding")
        return self._ch

    def _error(self, kind: ScanErrorKind, message: str) -> None:
        self.error_count += 1
        if self.error is not None:
            self.error(self, kind, message)
            return
        logger.warning("%s: %s", self.pos(), message)

    # =========================================================================
    # Public API
    # =========================================================================

    def pos(self) -> Position:
        """Position of the character immediately after the last token or error."""
        return Position(
            filename=self.filename,
            offset=self._offset,
            line=self._line,
            column=self._column,
        )

    def token_text(self) -> str:
        """Raw source text of the most recently scanned token."""
        return self._text

    def scan(self) -> int:
        """Scan the next token.

        Returns:
            A Category for symbolic tokens, otherwise the code point of the
            single character read. Category.EOF is returned repeatedly once
            the source is exhausted.
        """
        ch = self._ch if self._ch is not None else self._next()
        mode = self.mode

        while True:
            self._tok = None
            while ch in self.whitespace:
                ch = self._next()

            self._tok = []
            self.position = self.pos()

            tok: int = ord(ch) if ch else Category.EOF
            if not ch:
                pass
            elif is_ident_char(ch, 0):
                if mode & ScanMode.IDENTS:
                    tok = Category.IDENT
                    ch = self._scan_identifier()
                else:
                    ch = self._next()
            elif is_decimal(ch):
                if mode & (ScanMode.INTS | ScanMode.FLOATS):
                    tok, ch = self._scan_number(ch, False)
                else:
                    ch = self._next()
            elif ch == '"':
                if mode & ScanMode.STRINGS:
                    self._scan_string('"')
                    tok = Category.STRING
                ch = self._next()
            elif ch == "'":
                if mode & ScanMode.CHARS:
                    self._scan_char()
                    tok = Category.CHAR
                ch = self._next()
            elif ch == ".":
                ch = self._next()
                if is_decimal(ch) and mode & ScanMode.FLOATS:
                    tok, ch = self._scan_number(ch, True)
            elif ch == "/":
                ch = self._next()
                if ch in ("/", "*") and mode & ScanMode.COMMENTS:
                    if mode & ScanMode.SKIP_COMMENTS:
                        self._tok = None
                        ch = self._scan_comment(ch)
                        continue
                    ch = self._scan_comment(ch)
                    tok = Category.COMMENT
            elif ch == "`":
                if mode & ScanMode.RAW_STRINGS:
                    self._scan_raw_string()
                    tok = Category.RAW_STRING
                ch = self._next()
            else:
                ch = self._next()
            break

        self._text = "".join(self._tok) if self._tok is not None else ""
        self._tok = None
        return tok

    def _scan_identifier(self) -> str:
        ch = self._next()  # first character already validated
        index = 1
        while is_ident_char(ch, index):
            ch = self._next()
            index += 1
        return ch
