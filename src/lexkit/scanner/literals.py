"""Quoted literal and comment scanner mixin."""

from lexkit.scanner.modes import ScanErrorKind

# Escapes valid after a backslash regardless of the enclosing quote.
_SIMPLE_ESCAPES = frozenset({"a", "b", "f", "n", "r", "t", "v", "\\"})

_OCTAL_DIGITS = frozenset("01234567")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class LiteralScannerMixin:
    """Mixin providing string, char, raw string and comment scanning.

    Every method is entered with the opening delimiter as the current
    character and returns the first character after the construct.

    """

    def _next(self) -> str:
        """Advance one character. Implemented by Scanner."""
        raise NotImplementedError

    def _error(self, kind: ScanErrorKind, message: str) -> None:
        """Report malformed input. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_string(self, quote: str) -> int:
        """Scan a quoted literal up to and including the closing quote.

        Returns:
            Number of characters (escapes count as one) between the quotes.
        """
        count = 0
        ch = self._next()  # read character after quote
        while ch != quote:
            if ch == "\n" or not ch:
                self._error(ScanErrorKind.LITERAL_NOT_TERMINATED, "literal not terminated")
                return count
            if ch == "\\":
                ch = self._scan_escape(quote)
            else:
                ch = self._next()
            count += 1
        return count

    def _scan_char(self) -> None:
        if self._scan_string("'") != 1:
            self._error(ScanErrorKind.ILLEGAL_CHAR_LITERAL, "illegal char literal")

    def _scan_raw_string(self) -> None:
        ch = self._next()  # read character after '`'
        while ch != "`":
            if not ch:
                self._error(ScanErrorKind.LITERAL_NOT_TERMINATED, "literal not terminated")
                return
            ch = self._next()

    def _scan_escape(self, quote: str) -> str:
        ch = self._next()  # read character after backslash
        if ch in _SIMPLE_ESCAPES or ch == quote:
            return self._next()
        if ch in _OCTAL_DIGITS:
            return self._scan_escape_digits(ch, _OCTAL_DIGITS, 3)
        if ch == "x":
            return self._scan_escape_digits(self._next(), _HEX_DIGITS, 2)
        if ch == "u":
            return self._scan_escape_digits(self._next(), _HEX_DIGITS, 4)
        if ch == "U":
            return self._scan_escape_digits(self._next(), _HEX_DIGITS, 8)
        self._error(ScanErrorKind.INVALID_ESCAPE, "invalid char escape")
        return ch

    def _scan_escape_digits(self, ch: str, digits: frozenset[str], count: int) -> str:
        while count > 0 and ch in digits:
            ch = self._next()
            count -= 1
        if count > 0:
            self._error(ScanErrorKind.INVALID_ESCAPE, "invalid char escape")
        return ch

    def _scan_comment(self, ch: str) -> str:
        """Scan a comment whose second character ('/' or '*') is ch."""
        if ch == "/":
            # line comment, the newline is not part of it
            ch = self._next()
            while ch != "\n" and ch:
                ch = self._next()
            return ch

        # block comment
        ch = self._next()  # read character after "/*"
        while True:
            if not ch:
                self._error(ScanErrorKind.COMMENT_NOT_TERMINATED, "comment not terminated")
                return ch
            prev = ch
            ch = self._next()
            if prev == "*" and ch == "/":
                return self._next()
