"""Numeric literal scanner mixin.

Accepts decimal, hexadecimal (0x), octal (0o or a leading 0) and binary (0b)
integers, decimal and hexadecimal floats, exponents and '_' digit
separators. The number is consumed greedily first and validated afterwards,
so a malformed literal is still returned as a single token.
"""

from lexkit.scanner.modes import Category, ScanErrorKind, ScanMode

_DIGIT = 1  # digsep bit: at least one digit seen
_SEPARATOR = 2  # digsep bit: at least one '_' seen


def is_decimal(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_hex(ch: str) -> bool:
    return is_decimal(ch) or "a" <= ch.lower() <= "f"


def _literal_name(prefix: str) -> str:
    if prefix == "x":
        return "hexadecimal literal"
    if prefix in ("o", "0"):
        return "octal literal"
    if prefix == "b":
        return "binary literal"
    return "decimal literal"


def invalid_separator(text: str) -> int:
    """Return the index of the first misplaced '_' in text, or -1.

    A '_' must sit between two digits, or between a base prefix and a digit.
    """
    x1 = " "  # prefix letter, only 'x' matters
    d = "."  # class of the previous character: '_', '0' (digit) or '.' (other)
    i = 0

    # a base prefix counts as a digit
    if len(text) >= 2 and text[0] == "0":
        x1 = text[1].lower()
        if x1 in ("x", "o", "b"):
            d = "0"
            i = 2

    while i < len(text):
        p = d
        d = text[i]
        if d == "_":
            if p != "0":
                return i
        elif is_decimal(d) or (x1 == "x" and is_hex(d)):
            d = "0"
        else:
            if p == "_":
                return i - 1
            d = "."
        i += 1
    if d == "_":
        return len(text) - 1
    return -1


class NumberScannerMixin:
    """Mixin providing numeric literal scanning."""

    mode: ScanMode
    _tok: list[str] | None

    def _next(self) -> str:
        """Advance one character. Implemented by Scanner."""
        raise NotImplementedError

    def _error(self, kind: ScanErrorKind, message: str) -> None:
        """Report malformed input. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_digits(self, ch: str, base: int, invalid: str) -> tuple[str, int, str]:
        """Consume digits and separators valid for base.

        Decimal digits beyond the base are still consumed; the first one is
        returned as invalid so the caller can reject integer literals.

        Returns:
            (next character, digsep bits, first invalid digit or "")
        """
        digsep = 0
        if base <= 10:
            limit = chr(ord("0") + base)
            while is_decimal(ch) or ch == "_":
                if ch == "_":
                    digsep |= _SEPARATOR
                else:
                    digsep |= _DIGIT
                    if ch >= limit and not invalid:
                        invalid = ch
                ch = self._next()
        else:
            while is_hex(ch) or ch == "_":
                digsep |= _SEPARATOR if ch == "_" else _DIGIT
                ch = self._next()
        return ch, digsep, invalid

    def _scan_number(self, ch: str, seen_dot: bool) -> tuple[int, str]:
        """Scan a number starting at ch.

        Args:
            ch: First character of the number (after the '.' if seen_dot)
            seen_dot: True if a leading '.' has already been consumed

        Returns:
            (Category.INT or Category.FLOAT, next character)
        """
        base = 10
        prefix = ""
        digsep = 0
        invalid = ""

        tok = Category.INT
        if not seen_dot:
            if ch == "0":
                ch = self._next()
                lower = ch.lower()
                if lower == "x":
                    ch = self._next()
                    base, prefix = 16, "x"
                elif lower == "o":
                    ch = self._next()
                    base, prefix = 8, "o"
                elif lower == "b":
                    ch = self._next()
                    base, prefix = 2, "b"
                else:
                    base, prefix = 8, "0"
                    digsep = _DIGIT  # the leading 0
            ch, ds, invalid = self._scan_digits(ch, base, invalid)
            digsep |= ds
            if ch == "." and self.mode & ScanMode.FLOATS:
                ch = self._next()
                seen_dot = True

        if seen_dot:
            tok = Category.FLOAT
            if prefix in ("o", "b"):
                self._error(
                    ScanErrorKind.INVALID_NUMBER,
                    f"invalid radix point in {_literal_name(prefix)}",
                )
            ch, ds, invalid = self._scan_digits(ch, base, invalid)
            digsep |= ds

        if not digsep & _DIGIT:
            self._error(ScanErrorKind.INVALID_NUMBER, f"{_literal_name(prefix)} has no digits")

        exp = ch.lower()
        if exp in ("e", "p") and self.mode & ScanMode.FLOATS:
            if exp == "e" and prefix not in ("", "0"):
                self._error(
                    ScanErrorKind.INVALID_NUMBER, "'e' exponent requires decimal mantissa"
                )
            elif exp == "p" and prefix != "x":
                self._error(
                    ScanErrorKind.INVALID_NUMBER, "'p' exponent requires hexadecimal mantissa"
                )
            ch = self._next()
            tok = Category.FLOAT
            if ch in ("+", "-"):
                ch = self._next()
            ch, ds, _ = self._scan_digits(ch, 10, "")
            digsep |= ds
            if not ds & _DIGIT:
                self._error(ScanErrorKind.INVALID_NUMBER, "exponent has no digits")
        elif prefix == "x" and tok == Category.FLOAT:
            self._error(
                ScanErrorKind.INVALID_NUMBER, "hexadecimal mantissa requires a 'p' exponent"
            )

        if tok == Category.INT and invalid:
            self._error(
                ScanErrorKind.INVALID_NUMBER,
                f"invalid digit {invalid!r} in {_literal_name(prefix)}",
            )

        if digsep & _SEPARATOR and self._tok is not None:
            if invalid_separator("".join(self._tok)) >= 0:
                self._error(ScanErrorKind.INVALID_NUMBER, "'_' must separate successive digits")

        return tok, ch
