"""Tests for numeric literal scanning."""

import io

import pytest

from lexkit.scanner import Category, Scanner, ScanErrorKind
from lexkit.scanner.numbers import invalid_separator


def scan_number(source: str) -> tuple[int, str, list[str]]:
    """Scan source as one token; return its category, text and error messages."""
    errors: list[str] = []
    scanner = Scanner(io.StringIO(source))

    def record(s: Scanner, kind: ScanErrorKind, message: str) -> None:
        assert kind is ScanErrorKind.INVALID_NUMBER
        errors.append(message)

    scanner.error = record
    tok = scanner.scan()
    text = scanner.token_text()
    assert scanner.scan() == Category.EOF
    return tok, text, errors


class TestValidNumbers:
    """Well-formed literals scan as one token without errors."""

    @pytest.mark.parametrize(
        "source,category",
        [
            ("42", Category.INT),
            ("0", Category.INT),
            ("0x1F", Category.INT),
            ("0XaB", Category.INT),
            ("0o17", Category.INT),
            ("017", Category.INT),
            ("0b101", Category.INT),
            ("1_000", Category.INT),
            ("0x_1", Category.INT),
            ("3.14", Category.FLOAT),
            (".5", Category.FLOAT),
            ("1.", Category.FLOAT),
            ("1e10", Category.FLOAT),
            ("1E-3", Category.FLOAT),
            ("2.5e+7", Category.FLOAT),
            ("0x1p-2", Category.FLOAT),
            ("0x1.8p1", Category.FLOAT),
            ("09.5", Category.FLOAT),
            ("1_0.2_5", Category.FLOAT),
        ],
    )
    def test_valid(self, source: str, category: Category) -> None:
        assert scan_number(source) == (category, source, [])


class TestInvalidNumbers:
    """Malformed literals are still one token, with one error."""

    @pytest.mark.parametrize(
        "source,message",
        [
            ("0x", "hexadecimal literal has no digits"),
            ("0b", "binary literal has no digits"),
            ("0o", "octal literal has no digits"),
            ("08", "invalid digit '8' in octal literal"),
            ("0b12", "invalid digit '2' in binary literal"),
            ("0o19", "invalid digit '9' in octal literal"),
            ("1e", "exponent has no digits"),
            ("1e+", "exponent has no digits"),
            ("0x1.8", "hexadecimal mantissa requires a 'p' exponent"),
            ("0b1.0", "invalid radix point in binary literal"),
            ("0o1.0", "invalid radix point in octal literal"),
            ("0o1e2", "'e' exponent requires decimal mantissa"),
            ("1p2", "'p' exponent requires hexadecimal mantissa"),
            ("1__0", "'_' must separate successive digits"),
            ("1_", "'_' must separate successive digits"),
        ],
    )
    def test_invalid(self, source: str, message: str) -> None:
        _, text, errors = scan_number(source)
        assert text == source
        assert errors == [message]


class TestInvalidSeparator:
    """Placement rules for '_' separators."""

    @pytest.mark.parametrize(
        "text,index",
        [
            ("1_000", -1),
            ("0x_1f", -1),
            ("0b_1", -1),
            ("1.5", -1),
            ("1__0", 2),
            ("_1", 0),
            ("1_", 1),
            ("1_.5", 1),
            ("0x1_", 3),
        ],
    )
    def test_invalid_separator(self, text: str, index: int) -> None:
        assert invalid_separator(text) == index
