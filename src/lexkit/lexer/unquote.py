"""Unescaping of double-quoted string literals.

Escape rules:
    \\a \\b \\f \\n \\r \\t \\v \\\\ \\"   single characters
    \\xHH                          one byte, two hex digits
    \\OOO                          one byte, three octal digits (max \\377)
    \\uXXXX, \\UXXXXXXXX            a Unicode code point (no surrogates)

Byte escapes are combined with the surrounding text and the result must be
valid UTF-8, so "\\xc3\\xa9" unescapes to "é" while "\\xff" is rejected.
"""

from __future__ import annotations

from typing import Final

_SIMPLE_ESCAPES: Final[dict[str, bytes]] = {
    "a": b"\a",
    "b": b"\b",
    "f": b"\f",
    "n": b"\n",
    "r": b"\r",
    "t": b"\t",
    "v": b"\v",
    "\\": b"\\",
    '"': b'"',
}

_HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")
_OCTAL_DIGITS: Final = frozenset("01234567")
_CODE_POINT_WIDTHS: Final[dict[str, int]] = {"u": 4, "U": 8}


def unquote(literal: str) -> str:
    """Return the value of a double-quoted string literal.

    Args:
        literal: Literal text including the enclosing double quotes

    Returns:
        The unescaped value.

    Raises:
        ValueError: If the literal is malformed. The message says why.

    Example:
        >>> unquote('"a\\\\tb"')
        'a\\tb'
    """
    if len(literal) < 2 or literal[0] != '"' or literal[-1] != '"':
        raise ValueError("string literal must be enclosed in double quotes")
    body = literal[1:-1]
    if "\n" in body:
        raise ValueError("newline in string literal")
    if '"' not in body and "\\" not in body:
        try:
            body.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError("string literal is not valid UTF-8") from exc
        return body

    out = bytearray()
    i = 0
    end = len(body)
    while i < end:
        ch = body[i]
        if ch == '"':
            raise ValueError("unescaped double quote in string literal")
        if ch != "\\":
            out += ch.encode("utf-8", "surrogatepass")
            i += 1
            continue

        if i + 1 >= end:
            raise ValueError("unterminated escape sequence")
        esc = body[i + 1]
        i += 2

        simple = _SIMPLE_ESCAPES.get(esc)
        if simple is not None:
            out += simple
        elif esc == "x":
            digits = body[i : i + 2]
            if len(digits) != 2 or not _HEX_DIGITS.issuperset(digits):
                raise ValueError(f"invalid escape sequence \\x{digits}")
            out.append(int(digits, 16))
            i += 2
        elif esc in _OCTAL_DIGITS:
            digits = body[i - 1 : i + 2]
            if len(digits) != 3 or not _OCTAL_DIGITS.issuperset(digits):
                raise ValueError(f"invalid escape sequence \\{digits}")
            value = int(digits, 8)
            if value > 0xFF:
                raise ValueError(f"octal escape value \\{digits} > 255")
            out.append(value)
            i += 2
        elif esc in _CODE_POINT_WIDTHS:
            width = _CODE_POINT_WIDTHS[esc]
            digits = body[i : i + width]
            if len(digits) != width or not _HEX_DIGITS.issuperset(digits):
                raise ValueError(f"invalid escape sequence \\{esc}{digits}")
            value = int(digits, 16)
            if 0xD800 <= value <= 0xDFFF or value > 0x10FFFF:
                raise ValueError(f"escape sequence \\{esc}{digits} is not a valid code point")
            out += chr(value).encode("utf-8")
            i += width
        else:
            raise ValueError(f"unknown escape sequence \\{esc}")

    try:
        return out.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError("string literal is not valid UTF-8") from exc
