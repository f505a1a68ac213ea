"""Tests for literal normalization.

String and char literals are unescaped, single-quoted literals with more
than one code point become strings, raw strings lose their delimiters, and
everything else keeps its source text.
"""

import pytest

from lexkit import LexError, Position, consume_all, lex_string
from lexkit.scanner import Category


def first_token(source: str):
    return lex_string(source).next()


class TestDoubleQuotedStrings:
    """Double-quoted literals are unescaped."""

    def test_newline_escape(self) -> None:
        token = first_token(r'"a\nb"')
        assert token.type == Category.STRING
        assert token.value == "a\nb"
        assert len(token.value) == 3

    def test_escaped_quotes(self) -> None:
        assert first_token(r'"say \"hi\""').value == 'say "hi"'

    def test_plain_unicode(self) -> None:
        assert first_token('"héllo wörld"').value == "héllo wörld"

    def test_unicode_escapes(self) -> None:
        assert first_token(r'"\u00e9\U0001F600"').value == "é\U0001f600"

    def test_byte_escapes_form_utf8(self) -> None:
        assert first_token(r'"\xc3\xa9"').value == "é"

    def test_octal_escape(self) -> None:
        assert first_token(r'"\101"').value == "A"

    def test_empty_string(self) -> None:
        token = first_token('""')
        assert token.type == Category.STRING
        assert token.value == ""

    def test_position_is_opening_quote(self) -> None:
        tokens = consume_all(lex_string('x "y"'))
        assert tokens[1].pos == Position("", 2, 1, 3)


class TestSingleQuotedLiterals:
    """Single-quoted literals are chars when they hold one code point."""

    def test_single_character(self) -> None:
        token = first_token("'x'")
        assert token.type == Category.CHAR
        assert token.value == "x"

    def test_multiple_characters_become_string(self) -> None:
        token = first_token("'xy'")
        assert token.type == Category.STRING
        assert token.value == "xy"

    def test_non_ascii_character(self) -> None:
        token = first_token("'é'")
        assert token.type == Category.CHAR
        assert token.value == "é"

    def test_escaped_character(self) -> None:
        token = first_token(r"'\n'")
        assert token.type == Category.CHAR
        assert token.value == "\n"

    def test_escape_sequence_counts_as_one_character(self) -> None:
        token = first_token(r"'\u00e9'")
        assert token.type == Category.CHAR
        assert token.value == "é"

    def test_empty_literal(self) -> None:
        token = first_token("''")
        assert token.type == Category.CHAR
        assert token.value == ""

    def test_multi_character_with_escape(self) -> None:
        token = first_token(r"'a\tb'")
        assert token.type == Category.STRING
        assert token.value == "a\tb"

    def test_following_tokens_unaffected(self) -> None:
        tokens = consume_all(lex_string("'ab' c"))
        assert [(t.type, t.value) for t in tokens] == [
            (Category.STRING, "ab"),
            (Category.IDENT, "c"),
            (Category.EOF, ""),
        ]

    def test_embedded_double_quote_is_rejected(self) -> None:
        with pytest.raises(LexError) as exc_info:
            first_token("'a\"b'")
        assert exc_info.value.position == Position("", 0, 1, 1)

    def test_escaped_single_quote_is_rejected(self) -> None:
        """Escapes follow double-quote rules once the literal is rewritten."""
        with pytest.raises(LexError) as exc_info:
            first_token(r"'it\'s'")
        assert exc_info.value.position == Position("", 0, 1, 1)


class TestRawStrings:
    """Raw strings keep their content verbatim."""

    def test_no_escape_processing(self) -> None:
        token = first_token(r"`a\nb`")
        assert token.type == Category.RAW_STRING
        assert token.value == "a\\nb"
        assert len(token.value) == 4

    def test_spans_lines(self) -> None:
        tokens = consume_all(lex_string("`line1\nline2` next"))
        assert tokens[0].value == "line1\nline2"
        assert tokens[1].value == "next"
        assert tokens[1].pos.line == 2

    def test_empty_raw_string(self) -> None:
        token = first_token("``")
        assert token.type == Category.RAW_STRING
        assert token.value == ""

    def test_quotes_inside_are_literal(self) -> None:
        assert first_token("`'\"`").value == "'\""


class TestUnescapeFailures:
    """Literals the scanner accepts but that cannot be unescaped."""

    def test_surrogate_escape(self) -> None:
        with pytest.raises(LexError, match="not a valid code point") as exc_info:
            consume_all(lex_string('a "\\uD800"', filename="s.txt"))
        assert exc_info.value.position == Position("s.txt", 2, 1, 3)

    def test_invalid_utf8_bytes(self) -> None:
        with pytest.raises(LexError, match="not valid UTF-8"):
            first_token(r'"\xff"')

    def test_lone_surrogate_without_escapes(self) -> None:
        with pytest.raises(LexError, match="not valid UTF-8") as exc_info:
            first_token('"\ud800"')
        assert exc_info.value.position == Position("", 0, 1, 1)

    def test_lone_surrogate_in_char_literal(self) -> None:
        with pytest.raises(LexError, match="not valid UTF-8"):
            first_token("'\ud800'")

    def test_surrogate_rejected_with_or_without_escapes(self) -> None:
        for source in ('"\ud800"', '"\ud800\\n"'):
            with pytest.raises(LexError, match="not valid UTF-8"):
                first_token(source)

    def test_octal_out_of_range(self) -> None:
        with pytest.raises(LexError, match="> 255"):
            first_token(r'"\400"')
