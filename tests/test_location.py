"""Tests for Position rendering and immutability."""

import dataclasses

import pytest

from lexkit.location import UNNAMED_SOURCE, Position


class TestPositionString:
    """Position renders as filename:line:column."""

    def test_named_source(self) -> None:
        assert str(Position("grammar.txt", 10, 2, 4)) == "grammar.txt:2:4"

    def test_unnamed_source_uses_placeholder(self) -> None:
        pos = Position(offset=0, line=1, column=1)
        assert str(pos) == "<source>:1:1"
        assert UNNAMED_SOURCE == "<source>"

    def test_default_position_renders(self) -> None:
        """Rendering never fails, even for a zero position."""
        assert str(Position()) == "<source>:0:0"


class TestPositionValue:
    """Position is an immutable value."""

    def test_immutability(self) -> None:
        pos = Position("a", 0, 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            pos.line = 2  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        a = Position("f", 3, 1, 4)
        b = Position("f", 3, 1, 4)
        assert a == b
        assert hash(a) == hash(b)
        assert a != dataclasses.replace(b, filename="g")

    def test_is_valid(self) -> None:
        assert Position(line=1, column=1).is_valid
        assert not Position().is_valid
