"""Tests for core data structures."""

import pytest
from core import Pos


class TestManhattanDistance:
    def test_returns_zero_for_same_position(self) -> None:
        p = Pos(5, 5)
        assert p.manhattan_distance(p) == 0

    def test_calculates_horizontal_distance(self) -> None:
        p1 = Pos(0, 5)
        p2 = Pos(7, 5)
        assert p1.manhattan_distance(p2) == 7

    def test_calculates_vertical_distance(self) -> None:
        p1 = Pos(5, 0)
        p2 = Pos(5, 4)
        assert p1.manhattan_distance(p2) == 4

    def test_calculates_diagonal_distance(self) -> None:
        p1 = Pos(0, 0)
        p2 = Pos(3, 4)
        assert p1.manhattan_distance(p2) == 7

    def test_handles_negative_coordinates(self) -> None:
        assert Pos(2, 18).manhattan_distance(Pos(-2, 15)) == 7

    def test_is_symmetric(self) -> None:
        p1 = Pos(-3, 8)
        p2 = Pos(4, -1)
        assert p1.manhattan_distance(p2) == p2.manhattan_distance(p1)


class TestPos:
    def test_is_hashable_and_compares_by_value(self) -> None:
        assert {Pos(1, 2), Pos(1, 2)} == {Pos(1, 2)}

    def test_is_immutable(self) -> None:
        p = Pos(1, 2)
        with pytest.raises(AttributeError):
            p.x = 3  # type: ignore[misc]

    def test_str_shows_coordinates(self) -> None:
        assert str(Pos(14, -11)) == "(14, -11)"
