"""
Tests for integer 2D vectors.
"""

import pytest

from blokus.vec2 import Vec2


class TestVec2:
    """Test vector arithmetic and transforms."""

    def test_arithmetic(self):
        assert Vec2(1, 2) + Vec2(3, 4) == Vec2(4, 6)
        assert Vec2(1, 2) - Vec2(3, 4) == Vec2(-2, -2)
        assert -Vec2(1, -2) == Vec2(-1, 2)

    def test_constructors(self):
        assert Vec2.both(3) == Vec2(3, 3)
        assert Vec2.zero() == Vec2(0, 0)

    def test_turns(self):
        v = Vec2(2, 1)
        assert v.turn_right() == Vec2(-1, 2)
        assert v.turn_left() == Vec2(1, -2)
        assert v.turn_right().turn_left() == v
        assert v.turn_right().turn_right() == -v

    def test_flip(self):
        assert Vec2(2, 1).flip() == Vec2(-2, 1)
        assert Vec2(2, 1).flip().flip() == Vec2(2, 1)

    def test_min_max(self):
        assert Vec2(1, 5).min(Vec2(3, 2)) == Vec2(1, 2)
        assert Vec2(1, 5).max(Vec2(3, 2)) == Vec2(3, 5)

    def test_area_is_row_major(self):
        assert list(Vec2(1, 1).area()) == [Vec2(0, 0), Vec2(1, 0), Vec2(0, 1), Vec2(1, 1)]
        assert len(list(Vec2(4, 2).area())) == 15

    def test_area_rejects_negative(self):
        with pytest.raises(ValueError):
            list(Vec2(-1, 2).area())

    def test_hashable_and_str(self):
        assert len({Vec2(1, 1), Vec2(1, 1), Vec2(0, 1)}) == 2
        assert str(Vec2(3, -4)) == "(3, -4)"
