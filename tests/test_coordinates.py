"""Tests for space coordinates."""

import pytest

from starforge.models import SpaceCoordinates


class TestSpaceCoordinates:
    """Test coordinate arithmetic and transforms."""

    def test_elementwise_operators(self):
        """Test that operators apply axis by axis."""
        a = SpaceCoordinates(6, -4, 9)
        b = SpaceCoordinates(3, 2, 2)

        assert a + b == SpaceCoordinates(9, -2, 11)
        assert a - b == SpaceCoordinates(3, -6, 7)
        assert a * b == SpaceCoordinates(18, -8, 18)
        assert a / b == SpaceCoordinates(2, -2, 4)

    def test_division_truncates_toward_zero(self):
        """Test that negative quotients round toward zero, not down."""
        assert SpaceCoordinates(-7, 7, -1) / SpaceCoordinates(2, 2, 2) == SpaceCoordinates(-3, 3, 0)

    def test_division_by_zero_component(self):
        """Test that dividing by a zero component raises."""
        with pytest.raises(ZeroDivisionError):
            SpaceCoordinates(1, 1, 1) / SpaceCoordinates(1, 0, 1)

    def test_abs_and_rel_are_inverses(self):
        """Test that rel then abs gives back the original coordinates."""
        origin = SpaceCoordinates(-49, -2, 0)
        for coord in (SpaceCoordinates(0, 0, 0), SpaceCoordinates(-10, -2, 0), SpaceCoordinates(50, 2, 0)):
            assert coord.rel(origin).abs(origin) == coord
            assert coord.abs(origin).rel(origin) == coord

    def test_abs_counts_from_starting_point(self):
        """Test absolute coordinates of the galaxy's first parsec."""
        start = SpaceCoordinates(-49, -2, 0)
        assert start.abs(start) == SpaceCoordinates(0, 0, 0)

    def test_hashable_and_ordered(self):
        """Test that coordinates can key dicts and be sorted."""
        cache = {SpaceCoordinates(1, 2, 3): "hex"}
        assert cache[SpaceCoordinates(1, 2, 3)] == "hex"
        assert sorted([SpaceCoordinates(1, 0, 0), SpaceCoordinates(0, 5, 5)])[0] == SpaceCoordinates(0, 5, 5)

    def test_str(self):
        """Test the one-line summary."""
        assert str(SpaceCoordinates(1, 2, 3)) == "(x: 1, y: 2, z: 3)"
