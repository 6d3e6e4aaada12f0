"""Tests for the basic value types: vectors, points and intervals."""

import math

import pytest

from shapekit.config import override_settings
from shapekit.domain import Interval, Point, SortedInterval, Vector
from shapekit.exceptions import InvalidArgumentError, InvalidStateError


class TestVector:
    """Tests for Vector class."""

    def test_length(self) -> None:
        """Test length of a 3-4-5 vector."""
        assert Vector(3, 4).length == 5.0

    def test_from_points(self) -> None:
        """Test vector between two points."""
        v = Vector.from_points(Point(1, 1), Point(4, 5))
        assert v == Vector(3, 4)

    def test_arithmetic_operators(self) -> None:
        """Test operator forms match the named methods."""
        a = Vector(1, 2)
        b = Vector(3, -1)
        assert a + b == Vector(4, 1)
        assert a - b == Vector(-2, 3)
        assert a * 2 == Vector(2, 4)
        assert 2 * a == Vector(2, 4)
        assert a / 2 == Vector(0.5, 1)
        assert -a == Vector(-1, -2)

    def test_divide_by_zero(self) -> None:
        """Test dividing by zero is rejected."""
        with pytest.raises(InvalidArgumentError):
            Vector(1, 1).divide(0)

    def test_dot_and_cross(self) -> None:
        """Test dot and cross products."""
        assert Vector(1, 0).dot(Vector(0, 1)) == 0
        assert Vector(1, 0).cross(Vector(0, 1)) == 1
        assert Vector(0, 1).cross(Vector(1, 0)) == -1

    def test_unitize(self) -> None:
        """Test unitize keeps direction and sets length to one."""
        v = Vector(3, 4).unitize()
        assert v.equals(Vector(0.6, 0.8))
        assert v.is_unit()

    def test_unitize_zero_vector(self) -> None:
        """Test unitizing a zero vector fails."""
        with pytest.raises(InvalidStateError):
            Vector.zero().unitize()

    def test_with_length(self) -> None:
        """Test rescaling a vector."""
        assert Vector(0, 2).with_length(5).equals(Vector(0, 5))

    def test_angle_is_unsigned(self) -> None:
        """Test angle ignores turn direction."""
        assert math.isclose(Vector(1, 0).angle(Vector(0, 1)), math.pi / 2)
        assert math.isclose(Vector(1, 0).angle(Vector(0, -1)), math.pi / 2)

    def test_angle_signed(self) -> None:
        """Test signed angle is positive counter-clockwise."""
        assert math.isclose(Vector(1, 0).angle_signed(Vector(0, 1)), math.pi / 2)
        assert math.isclose(Vector(1, 0).angle_signed(Vector(0, -1)), -math.pi / 2)

    def test_angle_signed_opposite_is_pi(self) -> None:
        """Test opposite vectors report +pi, never -pi."""
        assert math.isclose(Vector(1, 0).angle_signed(Vector(-1, 0)), math.pi)

    def test_angle_signed_inverted_y(self) -> None:
        """Test the sign flips when the y-axis points down."""
        with override_settings(invert_y=True):
            assert math.isclose(Vector(1, 0).angle_signed(Vector(0, 1)), -math.pi / 2)

    def test_angle_with_zero_vector(self) -> None:
        """Test angles against a zero vector are undefined."""
        with pytest.raises(InvalidStateError):
            Vector(1, 0).angle(Vector.zero())

    def test_perpendicular(self) -> None:
        """Test perpendicular turns a quarter turn counter-clockwise."""
        assert Vector(1, 0).perpendicular() == Vector(-0.0, 1)
        with override_settings(invert_y=True):
            assert Vector(1, 0).perpendicular() == Vector(0, -1)

    def test_parallel_and_perpendicular(self) -> None:
        """Test direction comparisons within the angle tolerance."""
        assert Vector(1, 0).is_parallel_to(Vector(-2, 0))
        assert Vector(1, 0).is_parallel_to(Vector(1, 0.001))
        assert not Vector(1, 0).is_parallel_to(Vector(1, 1))
        assert Vector(1, 0).is_perpendicular_to(Vector(0, 3))

    def test_rotate(self) -> None:
        """Test rotating a vector a quarter turn."""
        assert Vector(1, 0).rotate(math.pi / 2).equals(Vector(0, 1))

    def test_translate_does_not_move_vector(self) -> None:
        """Test vectors ignore translation."""
        assert Vector(1, 2).translate(Vector(10, 10)) == Vector(1, 2)

    def test_str(self) -> None:
        """Test canonical string form."""
        assert str(Vector(1, -0.0)) == "⟨1,0⟩"
        assert str(Vector(0.5, 2)) == "⟨0.5,2⟩"


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_from_coords(self) -> None:
        """Test creation from a coordinate pair."""
        assert Point.from_coords([1, 2]) == Point(1.0, 2.0)

    def test_point_is_hashable(self) -> None:
        """Test points can be used in sets."""
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2

    def test_subtract_gives_vector(self) -> None:
        """Test point difference is a vector."""
        assert Point(4, 5) - Point(1, 1) == Vector(3, 4)

    def test_subtract_vector_gives_point(self) -> None:
        """Test subtracting a vector moves the point."""
        assert Point(4, 5) - Vector(1, 1) == Point(3, 4)

    def test_distance(self) -> None:
        """Test euclidean distance."""
        assert Point(0, 0).distance_to(Point(3, 4)) == 5.0

    def test_equals_with_tolerance(self) -> None:
        """Test tolerant equality."""
        assert Point(1, 1).equals(Point(1 + 1e-9, 1))
        assert not Point(1, 1).equals(Point(1.1, 1))
        assert Point(1, 1).equals(Point(1.1, 1), tolerance=0.2)

    def test_translate(self) -> None:
        """Test translation by a vector and by a distance."""
        assert Point(0, 0).translate(Vector(3, 4)).equals(Point(3, 4))
        assert Point(0, 0).translate(Vector(3, 4), 10).equals(Point(6, 8))

    def test_rotate_about_pivot(self) -> None:
        """Test rotation about a pivot point."""
        assert Point(2, 1).rotate(math.pi / 2, Point(1, 1)).equals(Point(1, 2))

    def test_str(self) -> None:
        """Test canonical string form."""
        assert str(Point(1.5, 2)) == "(1.5,2)"


class TestInterval:
    """Tests for Interval and SortedInterval."""

    def test_descending_interval_is_kept(self) -> None:
        """Test a plain interval keeps its direction."""
        interval = Interval(2, 0)
        assert interval.is_decreasing
        assert interval.length == -2
        assert interval.length_abs == 2
        assert interval.min == 0
        assert interval.max == 2

    def test_sorted_interval_sorts(self) -> None:
        """Test sorted intervals swap descending bounds."""
        interval = SortedInterval(5, 1)
        assert interval.t0 == 1
        assert interval.t1 == 5
        assert interval.width == 4

    def test_from_values(self) -> None:
        """Test interval spanning several values."""
        assert Interval.from_values([3, 1, 2]) == Interval(1, 3)

    def test_from_values_empty(self) -> None:
        """Test an empty value list is rejected."""
        with pytest.raises(InvalidArgumentError):
            Interval.from_values([])

    def test_contains(self) -> None:
        """Test closed and strict containment."""
        interval = Interval(0, 10)
        assert interval.contains(10)
        assert interval.contains(5, strict=True)
        assert not interval.contains(10, strict=True)
        assert not interval.contains(10.5)

    def test_value_at_and_remap(self) -> None:
        """Test normalised parameters map back and forth."""
        interval = Interval(10, 20)
        assert interval.value_at(0.25) == 12.5
        assert interval.remap_to_interval(12.5) == 0.25

    def test_remap_zero_length(self) -> None:
        """Test remapping onto a zero-length interval fails."""
        with pytest.raises(InvalidStateError):
            Interval(1, 1).remap_to_interval(1)

    def test_grow_keeps_direction(self) -> None:
        """Test grow extends the interval without flipping it."""
        assert Interval(2, 0).grow(5) == Interval(5, 0)
        assert Interval(0, 2).grow(-1) == Interval(-1, 2)
        assert Interval(0, 2).grow(1) == Interval(0, 2)

    def test_union_and_intersection(self) -> None:
        """Test set operations on intervals."""
        a = Interval(0, 5)
        b = Interval(3, 8)
        assert a.union(b) == SortedInterval(0, 8)
        assert a.intersection(b) == SortedInterval(3, 5)
        assert a.intersection(Interval(6, 7)) is None

    def test_inflate(self) -> None:
        """Test inflating and over-deflating an interval."""
        interval = SortedInterval(0, 4)
        assert interval.inflate(1) == SortedInterval(-1, 5)
        assert interval.inflate(-10) == SortedInterval(2, 2)

    def test_from_center(self) -> None:
        """Test centred interval construction."""
        assert SortedInterval.from_center(5, 4) == SortedInterval(3, 7)
        with pytest.raises(InvalidArgumentError):
            SortedInterval.from_center(0, -1)

    def test_with_min_crossing_max(self) -> None:
        """Test bounds cannot cross through the with_* helpers."""
        interval = SortedInterval(0, 4)
        assert interval.with_min(1) == SortedInterval(1, 4)
        with pytest.raises(InvalidArgumentError):
            interval.with_min(5)
        with pytest.raises(InvalidArgumentError):
            interval.with_max(-1)

    def test_str(self) -> None:
        """Test canonical string form."""
        assert str(Interval(0, 2.5)) == "[0,2.5]"
