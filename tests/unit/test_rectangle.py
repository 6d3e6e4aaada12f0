"""Unit tests for plane-aligned rectangles."""

import math

import pytest

from shapekit.domain import Plane, Point, PointContainment, Rectangle, SortedInterval, Vector
from shapekit.exceptions import InvalidArgumentError


class TestRectangle:
    """Tests for Rectangle class."""

    def test_numbers_become_ranges_from_zero(self) -> None:
        """Test numeric sides span from the plane origin."""
        rect = Rectangle(Plane.world_xy(), 4, 2)
        assert rect.x == SortedInterval(0, 4)
        assert rect.y == SortedInterval(0, 2)
        assert rect.area == 8
        assert rect.circumference == 12

    def test_zero_width(self) -> None:
        """Test a rectangle needs positive width on both sides."""
        with pytest.raises(InvalidArgumentError):
            Rectangle(Plane.world_xy(), 0, 2)

    def test_from_center(self) -> None:
        """Test a rectangle centred on its plane origin."""
        rect = Rectangle.from_center(Plane.world_xy().with_origin(Point(5, 5)), 4, 2)
        assert rect.center.equals(Point(5, 5))
        assert rect.corners[0].equals(Point(3, 4))

    def test_from_corners(self) -> None:
        """Test construction from two opposite corners."""
        rect = Rectangle.from_corners(Point(3, 1), Point(1, 4))
        assert rect.width_x == 2
        assert rect.width_y == 3
        assert rect.corners[0] == Point(1, 1)

    def test_rotated_plane(self) -> None:
        """Test corners follow the plane axes."""
        plane = Plane.from_axis(Point(0, 0), Vector(0, 1))
        rect = Rectangle(plane, 2, 1)
        assert rect.corners[1].equals(Point(0, 2))
        assert rect.corners[2].equals(Point(-1, 2))
        assert rect.bounding_box.min.equals(Point(-1, 0))

    def test_contains(self) -> None:
        """Test containment classification."""
        rect = Rectangle(Plane.world_xy(), 2, 2)
        assert rect.contains(Point(1, 1)) is PointContainment.INSIDE
        assert rect.contains(Point(0, 1)) is PointContainment.COINCIDENT
        assert rect.contains(Point(3, 1)) is PointContainment.OUTSIDE

    def test_closest_point(self) -> None:
        """Test closest point on the boundary."""
        rect = Rectangle(Plane.world_xy(), 2, 2)
        assert rect.closest_point(Point(1, 0.5)).equals(Point(1, 0))
        assert rect.closest_point(Point(1, 0.5), include_interior=True) == Point(1, 0.5)
        assert rect.closest_point(Point(5, 1)).equals(Point(2, 1))

    def test_point_at(self) -> None:
        """Test normalised rectangle coordinates."""
        rect = Rectangle(Plane.world_xy(), 4, 2)
        assert rect.point_at(0.5, 0.5).equals(Point(2, 1))

    def test_to_polyline(self) -> None:
        """Test conversion to a closed loop."""
        loop = Rectangle(Plane.world_xy(), 4, 2).to_polyline()
        assert loop.is_closed
        assert loop.area == 8

    def test_rotate_keeps_size(self) -> None:
        """Test rotating a rectangle keeps its dimensions."""
        rect = Rectangle(Plane.world_xy(), 4, 2).rotate(math.pi / 3)
        assert math.isclose(rect.width_x, 4)
        assert math.isclose(rect.width_y, 2)
        assert rect.plane.x_axis.equals(Vector(math.cos(math.pi / 3), math.sin(math.pi / 3)))

    def test_with_helpers(self) -> None:
        """Test copy-with helpers."""
        rect = Rectangle(Plane.world_xy(), 4, 2)
        assert rect.with_x(6).width_x == 6
        assert rect.with_y(SortedInterval(-1, 1)).center.equals(Point(2, 0))

    def test_str(self) -> None:
        """Test canonical string form."""
        assert str(Rectangle(Plane.world_xy(), 4, 2)) == "[[(0,0),⟨1,0⟩],4,2]"
