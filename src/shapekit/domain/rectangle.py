"""Rectangles oriented along a plane."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from shapekit.config.settings import resolve_tolerance
from shapekit.domain.bounding_box import BoundingBox
from shapekit.domain.enums import PointContainment
from shapekit.domain.interval import Interval, SortedInterval
from shapekit.domain.plane import Plane
from shapekit.domain.point import Point
from shapekit.domain.tolerance import format_number
from shapekit.domain.transformable import Transformable
from shapekit.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from shapekit.domain.line import Line
    from shapekit.domain.polyline import Polyline
    from shapekit.domain.transform import Transform


@dataclass(frozen=True, slots=True)
class Rectangle(Transformable):
    """A box whose sides run along a plane's axes.

    ``x`` and ``y`` are ranges of plane coordinates. Passing a number instead
    of an interval means the range from 0 to that number, so
    ``Rectangle(plane, 10, 20)`` has its minimum corner on the plane origin.

    Attributes:
        plane: Frame the rectangle is aligned to
        x: Extent along the plane's x-axis
        y: Extent along the plane's y-axis

    Raises:
        InvalidArgumentError: If either side has zero width
    """

    plane: Plane
    x: SortedInterval
    y: SortedInterval

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _as_interval(self.x))
        object.__setattr__(self, "y", _as_interval(self.y))
        if self.x.width <= 0 or self.y.width <= 0:
            raise InvalidArgumentError(
                f"Rectangle sides must have positive width, got {self.x.width} x {self.y.width}"
            )

    @classmethod
    def from_corners(cls, a: Point, b: Point, plane: Plane | None = None) -> Rectangle:
        """Create the rectangle on ``plane`` (world XY if None) spanning two opposite corners."""
        frame = plane if plane is not None else Plane.world_xy()
        local_a = frame.remap_to_plane_space(a)
        local_b = frame.remap_to_plane_space(b)
        return cls(
            frame,
            SortedInterval(local_a.x, local_b.x),
            SortedInterval(local_a.y, local_b.y),
        )

    @classmethod
    def from_center(cls, plane: Plane, width: float, height: float) -> Rectangle:
        """Create a rectangle centred on the plane origin."""
        return cls(
            plane,
            SortedInterval.from_center(0.0, width),
            SortedInterval.from_center(0.0, height),
        )

    @property
    def width_x(self) -> float:
        return self.x.width

    @property
    def width_y(self) -> float:
        return self.y.width

    @property
    def area(self) -> float:
        return self.width_x * self.width_y

    @property
    def circumference(self) -> float:
        return 2 * (self.width_x + self.width_y)

    @property
    def center(self) -> Point:
        return self.plane.point_at(self.x.mid, self.y.mid)

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners in the order min/min, max/min, max/max, min/max (plane coordinates)."""
        return (
            self.corner(True, True),
            self.corner(False, True),
            self.corner(False, False),
            self.corner(True, False),
        )

    @property
    def edges(self) -> tuple[Line, Line, Line, Line]:
        from shapekit.domain.line import Line

        c = self.corners
        return (Line(c[0], c[1]), Line(c[1], c[2]), Line(c[2], c[3]), Line(c[3], c[0]))

    @property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(self.corners)

    def corner(self, min_x: bool, min_y: bool) -> Point:
        return self.plane.point_at(
            self.x.min if min_x else self.x.max,
            self.y.min if min_y else self.y.max,
        )

    def point_at(self, u: float, v: float) -> Point:
        """Map normalised coordinates (0..1 along each side) to a world point."""
        return self.plane.point_at(self.x.value_at(u), self.y.value_at(v))

    def contains(self, point: Point, tolerance: float | None = None) -> PointContainment:
        """Classify a point against the rectangle.

        Points within tolerance of an edge are COINCIDENT.
        """
        tol = resolve_tolerance(tolerance)
        local = self.plane.remap_to_plane_space(point)
        inside_x = self.x.contains(local.x, tolerance=tol)
        if not (inside_x and self.y.contains(local.y, tolerance=tol)):
            return PointContainment.OUTSIDE
        if self.x.contains(local.x, strict=True, tolerance=tol) and self.y.contains(
            local.y, strict=True, tolerance=tol
        ):
            return PointContainment.INSIDE
        return PointContainment.COINCIDENT

    def closest_point(self, point: Point, include_interior: bool = False) -> Point:
        """Find the nearest point on the rectangle.

        Args:
            point: Point to search from
            include_interior: If True, points inside the rectangle are returned unchanged

        Returns:
            The closest point
        """
        local = self.plane.remap_to_plane_space(point)
        box = BoundingBox(self.x, self.y)
        closest = box.closest_point(local, include_interior)
        if include_interior and closest == local:
            return point
        return self.plane.point_at(closest.x, closest.y)

    def to_polyline(self) -> Polyline:
        from shapekit.domain.polyline import Polyline

        return Polyline.from_points(self.corners, closed=True)

    def with_plane(self, plane: Plane) -> Rectangle:
        return Rectangle(plane, self.x, self.y)

    def with_x(self, x: Interval | float) -> Rectangle:
        return Rectangle(self.plane, x, self.y)

    def with_y(self, y: Interval | float) -> Rectangle:
        return Rectangle(self.plane, self.x, y)

    def transform(self, change: Transform) -> Rectangle:
        """Move the rectangle; transforms that shear it are approximated by its corners."""
        plane = self.plane.transform(change)
        return Rectangle.from_corners(
            change.transform_point(self.corners[0]),
            change.transform_point(self.corners[2]),
            plane,
        )

    def equals(self, other: Rectangle, tolerance: float | None = None) -> bool:
        return (
            self.plane.equals(other.plane, tolerance)
            and self.x.equals(other.x, tolerance)
            and self.y.equals(other.y, tolerance)
        )

    def __str__(self) -> str:
        return f"[{self.plane},{format_number(self.width_x)},{format_number(self.width_y)}]"


def _as_interval(value: Interval | float) -> SortedInterval:
    if isinstance(value, SortedInterval):
        return value
    if isinstance(value, Interval):
        return SortedInterval(value.t0, value.t1)
    return SortedInterval(0.0, float(value))
