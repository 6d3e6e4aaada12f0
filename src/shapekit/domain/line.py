"""Finite line segments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from shapekit.domain.bounding_box import BoundingBox
from shapekit.domain.point import Point
from shapekit.domain.transformable import Transformable
from shapekit.domain.vector import Vector
from shapekit.exceptions import InvalidArgumentError, InvalidStateError

if TYPE_CHECKING:
    from shapekit.domain.transform import Transform


@dataclass(frozen=True, slots=True)
class Line(Transformable):
    """A straight segment from ``start`` to ``end``.

    Parameters along the line run from 0 at ``start`` to 1 at ``end``. Most
    queries accept ``limit_to_finite_segment``; when False the segment is
    treated as an infinite line and parameters outside [0, 1] are allowed.
    A zero-length line is permitted and reports parameter 0 for every
    projection.

    Attributes:
        start: First end point
        end: Second end point
    """

    start: Point
    end: Point

    @classmethod
    def from_coords(cls, coords: Sequence[Sequence[float]]) -> Line:
        """Create a line from ``((x0, y0), (x1, y1))``."""
        first, second = coords
        return cls(Point.from_coords(first), Point.from_coords(second))

    @classmethod
    def from_vector(cls, start: Point, direction: Vector, length: float | None = None) -> Line:
        """Create a line starting at ``start`` and running along ``direction``.

        Args:
            start: First end point
            direction: Direction of the line
            length: Length of the line; the length of ``direction`` when None

        Raises:
            InvalidArgumentError: If ``direction`` has zero length
        """
        if direction.length == 0:
            raise InvalidArgumentError("Line direction cannot have zero length")
        move = direction if length is None else direction.with_length(length)
        return cls(start, start.add(move))

    @property
    def direction(self) -> Vector:
        return self.end.subtract(self.start)

    @property
    def unit_direction(self) -> Vector:
        """Unit tangent of the line.

        Raises:
            InvalidStateError: If the line has zero length
        """
        return self.direction.unitize()

    @property
    def unit_normal(self) -> Vector:
        return self.unit_direction.perpendicular()

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def mid_point(self) -> Point:
        return self.point_at(0.5)

    @property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_corners(self.start, self.end)

    def closest_parameter(self, point: Point, limit_to_finite_segment: bool = True) -> float:
        """Project ``point`` onto the line.

        Args:
            point: Point to project
            limit_to_finite_segment: Clamp the result to [0, 1]

        Returns:
            Parameter of the projection
        """
        d = self.direction
        denominator = d.dot(d)
        if denominator == 0:
            return 0.0
        t = point.subtract(self.start).dot(d) / denominator
        if limit_to_finite_segment:
            return min(1.0, max(0.0, t))
        return t

    def closest_point(self, point: Point, limit_to_finite_segment: bool = True) -> Point:
        return self.point_at(self.closest_parameter(point, limit_to_finite_segment), False)

    def point_at(self, t: float, limit_to_finite_segment: bool = True) -> Point:
        """Evaluate the line at parameter ``t``."""
        if limit_to_finite_segment:
            t = min(1.0, max(0.0, t))
        return Point(
            self.start.x + (self.end.x - self.start.x) * t,
            self.start.y + (self.end.y - self.start.y) * t,
        )

    def point_at_length(self, distance: float, limit_to_finite_segment: bool = True) -> Point:
        """Evaluate the line ``distance`` units from ``start``."""
        length = self.length
        if length == 0:
            return self.start
        return self.point_at(distance / length, limit_to_finite_segment)

    def distance_to(self, other: Point | Line, limit_to_finite_segment: bool = True) -> float:
        """Shortest distance to a point or another line.

        Lines that cross are at distance 0; otherwise the minimum is reached
        at one of the four end points.
        """
        if isinstance(other, Point):
            return other.distance_to(self.closest_point(other, limit_to_finite_segment))

        from shapekit.core.intersection import line_line

        if line_line(self, other, limit_to_finite_segment, angle_tolerance=0.0).intersects:
            return 0.0
        return min(
            self.distance_to(other.start, limit_to_finite_segment),
            self.distance_to(other.end, limit_to_finite_segment),
            other.distance_to(self.start, limit_to_finite_segment),
            other.distance_to(self.end, limit_to_finite_segment),
        )

    def extend(self, start_extension: float, end_extension: float) -> Line:
        """Lengthen the line at both ends; negative amounts shorten it.

        Raises:
            InvalidStateError: If the line has zero length
        """
        if self.length == 0:
            raise InvalidStateError("Cannot extend a zero-length line")
        unit = self.unit_direction
        return Line(
            self.start.add(unit.multiply(-start_extension)),
            self.end.add(unit.multiply(end_extension)),
        )

    def flip(self) -> Line:
        return Line(self.end, self.start)

    def with_start(self, start: Point) -> Line:
        return Line(start, self.end)

    def with_end(self, end: Point) -> Line:
        return Line(self.start, end)

    def with_length(self, length: float) -> Line:
        """Keep ``start`` and direction, move ``end`` to give the requested length."""
        return Line(self.start, self.start.add(self.unit_direction.multiply(length)))

    def intersection(self, other: Any, limit_to_finite_segment: bool = True) -> list[float]:
        """Parameters along this line where it meets ``other``.

        See :func:`shapekit.core.intersection.line` for supported shapes.
        """
        from shapekit.core.intersection import line

        return line(self, other, limit_to_finite_segment)

    def transform(self, change: Transform) -> Line:
        return Line(change.transform_point(self.start), change.transform_point(self.end))

    def equals(self, other: Line, tolerance: float | None = None) -> bool:
        return self.start.equals(other.start, tolerance) and self.end.equals(
            other.end, tolerance
        )

    def __str__(self) -> str:
        return f"({self.start},{self.end})"
