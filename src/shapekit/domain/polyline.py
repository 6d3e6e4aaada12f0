"""Polylines: ordered chains of straight segments.

A closed polyline repeats its first point as its last point. Parameters along
a polyline combine the segment index and the local line parameter into one
number: ``2.25`` is a quarter of the way along segment 2.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Any

from shapekit.config.settings import get_settings, resolve_angle_tolerance, resolve_tolerance
from shapekit.domain.bounding_box import BoundingBox
from shapekit.domain.enums import CurveOrientation, PointContainment
from shapekit.domain.interval import Interval
from shapekit.domain.line import Line
from shapekit.domain.point import Point
from shapekit.domain.transformable import Transformable
from shapekit.domain.vector import Vector
from shapekit.exceptions import InvalidArgumentError, InvalidStateError, SegmentIndexError

if TYPE_CHECKING:
    from shapekit.domain.transform import Transform


@dataclass(frozen=True)
class Polyline(Transformable):
    """An open or closed chain of points.

    Attributes:
        points: Vertices in order; closed polylines end with their first point

    Raises:
        InvalidArgumentError: If fewer than two points are given
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        points = tuple(self.points)
        if len(points) < 2:
            raise InvalidArgumentError(
                f"A polyline needs at least two points, got {len(points)}"
            )
        object.__setattr__(self, "points", points)

    @classmethod
    def from_points(cls, points: Iterable[Point], closed: bool = False) -> Polyline:
        """Create a polyline, optionally closing it.

        Args:
            points: Vertices in order
            closed: Append the first point at the end if it is not already there
        """
        polyline = cls(tuple(points))
        return polyline.make_closed() if closed else polyline

    @classmethod
    def from_coords(cls, coords: Iterable[Sequence[float]], closed: bool = False) -> Polyline:
        """Create a polyline from ``(x, y)`` pairs."""
        return cls.from_points((Point.from_coords(c) for c in coords), closed)

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    @property
    def is_closed(self) -> bool:
        return len(self.points) > 2 and self.start.equals(self.end)

    @property
    def segment_count(self) -> int:
        return len(self.points) - 1

    @cached_property
    def segments(self) -> tuple[Line, ...]:
        return tuple(Line(a, b) for a, b in zip(self.points, self.points[1:]))

    @cached_property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(self.points)

    @property
    def length(self) -> float:
        return sum(segment.length for segment in self.segments)

    @property
    def signed_area(self) -> float:
        """Shoelace area, positive when the points run counter-clockwise in y-up coordinates.

        Raises:
            InvalidStateError: If the polyline is open
        """
        self._require_closed("area")
        total = 0.0
        for a, b in zip(self.points, self.points[1:]):
            total += a.x * b.y - b.x * a.y
        return total / 2

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def orientation(self) -> CurveOrientation:
        """Loop direction, flipped when ``invert_y`` is active.

        Raises:
            InvalidStateError: If the polyline is open
        """
        signed = self.signed_area
        if signed == 0:
            return CurveOrientation.UNDEFINED
        counterclockwise = signed > 0
        if get_settings().invert_y:
            counterclockwise = not counterclockwise
        if counterclockwise:
            return CurveOrientation.COUNTERCLOCKWISE
        return CurveOrientation.CLOCKWISE

    def with_orientation(self, goal: CurveOrientation) -> Polyline:
        """Return this polyline running in the ``goal`` direction.

        Degenerate loops and an UNDEFINED goal leave the polyline unchanged.

        Raises:
            InvalidStateError: If the polyline is open
        """
        current = self.orientation
        if goal is CurveOrientation.UNDEFINED or current is CurveOrientation.UNDEFINED:
            return self
        if current is goal:
            return self
        return self.reverse()

    def reverse(self) -> Polyline:
        return Polyline(self.points[::-1])

    def make_closed(self, tolerance: float | None = None) -> Polyline:
        """Return a closed copy; already-closed polylines are returned unchanged."""
        if len(self.points) > 2 and self.start.equals(self.end, tolerance):
            return self
        return Polyline(self.points + (self.start,))

    def segment_at(self, index: int) -> Line:
        """Return segment ``index`` (from ``points[index]`` to ``points[index + 1]``).

        Raises:
            SegmentIndexError: If no such segment exists
        """
        if index < 0 or index >= self.segment_count:
            raise SegmentIndexError(index, self.segment_count)
        return self.segments[index]

    def point_at(self, t: float) -> Point:
        """Evaluate the polyline at combined parameter ``t``."""
        index, local = self._split_parameter(t)
        return self.segments[index].point_at(local)

    def tangent_at(self, t: float) -> Vector:
        index, _ = self._split_parameter(t)
        return self.segments[index].unit_direction

    def normal_at(self, t: float) -> Vector:
        """Unit normal at ``t``, the tangent turned by :meth:`Vector.perpendicular`."""
        return self.tangent_at(t).perpendicular()

    def closest_index(self, point: Point) -> int:
        """Index of the segment nearest ``point``."""
        distances = [segment.distance_to(point) for segment in self.segments]
        return distances.index(min(distances))

    def closest_parameter(self, point: Point) -> float:
        """Combined parameter of the polyline point nearest ``point``."""
        index = self.closest_index(point)
        return index + self.segments[index].closest_parameter(point)

    def closest_point(self, point: Point) -> Point:
        return self.segments[self.closest_index(point)].closest_point(point)

    def distance_to(self, point: Point) -> float:
        return min(segment.distance_to(point) for segment in self.segments)

    def contains(self, point: Point, tolerance: float | None = None) -> PointContainment:
        """Classify a point against the closed polyline.

        Points within tolerance of an edge are COINCIDENT. Everything else is
        decided by counting crossings of a horizontal ray cast from the point.

        Raises:
            InvalidStateError: If the polyline is open
        """
        self._require_closed("containment")
        tol = resolve_tolerance(tolerance)

        if self.bounding_box.inflate(tol).contains(point, 0.0) is PointContainment.OUTSIDE:
            return PointContainment.OUTSIDE

        if self.distance_to(point) <= tol:
            return PointContainment.COINCIDENT

        from shapekit.core.intersection import horizontal_ray_polyline

        if len(horizontal_ray_polyline(point, self)) % 2 == 1:
            return PointContainment.INSIDE
        return PointContainment.OUTSIDE

    def contains_polyline(self, other: Polyline, tolerance: float | None = None) -> bool:
        """Return True if no vertex of ``other`` lies outside this closed polyline.

        Edge crossings between the two polylines are not checked.
        """
        return all(
            self.contains(p, tolerance) is not PointContainment.OUTSIDE for p in other.points
        )

    def trim(self, interval: Interval) -> Polyline:
        """Cut out the part of the polyline between two combined parameters.

        A descending interval returns the piece running backwards.

        Raises:
            InvalidArgumentError: If the interval has zero length
            SegmentIndexError: If a bound lies outside the polyline
        """
        if interval.is_decreasing:
            return self.trim(interval.reverse()).reverse()
        if interval.t0 == interval.t1:
            raise InvalidArgumentError("Cannot trim a polyline to a single point")
        points = [self.point_at(interval.t0)]
        for index in range(math.floor(interval.t0) + 1, math.ceil(interval.t1)):
            points.append(self.points[index])
        points.append(self.point_at(interval.t1))
        return Polyline(tuple(points))

    def delete_short_segments(self, tolerance: float | None = None) -> Polyline:
        """Remove vertices that sit within ``tolerance`` of the previous kept vertex.

        End points are always preserved.

        Raises:
            InvalidStateError: If every point collapses onto the start
        """
        tol = resolve_tolerance(tolerance)
        kept = [self.start]
        for p in self.points[1:-1]:
            if p.distance_to(kept[-1]) > tol:
                kept.append(p)
        if self.end.distance_to(kept[-1]) > tol:
            kept.append(self.end)
        elif len(kept) > 1:
            kept[-1] = self.end
        else:
            raise InvalidStateError("Polyline collapses to a single point")
        return Polyline(tuple(kept))

    def merge_colinear_segments(
        self, angle_tolerance: float | None = None, include_seam: bool = True
    ) -> Polyline:
        """Join consecutive segments that continue in the same direction.

        Args:
            angle_tolerance: Largest turn between segments that still counts as straight
            include_seam: On closed polylines, also merge across the start point

        Returns:
            Polyline with the redundant vertices removed
        """
        tol = resolve_angle_tolerance(angle_tolerance)
        merged = [self.start]
        for index in range(1, len(self.points) - 1):
            before = self.points[index].subtract(merged[-1])
            after = self.points[index + 1].subtract(self.points[index])
            if not _continues(before, after, tol):
                merged.append(self.points[index])
        merged.append(self.end)

        if include_seam and self.is_closed and len(merged) > 4:
            before = merged[0].subtract(merged[-2])
            after = merged[1].subtract(merged[0])
            if _continues(before, after, tol):
                merged = merged[1:-1] + [merged[1]]
        return Polyline(tuple(merged))

    def offset(self, distance: float) -> Polyline:
        """Shift every segment sideways by ``distance`` along its normal.

        Adjacent offset segments are re-joined at the intersection of their
        infinite extensions. Segments that vanish in the offset are not
        removed.
        """
        from shapekit.core.intersection import line_line

        shifted = [
            segment.translate(segment.unit_normal, distance) for segment in self.segments
        ]
        closed = self.is_closed
        points: list[Point] = []
        for index in range(len(self.points)):
            incoming = shifted[index - 1] if index > 0 else (shifted[-1] if closed else None)
            outgoing = (
                shifted[index] if index < len(shifted) else (shifted[0] if closed else None)
            )
            if incoming is None:
                points.append(outgoing.start)
                continue
            if outgoing is None:
                points.append(incoming.end)
                continue
            hit = line_line(incoming, outgoing, limit_to_finite_segment=False)
            if hit.intersects:
                points.append(incoming.point_at(hit.line_a_t, False))
            else:
                points.append(incoming.end)
        return Polyline(tuple(points))

    def intersection(self, other: Any) -> list[float]:
        """Combined parameters along this polyline where it meets ``other``.

        See :func:`shapekit.core.intersection.polyline` for supported shapes.
        """
        from shapekit.core.intersection import polyline

        return polyline(self, other)

    def transform(self, change: Transform) -> Polyline:
        return Polyline(tuple(change.transform_points(self.points)))

    def to_ring(self) -> list[tuple[float, float]]:
        """Coordinates as a list of ``(x, y)`` pairs."""
        return [p.to_tuple() for p in self.points]

    def equals(self, other: Polyline, tolerance: float | None = None) -> bool:
        return len(self.points) == len(other.points) and all(
            a.equals(b, tolerance) for a, b in zip(self.points, other.points)
        )

    def _split_parameter(self, t: float) -> tuple[int, float]:
        count = self.segment_count
        if t < 0 or t > count:
            raise SegmentIndexError(math.floor(t), count)
        index = min(math.floor(t), count - 1)
        return index, t - index

    def _require_closed(self, operation: str) -> None:
        if not self.is_closed:
            raise InvalidStateError(f"Polyline must be closed to compute {operation}")

    def __str__(self) -> str:
        return "[" + ",".join(str(p) for p in self.points) + "]"


def _continues(before: Vector, after: Vector, angle_tolerance: float) -> bool:
    if before.length == 0 or after.length == 0:
        return True
    return before.angle(after) <= angle_tolerance
