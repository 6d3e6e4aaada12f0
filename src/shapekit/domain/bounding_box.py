"""World-axis-aligned bounding boxes.

Bounding boxes are the cheap overlap pre-filter run before every composite
intersection search.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shapekit.config.settings import resolve_tolerance
from shapekit.domain.enums import PointContainment
from shapekit.domain.interval import Interval, SortedInterval
from shapekit.domain.point import Point
from shapekit.domain.transformable import Transformable
from shapekit.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from shapekit.domain.line import Line
    from shapekit.domain.polyline import Polyline
    from shapekit.domain.transform import Transform


@dataclass(frozen=True, slots=True)
class BoundingBox(Transformable):
    """An axis-aligned box described by an x range and a y range.

    Attributes:
        x_range: Extent along the world x-axis
        y_range: Extent along the world y-axis
    """

    x_range: SortedInterval
    y_range: SortedInterval

    def __post_init__(self) -> None:
        if not isinstance(self.x_range, SortedInterval):
            object.__setattr__(self, "x_range", SortedInterval(self.x_range.t0, self.x_range.t1))
        if not isinstance(self.y_range, SortedInterval):
            object.__setattr__(self, "y_range", SortedInterval(self.y_range.t0, self.y_range.t1))

    @classmethod
    def from_corners(cls, a: Point, b: Point) -> BoundingBox:
        return cls(SortedInterval(a.x, b.x), SortedInterval(a.y, b.y))

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> BoundingBox:
        """Create the smallest box enclosing every point.

        Raises:
            InvalidArgumentError: If no points are given
        """
        items = list(points)
        if not items:
            raise InvalidArgumentError("Cannot build a bounding box from zero points")
        xs = [p.x for p in items]
        ys = [p.y for p in items]
        return cls(SortedInterval(min(xs), max(xs)), SortedInterval(min(ys), max(ys)))

    @property
    def min(self) -> Point:
        return Point(self.x_range.min, self.y_range.min)

    @property
    def max(self) -> Point:
        return Point(self.x_range.max, self.y_range.max)

    @property
    def center(self) -> Point:
        return Point(self.x_range.mid, self.y_range.mid)

    @property
    def width(self) -> float:
        return self.x_range.width

    @property
    def height(self) -> float:
        return self.y_range.width

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners in the order min/min, max/min, max/max, min/max."""
        x0, x1 = self.x_range.min, self.x_range.max
        y0, y1 = self.y_range.min, self.y_range.max
        return (Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1))

    @property
    def edges(self) -> tuple[Line, Line, Line, Line]:
        """Edges joining consecutive corners, ending with the edge back to the first."""
        from shapekit.domain.line import Line

        c = self.corners
        return (Line(c[0], c[1]), Line(c[1], c[2]), Line(c[2], c[3]), Line(c[3], c[0]))

    def corner(self, min_x: bool, min_y: bool) -> Point:
        return Point(
            self.x_range.min if min_x else self.x_range.max,
            self.y_range.min if min_y else self.y_range.max,
        )

    def point_at(self, u: float, v: float) -> Point:
        """Map normalised coordinates (0..1 across each side) to a world point."""
        return Point(self.x_range.value_at(u), self.y_range.value_at(v))

    def remap_to_box(self, point: Point) -> Point:
        """Inverse of :meth:`point_at`, returned as ``Point(u, v)``."""
        return Point(
            self.x_range.remap_to_interval(point.x),
            self.y_range.remap_to_interval(point.y),
        )

    def contains(self, point: Point, tolerance: float | None = None) -> PointContainment:
        """Classify a point against the box.

        Points within tolerance of an edge are COINCIDENT.
        """
        tol = resolve_tolerance(tolerance)
        if not (
            self.x_range.contains(point.x, tolerance=tol)
            and self.y_range.contains(point.y, tolerance=tol)
        ):
            return PointContainment.OUTSIDE
        if self.x_range.contains(point.x, strict=True, tolerance=tol) and self.y_range.contains(
            point.y, strict=True, tolerance=tol
        ):
            return PointContainment.INSIDE
        return PointContainment.COINCIDENT

    def closest_point(self, point: Point, include_interior: bool = True) -> Point:
        """Find the closest point on (or in) the box.

        Args:
            point: Point to search from
            include_interior: If True, interior points are returned unchanged;
                otherwise the result always lies on the boundary

        Returns:
            The closest point
        """
        clamped = Point(
            _clamp(point.x, self.x_range.min, self.x_range.max),
            _clamp(point.y, self.y_range.min, self.y_range.max),
        )
        if include_interior or clamped != point:
            return clamped
        # point is inside, push it to the nearest side
        candidates = [
            Point(self.x_range.min, point.y),
            Point(self.x_range.max, point.y),
            Point(point.x, self.y_range.min),
            Point(point.x, self.y_range.max),
        ]
        return min(candidates, key=point.distance_to)

    def overlaps(self, other: BoundingBox, tolerance: float | None = None) -> bool:
        """Return True if the boxes touch or overlap."""
        tol = resolve_tolerance(tolerance)
        return (
            self.x_range.min <= other.x_range.max + tol
            and other.x_range.min <= self.x_range.max + tol
            and self.y_range.min <= other.y_range.max + tol
            and other.y_range.min <= self.y_range.max + tol
        )

    def union(self, other: BoundingBox) -> BoundingBox:
        return BoundingBox(self.x_range.union(other.x_range), self.y_range.union(other.y_range))

    def intersection(self, other: BoundingBox) -> BoundingBox | None:
        """Return the shared region, or None if the boxes are disjoint."""
        x_range = self.x_range.intersection(other.x_range)
        y_range = self.y_range.intersection(other.y_range)
        if x_range is None or y_range is None:
            return None
        return BoundingBox(x_range, y_range)

    def inflate(self, x: float, y: float | None = None) -> BoundingBox:
        """Grow the box by ``x`` horizontally and ``y`` (default ``x``) vertically on each side."""
        return BoundingBox(self.x_range.inflate(x), self.y_range.inflate(x if y is None else y))

    def with_x_range(self, x_range: Interval) -> BoundingBox:
        return BoundingBox(SortedInterval(x_range.t0, x_range.t1), self.y_range)

    def with_y_range(self, y_range: Interval) -> BoundingBox:
        return BoundingBox(self.x_range, SortedInterval(y_range.t0, y_range.t1))

    def to_polyline(self) -> Polyline:
        from shapekit.domain.polyline import Polyline

        return Polyline.from_points(self.corners, closed=True)

    def transform(self, change: Transform) -> BoundingBox:
        """Return the box enclosing the transformed corners."""
        return BoundingBox.from_points(change.transform_points(self.corners))

    def equals(self, other: BoundingBox, tolerance: float | None = None) -> bool:
        return self.x_range.equals(other.x_range, tolerance) and self.y_range.equals(
            other.y_range, tolerance
        )

    def __str__(self) -> str:
        return f"[{self.min},{self.max}]"


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
