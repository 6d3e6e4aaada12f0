"""Polygons: an outer boundary with optional holes.

Boolean operations are delegated to a clipping engine through
:mod:`shapekit.core.clipping`.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shapekit.domain.bounding_box import BoundingBox
from shapekit.domain.enums import CurveOrientation, PointContainment
from shapekit.domain.point import Point
from shapekit.domain.polyline import Polyline
from shapekit.domain.transformable import Transformable
from shapekit.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from shapekit.core.clipping import PolygonClipper, Ring
    from shapekit.domain.transform import Transform


@dataclass(frozen=True, slots=True)
class Polygon(Transformable):
    """A closed boundary polyline with zero or more hole polylines.

    At construction the boundary is oriented counter-clockwise and every
    hole clockwise, in the active y-axis convention.

    Attributes:
        boundary: Outer loop
        holes: Inner loops, each inside the boundary

    Raises:
        InvalidArgumentError: If a loop is open or a hole leaves the boundary
    """

    boundary: Polyline
    holes: tuple[Polyline, ...] = ()

    def __post_init__(self) -> None:
        holes = tuple(self.holes)
        if not self.boundary.is_closed:
            raise InvalidArgumentError("Polygon boundary must be a closed polyline")
        for hole in holes:
            if not hole.is_closed:
                raise InvalidArgumentError("Polygon holes must be closed polylines")
            if not self.boundary.contains_polyline(hole):
                raise InvalidArgumentError("Polygon hole lies outside the boundary")
        object.__setattr__(
            self, "boundary", self.boundary.with_orientation(CurveOrientation.COUNTERCLOCKWISE)
        )
        object.__setattr__(
            self,
            "holes",
            tuple(hole.with_orientation(CurveOrientation.CLOCKWISE) for hole in holes),
        )

    @classmethod
    def from_coords(cls, rings: Sequence[Sequence[Sequence[float]]]) -> Polygon:
        """Create a polygon from coordinate rings; the first ring is the boundary.

        Raises:
            InvalidArgumentError: If no rings are given
        """
        if not rings:
            raise InvalidArgumentError("A polygon needs at least a boundary ring")
        loops = [Polyline.from_coords(ring, closed=True) for ring in rings]
        return cls(loops[0], tuple(loops[1:]))

    @property
    def loops(self) -> tuple[Polyline, ...]:
        return (self.boundary, *self.holes)

    @property
    def area(self) -> float:
        return self.boundary.area - sum(hole.area for hole in self.holes)

    @property
    def bounding_box(self) -> BoundingBox:
        return self.boundary.bounding_box

    def contains(self, point: Point, tolerance: float | None = None) -> PointContainment:
        """Classify a point; points inside a hole are OUTSIDE."""
        result = self.boundary.contains(point, tolerance)
        if result is not PointContainment.INSIDE:
            return result
        for hole in self.holes:
            in_hole = hole.contains(point, tolerance)
            if in_hole is PointContainment.INSIDE:
                return PointContainment.OUTSIDE
            if in_hole is PointContainment.COINCIDENT:
                return PointContainment.COINCIDENT
        return PointContainment.INSIDE

    def closest_loop(self, point: Point) -> Polyline:
        """Return the boundary or hole nearest ``point``."""
        return min(self.loops, key=lambda loop: loop.distance_to(point))

    def closest_point(self, point: Point, include_interior: bool = False) -> Point:
        """Find the nearest point on the polygon's edges.

        Args:
            point: Point to search from
            include_interior: If True, points inside the polygon are returned unchanged
        """
        if include_interior and self.contains(point) is PointContainment.INSIDE:
            return point
        return self.closest_loop(point).closest_point(point)

    def union(
        self, other: Polygon | Polyline, clipper: PolygonClipper | None = None
    ) -> list[Polygon]:
        from shapekit.core.clipping import union

        return union(self, other, clipper)

    def intersection(
        self, other: Polygon | Polyline, clipper: PolygonClipper | None = None
    ) -> list[Polygon]:
        from shapekit.core.clipping import intersection

        return intersection(self, other, clipper)

    def difference(
        self, other: Polygon | Polyline, clipper: PolygonClipper | None = None
    ) -> list[Polygon]:
        from shapekit.core.clipping import difference

        return difference(self, other, clipper)

    def to_rings(self) -> list[Ring]:
        """Coordinate rings, boundary first."""
        return [loop.to_ring() for loop in self.loops]

    def transform(self, change: Transform) -> Polygon:
        return Polygon(
            self.boundary.transform(change),
            tuple(hole.transform(change) for hole in self.holes),
        )

    def equals(self, other: Polygon, tolerance: float | None = None) -> bool:
        return (
            len(self.holes) == len(other.holes)
            and self.boundary.equals(other.boundary, tolerance)
            and all(a.equals(b, tolerance) for a, b in zip(self.holes, other.holes))
        )

    def __str__(self) -> str:
        return "[" + ",".join(str(loop) for loop in self.loops) + "]"
