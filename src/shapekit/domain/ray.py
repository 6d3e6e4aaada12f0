"""Half-infinite rays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from shapekit.config.settings import resolve_tolerance
from shapekit.domain.enums import RayRange
from shapekit.domain.point import Point
from shapekit.domain.transformable import Transformable
from shapekit.domain.vector import Vector
from shapekit.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from shapekit.domain.transform import Transform


@dataclass(frozen=True, slots=True)
class Ray(Transformable):
    """A line starting at a point and running along a unit direction.

    The direction is unitized at construction, so a parameter ``t`` is the
    distance from ``start``. Which parameters count as "on" the ray depends
    on a :class:`RayRange`; ``RayRange.BOTH`` treats the ray as an infinite
    line.

    Raises:
        InvalidArgumentError: If ``direction`` has zero length
    """

    start: Point
    direction: Vector

    def __post_init__(self) -> None:
        if self.direction.length == 0:
            raise InvalidArgumentError("Ray direction cannot have zero length")
        object.__setattr__(self, "direction", self.direction.unitize())

    @classmethod
    def from_points(cls, start: Point, through: Point) -> Ray:
        """Create a ray from ``start`` passing through ``through``."""
        return cls(start, through.subtract(start))

    @staticmethod
    def in_range(
        t: float, ray_range: RayRange = RayRange.BOTH, tolerance: float | None = None
    ) -> bool:
        """Check whether parameter ``t`` is allowed by ``ray_range``."""
        tol = resolve_tolerance(tolerance)
        if ray_range is RayRange.POSITIVE:
            return t > tol
        if ray_range is RayRange.POSITIVE_AND_ZERO:
            return t >= -tol
        return True

    def closest_parameter(self, point: Point, ray_range: RayRange = RayRange.BOTH) -> float:
        """Project ``point`` onto the ray.

        Negative parameters are pinned to 0 unless ``ray_range`` is BOTH.
        """
        t = point.subtract(self.start).dot(self.direction)
        if ray_range is not RayRange.BOTH and t < 0:
            return 0.0
        return t

    def closest_point(self, point: Point, ray_range: RayRange = RayRange.BOTH) -> Point:
        return self.point_at(self.closest_parameter(point, ray_range))

    def point_at(self, t: float, ray_range: RayRange = RayRange.BOTH) -> Point:
        if ray_range is not RayRange.BOTH and t < 0:
            t = 0.0
        return Point(self.start.x + self.direction.x * t, self.start.y + self.direction.y * t)

    def distance_to(self, point: Point, ray_range: RayRange = RayRange.BOTH) -> float:
        return point.distance_to(self.closest_point(point, ray_range))

    def with_start(self, start: Point) -> Ray:
        return Ray(start, self.direction)

    def with_direction(self, direction: Vector) -> Ray:
        return Ray(self.start, direction)

    def flip(self) -> Ray:
        return Ray(self.start, self.direction.reverse())

    def intersection(self, other: Any, ray_range: RayRange = RayRange.BOTH) -> list[float]:
        """Parameters along this ray where it meets ``other``.

        See :func:`shapekit.core.intersection.ray` for supported shapes.
        """
        from shapekit.core.intersection import ray

        return ray(self, other, ray_range)

    def transform(self, change: Transform) -> Ray:
        return Ray(change.transform_point(self.start), change.transform_vector(self.direction))

    def equals(self, other: Ray, tolerance: float | None = None) -> bool:
        return self.start.equals(other.start, tolerance) and self.direction.equals(
            other.direction, tolerance
        )

    def __str__(self) -> str:
        return f"[{self.start},{self.direction}]"
