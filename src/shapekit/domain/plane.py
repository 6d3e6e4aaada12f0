"""Oriented local coordinate frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from shapekit.config.settings import resolve_tolerance
from shapekit.domain.point import Point
from shapekit.domain.transformable import Transformable
from shapekit.domain.vector import Vector
from shapekit.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from shapekit.domain.transform import Transform


@dataclass(frozen=True, slots=True)
class Plane(Transformable):
    """An orthonormal frame: origin plus unit x- and y-axes.

    Use :meth:`from_axis` to derive the y-axis from the x-axis. The derived
    y-axis is the x-axis turned by :meth:`Vector.perpendicular`, so its side
    depends on the ``invert_y`` setting. :meth:`world_xy` always returns the
    world frame itself.

    Attributes:
        origin: Location of the plane's (0, 0)
        x_axis: Unit direction of the plane's u coordinate
        y_axis: Unit direction of the plane's v coordinate

    Raises:
        InvalidArgumentError: If the axes are not unit length and perpendicular
    """

    origin: Point
    x_axis: Vector
    y_axis: Vector

    def __post_init__(self) -> None:
        tol = resolve_tolerance(None)
        if not (self.x_axis.is_unit(tol) and self.y_axis.is_unit(tol)):
            raise InvalidArgumentError("Plane axes must have unit length")
        if abs(self.x_axis.dot(self.y_axis)) > tol:
            raise InvalidArgumentError("Plane axes must be perpendicular")

    @classmethod
    def from_axis(cls, origin: Point, x_axis: Vector) -> Plane:
        """Create a plane from an origin and x direction.

        Raises:
            InvalidArgumentError: If ``x_axis`` has zero length
        """
        if x_axis.length == 0:
            raise InvalidArgumentError("Plane x-axis cannot have zero length")
        unit = x_axis.unitize()
        return cls(origin, unit, unit.perpendicular())

    @classmethod
    def world_xy(cls) -> Plane:
        return cls(Point(0.0, 0.0), Vector(1.0, 0.0), Vector(0.0, 1.0))

    def point_at(self, u: float, v: float) -> Point:
        """Map plane coordinates to world coordinates: ``origin + u*x_axis + v*y_axis``."""
        return Point(
            self.origin.x + u * self.x_axis.x + v * self.y_axis.x,
            self.origin.y + u * self.x_axis.y + v * self.y_axis.y,
        )

    def remap_to_plane_space(self, point: Point) -> Point:
        """Map a world point to plane coordinates, returned as ``Point(u, v)``."""
        offset = point.subtract(self.origin)
        return Point(offset.dot(self.x_axis), offset.dot(self.y_axis))

    def with_origin(self, origin: Point) -> Plane:
        return Plane(origin, self.x_axis, self.y_axis)

    def with_x_axis(self, x_axis: Vector) -> Plane:
        return Plane.from_axis(self.origin, x_axis)

    def transform(self, change: Transform) -> Plane:
        """Move the frame; a mirroring transform flips the y-axis side."""
        x_axis = change.transform_vector(self.x_axis).unitize()
        y_moved = change.transform_vector(self.y_axis)
        y_axis = Vector(-x_axis.y, x_axis.x)
        if y_axis.dot(y_moved) < 0:
            y_axis = y_axis.reverse()
        return Plane(change.transform_point(self.origin), x_axis, y_axis)

    def equals(self, other: Plane, tolerance: float | None = None) -> bool:
        return (
            self.origin.equals(other.origin, tolerance)
            and self.x_axis.equals(other.x_axis, tolerance)
            and self.y_axis.equals(other.y_axis, tolerance)
        )

    def __str__(self) -> str:
        return f"[{self.origin},{self.x_axis}]"
