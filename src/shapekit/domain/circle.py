"""Circles positioned on a plane."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shapekit.config.settings import resolve_tolerance
from shapekit.domain.bounding_box import BoundingBox
from shapekit.domain.enums import PointContainment
from shapekit.domain.interval import SortedInterval
from shapekit.domain.plane import Plane
from shapekit.domain.point import Point
from shapekit.domain.tolerance import format_number
from shapekit.domain.transformable import Transformable
from shapekit.domain.vector import Vector
from shapekit.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from shapekit.domain.transform import Transform


@dataclass(frozen=True, slots=True)
class Circle(Transformable):
    """A circle of ``radius`` centred on ``plane.origin``.

    The circle is parametrised by angle around the plane's basis:
    ``point_at(t) = plane.point_at(r*cos(t), r*sin(t))``, so ``t = 0`` lies on
    the plane's x-axis.

    Attributes:
        radius: Radius, always greater than zero
        plane: Frame the circle is drawn on (world XY by default)

    Raises:
        InvalidArgumentError: If radius is not positive
    """

    radius: float
    plane: Plane = field(default_factory=Plane.world_xy)

    def __post_init__(self) -> None:
        if not self.radius > 0:
            raise InvalidArgumentError(
                f"Circle radius must be greater than zero, got {self.radius}"
            )

    @classmethod
    def from_center(cls, center: Point, radius: float) -> Circle:
        return cls(radius, Plane.world_xy().with_origin(center))

    @classmethod
    def from_center_start(cls, center: Point, start: Point) -> Circle:
        """Create a circle through ``start`` whose parameter 0 lies at ``start``.

        Raises:
            InvalidArgumentError: If ``start`` coincides with ``center``
        """
        radius = center.distance_to(start)
        if radius == 0:
            raise InvalidArgumentError("Circle start point cannot coincide with its center")
        return cls(radius, Plane.from_axis(center, start.subtract(center)))

    @classmethod
    def from_three_points(
        cls, p1: Point, p2: Point, p3: Point, tolerance: float | None = None
    ) -> Circle:
        """Create the circle passing through three points.

        Raises:
            InvalidArgumentError: If the points are collinear
        """
        temp = p2.x**2 + p2.y**2
        bc = (p1.x**2 + p1.y**2 - temp) / 2
        cd = (temp - p3.x**2 - p3.y**2) / 2
        det = (p1.x - p2.x) * (p2.y - p3.y) - (p2.x - p3.x) * (p1.y - p2.y)
        if abs(det) <= resolve_tolerance(tolerance):
            raise InvalidArgumentError("Points can't be in a line")
        cx = (bc * (p2.y - p3.y) - cd * (p1.y - p2.y)) / det
        cy = ((p1.x - p2.x) * cd - (p2.x - p3.x) * bc) / det
        center = Point(cx, cy)
        return cls.from_center(center, center.distance_to(p1))

    @property
    def center(self) -> Point:
        return self.plane.origin

    @property
    def diameter(self) -> float:
        return self.radius * 2

    @property
    def circumference(self) -> float:
        return 2 * math.pi * self.radius

    @property
    def area(self) -> float:
        return math.pi * self.radius**2

    @property
    def bounding_box(self) -> BoundingBox:
        c = self.center
        return BoundingBox(
            SortedInterval(c.x - self.radius, c.x + self.radius),
            SortedInterval(c.y - self.radius, c.y + self.radius),
        )

    def point_at(self, t: float) -> Point:
        """Evaluate the circle at angle ``t`` (radians)."""
        return self.plane.point_at(self.radius * math.cos(t), self.radius * math.sin(t))

    def point_at_length(self, distance: float) -> Point:
        """Evaluate the circle ``distance`` units along the circumference from parameter 0."""
        return self.point_at(distance / self.radius)

    def tangent_at(self, t: float) -> Vector:
        """Unit tangent in the direction of increasing parameter."""
        x_axis, y_axis = self.plane.x_axis, self.plane.y_axis
        return x_axis.multiply(-math.sin(t)).add(y_axis.multiply(math.cos(t)))

    def closest_parameter(self, point: Point) -> float:
        """Angle of the circle point nearest ``point``, in [0, 2*pi).

        The angle is measured from the plane's x-axis towards its y-axis. The
        centre itself has no unique nearest point and reports 0.
        """
        local = self.plane.remap_to_plane_space(point)
        if local.x == 0 and local.y == 0:
            return 0.0
        angle = math.atan2(local.y, local.x)
        if angle < 0:
            angle += 2 * math.pi
        return angle

    def closest_point(self, point: Point, include_interior: bool = False) -> Point:
        """Find the nearest point on the circle.

        Args:
            point: Point to search from
            include_interior: If True, points inside the circle are returned unchanged

        Returns:
            The closest point
        """
        offset = point.subtract(self.center)
        distance = offset.length
        if include_interior and distance <= self.radius:
            return point
        if distance == 0:
            return self.point_at(0.0)
        return self.center.add(offset.multiply(self.radius / distance))

    def contains(self, point: Point, tolerance: float | None = None) -> PointContainment:
        """Classify a point against the circle.

        Points within tolerance of the circumference are COINCIDENT.
        """
        distance = self.center.distance_to(point)
        if abs(distance - self.radius) <= resolve_tolerance(tolerance):
            return PointContainment.COINCIDENT
        if distance < self.radius:
            return PointContainment.INSIDE
        return PointContainment.OUTSIDE

    def with_radius(self, radius: float) -> Circle:
        return Circle(radius, self.plane)

    def with_diameter(self, diameter: float) -> Circle:
        return Circle(diameter / 2, self.plane)

    def with_circumference(self, circumference: float) -> Circle:
        return Circle(circumference / (2 * math.pi), self.plane)

    def with_area(self, area: float) -> Circle:
        if area <= 0:
            raise InvalidArgumentError(f"Circle area must be greater than zero, got {area}")
        return Circle(math.sqrt(area / math.pi), self.plane)

    def with_center(self, center: Point) -> Circle:
        return Circle(self.radius, self.plane.with_origin(center))

    def with_plane(self, plane: Plane) -> Circle:
        return Circle(self.radius, plane)

    def transform(self, change: Transform) -> Circle:
        """Apply a transform that keeps the circle round.

        Raises:
            InvalidArgumentError: If ``change`` scales the axes unevenly or shears
        """
        factor = change.similarity_scale()
        if factor is None or factor == 0:
            raise InvalidArgumentError("Circles only support transforms with uniform scale")
        return Circle(self.radius * factor, self.plane.transform(change))

    def equals(self, other: Circle, tolerance: float | None = None) -> bool:
        return (
            abs(self.radius - other.radius) <= resolve_tolerance(tolerance)
            and self.plane.equals(other.plane, tolerance)
        )

    def __str__(self) -> str:
        return f"[{self.plane},{format_number(self.radius)}]"
