"""Two-dimensional direction vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shapekit.config.settings import get_settings, resolve_angle_tolerance, resolve_tolerance
from shapekit.domain.tolerance import approximately_equal, format_number
from shapekit.domain.transformable import Transformable
from shapekit.exceptions import InvalidArgumentError, InvalidStateError

if TYPE_CHECKING:
    from shapekit.domain.point import Point
    from shapekit.domain.transform import Transform


@dataclass(frozen=True, slots=True)
class Vector(Transformable):
    """A direction and magnitude in 2D space.

    Vectors ignore the translation part of a transform.

    Attributes:
        x: X component
        y: Y component
    """

    x: float
    y: float

    @classmethod
    def from_points(cls, start: Point, end: Point) -> Vector:
        """Create the vector pointing from ``start`` to ``end``."""
        return cls(end.x - start.x, end.y - start.y)

    @classmethod
    def world_x(cls) -> Vector:
        return cls(1.0, 0.0)

    @classmethod
    def world_y(cls) -> Vector:
        return cls(0.0, 1.0)

    @classmethod
    def zero(cls) -> Vector:
        return cls(0.0, 0.0)

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def is_zero(self, tolerance: float | None = None) -> bool:
        """Return True when the vector has no meaningful length."""
        return self.length <= resolve_tolerance(tolerance)

    def is_unit(self, tolerance: float | None = None) -> bool:
        """Return True when the vector has length 1 within tolerance."""
        return approximately_equal(self.length, 1.0, tolerance)

    def add(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def subtract(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def multiply(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor)

    def divide(self, denominator: float) -> Vector:
        if denominator == 0:
            raise InvalidArgumentError("Cannot divide a vector by zero")
        return Vector(self.x / denominator, self.y / denominator)

    def reverse(self) -> Vector:
        return Vector(-self.x, -self.y)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        """Return the z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def angle(self, other: Vector) -> float:
        """Return the unsigned angle to ``other`` in the range [0, pi].

        Raises:
            InvalidStateError: If either vector has zero length
        """
        self._require_length(other)
        return abs(math.atan2(self.cross(other), self.dot(other)))

    def angle_signed(self, other: Vector) -> float:
        """Return the signed angle from this vector to ``other``.

        Positive angles turn counter-clockwise in the y-up convention; the
        sign is flipped when ``invert_y`` is active. The result lies in
        (-pi, pi].

        Raises:
            InvalidStateError: If either vector has zero length
        """
        self._require_length(other)
        angle = math.atan2(self.cross(other), self.dot(other))
        if get_settings().invert_y:
            angle = -angle
        if angle <= -math.pi:
            angle += 2 * math.pi
        return angle

    def perpendicular(self) -> Vector:
        """Return this vector turned a quarter turn in the positive rotation direction."""
        if get_settings().invert_y:
            return Vector(self.y, -self.x)
        return Vector(-self.y, self.x)

    def unitize(self) -> Vector:
        """Return a unit-length copy.

        Raises:
            InvalidStateError: If the vector has zero length
        """
        length = self.length
        if length == 0:
            raise InvalidStateError("Cannot unitize a zero-length vector")
        return Vector(self.x / length, self.y / length)

    def with_length(self, length: float) -> Vector:
        return self.unitize().multiply(length)

    def with_x(self, x: float) -> Vector:
        return Vector(x, self.y)

    def with_y(self, y: float) -> Vector:
        return Vector(self.x, y)

    def is_parallel_to(self, other: Vector, angle_tolerance: float | None = None) -> bool:
        """Return True when the vectors point along the same line (either sense)."""
        angle = self.angle(other)
        return min(angle, math.pi - angle) <= resolve_angle_tolerance(angle_tolerance)

    def is_perpendicular_to(self, other: Vector, angle_tolerance: float | None = None) -> bool:
        return approximately_equal(
            self.angle(other), math.pi / 2, resolve_angle_tolerance(angle_tolerance)
        )

    def equals(self, other: Vector, tolerance: float | None = None) -> bool:
        """Return True when both components match within tolerance."""
        return approximately_equal(self.x, other.x, tolerance) and approximately_equal(
            self.y, other.y, tolerance
        )

    def transform(self, change: Transform) -> Vector:
        return change.transform_vector(self)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def _require_length(self, other: Vector) -> None:
        if self.length == 0 or other.length == 0:
            raise InvalidStateError("Cannot measure an angle with a zero-length vector")

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.subtract(other)

    def __mul__(self, factor: float) -> Vector:
        return self.multiply(factor)

    __rmul__ = __mul__

    def __truediv__(self, denominator: float) -> Vector:
        return self.divide(denominator)

    def __neg__(self) -> Vector:
        return self.reverse()

    def __str__(self) -> str:
        return f"⟨{format_number(self.x)},{format_number(self.y)}⟩"
