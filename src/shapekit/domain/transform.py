"""Affine transforms as 3x3 matrices.

Matrices are stored row-major with a fixed bottom row of ``(0, 0, 1)``::

    | m00 m01 m02 |
    | m10 m11 m12 |
    |  0   0   1  |

A point ``(x, y)`` maps to ``(m00*x + m01*y + m02, m10*x + m11*y + m12)``.
Vectors ignore the translation column.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shapekit.config.settings import get_settings
from shapekit.domain.point import Point
from shapekit.domain.tolerance import approximately_equal, format_number
from shapekit.domain.vector import Vector
from shapekit.exceptions import InvalidStateError

if TYPE_CHECKING:
    from shapekit.domain.plane import Plane


@dataclass(frozen=True, slots=True)
class Transform:
    """A 2D affine transformation.

    Composition follows matrix multiplication: ``a.multiply(b)`` (or
    ``a @ b``) applies ``b`` first and ``a`` second. ``a.then(b)`` reads in
    application order and equals ``b @ a``.

    Example:
        >>> move = Transform.translate(Vector(1, 0))
        >>> turn = Transform.rotate(math.pi / 2)
        >>> move.then(turn).transform_point(Point(0, 0))
        Point(x=6.123233995736766e-17, y=1.0)
    """

    m00: float = 1.0
    m01: float = 0.0
    m02: float = 0.0
    m10: float = 0.0
    m11: float = 1.0
    m12: float = 0.0

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @classmethod
    def translate(cls, move: Vector, distance: float | None = None) -> Transform:
        """Create a translation along ``move``.

        Args:
            move: Direction of travel
            distance: Distance to travel; the length of ``move`` when None
        """
        actual = move if distance is None else move.with_length(distance)
        return cls(m02=actual.x, m12=actual.y)

    @classmethod
    def rotate(cls, angle: float, pivot: Point | None = None) -> Transform:
        """Create a rotation about ``pivot`` (the world origin when None).

        Positive angles rotate counter-clockwise in the y-up convention and
        clockwise numerically when ``invert_y`` is active.
        """
        if get_settings().invert_y:
            angle = -angle
        cos = math.cos(angle)
        sin = math.sin(angle)
        if pivot is None:
            return cls(cos, -sin, 0.0, sin, cos, 0.0)
        return cls(
            cos,
            -sin,
            pivot.x - (cos * pivot.x - sin * pivot.y),
            sin,
            cos,
            pivot.y - (sin * pivot.x + cos * pivot.y),
        )

    @classmethod
    def scale(cls, x: float, y: float | None = None, center: Point | None = None) -> Transform:
        """Create a scale about ``center`` (the world origin when None).

        Args:
            x: Factor along the x-axis
            y: Factor along the y-axis; same as ``x`` when None
            center: Fixed point of the scale
        """
        sy = x if y is None else y
        if center is None:
            return cls(m00=x, m11=sy)
        return cls(x, 0.0, center.x * (1 - x), 0.0, sy, center.y * (1 - sy))

    @classmethod
    def plane_to_world(cls, plane: Plane) -> Transform:
        """Map plane coordinates ``(u, v)`` to world coordinates."""
        return cls(
            plane.x_axis.x,
            plane.y_axis.x,
            plane.origin.x,
            plane.x_axis.y,
            plane.y_axis.y,
            plane.origin.y,
        )

    @classmethod
    def world_to_plane(cls, plane: Plane) -> Transform:
        """Map world coordinates to coordinates ``(u, v)`` on ``plane``."""
        x_axis, y_axis, origin = plane.x_axis, plane.y_axis, plane.origin
        return cls(
            x_axis.x,
            x_axis.y,
            -(x_axis.x * origin.x + x_axis.y * origin.y),
            y_axis.x,
            y_axis.y,
            -(y_axis.x * origin.x + y_axis.y * origin.y),
        )

    @classmethod
    def change_basis(cls, plane_from: Plane, plane_to: Plane) -> Transform:
        """Re-express coordinates measured in ``plane_from`` as coordinates in ``plane_to``."""
        return cls.world_to_plane(plane_to).multiply(cls.plane_to_world(plane_from))

    @classmethod
    def plane_to_plane(cls, plane_from: Plane, plane_to: Plane) -> Transform:
        """Move geometry sitting on ``plane_from`` so it sits on ``plane_to`` the same way."""
        return cls.plane_to_world(plane_to).multiply(cls.world_to_plane(plane_from))

    @property
    def determinant(self) -> float:
        return self.m00 * self.m11 - self.m01 * self.m10

    def multiply(self, other: Transform) -> Transform:
        """Return ``self @ other``: ``other`` is applied first."""
        return Transform(
            self.m00 * other.m00 + self.m01 * other.m10,
            self.m00 * other.m01 + self.m01 * other.m11,
            self.m00 * other.m02 + self.m01 * other.m12 + self.m02,
            self.m10 * other.m00 + self.m11 * other.m10,
            self.m10 * other.m01 + self.m11 * other.m11,
            self.m10 * other.m02 + self.m11 * other.m12 + self.m12,
        )

    def then(self, other: Transform) -> Transform:
        """Return the transform that applies ``self`` and then ``other``."""
        return other.multiply(self)

    def inverse(self) -> Transform:
        """Return the inverse transform.

        Raises:
            InvalidStateError: If the matrix is singular
        """
        det = self.determinant
        if det == 0:
            raise InvalidStateError("Transform is singular and cannot be inverted")
        a = self.m11 / det
        b = -self.m01 / det
        c = -self.m10 / det
        d = self.m00 / det
        return Transform(
            a,
            b,
            -(a * self.m02 + b * self.m12),
            c,
            d,
            -(c * self.m02 + d * self.m12),
        )

    def similarity_scale(self, tolerance: float | None = None) -> float | None:
        """Return the uniform scale factor, or None if the transform distorts shapes.

        A similarity keeps angles: its columns are perpendicular and equally long.
        """
        col_x = Vector(self.m00, self.m10)
        col_y = Vector(self.m01, self.m11)
        length_x = col_x.length
        if not approximately_equal(length_x, col_y.length, tolerance):
            return None
        if not approximately_equal(col_x.dot(col_y), 0.0, tolerance):
            return None
        return length_x

    def transform_point(self, point: Point) -> Point:
        return Point(
            self.m00 * point.x + self.m01 * point.y + self.m02,
            self.m10 * point.x + self.m11 * point.y + self.m12,
        )

    def transform_points(self, points: Iterable[Point]) -> list[Point]:
        return [self.transform_point(p) for p in points]

    def transform_vector(self, vector: Vector) -> Vector:
        return Vector(
            self.m00 * vector.x + self.m01 * vector.y,
            self.m10 * vector.x + self.m11 * vector.y,
        )

    def equals(self, other: Transform, tolerance: float | None = None) -> bool:
        return all(
            approximately_equal(a, b, tolerance)
            for a, b in zip(self._values(), other._values(), strict=True)
        )

    def _values(self) -> tuple[float, ...]:
        return (self.m00, self.m01, self.m02, self.m10, self.m11, self.m12)

    def __matmul__(self, other: Transform) -> Transform:
        return self.multiply(other)

    def __str__(self) -> str:
        rows = (
            (self.m00, self.m01, self.m02),
            (self.m10, self.m11, self.m12),
            (0.0, 0.0, 1.0),
        )
        return "[" + ",".join(
            "[" + ",".join(format_number(v) for v in row) + "]" for row in rows
        ) + "]"
