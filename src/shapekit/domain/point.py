"""Two-dimensional points."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from shapekit.domain.tolerance import approximately_equal, format_number
from shapekit.domain.transformable import Transformable
from shapekit.domain.vector import Vector

if TYPE_CHECKING:
    from shapekit.domain.transform import Transform


@dataclass(frozen=True, slots=True)
class Point(Transformable):
    """A location in 2D space.

    Immutable and hashable. Transforms applied to points include translation.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    @classmethod
    def origin(cls) -> Point:
        return cls(0.0, 0.0)

    @classmethod
    def from_coords(cls, coords: Sequence[float]) -> Point:
        """Create a point from an ``(x, y)`` pair."""
        x, y = coords
        return cls(float(x), float(y))

    def add(self, move: Vector) -> Point:
        return Point(self.x + move.x, self.y + move.y)

    def subtract(self, other: Point) -> Vector:
        """Return the vector pointing from ``other`` to this point."""
        return Vector(self.x - other.x, self.y - other.y)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def equals(self, other: Point, tolerance: float | None = None) -> bool:
        """Return True when both coordinates match within tolerance."""
        return approximately_equal(self.x, other.x, tolerance) and approximately_equal(
            self.y, other.y, tolerance
        )

    def transform(self, change: Transform) -> Point:
        return change.transform_point(self)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def __add__(self, move: Vector) -> Point:
        return self.add(move)

    @overload
    def __sub__(self, other: Point) -> Vector: ...

    @overload
    def __sub__(self, other: Vector) -> Point: ...

    def __sub__(self, other: Point | Vector) -> Vector | Point:
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        return self.subtract(other)

    def __str__(self) -> str:
        return f"({format_number(self.x)},{format_number(self.y)})"
