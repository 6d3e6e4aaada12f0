"""Shared behaviour for shapes that can be moved by an affine transform.

Every shape implements the single primitive ``transform(change)``; the
convenience operations build the matching matrix and delegate to it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from shapekit.domain.plane import Plane
    from shapekit.domain.point import Point
    from shapekit.domain.transform import Transform
    from shapekit.domain.vector import Vector


class Transformable(ABC):
    """Capability mixin for shapes that support affine transforms."""

    __slots__ = ()

    @abstractmethod
    def transform(self, change: Transform) -> Self:
        """Return a copy of the shape with ``change`` applied."""

    def translate(self, move: Vector, distance: float | None = None) -> Self:
        """Return a copy moved along ``move``.

        Args:
            move: Direction of travel
            distance: Distance to travel; the length of ``move`` when None
        """
        from shapekit.domain.transform import Transform

        return self.transform(Transform.translate(move, distance))

    def rotate(self, angle: float, pivot: Point | None = None) -> Self:
        """Return a copy rotated by ``angle`` radians about ``pivot`` (origin if None)."""
        from shapekit.domain.transform import Transform

        return self.transform(Transform.rotate(angle, pivot))

    def scale(self, x: float, y: float | None = None, center: Point | None = None) -> Self:
        """Return a copy scaled by ``x`` and ``y`` (``y`` defaults to ``x``) about ``center``."""
        from shapekit.domain.transform import Transform

        return self.transform(Transform.scale(x, y, center))

    def change_basis(self, plane_from: Plane, plane_to: Plane) -> Self:
        """Re-express the shape's coordinates from ``plane_from`` into ``plane_to``."""
        from shapekit.domain.transform import Transform

        return self.transform(Transform.change_basis(plane_from, plane_to))

    def plane_to_plane(self, plane_from: Plane, plane_to: Plane) -> Self:
        """Move the shape so it sits on ``plane_to`` the way it sat on ``plane_from``."""
        from shapekit.domain.transform import Transform

        return self.transform(Transform.plane_to_plane(plane_from, plane_to))
