"""Geometric primitives for shapekit.

All shapes are immutable frozen dataclasses. Methods that would change a
shape return a new instance instead (``with_*``, ``transform``, ``reverse``).
Every tolerance-sensitive method accepts an explicit tolerance override and
otherwise uses the active :mod:`shapekit.config` settings.

Key classes:
- Vector, Point: Directions and locations
- Interval, SortedInterval: Parameter ranges
- Transform: 3x3 affine matrices
- Plane: Oriented local coordinate frames
- BoundingBox, Rectangle: Axis-aligned and plane-aligned boxes
- Line, Ray, Circle: Elementary curves
- Polyline, Polygon: Chains of segments and areas with holes
"""

from shapekit.domain.enums import (
    CircleIntersectionKind,
    CurveOrientation,
    PointContainment,
    RayRange,
)
from shapekit.domain.tolerance import approximately_equal
from shapekit.domain.transformable import Transformable
from shapekit.domain.vector import Vector
from shapekit.domain.point import Point
from shapekit.domain.interval import Interval, SortedInterval
from shapekit.domain.transform import Transform
from shapekit.domain.plane import Plane
from shapekit.domain.bounding_box import BoundingBox
from shapekit.domain.line import Line
from shapekit.domain.ray import Ray
from shapekit.domain.circle import Circle
from shapekit.domain.polyline import Polyline
from shapekit.domain.rectangle import Rectangle
from shapekit.domain.polygon import Polygon

__all__: list[str] = [
    # Enums
    "CircleIntersectionKind",
    "CurveOrientation",
    "PointContainment",
    "RayRange",
    # Helpers
    "Transformable",
    "approximately_equal",
    # Core types
    "Vector",
    "Point",
    "Interval",
    "SortedInterval",
    "Transform",
    "Plane",
    "BoundingBox",
    "Line",
    "Ray",
    "Circle",
    "Polyline",
    "Rectangle",
    "Polygon",
]
