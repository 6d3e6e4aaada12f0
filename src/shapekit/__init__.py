"""Shapekit - a 2D computational geometry kernel.

Shapekit provides immutable geometric primitives (points, vectors, intervals,
lines, rays, circles, polylines, rectangles, bounding boxes, planes and
polygons) together with affine transforms and the intersection, containment
and closest-point algorithms that operate on them.

Example:
    >>> from shapekit.domain import Line, Point
    >>> line = Line(Point(0, 0), Point(10, 0))
    >>> line.closest_point(Point(5, 5))
    Point(x=5.0, y=0.0)
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
