"""Core algorithms for shapekit.

This module contains the algorithms that operate across shapes:

- Intersection of lines, rays, circles, boxes, polylines and polygons
- Ring adaptation around the external polygon clipping engine

Key functions:
- line, ray, polyline: Intersect a primary shape with any supported shape
- line_line, ray_line, ray_ray: Pairwise straight-line intersections
- line_box, ray_box: Parameter range inside a bounding box
- line_circle, ray_circle: Quadratic line/circle intersection
- clipping.union, clipping.intersection, clipping.difference: Polygon boolean operations

Key classes:
- PolygonClipper: Protocol for the clipping engine
- ShapelyClipper: Clipping engine backed by shapely
"""

from shapekit.core.clipping import (
    PolygonClipper,
    ShapelyClipper,
    rings_to_polygons,
    to_multipolygon,
)
from shapekit.core.intersection import (
    line,
    line_box,
    line_circle,
    line_line,
    polyline,
    polyline_polyline,
    ray,
    ray_box,
    ray_circle,
    ray_line,
    ray_ray,
)

__all__ = [
    "PolygonClipper",
    "ShapelyClipper",
    "line",
    "line_box",
    "line_circle",
    "line_line",
    "polyline",
    "polyline_polyline",
    "ray",
    "ray_box",
    "ray_circle",
    "ray_line",
    "ray_ray",
    "rings_to_polygons",
    "to_multipolygon",
]
