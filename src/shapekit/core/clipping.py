"""Ring adaptation around an external polygon clipping engine.

Boolean operations are never computed here. Shapes are converted to plain
coordinate rings with normalised winding, handed to a :class:`PolygonClipper`
and the rings that come back are reassembled into :class:`Polygon` objects.

Ring format:
- Ring: list of ``(x, y)`` pairs, closed (first pair repeated at the end)
- polygon: list of rings, outer ring first
- multipolygon: list of polygons

Outer rings wind counter-clockwise (positive shoelace area in y-up
coordinates) and holes clockwise, regardless of the ``invert_y`` setting.
"""

from collections.abc import Iterable
from typing import Protocol, TypeAlias

import structlog
from shapely.errors import GEOSException
from shapely.geometry import GeometryCollection, MultiPolygon
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient
from shapely.ops import unary_union

from shapekit.domain import Polygon, Polyline
from shapekit.exceptions import ClippingError

logger = structlog.get_logger(__name__)

Ring: TypeAlias = list[tuple[float, float]]
PolygonRings: TypeAlias = list[Ring]
MultiPolygonRings: TypeAlias = list[PolygonRings]


class PolygonClipper(Protocol):
    """Boolean operations on multipolygons in ring format."""

    def union(self, subject: MultiPolygonRings, clip: MultiPolygonRings) -> MultiPolygonRings:
        ...

    def intersection(
        self, subject: MultiPolygonRings, clip: MultiPolygonRings
    ) -> MultiPolygonRings:
        ...

    def difference(
        self, subject: MultiPolygonRings, clip: MultiPolygonRings
    ) -> MultiPolygonRings:
        ...


class ShapelyClipper:
    """Polygon clipper backed by shapely (GEOS)."""

    def union(self, subject: MultiPolygonRings, clip: MultiPolygonRings) -> MultiPolygonRings:
        return self._run("union", subject, clip)

    def intersection(
        self, subject: MultiPolygonRings, clip: MultiPolygonRings
    ) -> MultiPolygonRings:
        return self._run("intersection", subject, clip)

    def difference(
        self, subject: MultiPolygonRings, clip: MultiPolygonRings
    ) -> MultiPolygonRings:
        return self._run("difference", subject, clip)

    def _run(
        self, operation: str, subject: MultiPolygonRings, clip: MultiPolygonRings
    ) -> MultiPolygonRings:
        try:
            result = getattr(_to_geometry(subject), operation)(_to_geometry(clip))
        except GEOSException as e:
            raise ClippingError(str(e)) from e
        return _from_geometry(result)


def _to_geometry(multipolygon: MultiPolygonRings) -> BaseGeometry:
    # unary_union dissolves overlaps so every operand is a valid geometry
    return unary_union([ShapelyPolygon(rings[0], rings[1:]) for rings in multipolygon])


def _from_geometry(geometry: BaseGeometry) -> MultiPolygonRings:
    if isinstance(geometry, ShapelyPolygon):
        parts = [geometry]
    elif isinstance(geometry, MultiPolygon | GeometryCollection):
        parts = [g for g in geometry.geoms if isinstance(g, ShapelyPolygon)]
    else:
        parts = []

    result: MultiPolygonRings = []
    for part in parts:
        if part.is_empty:
            continue
        oriented = orient(part, sign=1.0)
        rings = [list(oriented.exterior.coords)]
        rings.extend(list(interior.coords) for interior in oriented.interiors)
        result.append([[(float(x), float(y)) for x, y in ring] for ring in rings])
    return result


def polyline_to_ring(polyline: Polyline, positive: bool) -> Ring:
    """Convert a closed polyline to a ring with the requested winding.

    Args:
        polyline: Closed polyline
        positive: True for a counter-clockwise (outer) ring, False for a hole

    Raises:
        InvalidStateError: If the polyline is open
    """
    if (polyline.signed_area > 0) != positive:
        polyline = polyline.reverse()
    return polyline.to_ring()


def polygon_to_rings(polygon: Polygon) -> PolygonRings:
    """Convert a polygon to rings: outer ring first, then holes."""
    return [
        polyline_to_ring(polygon.boundary, True),
        *(polyline_to_ring(hole, False) for hole in polygon.holes),
    ]


def to_multipolygon(
    shapes: Polygon | Polyline | Iterable[Polygon | Polyline],
) -> MultiPolygonRings:
    """Convert polygons and closed polylines to the clipper's input format."""
    if isinstance(shapes, Polygon):
        return [polygon_to_rings(shapes)]
    if isinstance(shapes, Polyline):
        return [[polyline_to_ring(shapes, True)]]
    result: MultiPolygonRings = []
    for shape in shapes:
        result.extend(to_multipolygon(shape))
    return result


def rings_to_polygons(
    multipolygon: MultiPolygonRings, tolerance: float | None = None
) -> list[Polygon]:
    """Reassemble clipper output into polygons.

    Every ring is flattened out of its polygon grouping and classified by
    winding. Each hole is then given to the smallest outer ring that
    contains it.

    Raises:
        ClippingError: If a hole is not inside any outer ring
    """
    outers: list[Polyline] = []
    holes: list[Polyline] = []
    for polygon_rings in multipolygon:
        for ring in polygon_rings:
            loop = Polyline.from_coords(ring, closed=True)
            signed = loop.signed_area
            if signed > 0:
                outers.append(loop)
            elif signed < 0:
                holes.append(loop)
            else:
                logger.debug("Dropping degenerate ring", point_count=len(ring))

    owned: list[list[Polyline]] = [[] for _ in outers]
    for hole in holes:
        owners = [i for i, outer in enumerate(outers) if outer.contains_polyline(hole, tolerance)]
        if not owners:
            raise ClippingError("hole ring is not inside any outer ring")
        owner = min(owners, key=lambda i: outers[i].area)
        owned[owner].append(hole)

    return [Polygon(outer, tuple(owned[i])) for i, outer in enumerate(outers)]


def _run(
    operation: str,
    subject: Polygon | Polyline | Iterable[Polygon | Polyline],
    clip: Polygon | Polyline | Iterable[Polygon | Polyline],
    clipper: PolygonClipper | None,
) -> list[Polygon]:
    engine = clipper if clipper is not None else ShapelyClipper()
    subject_rings = to_multipolygon(subject)
    clip_rings = to_multipolygon(clip)
    logger.debug(
        "Clipping polygons",
        operation=operation,
        subject_polygons=len(subject_rings),
        clip_polygons=len(clip_rings),
    )
    polygons = rings_to_polygons(getattr(engine, operation)(subject_rings, clip_rings))
    logger.debug("Clipping complete", operation=operation, polygons=len(polygons))
    return polygons


def union(
    subject: Polygon | Polyline | Iterable[Polygon | Polyline],
    clip: Polygon | Polyline | Iterable[Polygon | Polyline],
    clipper: PolygonClipper | None = None,
) -> list[Polygon]:
    """Area covered by either operand."""
    return _run("union", subject, clip, clipper)


def intersection(
    subject: Polygon | Polyline | Iterable[Polygon | Polyline],
    clip: Polygon | Polyline | Iterable[Polygon | Polyline],
    clipper: PolygonClipper | None = None,
) -> list[Polygon]:
    """Area covered by both operands."""
    return _run("intersection", subject, clip, clipper)


def difference(
    subject: Polygon | Polyline | Iterable[Polygon | Polyline],
    clip: Polygon | Polyline | Iterable[Polygon | Polyline],
    clipper: PolygonClipper | None = None,
) -> list[Polygon]:
    """Area of ``subject`` not covered by ``clip``."""
    return _run("difference", subject, clip, clipper)
