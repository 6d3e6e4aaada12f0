"""Intersection algorithms between shapes.

Pairwise routines return small result records; the entry points
:func:`line`, :func:`ray` and :func:`polyline` accept any supported shape
(or a sequence of shapes) and return the sorted parameters along the
primary shape where they meet.

Composite shapes are broken into segments. The distance tolerance lets a
crossing lie slightly past either end of a segment; it is converted to each
segment's own parameter units so long and short segments are treated alike.
When two adjoining segments both report a crossing on their shared vertex,
only the later segment keeps it, so such a hit is reported once.
Every composite search runs a bounding-box overlap test first.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from shapekit.config.settings import resolve_angle_tolerance, resolve_tolerance
from shapekit.domain import (
    BoundingBox,
    Circle,
    CircleIntersectionKind,
    Line,
    Point,
    Polygon,
    Polyline,
    Ray,
    RayRange,
    Rectangle,
    SortedInterval,
    Vector,
)


@dataclass(frozen=True, slots=True)
class LineLineIntersection:
    """Where two lines cross.

    Attributes:
        intersects: Whether the lines meet within the requested ranges
        line_a_t: Parameter along the first line
        line_b_t: Parameter along the second line
    """

    intersects: bool
    line_a_t: float = math.nan
    line_b_t: float = math.nan


@dataclass(frozen=True, slots=True)
class RayLineIntersection:
    """Where a ray crosses a line."""

    intersects: bool
    ray_t: float = math.nan
    line_t: float = math.nan


@dataclass(frozen=True, slots=True)
class RayRayIntersection:
    """Where two rays cross."""

    intersects: bool
    ray_a_t: float = math.nan
    ray_b_t: float = math.nan


@dataclass(frozen=True, slots=True)
class BoxIntersection:
    """Portion of a line or ray that lies inside a bounding box.

    Attributes:
        intersects: Whether any part lies inside the box
        domain: Parameter range inside the box, None when there is none
    """

    intersects: bool
    domain: SortedInterval | None = None


@dataclass(frozen=True, slots=True)
class CircleIntersection:
    """Where a line or ray meets a circle.

    Attributes:
        kind: NONE, SINGLE (tangent or one surviving root) or MULTIPLE
        parameters: Sorted parameters along the line or ray
    """

    kind: CircleIntersectionKind
    parameters: tuple[float, ...] = ()

    @property
    def intersects(self) -> bool:
        return self.kind is not CircleIntersectionKind.NONE


# ---------------------------------------------------------------------------
# Pairwise routines
# ---------------------------------------------------------------------------


def _solve(
    a_start: Point,
    a_dir: Vector,
    b_start: Point,
    b_dir: Vector,
    angle_tolerance: float | None = None,
) -> tuple[float, float] | None:
    """Solve ``a_start + t*a_dir = b_start + s*b_dir`` for ``(t, s)``.

    Returns None for degenerate input and for directions within
    ``angle_tolerance`` of parallel (coincident lines included).
    """
    length_a = a_dir.length
    length_b = b_dir.length
    if length_a == 0 or length_b == 0:
        return None
    denominator = a_dir.cross(b_dir)
    # |cross| / (|a||b|) is the sine of the angle between the directions
    limit = math.sin(resolve_angle_tolerance(angle_tolerance))
    if abs(denominator) <= length_a * length_b * limit:
        return None
    offset = b_start.subtract(a_start)
    return offset.cross(b_dir) / denominator, offset.cross(a_dir) / denominator


def _on_segment(t: float, segment: Line, tolerance: float) -> bool:
    """Check ``t`` lies on ``segment``, allowing ``tolerance`` of distance past either end."""
    length = segment.length
    slack = tolerance / length if length > 0 else 0.0
    return -slack <= t <= 1 + slack


def _following_segment(polyline: Polyline, index: int) -> int | None:
    if index + 1 < polyline.segment_count:
        return index + 1
    return 0 if polyline.is_closed else None


def _unique_hits(
    polyline: Polyline, hits: list[tuple[int, float, Any]], tolerance: float
) -> list[Any]:
    """Report a crossing on a shared vertex once.

    ``hits`` holds ``(segment index, segment parameter, value)`` triples. A
    hit within ``tolerance`` of a segment's end vertex is dropped when the
    following segment (wrapping around on closed polylines) reports a hit
    within ``tolerance`` of the same vertex.
    """
    segments = polyline.segments
    at_start = {i for i, s, _ in hits if abs(s) * segments[i].length <= tolerance}
    kept = []
    for index, s, value in hits:
        at_end = abs(1 - s) * segments[index].length <= tolerance
        if at_end and _following_segment(polyline, index) in at_start:
            continue
        kept.append(value)
    return kept


def line_line(
    line_a: Line,
    line_b: Line,
    limit_to_finite_segment: bool = True,
    tolerance: float | None = None,
    angle_tolerance: float | None = None,
) -> LineLineIntersection:
    """Intersect two lines.

    Parallel lines never intersect, even when they overlap.

    Args:
        line_a: First line
        line_b: Second line
        limit_to_finite_segment: Require the crossing to lie on both segments
        tolerance: Distance a crossing may lie beyond a segment end
        angle_tolerance: Angle below which the lines count as parallel

    Returns:
        Parameters along both lines
    """
    tol = resolve_tolerance(tolerance)
    solved = _solve(
        line_a.start, line_a.direction, line_b.start, line_b.direction, angle_tolerance
    )
    if solved is None:
        return LineLineIntersection(False)
    t, s = solved
    if limit_to_finite_segment and not (
        _on_segment(t, line_a, tol) and _on_segment(s, line_b, tol)
    ):
        return LineLineIntersection(False)
    return LineLineIntersection(True, t, s)


def ray_line(
    ray: Ray,
    line: Line,
    ray_range: RayRange = RayRange.BOTH,
    limit_to_finite_segment: bool = True,
    tolerance: float | None = None,
    angle_tolerance: float | None = None,
) -> RayLineIntersection:
    """Intersect a ray with a line.

    Args:
        ray: The ray; its parameter is the distance from its start
        line: The line
        ray_range: Which ray parameters are allowed
        limit_to_finite_segment: Require the crossing to lie on the segment
        tolerance: Distance a crossing may lie outside either range
        angle_tolerance: Angle below which the two count as parallel

    Returns:
        Parameters along the ray and the line
    """
    tol = resolve_tolerance(tolerance)
    solved = _solve(ray.start, ray.direction, line.start, line.direction, angle_tolerance)
    if solved is None:
        return RayLineIntersection(False)
    t, s = solved
    if not Ray.in_range(t, ray_range, tol):
        return RayLineIntersection(False)
    if limit_to_finite_segment and not _on_segment(s, line, tol):
        return RayLineIntersection(False)
    return RayLineIntersection(True, t, s)


def ray_ray(
    ray_a: Ray,
    ray_b: Ray,
    range_a: RayRange = RayRange.BOTH,
    range_b: RayRange = RayRange.BOTH,
    tolerance: float | None = None,
    angle_tolerance: float | None = None,
) -> RayRayIntersection:
    """Intersect two rays, each filtered by its own range."""
    tol = resolve_tolerance(tolerance)
    solved = _solve(
        ray_a.start, ray_a.direction, ray_b.start, ray_b.direction, angle_tolerance
    )
    if solved is None:
        return RayRayIntersection(False)
    t, s = solved
    if not (Ray.in_range(t, range_a, tol) and Ray.in_range(s, range_b, tol)):
        return RayRayIntersection(False)
    return RayRayIntersection(True, t, s)


def _clip_to_box(
    start: Point,
    direction: Vector,
    box: BoundingBox,
    t_min: float,
    t_max: float,
    tolerance: float,
) -> BoxIntersection:
    # Liang-Barsky: shrink [t_min, t_max] against each of the four slabs
    checks = (
        (-direction.x, start.x - box.x_range.min),
        (direction.x, box.x_range.max - start.x),
        (-direction.y, start.y - box.y_range.min),
        (direction.y, box.y_range.max - start.y),
    )
    for p, q in checks:
        if p == 0:
            if q < -tolerance:
                return BoxIntersection(False)
            continue
        r = q / p
        if p < 0:
            t_min = max(t_min, r)
        else:
            t_max = min(t_max, r)
    if t_min > t_max:
        return BoxIntersection(False)
    return BoxIntersection(True, SortedInterval(t_min, t_max))


def line_box(
    line: Line,
    box: BoundingBox,
    limit_to_finite_segment: bool = True,
    tolerance: float | None = None,
) -> BoxIntersection:
    """Find the parameter range of ``line`` that lies inside ``box``."""
    tol = resolve_tolerance(tolerance)
    if limit_to_finite_segment:
        return _clip_to_box(line.start, line.direction, box, 0.0, 1.0, tol)
    return _clip_to_box(line.start, line.direction, box, -math.inf, math.inf, tol)


def ray_box(
    ray: Ray,
    box: BoundingBox,
    ray_range: RayRange = RayRange.BOTH,
    tolerance: float | None = None,
) -> BoxIntersection:
    """Find the parameter range of ``ray`` that lies inside ``box``."""
    tol = resolve_tolerance(tolerance)
    t_min = -math.inf if ray_range is RayRange.BOTH else 0.0
    return _clip_to_box(ray.start, ray.direction, box, t_min, math.inf, tol)


def _circle_roots(
    start: Point, direction: Vector, circle: Circle, tolerance: float
) -> tuple[float, ...]:
    # substitute start + t*direction into |p - center|^2 = r^2
    a = direction.dot(direction)
    if a == 0:
        return ()
    f = start.subtract(circle.center)
    b = 2 * f.dot(direction)
    c = f.dot(f) - circle.radius**2
    distance = abs(f.cross(direction)) / math.sqrt(a)
    if abs(distance - circle.radius) <= tolerance:
        return (-b / (2 * a),)
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return ()
    root = math.sqrt(discriminant)
    return ((-b - root) / (2 * a), (-b + root) / (2 * a))


def _circle_result(parameters: list[float]) -> CircleIntersection:
    if not parameters:
        return CircleIntersection(CircleIntersectionKind.NONE)
    if len(parameters) == 1:
        return CircleIntersection(CircleIntersectionKind.SINGLE, tuple(parameters))
    return CircleIntersection(CircleIntersectionKind.MULTIPLE, tuple(sorted(parameters)))


def line_circle(
    line: Line,
    circle: Circle,
    limit_to_finite_segment: bool = True,
    tolerance: float | None = None,
) -> CircleIntersection:
    """Intersect a line with a circle.

    A line that grazes the circle within tolerance is tangent and reports a
    single parameter. Roots beyond the segment ends are dropped for finite lines.
    """
    tol = resolve_tolerance(tolerance)
    roots = _circle_roots(line.start, line.direction, circle, tol)
    if limit_to_finite_segment:
        roots = tuple(t for t in roots if _on_segment(t, line, tol))
    return _circle_result(list(roots))


def ray_circle(
    ray: Ray,
    circle: Circle,
    ray_range: RayRange = RayRange.BOTH,
    tolerance: float | None = None,
) -> CircleIntersection:
    """Intersect a ray with a circle, keeping only roots allowed by ``ray_range``."""
    tol = resolve_tolerance(tolerance)
    roots = _circle_roots(ray.start, ray.direction, circle, tol)
    return _circle_result([t for t in roots if Ray.in_range(t, ray_range, tol)])


def horizontal_ray_line(origin: Point, segment: Line) -> float | None:
    """Cast a ray from ``origin`` towards +x and return the line parameter it crosses.

    A segment counts as crossed when its end points lie on opposite sides
    of the ray, with points exactly at the ray's height treated as lying
    below. This counts a vertex shared by two segments once and ignores
    horizontal segments.

    Returns:
        The line parameter of the crossing, or None
    """
    a, b = segment.start, segment.end
    if (a.y > origin.y) == (b.y > origin.y):
        return None
    s = (origin.y - a.y) / (b.y - a.y)
    x = a.x + (b.x - a.x) * s
    if x <= origin.x:
        return None
    return s


def horizontal_ray_polyline(origin: Point, polyline: Polyline) -> list[float]:
    """Combined polyline parameters crossed by a +x ray from ``origin``."""
    box = polyline.bounding_box
    if origin.x > box.x_range.max or not box.y_range.contains(origin.y, tolerance=0.0):
        return []
    hits = []
    for index, segment in enumerate(polyline.segments):
        s = horizontal_ray_line(origin, segment)
        if s is not None:
            hits.append(index + s)
    return hits


def polyline_polyline(
    polyline_a: Polyline, polyline_b: Polyline, tolerance: float | None = None
) -> list[Point]:
    """Points where two polylines cross, ordered along ``polyline_a``."""
    tol = resolve_tolerance(tolerance)
    if not polyline_a.bounding_box.overlaps(polyline_b.bounding_box, tol):
        return []
    hits: list[tuple[int, float, Any]] = []
    for index, segment in enumerate(polyline_a.segments):
        for t in _line_polyline(segment, polyline_b, True, tol):
            hits.append((index, t, (index + t, segment.point_at(t, False))))
    unique = sorted(_unique_hits(polyline_a, hits, tol), key=lambda hit: hit[0])
    return [point for _, point in unique]


def _line_polyline(
    the_line: Line, other: Polyline, limit_to_finite_segment: bool, tolerance: float
) -> list[float]:
    if limit_to_finite_segment:
        if not the_line.bounding_box.overlaps(other.bounding_box, tolerance):
            return []
    elif not line_box(the_line, other.bounding_box, False, tolerance).intersects:
        return []
    hits: list[tuple[int, float, Any]] = []
    for index, segment in enumerate(other.segments):
        if limit_to_finite_segment and not the_line.bounding_box.overlaps(
            segment.bounding_box, tolerance
        ):
            continue
        solved = _solve(the_line.start, the_line.direction, segment.start, segment.direction)
        if solved is None:
            continue
        t, s = solved
        if limit_to_finite_segment and not _on_segment(t, the_line, tolerance):
            continue
        if _on_segment(s, segment, tolerance):
            hits.append((index, s, t))
    return _unique_hits(other, hits, tolerance)


def _ray_polyline(
    the_ray: Ray, other: Polyline, ray_range: RayRange, tolerance: float
) -> list[float]:
    if not ray_box(the_ray, other.bounding_box, ray_range, tolerance).intersects:
        return []
    hits: list[tuple[int, float, Any]] = []
    for index, segment in enumerate(other.segments):
        solved = _solve(the_ray.start, the_ray.direction, segment.start, segment.direction)
        if solved is None:
            continue
        t, s = solved
        if Ray.in_range(t, ray_range, tolerance) and _on_segment(s, segment, tolerance):
            hits.append((index, s, t))
    return _unique_hits(other, hits, tolerance)


def _as_polylines(shape: Any) -> list[Polyline] | None:
    if isinstance(shape, Polyline):
        return [shape]
    if isinstance(shape, BoundingBox | Rectangle):
        return [shape.to_polyline()]
    if isinstance(shape, Polygon):
        return [shape.boundary, *shape.holes]
    return None


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def line(
    the_line: Line,
    other: Any,
    limit_to_finite_segment: bool = True,
    tolerance: float | None = None,
) -> list[float]:
    """Sorted parameters along ``the_line`` where it meets ``other``.

    Args:
        the_line: Line to measure parameters along
        other: A Point, Line, Ray, BoundingBox, Circle, Rectangle, Polyline,
            Polygon, or a sequence of these. A Ray counts from its start
            onward.
        limit_to_finite_segment: If False, ``the_line`` is treated as infinite
        tolerance: Distance tolerance (configured default if None)

    Segments of ``other`` that run along ``the_line`` are parallel and
    report nothing. Their end vertices are still found through the
    neighbouring segments, so a line lying on a box edge reports both
    corners.

    Returns:
        Ascending list of parameters, empty when the shapes do not meet

    Raises:
        TypeError: If ``other`` is not a supported shape
    """
    tol = resolve_tolerance(tolerance)
    if isinstance(other, Point):
        t = the_line.closest_parameter(other, limit_to_finite_segment)
        if the_line.point_at(t, False).distance_to(other) <= tol:
            return [t]
        return []
    if isinstance(other, Line):
        result = _solve(the_line.start, the_line.direction, other.start, other.direction)
        if result is None:
            return []
        t, s = result
        if not _on_segment(s, other, tol):
            return []
        if limit_to_finite_segment and not _on_segment(t, the_line, tol):
            return []
        return [t]
    if isinstance(other, Ray):
        result = _solve(the_line.start, the_line.direction, other.start, other.direction)
        if result is None:
            return []
        t, s = result
        if not Ray.in_range(s, RayRange.POSITIVE_AND_ZERO, tol):
            return []
        if limit_to_finite_segment and not _on_segment(t, the_line, tol):
            return []
        return [t]
    if isinstance(other, Circle):
        return list(line_circle(the_line, other, limit_to_finite_segment, tol).parameters)
    polylines = _as_polylines(other)
    if polylines is not None:
        return sorted(
            t
            for p in polylines
            for t in _line_polyline(the_line, p, limit_to_finite_segment, tol)
        )
    if _is_shape_sequence(other):
        return sorted(
            t for item in other for t in line(the_line, item, limit_to_finite_segment, tol)
        )
    raise TypeError(f"Cannot intersect a Line with {type(other).__name__}")


def ray(
    the_ray: Ray,
    other: Any,
    ray_range: RayRange = RayRange.BOTH,
    tolerance: float | None = None,
) -> list[float]:
    """Sorted parameters along ``the_ray`` where it meets ``other``.

    Accepts the same shapes as :func:`line`; ``ray_range`` decides which
    parameters along ``the_ray`` are allowed.

    Raises:
        TypeError: If ``other`` is not a supported shape
    """
    tol = resolve_tolerance(tolerance)
    if isinstance(other, Point):
        t = the_ray.closest_parameter(other, RayRange.BOTH)
        if Ray.in_range(t, ray_range, tol) and the_ray.point_at(t).distance_to(other) <= tol:
            return [t]
        return []
    if isinstance(other, Line):
        hit = ray_line(the_ray, other, ray_range, True, tol)
        return [hit.ray_t] if hit.intersects else []
    if isinstance(other, Ray):
        hit = ray_ray(the_ray, other, ray_range, RayRange.POSITIVE_AND_ZERO, tol)
        return [hit.ray_a_t] if hit.intersects else []
    if isinstance(other, Circle):
        return list(ray_circle(the_ray, other, ray_range, tol).parameters)
    polylines = _as_polylines(other)
    if polylines is not None:
        return sorted(t for p in polylines for t in _ray_polyline(the_ray, p, ray_range, tol))
    if _is_shape_sequence(other):
        return sorted(t for item in other for t in ray(the_ray, item, ray_range, tol))
    raise TypeError(f"Cannot intersect a Ray with {type(other).__name__}")


def polyline(the_polyline: Polyline, other: Any, tolerance: float | None = None) -> list[float]:
    """Sorted combined parameters along ``the_polyline`` where it meets ``other``.

    Accepts the same shapes as :func:`line`.

    Raises:
        TypeError: If ``other`` is not a supported shape
    """
    tol = resolve_tolerance(tolerance)
    other_box = _bounding_box_of(other)
    if other_box is not None and not the_polyline.bounding_box.overlaps(other_box, tol):
        return []
    hits: list[tuple[int, float, Any]] = []
    for index, segment in enumerate(the_polyline.segments):
        for t in line(segment, other, True, tol):
            hits.append((index, t, index + t))
    return sorted(_unique_hits(the_polyline, hits, tol))


def _bounding_box_of(shape: Any) -> BoundingBox | None:
    if isinstance(shape, Point):
        return BoundingBox.from_corners(shape, shape)
    if isinstance(shape, BoundingBox):
        return shape
    if isinstance(shape, Line | Circle | Rectangle | Polyline | Polygon):
        return shape.bounding_box
    if isinstance(shape, Ray):
        return None
    if _is_shape_sequence(shape):
        boxes = [_bounding_box_of(item) for item in shape]
        if not boxes or any(box is None for box in boxes):
            return None
        merged = boxes[0]
        for box in boxes[1:]:
            merged = merged.union(box)
        return merged
    raise TypeError(f"Cannot intersect a Polyline with {type(shape).__name__}")


def _is_shape_sequence(value: Any) -> bool:
    return isinstance(value, list | tuple)
