"""Unit tests for polygons and the clipping adapter."""

import pytest

from shapekit.config import override_settings
from shapekit.core import ShapelyClipper, rings_to_polygons, to_multipolygon
from shapekit.core.clipping import polyline_to_ring
from shapekit.domain import CurveOrientation, Point, PointContainment, Polygon, Polyline
from shapekit.exceptions import ClippingError, InvalidArgumentError


def square(x0: float, y0: float, size: float) -> list[tuple[float, float]]:
    return [(x0, y0), (x0 + size, y0), (x0 + size, y0 + size), (x0, y0 + size)]


@pytest.fixture
def frame() -> Polygon:
    """4x4 square with a 2x2 hole in the middle."""
    return Polygon.from_coords([square(0, 0, 4), square(1, 1, 2)])


class TestPolygon:
    """Tests for Polygon class."""

    def test_area_subtracts_holes(self, frame: Polygon) -> None:
        """Test area of a polygon with a hole."""
        assert frame.area == 12

    def test_loops_are_oriented(self, frame: Polygon) -> None:
        """Test boundary runs counter-clockwise and holes clockwise."""
        assert frame.boundary.orientation is CurveOrientation.COUNTERCLOCKWISE
        assert frame.holes[0].orientation is CurveOrientation.CLOCKWISE

    def test_is_slotted(self, frame: Polygon) -> None:
        """Test polygons carry no instance dictionary, like the other shapes."""
        assert not hasattr(frame, "__dict__")
        with pytest.raises(AttributeError):
            frame.boundary = frame.holes[0]

    def test_clockwise_input_is_reoriented(self) -> None:
        """Test a clockwise boundary is reversed at construction."""
        polygon = Polygon.from_coords([list(reversed(square(0, 0, 1)))])
        assert polygon.boundary.orientation is CurveOrientation.COUNTERCLOCKWISE

    def test_contains(self, frame: Polygon) -> None:
        """Test points in the body, in the hole and on the hole edge."""
        assert frame.contains(Point(0.5, 0.5)) is PointContainment.INSIDE
        assert frame.contains(Point(2, 2)) is PointContainment.OUTSIDE
        assert frame.contains(Point(1, 2)) is PointContainment.COINCIDENT
        assert frame.contains(Point(9, 9)) is PointContainment.OUTSIDE

    def test_open_boundary(self) -> None:
        """Test an open boundary is rejected."""
        with pytest.raises(InvalidArgumentError):
            Polygon(Polyline.from_coords(square(0, 0, 1)))

    def test_hole_outside_boundary(self) -> None:
        """Test holes must lie inside the boundary."""
        with pytest.raises(InvalidArgumentError):
            Polygon.from_coords([square(0, 0, 1), square(5, 5, 1)])

    def test_no_rings(self) -> None:
        """Test a polygon needs at least one ring."""
        with pytest.raises(InvalidArgumentError):
            Polygon.from_coords([])

    def test_closest_point(self, frame: Polygon) -> None:
        """Test the closest edge may be a hole."""
        assert frame.closest_point(Point(1.5, 2)).equals(Point(1, 2))
        assert frame.closest_loop(Point(1.5, 2)) == frame.holes[0]
        assert frame.closest_point(Point(0.5, 2), include_interior=True) == Point(0.5, 2)

    def test_mirror_keeps_orientation(self, frame: Polygon) -> None:
        """Test loops are re-oriented after a mirror transform."""
        mirrored = frame.scale(-1, 1)
        assert mirrored.boundary.orientation is CurveOrientation.COUNTERCLOCKWISE
        assert mirrored.area == 12

    def test_orientation_follows_invert_y(self) -> None:
        """Test construction orients in the active convention."""
        with override_settings(invert_y=True):
            polygon = Polygon.from_coords([square(0, 0, 1)])
            assert polygon.boundary.orientation is CurveOrientation.COUNTERCLOCKWISE
        assert polygon.boundary.signed_area < 0


class TestBooleanOperations:
    """Tests for union, intersection and difference."""

    def test_union(self) -> None:
        """Test overlapping squares merge into one polygon."""
        a = Polygon.from_coords([square(0, 0, 2)])
        b = Polygon.from_coords([square(1, 1, 2)])
        result = a.union(b)
        assert len(result) == 1
        assert result[0].area == pytest.approx(7)

    def test_intersection(self) -> None:
        """Test the overlap of two squares."""
        a = Polygon.from_coords([square(0, 0, 2)])
        b = Polygon.from_coords([square(1, 1, 2)])
        result = a.intersection(b)
        assert len(result) == 1
        assert result[0].area == pytest.approx(1)

    def test_difference_creates_hole(self) -> None:
        """Test cutting a square out of the middle leaves a hole."""
        plate = Polygon.from_coords([square(0, 0, 4)])
        cut = Polygon.from_coords([square(1, 1, 2)])
        result = plate.difference(cut)
        assert len(result) == 1
        assert len(result[0].holes) == 1
        assert result[0].area == pytest.approx(12)
        assert result[0].holes[0].orientation is CurveOrientation.CLOCKWISE

    def test_disjoint_union(self) -> None:
        """Test disjoint operands stay separate."""
        a = Polygon.from_coords([square(0, 0, 1)])
        b = Polygon.from_coords([square(5, 5, 1)])
        assert len(a.union(b)) == 2

    def test_disjoint_intersection(self) -> None:
        """Test disjoint operands have an empty intersection."""
        a = Polygon.from_coords([square(0, 0, 1)])
        b = Polygon.from_coords([square(5, 5, 1)])
        assert a.intersection(b) == []

    def test_polyline_operand(self) -> None:
        """Test closed polylines are accepted as operands."""
        a = Polygon.from_coords([square(0, 0, 2)])
        loop = Polyline.from_coords(square(1, 0, 2), closed=True)
        assert a.union(loop)[0].area == pytest.approx(6)

    def test_custom_clipper(self) -> None:
        """Test a custom clipper receives normalised rings."""

        class RecordingClipper:
            def __init__(self) -> None:
                self.calls: list[tuple[str, list, list]] = []

            def union(self, subject, clip):
                self.calls.append(("union", subject, clip))
                return subject

            def intersection(self, subject, clip):
                return []

            def difference(self, subject, clip):
                return subject

        clipper = RecordingClipper()
        a = Polygon.from_coords([list(reversed(square(0, 0, 1)))])
        b = Polygon.from_coords([square(5, 5, 1)])
        result = a.union(b, clipper=clipper)

        assert len(result) == 1
        name, subject, clip = clipper.calls[0]
        assert name == "union"
        assert Polyline.from_coords(subject[0][0]).signed_area > 0
        assert clip[0][0][0] == (5.0, 5.0)


class TestRingAdapter:
    """Tests for ring conversion in and out of the clipper."""

    def test_polyline_to_ring_winding(self) -> None:
        """Test rings are wound as requested."""
        loop = Polyline.from_coords(square(0, 0, 1), closed=True)
        outer = polyline_to_ring(loop, positive=True)
        hole = polyline_to_ring(loop, positive=False)
        assert Polyline.from_coords(outer).signed_area > 0
        assert Polyline.from_coords(hole).signed_area < 0

    def test_ring_winding_ignores_invert_y(self) -> None:
        """Test ring winding uses raw signed area."""
        loop = Polyline.from_coords(square(0, 0, 1), closed=True)
        with override_settings(invert_y=True):
            ring = polyline_to_ring(loop, positive=True)
        assert Polyline.from_coords(ring).signed_area > 0

    def test_to_multipolygon(self) -> None:
        """Test a polygon with a hole becomes two rings."""
        polygon = Polygon.from_coords([square(0, 0, 4), square(1, 1, 2)])
        rings = to_multipolygon([polygon, polygon])
        assert len(rings) == 2
        assert len(rings[0]) == 2

    def test_holes_assigned_to_smallest_container(self) -> None:
        """Test nested outers each get the hole directly inside them."""
        big = [*square(0, 0, 10), (0, 0)]
        small = [*square(2, 2, 6), (2, 2)]
        hole = [*reversed(square(4, 4, 2)), (4, 6)]
        polygons = rings_to_polygons([[big], [small, hole]])
        assert len(polygons) == 2
        by_area = sorted(polygons, key=lambda p: p.boundary.area)
        assert len(by_area[0].holes) == 1
        assert len(by_area[1].holes) == 0

    def test_orphan_hole(self) -> None:
        """Test a hole outside every outer ring is an error."""
        outer = [*square(0, 0, 1), (0, 0)]
        hole = [*reversed(square(5, 5, 1)), (5, 6)]
        with pytest.raises(ClippingError):
            rings_to_polygons([[outer], [hole]])

    def test_degenerate_ring_dropped(self) -> None:
        """Test zero-area rings are skipped."""
        assert rings_to_polygons([[[(0, 0), (1, 0), (2, 0), (0, 0)]]]) == []

    def test_shapely_clipper_round_trip(self) -> None:
        """Test the shapely clipper returns normalised rings."""
        subject = [[[*square(0, 0, 2), (0, 0)]]]
        clip = [[[*square(1, 1, 2), (1, 1)]]]
        result = ShapelyClipper().union(subject, clip)
        assert len(result) == 1
        assert Polyline.from_coords(result[0][0]).signed_area == pytest.approx(7)
