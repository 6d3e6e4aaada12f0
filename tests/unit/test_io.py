"""Unit tests for the shape file I/O layer.

Tests for ShapeReader, ShapeWriter, and converter functions.
"""

import json
from pathlib import Path

import pytest

from shapekit.domain import Polygon
from shapekit.exceptions import ShapeLoadError, ShapeSaveError
from shapekit.io import ShapeReader, ShapeWriter, load_polygons, save_polygons
from shapekit.io.converter import geojson_to_polygons, polygon_to_geojson, polygons_to_geojson

SQUARE = [[0, 0], [2, 0], [2, 2], [0, 2], [0, 0]]
HOLE = [[0.5, 0.5], [0.5, 1.5], [1.5, 1.5], [1.5, 0.5], [0.5, 0.5]]


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestConverter:
    """Tests for GeoJSON conversion."""

    def test_polygon_to_geojson(self) -> None:
        """Test rings are written boundary first and closed."""
        polygon = Polygon.from_coords([SQUARE, HOLE])
        data = polygon_to_geojson(polygon)
        assert data["type"] == "Polygon"
        assert len(data["coordinates"]) == 2
        boundary = data["coordinates"][0]
        assert boundary[0] == boundary[-1]
        assert boundary[0] == [0.0, 0.0]

    def test_polygons_to_geojson(self) -> None:
        """Test several polygons become a MultiPolygon."""
        polygon = Polygon.from_coords([SQUARE])
        data = polygons_to_geojson([polygon, polygon])
        assert data["type"] == "MultiPolygon"
        assert len(data["coordinates"]) == 2

    def test_polygon_from_geojson(self) -> None:
        """Test reading a Polygon geometry."""
        polygons = geojson_to_polygons({"type": "Polygon", "coordinates": [SQUARE, HOLE]})
        assert len(polygons) == 1
        assert polygons[0].area == 3

    def test_feature_collection(self) -> None:
        """Test reading polygons out of features."""
        data = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "geometry": {"type": "Polygon", "coordinates": [SQUARE]}},
                {"type": "Feature", "geometry": {"type": "Point", "coordinates": [0, 0]}},
                {"type": "Feature", "geometry": None},
                {
                    "type": "Feature",
                    "geometry": {"type": "MultiPolygon", "coordinates": [[SQUARE], [SQUARE]]},
                },
            ],
        }
        assert len(geojson_to_polygons(data)) == 3

    def test_unknown_type(self) -> None:
        """Test unrecognised objects are rejected."""
        with pytest.raises(ValueError, match="Unrecognised"):
            geojson_to_polygons({"type": "Blob"})

    def test_round_trip(self) -> None:
        """Test writing and reading back gives the same polygon."""
        polygon = Polygon.from_coords([SQUARE, HOLE])
        restored = geojson_to_polygons(polygon_to_geojson(polygon))[0]
        assert restored.equals(polygon)


class TestShapeReader:
    """Tests for ShapeReader class."""

    def test_init(self) -> None:
        """Test ShapeReader initialization."""
        path = Path("shapes.json")
        reader = ShapeReader(path)
        assert reader._path == path
        assert reader._polygons is None

    def test_load_nonexistent_file(self) -> None:
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = ShapeReader(Path("nonexistent.json"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_polygons_before_load(self) -> None:
        """Test accessing polygons before loading raises RuntimeError."""
        reader = ShapeReader(Path("shapes.json"))
        with pytest.raises(RuntimeError, match="Shapes not loaded"):
            _ = reader.polygons

    def test_load(self, tmp_path: Path) -> None:
        """Test loading a MultiPolygon file."""
        path = write_json(
            tmp_path / "shapes.json",
            {"type": "MultiPolygon", "coordinates": [[SQUARE], [SQUARE, HOLE]]},
        )
        reader = ShapeReader(path)
        reader.load()
        assert reader.polygon_count == 2
        assert [p.area for p in reader.iter_polygons()] == [4, 3]

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON raises ShapeLoadError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ShapeLoadError) as exc_info:
            load_polygons(path)
        assert exc_info.value.path == str(path)

    def test_invalid_geometry(self, tmp_path: Path) -> None:
        """Test geometry errors are reported as ShapeLoadError."""
        path = write_json(
            tmp_path / "bad.json",
            {"type": "Polygon", "coordinates": [SQUARE, [[5, 5], [6, 5], [6, 6], [5, 5]]]},
        )
        with pytest.raises(ShapeLoadError, match="outside the boundary"):
            load_polygons(path)

    def test_missing_coordinates(self, tmp_path: Path) -> None:
        """Test a geometry without coordinates raises ShapeLoadError."""
        path = write_json(tmp_path / "bad.json", {"type": "Polygon"})
        with pytest.raises(ShapeLoadError):
            load_polygons(path)


class TestShapeWriter:
    """Tests for ShapeWriter class."""

    def test_get_output_path(self) -> None:
        """Test output path generation."""
        result = ShapeWriter.get_output_path(Path("/data/shapes.json"), "union")
        assert result == Path("/data/shapes-union.json")

    def test_get_output_path_without_suffix(self) -> None:
        """Test a missing suffix defaults to .json."""
        result = ShapeWriter.get_output_path(Path("/data/shapes"), "difference")
        assert result == Path("/data/shapes-difference.json")

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Test saved polygons load back unchanged."""
        polygons = [Polygon.from_coords([SQUARE, HOLE]), Polygon.from_coords([SQUARE])]
        path = tmp_path / "out.json"
        save_polygons(polygons, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["type"] == "MultiPolygon"

        restored = load_polygons(path)
        assert len(restored) == 2
        assert all(a.equals(b) for a, b in zip(polygons, restored))

    def test_add_and_save(self, tmp_path: Path) -> None:
        """Test adding polygons one at a time."""
        path = tmp_path / "out.json"
        writer = ShapeWriter(path)
        writer.add(Polygon.from_coords([SQUARE]))
        writer.save()
        assert len(load_polygons(path)) == 1

    def test_save_to_missing_directory(self, tmp_path: Path) -> None:
        """Test unwritable paths raise ShapeSaveError."""
        path = tmp_path / "missing" / "out.json"
        with pytest.raises(ShapeSaveError):
            save_polygons([Polygon.from_coords([SQUARE])], path)
