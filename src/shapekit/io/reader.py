"""Reader for polygon files stored as GeoJSON."""

import json
from collections.abc import Iterator
from pathlib import Path

import structlog

from shapekit.domain import Polygon
from shapekit.exceptions import ShapeLoadError
from shapekit.io.converter import geojson_to_polygons

logger = structlog.get_logger(__name__)


class ShapeReader:
    """Loads polygons from a GeoJSON file.

    Example:
        reader = ShapeReader(Path("shapes.json"))
        reader.load()
        for polygon in reader.iter_polygons():
            print(polygon.area)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the GeoJSON file
        """
        self._path = path
        self._polygons: list[Polygon] | None = None

    def load(self) -> None:
        """Read and parse the file.

        Raises:
            FileNotFoundError: If the file does not exist
            ShapeLoadError: If the file is not valid GeoJSON polygon data
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Shape file not found: {self._path}")

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            self._polygons = geojson_to_polygons(data)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise ShapeLoadError(str(self._path), str(e)) from e

        logger.info("Shapes loaded", path=str(self._path), polygons=len(self._polygons))

    @property
    def polygons(self) -> list[Polygon]:
        """Return the loaded polygons.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._polygons is None:
            raise RuntimeError("Shapes not loaded. Call load() first.")
        return list(self._polygons)

    @property
    def polygon_count(self) -> int:
        return len(self.polygons)

    def iter_polygons(self) -> Iterator[Polygon]:
        yield from self.polygons


def load_polygons(path: Path) -> list[Polygon]:
    """Load every polygon from a GeoJSON file."""
    reader = ShapeReader(path)
    reader.load()
    return reader.polygons
