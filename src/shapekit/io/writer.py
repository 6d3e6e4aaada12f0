"""Writer for polygon files stored as GeoJSON."""

import json
from pathlib import Path

import structlog

from shapekit.domain import Polygon
from shapekit.exceptions import ShapeSaveError
from shapekit.io.converter import polygons_to_geojson

logger = structlog.get_logger(__name__)


class ShapeWriter:
    """Collects polygons and saves them as a GeoJSON ``MultiPolygon``."""

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Path the file will be written to
        """
        self._output_path = output_path
        self._polygons: list[Polygon] = []

    def add(self, polygon: Polygon) -> None:
        self._polygons.append(polygon)

    def extend(self, polygons: list[Polygon]) -> None:
        self._polygons.extend(polygons)

    def save(self) -> None:
        """Write the collected polygons.

        Raises:
            ShapeSaveError: If the file cannot be written
        """
        try:
            self._output_path.write_text(
                json.dumps(polygons_to_geojson(self._polygons), indent=2),
                encoding="utf-8",
            )
        except OSError as e:
            raise ShapeSaveError(str(self._output_path), str(e)) from e

        logger.info(
            "Shapes saved", path=str(self._output_path), polygons=len(self._polygons)
        )

    @staticmethod
    def get_output_path(input_path: Path, operation: str) -> Path:
        """Generate an output path next to the input.

        Example:
            shapes.json + "union" -> shapes-union.json
        """
        return input_path.parent / f"{input_path.stem}-{operation}{input_path.suffix or '.json'}"


def save_polygons(polygons: list[Polygon], path: Path) -> None:
    """Save polygons to a GeoJSON file."""
    writer = ShapeWriter(path)
    writer.extend(polygons)
    writer.save()
