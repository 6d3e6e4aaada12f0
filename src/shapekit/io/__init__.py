"""Shape file I/O for shapekit.

Polygons are stored as GeoJSON geometry objects.

Key classes:
- ShapeReader: Load polygons from a file
- ShapeWriter: Save polygons to a file
"""

from shapekit.io.reader import ShapeReader, load_polygons
from shapekit.io.writer import ShapeWriter, save_polygons

__all__ = [
    "ShapeReader",
    "ShapeWriter",
    "load_polygons",
    "save_polygons",
]
