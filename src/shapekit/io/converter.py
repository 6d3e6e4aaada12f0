"""Converters between GeoJSON geometry objects and domain polygons.

Polygons are written as GeoJSON ``Polygon``/``MultiPolygon`` coordinate
arrays: a list of rings, outer ring first, each ring a list of ``[x, y]``
pairs whose first pair is repeated at the end.
"""

from typing import Any

from shapekit.domain import Polygon


def polygon_to_geojson(polygon: Polygon) -> dict[str, Any]:
    """Serialize a polygon to a GeoJSON ``Polygon`` geometry.

    Args:
        polygon: Polygon to convert

    Returns:
        Dictionary with ``type`` and ``coordinates`` keys
    """
    return {
        "type": "Polygon",
        "coordinates": [[[x, y] for x, y in ring] for ring in polygon.to_rings()],
    }


def polygons_to_geojson(polygons: list[Polygon]) -> dict[str, Any]:
    """Serialize polygons to a GeoJSON ``MultiPolygon`` geometry."""
    return {
        "type": "MultiPolygon",
        "coordinates": [polygon_to_geojson(p)["coordinates"] for p in polygons],
    }


def geojson_to_polygons(data: dict[str, Any]) -> list[Polygon]:
    """Deserialize polygons from a GeoJSON object.

    Accepts ``Polygon`` and ``MultiPolygon`` geometries, ``Feature`` objects
    wrapping them, and ``FeatureCollection`` objects. Other geometry types
    are skipped.

    Args:
        data: Parsed GeoJSON object

    Returns:
        Polygons in document order

    Raises:
        ValueError: If the object has no recognised ``type``
    """
    kind = data.get("type")
    if kind == "Polygon":
        return [Polygon.from_coords(data["coordinates"])]
    if kind == "MultiPolygon":
        return [Polygon.from_coords(rings) for rings in data["coordinates"]]
    if kind == "Feature":
        geometry = data.get("geometry")
        return geojson_to_polygons(geometry) if geometry else []
    if kind == "FeatureCollection":
        return [p for feature in data.get("features", []) for p in geojson_to_polygons(feature)]
    if kind in ("Point", "MultiPoint", "LineString", "MultiLineString", "GeometryCollection"):
        return []
    raise ValueError(f"Unrecognised GeoJSON type: {kind!r}")
