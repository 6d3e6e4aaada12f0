"""Exception hierarchy for Shapekit."""


class ShapekitError(Exception):
    """Base exception for all Shapekit errors."""

    pass


class GeometryError(ShapekitError):
    """Errors raised by geometric primitives and algorithms."""

    pass


class InvalidArgumentError(GeometryError, ValueError):
    """A shape was constructed or modified with invalid inputs.

    Examples are a circle with a non-positive radius, a ray with a zero
    direction or three collinear points handed to a circle factory.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidStateError(GeometryError):
    """An operation is not meaningful for the shape's current state.

    Examples are asking an open polyline for its area or unitizing a
    zero-length vector.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class SegmentIndexError(InvalidStateError, IndexError):
    """Requested segment does not exist on the polyline."""

    def __init__(self, index: int, segment_count: int) -> None:
        self.index = index
        self.segment_count = segment_count
        super().__init__(
            f"Segment index {index} out of range for polyline with {segment_count} segments"
        )


class ClippingError(GeometryError):
    """The clipping engine returned rings that cannot be turned into polygons."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Polygon clipping failed: {reason}")


class ShapeFileError(ShapekitError):
    """Errors related to reading or writing shape files."""

    pass


class ShapeLoadError(ShapeFileError):
    """Error loading a shape file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load shapes '{path}': {reason}")


class ShapeSaveError(ShapeFileError):
    """Error saving a shape file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save shapes '{path}': {reason}")
