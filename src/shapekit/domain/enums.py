"""Enumerations shared across the geometry kernel."""

from enum import Enum, auto


class PointContainment(Enum):
    """Result of testing a point against a closed shape."""

    INSIDE = auto()
    OUTSIDE = auto()
    COINCIDENT = auto()


class CurveOrientation(Enum):
    """Signed loop direction of a closed curve.

    The direction is interpreted in the active y-axis convention: the same
    vertex sequence reports the opposite orientation when ``invert_y`` is set.
    Open curves report UNDEFINED.
    """

    CLOCKWISE = auto()
    COUNTERCLOCKWISE = auto()
    UNDEFINED = auto()


class RayRange(Enum):
    """Parameter range a ray accepts.

    - POSITIVE: t > 0
    - POSITIVE_AND_ZERO: t >= 0
    - BOTH: any t, the ray behaves like an infinite line
    """

    POSITIVE = auto()
    POSITIVE_AND_ZERO = auto()
    BOTH = auto()


class CircleIntersectionKind(Enum):
    """Number of distinct points where a line or ray meets a circle."""

    NONE = auto()
    SINGLE = auto()
    MULTIPLE = auto()
