"""Tolerant scalar comparison and number formatting helpers."""

from shapekit.config.settings import resolve_tolerance


def approximately_equal(a: float, b: float, tolerance: float | None = None) -> bool:
    """Return True when ``a`` and ``b`` differ by at most ``tolerance``.

    Args:
        a: First value
        b: Second value
        tolerance: Maximum allowed difference (configured absolute tolerance if None)

    Returns:
        True if ``|a - b| <= tolerance``
    """
    return abs(a - b) <= resolve_tolerance(tolerance)


def format_number(value: float) -> str:
    """Format a coordinate for the canonical string forms of shapes."""
    # adding 0.0 turns -0.0 into 0.0
    return f"{value + 0.0:.15g}"
