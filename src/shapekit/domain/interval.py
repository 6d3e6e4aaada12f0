"""One-dimensional parameter intervals.

- Interval: an ordered pair (t0, t1) that may run backwards
- SortedInterval: an interval whose bounds are always ascending
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from shapekit.config.settings import resolve_tolerance
from shapekit.domain.tolerance import approximately_equal, format_number
from shapekit.exceptions import InvalidArgumentError, InvalidStateError


@dataclass(frozen=True, slots=True)
class Interval:
    """A pair of numbers describing a range and a direction.

    A descending interval (``t0 > t1``) is meaningful: polyline trimming
    reads it as an instruction to reverse the result.

    Attributes:
        t0: Start of the interval
        t1: End of the interval
    """

    t0: float
    t1: float

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Interval:
        """Create the smallest ascending interval containing every value.

        Raises:
            InvalidArgumentError: If no values are given
        """
        items = list(values)
        if not items:
            raise InvalidArgumentError("Cannot build an interval from zero values")
        return cls(min(items), max(items))

    @property
    def min(self) -> float:
        return min(self.t0, self.t1)

    @property
    def max(self) -> float:
        return max(self.t0, self.t1)

    @property
    def mid(self) -> float:
        return (self.t0 + self.t1) / 2

    @property
    def length(self) -> float:
        """Signed length, negative for descending intervals."""
        return self.t1 - self.t0

    @property
    def length_abs(self) -> float:
        return abs(self.t1 - self.t0)

    @property
    def is_increasing(self) -> bool:
        return self.t0 < self.t1

    @property
    def is_decreasing(self) -> bool:
        return self.t0 > self.t1

    def is_singleton(self, tolerance: float | None = None) -> bool:
        return approximately_equal(self.t0, self.t1, tolerance)

    def contains(self, value: float, strict: bool = False, tolerance: float | None = None) -> bool:
        """Check whether ``value`` lies in the interval.

        Args:
            value: Value to test
            strict: If True, values within tolerance of a bound are excluded
            tolerance: Comparison tolerance (configured default if None)

        Returns:
            True if the value lies within the interval
        """
        tol = resolve_tolerance(tolerance)
        if strict:
            return self.min + tol < value < self.max - tol
        return self.min - tol <= value <= self.max + tol

    def value_at(self, parameter: float) -> float:
        """Map a normalised parameter (0 at ``t0``, 1 at ``t1``) to a value."""
        return self.t0 + (self.t1 - self.t0) * parameter

    def remap_to_interval(self, value: float) -> float:
        """Inverse of :meth:`value_at`.

        Raises:
            InvalidStateError: If the interval has zero length
        """
        if self.t1 == self.t0:
            raise InvalidStateError("Cannot remap a value onto a zero-length interval")
        return (value - self.t0) / (self.t1 - self.t0)

    def grow(self, value: float) -> Interval:
        """Return an interval extended to include ``value``, keeping its direction."""
        if self.contains(value, tolerance=0.0):
            return self
        low = min(self.min, value)
        high = max(self.max, value)
        if self.is_decreasing:
            return Interval(high, low)
        return Interval(low, high)

    def reverse(self) -> Interval:
        """Return the interval with its bounds swapped."""
        return Interval(self.t1, self.t0)

    def union(self, other: Interval) -> SortedInterval:
        return SortedInterval(min(self.min, other.min), max(self.max, other.max))

    def intersection(self, other: Interval) -> SortedInterval | None:
        """Return the overlapping range, or None if the intervals are disjoint."""
        low = max(self.min, other.min)
        high = min(self.max, other.max)
        if low > high:
            return None
        return SortedInterval(low, high)

    def with_t0(self, t0: float) -> Interval:
        return Interval(t0, self.t1)

    def with_t1(self, t1: float) -> Interval:
        return Interval(self.t0, t1)

    def equals(self, other: Interval, tolerance: float | None = None) -> bool:
        return approximately_equal(self.t0, other.t0, tolerance) and approximately_equal(
            self.t1, other.t1, tolerance
        )

    def __str__(self) -> str:
        return f"[{format_number(self.t0)},{format_number(self.t1)}]"


@dataclass(frozen=True, slots=True)
class SortedInterval(Interval):
    """An interval whose bounds are sorted at construction so ``t0 <= t1``."""

    def __post_init__(self) -> None:
        if self.t0 > self.t1:
            low, high = self.t1, self.t0
            object.__setattr__(self, "t0", low)
            object.__setattr__(self, "t1", high)

    @classmethod
    def from_center(cls, center: float, width: float) -> SortedInterval:
        """Create an interval of ``width`` centred on ``center``.

        Raises:
            InvalidArgumentError: If width is negative
        """
        if width < 0:
            raise InvalidArgumentError(f"Interval width must be non-negative, got {width}")
        return cls(center - width / 2, center + width / 2)

    @property
    def width(self) -> float:
        return self.t1 - self.t0

    def inflate(self, amount: float) -> SortedInterval:
        """Grow both bounds outward by ``amount``.

        A negative amount shrinks the interval, collapsing it to its midpoint
        rather than inverting it.
        """
        if amount < 0 and -amount * 2 >= self.width:
            return SortedInterval(self.mid, self.mid)
        return SortedInterval(self.t0 - amount, self.t1 + amount)

    def with_min(self, value: float) -> SortedInterval:
        """Return a copy with a new lower bound.

        Raises:
            InvalidArgumentError: If the new bound exceeds the upper bound
        """
        if value > self.t1:
            raise InvalidArgumentError(f"Lower bound {value} exceeds upper bound {self.t1}")
        return SortedInterval(value, self.t1)

    def with_max(self, value: float) -> SortedInterval:
        """Return a copy with a new upper bound.

        Raises:
            InvalidArgumentError: If the new bound is below the lower bound
        """
        if value < self.t0:
            raise InvalidArgumentError(f"Upper bound {value} is below lower bound {self.t0}")
        return SortedInterval(self.t0, value)

    def with_t0(self, t0: float) -> SortedInterval:
        return SortedInterval(t0, self.t1)

    def with_t1(self, t1: float) -> SortedInterval:
        return SortedInterval(self.t0, t1)
