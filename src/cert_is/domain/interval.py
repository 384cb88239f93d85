"""Numeric interval value object used by range certification."""

from __future__ import annotations

from dataclasses import dataclass

from .kinds import is_nan


@dataclass(frozen=True, slots=True)
class Interval:
    """Closed, open, or half-open interval between two numeric bounds.

    Examples
    --------
    >>> span = Interval(0, 10, True, False)
    >>> span.contains(0), span.contains(10)
    (True, False)
    >>> span.describe("x")
    '0 <= x < 10'
    >>> Interval(5, 5, True, False).is_empty
    True
    """

    lower: float
    upper: float
    lower_inclusive: bool
    upper_inclusive: bool

    @property
    def is_empty(self) -> bool:
        if self.upper < self.lower:
            return True
        return self.upper == self.lower and not (self.lower_inclusive and self.upper_inclusive)

    def contains(self, value: float) -> bool:
        """Return ``True`` when *value* lies within the interval; NaN never does."""

        if is_nan(value):
            return False
        above = value >= self.lower if self.lower_inclusive else value > self.lower
        below = value <= self.upper if self.upper_inclusive else value < self.upper
        return above and below

    def describe(self, label: str) -> str:
        low_symbol = "<=" if self.lower_inclusive else "<"
        up_symbol = "<=" if self.upper_inclusive else "<"
        return f"{self.lower} {low_symbol} {label} {up_symbol} {self.upper}"
