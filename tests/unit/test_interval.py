from __future__ import annotations

import math

from hypothesis import given
from hypothesis import strategies as st

from cert_is.domain.interval import Interval

FINITE = st.floats(allow_nan=False, allow_infinity=False, min_value=-1e9, max_value=1e9)


def test_inclusive_flags_control_the_edges() -> None:
    closed = Interval(0, 1, True, True)
    opened = Interval(0, 1, False, False)
    assert closed.contains(0) and closed.contains(1)
    assert not opened.contains(0) and not opened.contains(1)
    assert opened.contains(0.5)


def test_nan_is_never_contained() -> None:
    assert not Interval(-math.inf, math.inf, True, True).contains(math.nan)


def test_empty_intervals() -> None:
    assert Interval(2, 1, True, True).is_empty
    assert Interval(1, 1, False, True).is_empty
    assert Interval(1, 1, True, False).is_empty
    assert not Interval(1, 1, True, True).is_empty
    assert not Interval(1, 2, False, False).is_empty


def test_describe() -> None:
    assert Interval(-math.inf, 3, True, False).describe('"x"') == '-inf <= "x" < 3'


@given(FINITE, FINITE)
def test_closed_interval_contains_its_bounds(lower: float, upper: float) -> None:
    low, high = sorted((lower, upper))
    interval = Interval(low, high, True, True)
    assert interval.contains(low)
    assert interval.contains(high)


def test_ints_beyond_float_range() -> None:
    huge = 10**400
    assert Interval(0, math.inf, True, True).contains(huge)
    assert not Interval(0, huge, True, False).contains(huge)
    assert Interval(-huge, huge, True, True).contains(huge - 1)
