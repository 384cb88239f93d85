"""Application-layer rule evaluators.

Purpose
-------
Judge an ordered sequence of subject values against one validation request.
The evaluators are pure: they hold no state, perform no I/O, and either return
``None`` or raise an error from :mod:`cert_is.domain.errors`.

Contents
    - ``check_values``: value-set membership (allowed or forbidden).
    - ``check_types``: type-set membership via kind tags or classes.
    - ``check_ranges``: numeric interval membership with inclusivity flags.
    - ``strictly_equal``: the equality used by ``check_values``.

System Role
-----------
Called by :class:`cert_is.application.certifier.Certifier`, which supplies its
stored subjects and optional message override.
"""

from __future__ import annotations

import math
from typing import Final, Iterable, Sequence

from ..domain.errors import (
    RangeArgumentError,
    RangeAssertionError,
    TypeArgumentError,
    TypeAssertionError,
    ValueArgumentError,
    ValueAssertionError,
)
from ..domain.interval import Interval
from ..domain.kinds import PrimitiveTag, TypeDescriptor, is_nan, kind_of, matches, resolve_descriptor

# Shapes a type descriptor may take, reported by TypeArgumentError.
DESCRIPTOR_SHAPES: Final[tuple[object, ...]] = ("string", "function", type)

_VALUE_KINDS: Final[frozenset[PrimitiveTag]] = frozenset(
    {
        PrimitiveTag.BOOLEAN,
        PrimitiveTag.UNDEFINED,
        PrimitiveTag.NUMBER,
        PrimitiveTag.STRING,
        PrimitiveTag.SYMBOL,
    }
)


def strictly_equal(left: object, right: object) -> bool:
    """Compare two values without cross-kind coercion.

    Primitive kinds compare by value (NaN equals NaN), objects and functions by
    identity.

    Examples
    --------
    >>> strictly_equal(1, 1.0), strictly_equal(1, True), strictly_equal("a", "a")
    (True, False, True)
    >>> strictly_equal([1], [1])
    False
    >>> strictly_equal(float("nan"), float("nan"))
    True
    """

    if left is right:
        return True
    kind = kind_of(left)
    if kind is not kind_of(right):
        return False
    if kind not in _VALUE_KINDS:
        return False
    if kind is PrimitiveTag.NUMBER and is_nan(left):
        return is_nan(right)
    return bool(left == right)


def _contains(pool: Iterable[object], value: object) -> bool:
    return any(strictly_equal(value, member) for member in pool)


def check_values(
    subjects: Sequence[object],
    valid: Sequence[object] | None = None,
    invalid: Sequence[object] | None = None,
    *,
    message: str | None = None,
) -> None:
    """Certify every subject is in *valid*, or none is in *invalid*.

    Exactly one of the two sets must be given.

    Raises
    ------
    ValueArgumentError
        When both or neither of *valid* / *invalid* are supplied.
    ValueAssertionError
        On the first subject that violates the request.

    Examples
    --------
    >>> check_values(["foo", "bar"], valid=["foo", "bar", "baz"])
    >>> check_values([3], invalid=[3])
    Traceback (most recent call last):
    ...
    cert_is.domain.errors.ValueAssertionError: [ERR_INVALID_VALUE]: Value is invalid
    """

    _require_one_of(valid, invalid, "valid", "invalid")
    for value in subjects:
        if valid is not None and not _contains(valid, value):
            raise ValueAssertionError(message)
        if invalid is not None and _contains(invalid, value):
            raise ValueAssertionError(message)


def check_types(
    subjects: Sequence[object],
    valid_types: Sequence[object] | None = None,
    invalid_types: Sequence[object] | None = None,
    *,
    message: str | None = None,
) -> None:
    """Certify every subject matches a type in *valid_types* or none in *invalid_types*.

    A string descriptor is compared with :func:`kind_of`, a class with
    :func:`isinstance`. Descriptors are resolved before any subject is judged.

    Raises
    ------
    ValueArgumentError
        When both or neither type sets are supplied.
    TypeArgumentError
        When a descriptor is neither a kind tag nor a class; the parameter name
        carries its position, e.g. ``valid_types[1]``.
    TypeAssertionError
        On the first subject that violates the request.

    Examples
    --------
    >>> check_types([{}, []], valid_types=["object"])
    >>> check_types([1], invalid_types=[int])
    Traceback (most recent call last):
    ...
    cert_is.domain.errors.TypeAssertionError: [ERR_INVALID_TYPE]: Value is of an invalid type
    """

    _require_one_of(valid_types, invalid_types, "valid_types", "invalid_types")
    if valid_types is not None:
        allowed = _resolve_all(valid_types, "valid_types")
        for value in subjects:
            if not any(matches(value, descriptor) for descriptor in allowed):
                raise TypeAssertionError(message)
    if invalid_types is not None:
        forbidden = _resolve_all(invalid_types, "invalid_types")
        for value in subjects:
            if any(matches(value, descriptor) for descriptor in forbidden):
                raise TypeAssertionError(message)


def check_ranges(
    subjects: Sequence[object],
    lower: float,
    upper: float,
    lower_inclusive: bool,
    upper_inclusive: bool,
    *,
    message: str | None = None,
) -> None:
    """Certify every subject lies within the interval described by the bounds.

    Why
    ----
    Argument problems must surface regardless of the subjects, so validation
    runs in three stages: parameter kinds, interval shape, subject kinds. Only
    then are subjects judged against the interval.

    Raises
    ------
    TypeArgumentError
        If a bound is not a number, a flag is not a bool, or a subject is not a
        number (``values[i]``).
    RangeArgumentError
        If a bound is NaN, ``upper < lower``, or ``upper == lower`` with an
        exclusive bound.
    RangeAssertionError
        On the first subject outside the interval.

    Examples
    --------
    >>> check_ranges([12, 22, 32], 2, math.inf, False, True)
    >>> check_ranges([1], 5, 1, True, True)
    Traceback (most recent call last):
    ...
    cert_is.domain.errors.RangeArgumentError: [ERR_INVALID_ARG_RANGE]: "upper" has an invalid range
    """

    interval = _build_interval(lower, upper, lower_inclusive, upper_inclusive)
    for index, value in enumerate(subjects):
        if kind_of(value) is not PrimitiveTag.NUMBER:
            raise TypeArgumentError(f"values[{index}]", "number")
    for value in subjects:
        if not interval.contains(value):  # type: ignore[arg-type]
            raise RangeAssertionError(message)


def _build_interval(lower: float, upper: float, lower_inclusive: bool, upper_inclusive: bool) -> Interval:
    """Validate bound parameters and return the resulting :class:`Interval`."""

    for name, bound in (("lower", lower), ("upper", upper)):
        if kind_of(bound) is not PrimitiveTag.NUMBER:
            raise TypeArgumentError(name, "number")
    for name, flag in (("lower_inclusive", lower_inclusive), ("upper_inclusive", upper_inclusive)):
        if not isinstance(flag, bool):
            raise TypeArgumentError(name, "boolean")
    for name, bound in (("lower", lower), ("upper", upper)):
        if is_nan(bound):
            raise RangeArgumentError(name)
    if upper < lower:
        raise RangeArgumentError("upper", lower, math.inf, lower_inclusive, True)
    interval = Interval(lower, upper, lower_inclusive, upper_inclusive)
    if interval.is_empty:
        raise RangeArgumentError("upper", lower, math.inf, False, True)
    return interval


def _resolve_all(descriptors: Sequence[object], param: str) -> list[TypeDescriptor]:
    resolved: list[TypeDescriptor] = []
    for index, descriptor in enumerate(descriptors):
        try:
            resolved.append(resolve_descriptor(descriptor))
        except LookupError:
            raise TypeArgumentError(f"{param}[{index}]", *DESCRIPTOR_SHAPES) from None
    return resolved


def _require_one_of(first: object, second: object, first_name: str, second_name: str) -> None:
    """Reject calls that supply both sets (second must be ``None``) or neither."""

    if first is None and second is None:
        raise ValueArgumentError(first_name)
    if first is not None and second is not None:
        raise ValueArgumentError(second_name, None)


__all__ = [
    "DESCRIPTOR_SHAPES",
    "check_values",
    "check_types",
    "check_ranges",
    "strictly_equal",
]
