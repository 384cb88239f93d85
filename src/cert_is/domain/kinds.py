"""Type descriptors and primitive kind classification.

Purpose
-------
Model the two shapes a caller may use to describe a type: a primitive kind tag
(compared with :func:`kind_of`) or a class (compared with :func:`isinstance`).
Both shapes are folded into one closed union so a single function decides
membership.

Contents
--------
* :class:`PrimitiveTag` – the seven kind tags.
* :func:`kind_of` – classify any value into exactly one tag.
* :class:`NominalType` – wrapper marking a class descriptor.
* :func:`resolve_descriptor` – turn caller input into a descriptor or raise
  :class:`LookupError`.
* :func:`matches` – polymorphic membership test.

System Role
-----------
Pure domain helpers without logging or error taxonomy concerns. The type rule
evaluator maps :class:`LookupError` onto ``TypeArgumentError`` because only it
knows the offending argument's position.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Union


class PrimitiveTag(str, Enum):
    """Primitive kind tags accepted as type descriptors.

    The members compare equal to their string values, so ``"number"`` and
    ``PrimitiveTag.NUMBER`` are interchangeable descriptors.
    """

    BOOLEAN = "boolean"
    UNDEFINED = "undefined"
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    OBJECT = "object"
    FUNCTION = "function"


@dataclass(frozen=True, slots=True)
class NominalType:
    """Class descriptor matched through :func:`isinstance` (subclasses included)."""

    cls: type


TypeDescriptor = Union[PrimitiveTag, NominalType]


def kind_of(value: object) -> PrimitiveTag:
    """Return the primitive kind tag describing *value*.

    Every value maps to exactly one tag. Classes are callable and therefore
    report :attr:`PrimitiveTag.FUNCTION`.

    Examples
    --------
    >>> kind_of(True).value, kind_of(None).value, kind_of(3.5).value
    ('boolean', 'undefined', 'number')
    >>> kind_of("x").value, kind_of(len).value, kind_of([]).value
    ('string', 'function', 'object')
    """

    if isinstance(value, bool):
        return PrimitiveTag.BOOLEAN
    if value is None:
        return PrimitiveTag.UNDEFINED
    if isinstance(value, numbers.Real):
        return PrimitiveTag.NUMBER
    if isinstance(value, str):
        return PrimitiveTag.STRING
    if isinstance(value, Enum):
        return PrimitiveTag.SYMBOL
    if callable(value):
        return PrimitiveTag.FUNCTION
    return PrimitiveTag.OBJECT


def is_nan(value: object) -> bool:
    """Return ``True`` when *value* is a number that is not a number.

    NaN is the only number unequal to itself. No float conversion happens, so
    ints beyond the float range are accepted.

    >>> is_nan(float("nan")), is_nan(10**400), is_nan("nan")
    (True, False, False)
    """

    return kind_of(value) is PrimitiveTag.NUMBER and value != value


def resolve_descriptor(descriptor: object) -> TypeDescriptor:
    """Translate caller input into a :data:`TypeDescriptor`.

    Raises
    ------
    LookupError
        If *descriptor* is neither a known tag nor a class usable with
        :func:`isinstance`.

    Examples
    --------
    >>> resolve_descriptor("string") is PrimitiveTag.STRING
    True
    >>> resolve_descriptor(dict)
    NominalType(cls=<class 'dict'>)
    """

    if isinstance(descriptor, PrimitiveTag):
        return descriptor
    if isinstance(descriptor, str):
        try:
            return PrimitiveTag(descriptor)
        except ValueError:
            raise LookupError(f"unknown kind tag {descriptor!r}") from None
    if isinstance(descriptor, type):
        # Plain typing.Protocol classes refuse isinstance at call time.
        try:
            isinstance(None, descriptor)
        except TypeError:
            raise LookupError(f"class does not support isinstance: {descriptor!r}") from None
        return NominalType(descriptor)
    raise LookupError(f"not a type descriptor: {descriptor!r}")


def matches(value: object, descriptor: TypeDescriptor) -> bool:
    """Return ``True`` when *value* belongs to *descriptor*."""

    if isinstance(descriptor, NominalType):
        return isinstance(value, descriptor.cls)
    return kind_of(value) is descriptor


__all__ = [
    "PrimitiveTag",
    "NominalType",
    "TypeDescriptor",
    "kind_of",
    "is_nan",
    "resolve_descriptor",
    "matches",
]
