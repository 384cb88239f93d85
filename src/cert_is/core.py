"""Composition root for ``cert_is``.

Purpose
-------
Provide the two entry points consumers call, :func:`certify` and :func:`check`,
and gather the stable public names in one place.

Contents
--------
* :func:`certify` (alias :data:`cert`) – build a throwing :class:`Certifier`.
* :func:`check` – build a boolean :class:`Checker`.

System Role
-----------
Wires the application-layer wrappers to the public package surface. The module
holds no state; every call returns an independent instance.
"""

from __future__ import annotations

from typing import Any

from .application.certifier import Certifier
from .application.checker import Checker
from .domain.errors import (
    ArgumentError,
    CertError,
    CertificationError,
    ErrorKind,
    RangeArgumentError,
    RangeAssertionError,
    TypeArgumentError,
    TypeAssertionError,
    ValueArgumentError,
    ValueAssertionError,
)
from .domain.kinds import PrimitiveTag, kind_of


def certify(*values: Any) -> Certifier:
    """Return a :class:`Certifier` for *values*; every value must pass each test.

    Examples
    --------
    >>> certify("foo").is_("foo", "bar").is_type("string").values
    ('foo',)
    >>> certify(15, 23).is_gte("foo")
    Traceback (most recent call last):
    ...
    cert_is.domain.errors.TypeArgumentError: [ERR_INVALID_ARG_TYPE]: "lower" has an invalid type
    """

    return Certifier(*values)


cert = certify


def check(*values: Any) -> Checker:
    """Return a :class:`Checker` for *values*; failed tests yield ``False``.

    Examples
    --------
    >>> check(12, 22, 32).is_gt(20)
    False
    >>> check(12, 22, 32).is_gt(2) is not False
    True
    """

    return Checker(*values)


__all__ = [
    "certify",
    "cert",
    "check",
    "Certifier",
    "Checker",
    "CertError",
    "ArgumentError",
    "CertificationError",
    "ErrorKind",
    "ValueArgumentError",
    "TypeArgumentError",
    "RangeArgumentError",
    "ValueAssertionError",
    "TypeAssertionError",
    "RangeAssertionError",
    "PrimitiveTag",
    "kind_of",
]
