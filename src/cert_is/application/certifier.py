"""Throwing-mode wrapper binding a fixed list of subject values.

Purpose
-------
Give callers a fluent surface over the rule evaluators: every predicate either
returns the same :class:`Certifier` (so calls chain) or raises the evaluator's
error unmodified.

System Role
-----------
Sits between the composition root (:func:`cert_is.core.certify`) and
:mod:`cert_is.application.rules`. It owns the subject tuple and the optional
message override and emits one debug event per decision.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from ..domain.errors import CertError, TypeArgumentError
from ..observability import log_debug, make_event
from .rules import check_ranges, check_types, check_values


class Certifier:
    """Chainable certification over a fixed set of values.

    All values must pass a predicate for the call to succeed.

    Examples
    --------
    >>> Certifier(15).is_gt(2).is_lt(17).values
    (15,)
    >>> Certifier("foo").is_("bar")
    Traceback (most recent call last):
    ...
    cert_is.domain.errors.ValueAssertionError: [ERR_INVALID_VALUE]: Value is invalid
    >>> Certifier(123).message("X").is_("y")
    Traceback (most recent call last):
    ...
    cert_is.domain.errors.ValueAssertionError: [ERR_INVALID_VALUE]: X
    """

    __slots__ = ("_values", "_message")

    def __init__(self, *values: Any) -> None:
        self._values: tuple[Any, ...] = values
        self._message: str | None = None

    @property
    def values(self) -> tuple[Any, ...]:
        """Subject values captured at construction time."""

        return self._values

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._values!r}"

    def message(self, text: str) -> Certifier:
        """Load a custom body for every later assertion error on this instance.

        Argument errors are unaffected. The override persists until the next
        call to :meth:`message`.
        """

        if not isinstance(text, str):
            raise TypeArgumentError("message", "string")
        self._message = text
        return self

    def is_(self, *valid: Any) -> Certifier:
        """Certify every value is strictly equal to one of *valid*.

        Raises :class:`~cert_is.domain.errors.ValueAssertionError` otherwise.
        """

        return self._run("is_", check_values, valid=valid)

    def is_not(self, *invalid: Any) -> Certifier:
        """Certify no value is strictly equal to any of *invalid*."""

        return self._run("is_not", check_values, invalid=invalid)

    def is_type(self, *valid_types: Any) -> Certifier:
        """Certify every value matches at least one of *valid_types*.

        A descriptor is either a kind tag (``"number"``, ``"string"``, ...)
        or a class tested with :func:`isinstance`.
        """

        return self._run("is_type", check_types, valid_types=valid_types)

    def is_not_type(self, *invalid_types: Any) -> Certifier:
        """Certify no value matches any of *invalid_types*."""

        return self._run("is_not_type", check_types, invalid_types=invalid_types)

    def is_range(
        self,
        lower: float,
        upper: float,
        lower_inclusive: bool = False,
        upper_inclusive: bool = False,
    ) -> Certifier:
        """Certify every value lies between *lower* and *upper*.

        Both bounds are exclusive unless their flag says otherwise.
        """

        return self._run("is_range", check_ranges, lower, upper, lower_inclusive, upper_inclusive)

    def is_gt(self, lower: float) -> Certifier:
        return self._run("is_gt", check_ranges, lower, math.inf, False, True)

    def is_gte(self, lower: float) -> Certifier:
        return self._run("is_gte", check_ranges, lower, math.inf, True, True)

    def is_lt(self, upper: float) -> Certifier:
        return self._run("is_lt", check_ranges, -math.inf, upper, True, False)

    def is_lte(self, upper: float) -> Certifier:
        return self._run("is_lte", check_ranges, -math.inf, upper, True, True)

    def _run(self, rule: str, evaluator: Callable[..., None], *args: Any, **kwargs: Any) -> Certifier:
        """Invoke *evaluator* on the stored values and log the outcome."""

        try:
            evaluator(self._values, *args, message=self._message, **kwargs)
        except CertError as exc:
            log_debug("certification_failed", **make_event(rule, len(self._values), {"code": exc.code}))
            raise
        log_debug("certification_passed", **make_event(rule, len(self._values)))
        return self
