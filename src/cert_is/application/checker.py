"""Boolean-mode wrapper over :class:`~cert_is.application.certifier.Certifier`.

A failed certification yields ``False`` instead of an exception. Argument
errors (malformed calls) still propagate; the boundary test is the error's
tag, :attr:`ErrorKind.is_assertion`.
"""

from __future__ import annotations

from typing import Any, Callable, Literal, Union

from ..domain.errors import CertError
from .certifier import Certifier

CheckResult = Union["Checker", Literal[False]]


class Checker:
    """Run certifications and report failures as ``False``.

    Predicates return the Checker itself on success so calls may chain.

    Examples
    --------
    >>> bool(Checker("foo").is_("foo"))
    True
    >>> Checker("foo").is_("bar")
    False
    >>> Checker("foo").is_type("bar")
    Traceback (most recent call last):
    ...
    cert_is.domain.errors.TypeArgumentError: [ERR_INVALID_ARG_TYPE]: "valid_types[0]" has an invalid type
    """

    __slots__ = ("_certifier",)

    def __init__(self, *values: Any) -> None:
        self._certifier = Certifier(*values)

    @property
    def values(self) -> tuple[Any, ...]:
        return self._certifier.values

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.values!r}"

    def message(self, text: str) -> Checker:
        """Forward *text* to the inner Certifier; results stay boolean."""

        self._certifier.message(text)
        return self

    def is_(self, *valid: Any) -> CheckResult:
        return self._call(self._certifier.is_, *valid)

    def is_not(self, *invalid: Any) -> CheckResult:
        return self._call(self._certifier.is_not, *invalid)

    def is_type(self, *valid_types: Any) -> CheckResult:
        return self._call(self._certifier.is_type, *valid_types)

    def is_not_type(self, *invalid_types: Any) -> CheckResult:
        return self._call(self._certifier.is_not_type, *invalid_types)

    def is_range(
        self,
        lower: float,
        upper: float,
        lower_inclusive: bool = False,
        upper_inclusive: bool = False,
    ) -> CheckResult:
        return self._call(self._certifier.is_range, lower, upper, lower_inclusive, upper_inclusive)

    def is_gt(self, lower: float) -> CheckResult:
        return self._call(self._certifier.is_gt, lower)

    def is_gte(self, lower: float) -> CheckResult:
        return self._call(self._certifier.is_gte, lower)

    def is_lt(self, upper: float) -> CheckResult:
        return self._call(self._certifier.is_lt, upper)

    def is_lte(self, upper: float) -> CheckResult:
        return self._call(self._certifier.is_lte, upper)

    def _call(self, method: Callable[..., Certifier], *args: Any) -> CheckResult:
        """Invoke *method*; convert assertion-family errors into ``False``.

        The inner Certifier has already logged the failure.
        """

        try:
            method(*args)
        except CertError as exc:
            if not exc.kind.is_assertion:
                raise
            return False
        return self
