"""Domain-level exception taxonomy.

Purpose
-------
Expose the stable error taxonomy shared by the rule evaluators, the Certifier,
the Checker, and consuming applications. Every error carries a tag
(:class:`ErrorKind`) so boundaries can classify failures with a simple tag
comparison instead of walking the class hierarchy.

Contents
--------
* :class:`ErrorKind` – closed enum of the six kinds with their stable codes.
* :class:`CertError` – umbrella base class for all library errors.
* :class:`ArgumentError` – family base for malformed calls to the library.
* :class:`ValueArgumentError` / :class:`TypeArgumentError` /
  :class:`RangeArgumentError` – argument variants with structured context.
* :class:`CertificationError` – family base for values failing certification.
* :class:`ValueAssertionError` / :class:`TypeAssertionError` /
  :class:`RangeAssertionError` – assertion variants honouring message overrides.

System Role
-----------
Evaluators raise these exceptions; the Certifier propagates them unmodified and
the Checker converts the assertion family into ``False``. Callers catch
:class:`CertError` to handle all library failures uniformly.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final

from .interval import Interval
from .kinds import PrimitiveTag, kind_of

DEFAULT_VALUE_MESSAGE: Final[str] = "Value is invalid"
DEFAULT_TYPE_MESSAGE: Final[str] = "Value is of an invalid type"
DEFAULT_RANGE_MESSAGE: Final[str] = "Value is of a prohibited range"


class ErrorKind(Enum):
    """Tag identifying one of the six error kinds.

    Each member's value is ``(code, family)``. ``code`` is the machine-readable
    identifier published to callers and must never change.

    Examples
    --------
    >>> ErrorKind.TYPE_ASSERTION.code
    'ERR_INVALID_TYPE'
    >>> ErrorKind.RANGE_ARGUMENT.is_assertion
    False
    """

    VALUE_ARGUMENT = ("ERR_INVALID_ARG_VALUE", "argument")
    TYPE_ARGUMENT = ("ERR_INVALID_ARG_TYPE", "argument")
    RANGE_ARGUMENT = ("ERR_INVALID_ARG_RANGE", "argument")
    VALUE_ASSERTION = ("ERR_INVALID_VALUE", "assertion")
    TYPE_ASSERTION = ("ERR_INVALID_TYPE", "assertion")
    RANGE_ASSERTION = ("ERR_INVALID_RANGE", "assertion")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def family(self) -> str:
        return self.value[1]

    @property
    def is_assertion(self) -> bool:
        """Return ``True`` for kinds signalling a failed certification."""

        return self.family == "assertion"


class CertError(Exception):
    """Base type for all exceptions emitted by ``cert_is``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.

    What
    ----
    Subclasses set :attr:`kind`; :attr:`code` is derived from it so the two can
    never disagree. :attr:`message` holds the fully formatted text that is also
    passed to :class:`Exception`.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def code(self) -> str:
        return self.kind.code


class ArgumentError(CertError):
    """Raised when a certification call itself is malformed.

    Argument errors are never suppressed, not even by the Checker.
    """

    _DETAIL: str = "has an invalid argument"

    def __init__(self, param_name: str) -> None:
        super().__init__(f'[{self.kind.code}]: "{param_name}" {self._DETAIL}')
        self.param_name = param_name


class ValueArgumentError(ArgumentError, ValueError):
    """Thrown when an argument's value is not an acceptable value.

    Examples
    --------
    >>> err = ValueArgumentError("foo", "bar")
    >>> err.message
    '[ERR_INVALID_ARG_VALUE]: "foo" has an invalid value'
    >>> err.valid
    ('bar',)
    >>> ValueArgumentError("foo").valid is None
    True
    """

    kind = ErrorKind.VALUE_ARGUMENT
    _DETAIL = "has an invalid value"

    def __init__(self, param_name: str, *valid: Any) -> None:
        super().__init__(param_name)
        self.valid: tuple[Any, ...] | None = valid or None


class TypeArgumentError(ArgumentError, TypeError):
    """Thrown when an argument's type is not an acceptable type.

    ``valid_types`` lists the accepted descriptors (tag names or classes) when
    the caller supplied any.

    Examples
    --------
    >>> err = TypeArgumentError("lower", "number")
    >>> err.message
    '[ERR_INVALID_ARG_TYPE]: "lower" has an invalid type'
    >>> err.valid_types
    ('number',)
    """

    kind = ErrorKind.TYPE_ARGUMENT
    _DETAIL = "has an invalid type"

    def __init__(self, param_name: str, *valid_types: Any) -> None:
        super().__init__(param_name)
        self.valid_types: tuple[Any, ...] | None = valid_types or None


class RangeArgumentError(ArgumentError, ValueError):
    """Thrown when an argument is not within an acceptable range.

    Why
    ----
    An inverted or empty interval is a caller mistake, not a failed
    certification, so it belongs to the argument family.

    What
    ----
    :attr:`range` describes the range the argument should have been in. It is
    only set when all four bound specifiers are supplied with the right kinds
    (numbers for the bounds, booleans for the flags).

    Examples
    --------
    >>> err = RangeArgumentError("foo", 42, 84, True, False)
    >>> err.message
    '[ERR_INVALID_ARG_RANGE]: "foo" has an invalid range'
    >>> err.range
    '42 <= "foo" < 84'
    >>> RangeArgumentError("foo", 42).range is None
    True
    """

    kind = ErrorKind.RANGE_ARGUMENT
    _DETAIL = "has an invalid range"

    def __init__(
        self,
        param_name: str,
        lower: float | None = None,
        upper: float | None = None,
        lower_inclusive: bool | None = None,
        upper_inclusive: bool | None = None,
    ) -> None:
        super().__init__(param_name)
        self.range: str | None = None
        flags = (lower_inclusive, upper_inclusive)
        if _is_bound(lower) and _is_bound(upper) and all(isinstance(flag, bool) for flag in flags):
            interval = Interval(lower, upper, lower_inclusive, upper_inclusive)  # type: ignore[arg-type]
            self.range = interval.describe(f'"{param_name}"')


class CertificationError(CertError, AssertionError):
    """Raised when a subject value fails its certification.

    The optional ``message`` replaces the default body; the ``[code]: `` prefix
    is always kept so :attr:`code` stays recoverable from the text.
    """

    _DEFAULT: str = "Value failed certification"

    def __init__(self, message: str | None = None) -> None:
        body = self._DEFAULT if message is None else message
        super().__init__(f"[{self.kind.code}]: {body}")


class ValueAssertionError(CertificationError):
    """Thrown when a value is either not expected or is explicitly forbidden.

    Examples
    --------
    >>> ValueAssertionError().message
    '[ERR_INVALID_VALUE]: Value is invalid'
    >>> ValueAssertionError("this is a custom message").message
    '[ERR_INVALID_VALUE]: this is a custom message'
    """

    kind = ErrorKind.VALUE_ASSERTION
    _DEFAULT = DEFAULT_VALUE_MESSAGE


class TypeAssertionError(CertificationError):
    """Thrown when a value's type is either not expected or explicitly forbidden."""

    kind = ErrorKind.TYPE_ASSERTION
    _DEFAULT = DEFAULT_TYPE_MESSAGE


class RangeAssertionError(CertificationError):
    """Thrown when a value lies outside the requested range."""

    kind = ErrorKind.RANGE_ASSERTION
    _DEFAULT = DEFAULT_RANGE_MESSAGE


def _is_bound(value: object) -> bool:
    return kind_of(value) is PrimitiveTag.NUMBER


__all__ = [
    "ErrorKind",
    "CertError",
    "ArgumentError",
    "ValueArgumentError",
    "TypeArgumentError",
    "RangeArgumentError",
    "CertificationError",
    "ValueAssertionError",
    "TypeAssertionError",
    "RangeAssertionError",
]
