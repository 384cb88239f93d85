"""Debug event logging for certification decisions.

Each Certifier predicate reports its outcome as a single DEBUG record on the
``cert_is`` logger. A Checker adds nothing of its own, so a converted failure
still shows up exactly once. The record's ``context`` extra holds the rule
name, the number of subjects, the error code on failure, and the caller's
trace identifier.

Contents
    - ``TRACE_ID``: trace identifier stamped on every certification event.
    - ``get_logger``: the ``cert_is`` logger, silent until a handler is attached.
    - ``bind_trace_id``: tag subsequent certifications with a request id.
    - ``log_debug``: emit one certification event.
    - ``make_event``: build the ``rule`` / ``subjects`` event payload.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("cert_is_trace_id", default=None)
"""Identifier of the request or job whose values are being certified."""

_LOGGER: Final[logging.Logger] = logging.getLogger("cert_is")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the ``cert_is`` logger.

    Certification runs in hot validation paths, so nothing is printed unless
    the host application attaches a handler and enables DEBUG here.
    """

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Tag the certifications that follow in this context with *trace_id*.

    Pass ``None`` to stop tagging. The value lives in a :class:`ContextVar`,
    so concurrent requests validating their own input keep separate ids.

    Examples
    --------
    >>> bind_trace_id('abc123')
    >>> TRACE_ID.get()
    'abc123'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Emit the certification event *message* with *fields* as its context."""

    _emit(logging.DEBUG, message, fields)


def make_event(
    rule: str,
    subjects: int,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured logging payload for a certification decision.

    Inputs
        rule: Name of the predicate that was evaluated (``"is_gt"``, ...).
        subjects: Number of subject values the predicate was applied to.
        payload: Optional mapping with extra diagnostic detail.

    Examples
    --------
    >>> make_event('is_type', 2, {'code': 'ERR_INVALID_TYPE'})
    {'rule': 'is_type', 'subjects': 2, 'code': 'ERR_INVALID_TYPE'}
    """

    event: dict[str, Any] = {"rule": rule, "subjects": subjects}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Log at *level*; the context dict is only built when the level is enabled."""

    if not _LOGGER.isEnabledFor(level):
        return
    _LOGGER.log(level, message, extra={"context": _with_trace(fields)})


def _with_trace(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Prefix *fields* with ``trace_id``; subject values themselves are never logged."""

    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    return context
