"""Public package surface for ``cert_is``.

Chainable value, type and range certification. :func:`certify` raises typed
errors on failure; :func:`check` answers with ``False`` instead while still
raising on malformed calls.
"""

from __future__ import annotations

from .core import (
    ArgumentError,
    CertError,
    CertificationError,
    Certifier,
    Checker,
    ErrorKind,
    PrimitiveTag,
    RangeArgumentError,
    RangeAssertionError,
    TypeArgumentError,
    TypeAssertionError,
    ValueArgumentError,
    ValueAssertionError,
    cert,
    certify,
    check,
    kind_of,
)
from .observability import bind_trace_id, get_logger

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
    "bind_trace_id",
    "get_logger",
]
