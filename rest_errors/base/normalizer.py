"""Error normalization rules.

Implements the idempotent stamping step shared by ``wrap`` and ``create``:

1. Validate the status code (finite number, 400+).
2. Mark the error normalized and default ``data``.
3. Compute the client-safe payload and reset headers.
4. Default the message to the reason phrase when there is none, or prefix a
   supplied message onto the existing one with ``": "``.

The payload is computed before step 4, so it reflects the message the error
carried when it was stamped. Call :meth:`NormalizedError.reformat` to refresh
it after changing ``message``.

Precondition failures raise :class:`UsageError` and are logged at ERROR. Nothing
in this module catches exceptions.
"""
from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any, Mapping, Optional

from .constants import DEFAULT_NORMALIZE_STATUS, MIN_ERROR_STATUS
from .errors_parts.normalized_error import NormalizedError
from .preconditions import assert_that


def is_valid_status_code(status_code: Any) -> bool:
    """Return ``True`` for finite integral numbers of at least 400."""
    if isinstance(status_code, bool) or not isinstance(status_code, Real):
        return False
    if isinstance(status_code, Integral):
        return status_code >= MIN_ERROR_STATUS
    value = float(status_code)
    return math.isfinite(value) and value.is_integer() and value >= MIN_ERROR_STATUS


def initialize(
    error: NormalizedError,
    status_code: Any,
    message: Optional[str] = None,
    reasons: Optional[Mapping[int, str]] = None,
) -> NormalizedError:
    """Stamp ``error`` in place with status, payload and headers."""
    assert_that(
        is_valid_status_code(status_code),
        "First argument must be a number (400+):",
        status_code,
    )

    error.is_normalized = True
    error.status_code = int(status_code)
    error.status_reasons = reasons
    error.headers = {}
    error.reformat()

    if not message and not error.message:
        message = error.payload.error if error.payload is not None else None

    if message:
        error.set_message(message + (f": {error.message}" if error.message else ""))

    return error


def _cause_message(candidate: BaseException) -> Optional[str]:
    explicit = getattr(candidate, "message", None)
    if isinstance(explicit, str):
        return explicit or None
    return str(candidate) or None


def to_normalized(candidate: BaseException) -> NormalizedError:
    """Return ``candidate`` itself or a :class:`NormalizedError` wrapping it."""
    if isinstance(candidate, NormalizedError):
        return candidate
    return NormalizedError(
        _cause_message(candidate),
        data=getattr(candidate, "data", None),
        cause=candidate,
    )


def normalize(
    candidate: BaseException,
    status_code: Any = None,
    message: Optional[str] = None,
    reasons: Optional[Mapping[int, str]] = None,
) -> NormalizedError:
    """Normalize any exception into a :class:`NormalizedError`.

    Parameters:
        candidate: Exception to normalize. Non-exceptions raise ``UsageError``.
        status_code: Status to stamp; defaults to 400.
        message: Optional prefix for the existing message.
        reasons: Optional reason-phrase table.

    Returns:
        ``candidate`` unchanged when it is already normalized; otherwise a
        stamped error (``candidate`` itself when it is a ``NormalizedError``,
        else a wrapper owning it).
    """
    assert_that(isinstance(candidate, BaseException), "Cannot wrap non-Error object")
    if isinstance(candidate, NormalizedError) and candidate.is_normalized:
        return candidate
    status = DEFAULT_NORMALIZE_STATUS if status_code is None else status_code
    return initialize(to_normalized(candidate), status, message, reasons)


__all__ = [
    "is_valid_status_code",
    "initialize",
    "to_normalized",
    "normalize",
]
