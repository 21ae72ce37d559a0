"""Payload formatting and header attribute escaping.

Two leaf helpers used by the normalizer and the challenge builder:

* :func:`format_payload` derives the client-safe payload from a status code
  and the current message. A 500 always reports the fixed internal message,
  whatever the underlying error said.
* :func:`escape_header_attribute` makes a value safe to embed inside a quoted
  ``WWW-Authenticate`` attribute. Values outside the allowed character set are
  rejected with :class:`UsageError` rather than passed through.
"""
from __future__ import annotations

import re
from typing import Mapping, Optional

from .constants import INTERNAL_ERROR_MESSAGE
from .errors_parts.error_payload import ErrorPayload
from .preconditions import assert_that
from .status_reasons import reason_phrase

# Allowed: !#$%&'()*+,-./:;<=>?@[]^_`{|}~ plus space, alphanumerics, backslash and double quote
_ATTRIBUTE_RE = re.compile(r"[ \w!#$%&'()*+,\-./:;<=>?@\[\]^`{|}~\"\\]*", re.ASCII)
_UNESCAPE_RE = re.compile(r"\\([\\\"])")


def format_payload(
    status_code: int,
    message: Optional[str] = None,
    reasons: Optional[Mapping[int, str]] = None,
) -> ErrorPayload:
    """Build the public payload for ``status_code``.

    Parameters:
        status_code: HTTP status being reported (400+).
        message: Current error message, if any.
        reasons: Optional reason-phrase table; defaults to the standard one.

    Returns:
        An :class:`ErrorPayload`. ``message`` is the fixed internal string for
        a 500, the given message otherwise, or absent when there is none.
    """
    if status_code == 500:
        payload_message: Optional[str] = INTERNAL_ERROR_MESSAGE
    else:
        payload_message = message or None
    return ErrorPayload(
        status_code=status_code,
        error=reason_phrase(status_code, reasons),
        message=payload_message,
    )


def escape_header_attribute(value: str) -> str:
    """Escape ``value`` for use inside a double-quoted header attribute.

    Backslashes are doubled first, then double quotes are backslash-escaped,
    so an input ``\\"`` becomes ``\\\\\\"``.

    Raises:
        UsageError: if ``value`` contains characters outside the allowed set
            (control characters, newlines, non-ASCII).
    """
    assert_that(
        isinstance(value, str) and _ATTRIBUTE_RE.fullmatch(value) is not None,
        f"Bad attribute value ({value})",
    )
    return value.replace("\\", "\\\\").replace('"', '\\"')


def unescape_header_attribute(value: str) -> str:
    """Reverse :func:`escape_header_attribute`."""
    return _UNESCAPE_RE.sub(r"\1", value)


__all__ = [
    "format_payload",
    "escape_header_attribute",
    "unescape_header_attribute",
]
