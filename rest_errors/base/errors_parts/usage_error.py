"""Precondition failure raised when the normalizer is misused.

Invalid status codes, non-exception wrap targets and header attribute values
outside the allowed character set all surface as :class:`UsageError`. These
are programmer errors: they are raised synchronously and never converted into
a :class:`NormalizedError`.
"""
from __future__ import annotations


class UsageError(ValueError):
    """Raised when an error-construction precondition is violated."""


__all__ = ["UsageError"]
