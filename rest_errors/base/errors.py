"""Normalized error types public surface.

This module re-exports the one-class-per-file implementations under
``rest_errors.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_payload import ErrorPayload
from .errors_parts.normalized_error import NormalizedError
from .errors_parts.usage_error import UsageError

__all__ = ["ErrorPayload", "NormalizedError", "UsageError"]
