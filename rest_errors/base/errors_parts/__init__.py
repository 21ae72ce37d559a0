"""Errors parts package public surface.

Re-exports individual error types for optional direct imports.
Prefer importing from `rest_errors.base.errors` for the stable surface.
"""

from .error_payload import ErrorPayload
from .normalized_error import NormalizedError
from .usage_error import UsageError

__all__ = ["ErrorPayload", "NormalizedError", "UsageError"]
