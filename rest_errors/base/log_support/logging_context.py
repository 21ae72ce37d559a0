"""Structured logging context for normalized errors.

:class:`ErrorLogContext` carries the fields logged alongside every
``error.normalized`` event. It never includes ``data`` or the raw cause
message of a 5xx, mirroring what the payload exposes.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from ..errors_parts.normalized_error import NormalizedError


@dataclass
class ErrorLogContext:
    """Structured context for normalized error events."""

    status_code: Optional[int] = None
    error: Optional[str] = None
    error_class: Optional[str] = None
    cause_class: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_error(cls, error: "NormalizedError", **extra: Any) -> "ErrorLogContext":
        """Build the context for ``error``; ``extra`` keys are logged alongside."""
        cause = error.cause
        return cls(
            status_code=error.status_code,
            error=error.payload.error if error.payload is not None else None,
            error_class=type(error).__name__,
            cause_class=type(cause).__name__ if cause is not None else None,
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["ErrorLogContext"]
