"""HTTP-transportable error type.

Every error produced by the normalizer is a :class:`NormalizedError`: an
exception annotated with a status code, a client-safe payload and optional
response headers. Foreign exceptions are not mutated; the normalizer builds a
``NormalizedError`` that owns a reference to them (``cause``) and resolves
unknown attributes against that cause so custom fields stay reachable.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .error_payload import ErrorPayload


class NormalizedError(Exception):
    """Exception carrying an HTTP status, safe payload and response headers.

    Attributes:
        status_code: HTTP status to report (400+).
        message: Human-readable detail; may be ``"<prefix>: <cause message>"``.
        data: Caller-attached context. Never copied into the payload.
        payload: Client-safe :class:`ErrorPayload`.
        headers: Response headers (``WWW-Authenticate`` for challenges).
        cause: Wrapped foreign exception, if any.
        is_normalized: Marker set once the error has been stamped.
        is_missing_credentials: ``True`` only for a 401 whose named-scheme
            challenge carried no error message; ``None`` otherwise.
        is_developer_error: ``True`` only for ``bad_implementation`` errors.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        data: Any = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(*((message,) if message else ()))
        self.message = message or None
        self.data = data
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
        self.status_code = 500
        self.payload: Optional[ErrorPayload] = None
        self.headers: Dict[str, str] = {}
        self.is_normalized = False
        self.is_missing_credentials: Optional[bool] = None
        self.is_developer_error: Optional[bool] = None
        self.status_reasons: Optional[Mapping[int, str]] = None

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes missing on the wrapper itself.
        cause = self.__dict__.get("cause")
        if cause is None or name.startswith("__"):
            raise AttributeError(name)
        return getattr(cause, name)

    def __str__(self) -> str:
        return self.message or ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, message={self.message!r})"

    def set_message(self, message: Optional[str]) -> None:
        """Replace ``message`` and keep ``args`` in sync for tracebacks."""
        self.message = message or None
        self.args = (self.message,) if self.message else ()

    def reformat(self) -> ErrorPayload:
        """Recompute ``payload`` from the current status code and message."""
        # local import avoids a cycle with base.formatting
        from ..formatting import format_payload

        self.payload = format_payload(self.status_code, self.message, self.status_reasons)
        return self.payload

    @property
    def output(self) -> Dict[str, Any]:
        """Response view: status code, payload dict and a copy of the headers."""
        payload = self.payload if self.payload is not None else self.reformat()
        return {
            "statusCode": self.status_code,
            "payload": payload.as_dict(),
            "headers": dict(self.headers),
        }


__all__ = ["NormalizedError"]
