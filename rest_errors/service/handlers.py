"""FastAPI exception handlers for normalized errors.

Maps :class:`NormalizedError` values onto ``JSONResponse`` objects: the body is
the client-safe payload and the headers are the error's headers. The adapter
never sends anything itself; FastAPI remains responsible for transport.

Registered handlers:
- ``NormalizedError``: rendered as-is (stamped first if it never was).
- ``HTTPException`` (Starlette, FastAPI subclass included): converted with
  ``create``; its headers are kept.
- ``Exception``: passed through ``wrap``, so clients see a 500 with the fixed
  internal message and the original text only reaches the logs.
"""
from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException

from ..base.constants import MIN_ERROR_STATUS
from ..base.errors import NormalizedError
from ..base.logging import ErrorLogContext, get_logger, log_event
from ..catalog import RestErrors

logger = get_logger("rest_errors.service")


def to_json_response(error: NormalizedError) -> JSONResponse:
    """Render ``error`` as a ``JSONResponse``."""
    output = error.output
    return JSONResponse(
        status_code=output["statusCode"],
        content=output["payload"],
        headers=output["headers"] or None,
    )


def register_exception_handlers(app: FastAPI, errors: Optional[RestErrors] = None) -> RestErrors:
    """Install normalized-error handlers on ``app``.

    Parameters:
        app: The FastAPI application.
        errors: Normalizer used to convert foreign exceptions; a new one is
            created when omitted.

    Returns:
        The normalizer in use, so callers can subscribe observers.
    """
    normalizer = errors if errors is not None else RestErrors()

    @app.exception_handler(NormalizedError)
    async def handle_normalized(_request: Request, exc: NormalizedError) -> JSONResponse:
        return to_json_response(exc if exc.is_normalized else normalizer.wrap(exc))

    @app.exception_handler(HTTPException)
    async def handle_http_exception(_request: Request, exc: HTTPException) -> Response:
        if exc.status_code < MIN_ERROR_STATUS:
            return Response(status_code=exc.status_code, headers=exc.headers)
        detail = exc.detail if isinstance(exc.detail, str) else None
        err = normalizer.create(exc.status_code, detail)
        if exc.headers:
            err.headers.update(exc.headers)
        return to_json_response(err)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        err = normalizer.wrap(exc)
        log_event(
            logger,
            "service.unhandled_exception",
            ErrorLogContext.from_error(err, detail=err.message),
            level="error",
        )
        return to_json_response(err)

    return normalizer


__all__ = ["to_json_response", "register_exception_handlers"]
