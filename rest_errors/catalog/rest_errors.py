"""Error normalizer entry point.

:class:`RestErrors` owns the observer list and exposes ``wrap``/``create`` plus
one named constructor per standard 4xx/5xx status (see the mixins). Every
successful ``wrap``, ``create`` or named constructor call notifies
``errorOccur`` subscribers exactly once, after the error is fully formed.

Example::

    errors = RestErrors()
    errors.on("errorOccur", lambda err: metrics.incr(err.status_code))
    raise errors.not_found("no such user", {"id": user_id})
"""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from ..base.constants import DEFAULT_WRAP_STATUS, ERROR_OCCUR_EVENT
from ..base.errors import NormalizedError
from ..base.logging import ErrorLogContext, get_logger, log_event
from ..base.normalizer import initialize, normalize
from ..base.observers import ErrorHandler, ErrorObservers
from ..config import RestErrorsSettings, load_settings
from .client_errors import ClientErrorsMixin
from .server_errors import ServerErrorsMixin


class RestErrors(ClientErrorsMixin, ServerErrorsMixin):
    """Creates and normalizes HTTP errors and publishes them to observers.

    Parameters:
        status_reasons: Optional status-code to reason-phrase table replacing
            the default one.
        settings: Optional resolved settings; loaded from the environment
            when omitted.
        logger: Optional logger; defaults to ``rest_errors.catalog``.
    """

    def __init__(
        self,
        *,
        status_reasons: Optional[Mapping[int, str]] = None,
        settings: Optional[RestErrorsSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.status_reasons = status_reasons
        self.settings = settings if settings is not None else load_settings()
        self._observers = ErrorObservers()
        self._logger = logger or get_logger("rest_errors.catalog")

    # ------------------------------ Observers ------------------------------ #
    def on(self, event: str, handler: ErrorHandler) -> "RestErrors":
        """Subscribe ``handler`` to ``event`` (``"errorOccur"``); chainable."""
        self._observers.on(event, handler)
        return self

    def off(self, event: str, handler: ErrorHandler) -> "RestErrors":
        self._observers.off(event, handler)
        return self

    def listeners(self, event: str) -> List[ErrorHandler]:
        return self._observers.listeners(event)

    # ---------------------------- Entry points ---------------------------- #
    def wrap(
        self,
        error: BaseException,
        status_code: Optional[int] = None,
        message: Optional[str] = None,
    ) -> NormalizedError:
        """Normalize ``error`` (default status 500).

        Already-normalized errors are returned unchanged; observers are still
        notified.
        """
        err = self._stamp(error, status_code, message)
        self._notify(err)
        return err

    def create(
        self,
        status_code: int,
        message: Optional[str] = None,
        data: Any = None,
    ) -> NormalizedError:
        """Build a fresh error with ``status_code``, ``message`` and ``data``."""
        err = self._build(status_code, message, data)
        self._notify(err)
        return err

    # ------------------------------ Internals ------------------------------ #
    def _stamp(
        self,
        error: BaseException,
        status_code: Optional[int],
        message: Optional[str],
    ) -> NormalizedError:
        status = DEFAULT_WRAP_STATUS if status_code is None else status_code
        return normalize(error, status, message, self.status_reasons)

    def _build(self, status_code: Any, message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return initialize(NormalizedError(message, data=data), status_code, reasons=self.status_reasons)

    def _notify(self, err: NormalizedError) -> None:
        if self.settings.log_events:
            level = logging.WARNING if err.status_code >= 500 else logging.DEBUG
            log_event(self._logger, "error.normalized", ErrorLogContext.from_error(err), level=level)
        self._observers.emit(ERROR_OCCUR_EVENT, err)


__all__ = ["RestErrors"]
