"""5xx constructors.

When ``data`` is an exception it is treated as the underlying cause and
normalized (its fields stay reachable and its message is kept after the
prefix). Any other ``data`` is attached as context to a fresh error.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from ..base.constants import DEFAULT_WRAP_STATUS
from ..base.errors import NormalizedError

if TYPE_CHECKING:
    from .rest_errors import RestErrors


class ServerErrorsMixin:
    """Named constructors for server errors, mixed into ``RestErrors``."""

    def _server_error(
        self: "RestErrors",
        message: Optional[str],
        data: Any,
        status_code: Optional[int],
        *,
        developer_error: bool = False,
    ) -> NormalizedError:
        if isinstance(data, BaseException):
            err = self._stamp(data, status_code, message)
        else:
            err = self._build(DEFAULT_WRAP_STATUS if status_code is None else status_code, message, data)
        if developer_error:
            err.is_developer_error = True
        self._notify(err)
        return err

    def internal(
        self: "RestErrors",
        message: Optional[str] = None,
        data: Any = None,
        status_code: Optional[int] = None,
    ) -> NormalizedError:
        """Return a 500 (or ``status_code``) error; see module docstring for ``data``."""
        return self._server_error(message, data, status_code)

    def bad_implementation(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        """Return a 500 flagged as a developer error (internal misuse)."""
        return self._server_error(message, data, 500, developer_error=True)

    def not_implemented(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self._server_error(message, data, 501)

    def bad_gateway(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self._server_error(message, data, 502)

    def server_timeout(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self._server_error(message, data, 503)

    def gateway_timeout(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self._server_error(message, data, 504)


__all__ = ["ServerErrorsMixin"]
