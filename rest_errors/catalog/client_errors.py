"""4xx constructors.

Each method is a fixed-status delegation to ``create``; ``unauthorized`` also
attaches a ``WWW-Authenticate`` challenge when a scheme is given.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Union

from ..base.challenge import Challenge, as_challenge, build_challenge
from ..base.constants import WWW_AUTHENTICATE
from ..base.errors import NormalizedError

if TYPE_CHECKING:
    from .rest_errors import RestErrors


class ClientErrorsMixin:
    """Named constructors for client errors, mixed into ``RestErrors``."""

    def bad_request(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(400, message, data)

    def unauthorized(
        self: "RestErrors",
        message: Optional[str] = None,
        scheme: Union[str, Sequence[str], Challenge, None] = None,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> NormalizedError:
        """Return a 401, optionally carrying a ``WWW-Authenticate`` header.

        ``scheme`` is either a scheme token (rendered with ``attributes`` and
        ``message``) or a list of pre-formatted challenges joined verbatim.
        A named scheme without a message marks the error
        ``is_missing_credentials``.
        """
        challenge = as_challenge(scheme, attributes)
        result = build_challenge(challenge, message=message) if challenge is not None else None

        err = self._build(401, message)
        if result is not None:
            err.headers[WWW_AUTHENTICATE] = result.header_value
            if result.is_missing_credentials:
                err.is_missing_credentials = True
        self._notify(err)
        return err

    def forbidden(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(403, message, data)

    def not_found(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(404, message, data)

    def method_not_allowed(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(405, message, data)

    def not_acceptable(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(406, message, data)

    def proxy_auth_required(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(407, message, data)

    def client_timeout(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(408, message, data)

    def conflict(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(409, message, data)

    def resource_gone(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(410, message, data)

    def length_required(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(411, message, data)

    def precondition_failed(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(412, message, data)

    def entity_too_large(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(413, message, data)

    def uri_too_long(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(414, message, data)

    def unsupported_media_type(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(415, message, data)

    def range_not_satisfiable(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(416, message, data)

    def expectation_failed(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(417, message, data)

    def bad_data(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(422, message, data)

    def too_many_requests(self: "RestErrors", message: Optional[str] = None, data: Any = None) -> NormalizedError:
        return self.create(429, message, data)


__all__ = ["ClientErrorsMixin"]
