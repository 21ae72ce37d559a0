"""Tests for the 4xx named constructors."""

from __future__ import annotations

from typing import List

import pytest

from rest_errors import NamedScheme, NormalizedError, RestErrors, UsageError, reason_phrase

CLIENT_CONSTRUCTORS = [
    ("bad_request", 400),
    ("forbidden", 403),
    ("not_found", 404),
    ("method_not_allowed", 405),
    ("not_acceptable", 406),
    ("proxy_auth_required", 407),
    ("client_timeout", 408),
    ("conflict", 409),
    ("resource_gone", 410),
    ("length_required", 411),
    ("precondition_failed", 412),
    ("entity_too_large", 413),
    ("uri_too_long", 414),
    ("unsupported_media_type", 415),
    ("range_not_satisfiable", 416),
    ("expectation_failed", 417),
    ("bad_data", 422),
    ("too_many_requests", 429),
]


@pytest.mark.parametrize("name,code", CLIENT_CONSTRUCTORS)
def test_client_constructor_status_and_message(errors: RestErrors, name, code):
    constructor = getattr(errors, name)

    default = constructor()
    assert default.status_code == code
    assert default.payload.error == reason_phrase(code)
    assert default.message == reason_phrase(code)
    assert default.data is None

    custom = constructor("custom message", {"k": "v"})
    assert custom.message == "custom message"
    assert custom.payload.message == "custom message"
    assert custom.data == {"k": "v"}


@pytest.mark.parametrize("name,code", CLIENT_CONSTRUCTORS)
def test_client_constructor_notifies_once(errors: RestErrors, events: List[NormalizedError], name, code):
    error = getattr(errors, name)("boom")
    assert events == [error]


def test_bad_request_defaults_message_to_reason(errors: RestErrors):
    assert errors.bad_request().message == "Bad Request"
    assert errors.bad_request("bad request").message == "bad request"


def test_unauthorized_without_scheme(errors: RestErrors):
    error = errors.unauthorized()
    assert error.status_code == 401
    assert error.headers == {}
    assert error.is_missing_credentials is None


def test_unauthorized_null_message_has_no_payload_message(errors: RestErrors):
    error = errors.unauthorized(None)
    assert error.payload.message is None
    assert error.message == "Unauthorized"


def test_unauthorized_with_scheme(errors: RestErrors):
    error = errors.unauthorized("unauthorized", "Test")
    assert error.status_code == 401
    assert error.headers["WWW-Authenticate"] == 'Test error="unauthorized"'
    assert error.is_missing_credentials is None


def test_unauthorized_with_scheme_and_attributes(errors: RestErrors):
    error = errors.unauthorized("bad creds", "Bearer", {"realm": "api"})
    assert error.headers["WWW-Authenticate"] == 'Bearer realm="api", error="bad creds"'


def test_unauthorized_missing_credentials(errors: RestErrors):
    error = errors.unauthorized(None, "Basic")
    assert error.is_missing_credentials is True
    assert error.headers["WWW-Authenticate"] == "Basic"
    assert "error=" not in error.headers["WWW-Authenticate"]


def test_unauthorized_empty_message_is_missing_credentials(errors: RestErrors):
    error = errors.unauthorized("", "Basic", {"a": 1})
    assert error.is_missing_credentials is True
    assert error.headers["WWW-Authenticate"] == 'Basic a="1"'


def test_unauthorized_challenge_list(errors: RestErrors):
    error = errors.unauthorized(None, ["Test", "one", "two"])
    assert error.headers["WWW-Authenticate"] == "Test, one, two"
    assert error.is_missing_credentials is None


def test_unauthorized_accepts_challenge_variant(errors: RestErrors):
    error = errors.unauthorized("expired", NamedScheme("Bearer", {"realm": "api"}))
    assert error.headers["WWW-Authenticate"] == 'Bearer realm="api", error="expired"'


def test_unauthorized_header_is_set_before_notification(errors: RestErrors):
    seen = []
    errors.on("errorOccur", lambda err: seen.append(dict(err.headers)))
    errors.unauthorized("nope", "Basic")
    assert seen == [{"WWW-Authenticate": 'Basic error="nope"'}]


def test_unauthorized_bad_message_raises_without_notifying(errors: RestErrors, events):
    with pytest.raises(UsageError):
        errors.unauthorized("line\nbreak", "Basic")
    assert events == []


def test_unauthorized_notifies_once(errors: RestErrors, events):
    error = errors.unauthorized("x", "Basic", {"realm": "r"})
    assert events == [error]
