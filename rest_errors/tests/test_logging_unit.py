"""Unit coverage for structured logging of normalization events."""

from __future__ import annotations

import json
import logging

import pytest

from rest_errors import RestErrors, RestErrorsSettings, UsageError
from rest_errors.base.log_support import ErrorLogContext, JsonFormatter
from rest_errors.base.logging import configure_logger, get_logger, log_event


def _events(stream) -> list:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.startswith("{")]


def test_log_events_enabled_logs_each_notification(log_stream):
    errors = RestErrors(settings=RestErrorsSettings(log_events=True))
    errors.server_timeout("db down")
    errors.not_found()

    logged = _events(log_stream)
    normalized = [e for e in logged if e["event"] == "error.normalized"]
    assert [e["status_code"] for e in normalized] == [503, 404]
    assert normalized[0]["error"] == "Service Unavailable"
    assert "db down" not in log_stream.getvalue()


def test_log_events_disabled_by_default(log_stream, errors: RestErrors):
    errors.not_found()
    assert not [e for e in _events(log_stream) if e["event"] == "error.normalized"]


def test_usage_errors_are_logged(log_stream, errors: RestErrors):
    with pytest.raises(UsageError):
        errors.create(200)
    logged = [e for e in _events(log_stream) if e["event"] == "normalizer.usage_error"]
    assert logged and "200" in logged[0]["diagnostic"]


def test_bad_header_attribute_is_logged(log_stream, errors: RestErrors):
    with pytest.raises(UsageError, match="Bad attribute value"):
        errors.unauthorized("bad\ncreds", "Basic")
    logged = [e for e in _events(log_stream) if e["event"] == "normalizer.usage_error"]
    assert logged and logged[0]["diagnostic"].startswith("Bad attribute value")


def test_malformed_challenge_scheme_is_logged(log_stream, errors: RestErrors):
    with pytest.raises(UsageError):
        errors.unauthorized("denied", 42)
    logged = [e for e in _events(log_stream) if e["event"] == "normalizer.usage_error"]
    assert logged and "Challenge scheme must be a string" in logged[0]["diagnostic"]


def test_error_log_context_includes_cause_class(errors: RestErrors):
    ctx = ErrorLogContext.from_error(errors.wrap(KeyError("k")))
    assert ctx.to_dict() == {
        "status_code": 500,
        "error": "Internal Server Error",
        "error_class": "NormalizedError",
        "cause_class": "KeyError",
    }


def test_error_log_context_carries_extra_fields(errors: RestErrors):
    ctx = ErrorLogContext.from_error(errors.bad_request("nope"), detail="nope", trace=None)
    payload = ctx.to_dict()
    assert payload["detail"] == "nope"
    assert "trace" not in payload
    assert payload["status_code"] == 400


def test_log_event_drops_none_fields(log_stream):
    logger = get_logger("rest_errors.test")
    log_event(logger, "test.event", level="warning", kept=1, dropped=None)
    payload = _events(log_stream)[-1]
    assert payload == {"event": "test.event", "kept": 1}


def test_json_formatter_hoists_event_payload():
    record = logging.LogRecord(
        name="rest_errors.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"event": "error.normalized", "status_code": 404}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["status_code"] == 404
    assert payload["level"] == "INFO"
    assert "msg" not in payload


def test_get_logger_env_overrides_level(monkeypatch):
    monkeypatch.setenv("REST_ERRORS_LOG_LEVEL", "ERROR")
    base = get_logger("rest_errors")
    previous = base.level
    try:
        get_logger("rest_errors.env")
        assert base.level == logging.ERROR
    finally:
        monkeypatch.delenv("REST_ERRORS_LOG_LEVEL")
        base.setLevel(previous)


def test_configure_logger_attaches_and_removes_file_handler(tmp_path):
    path = tmp_path / "logs" / "errors.log"
    base = configure_logger(file_path=str(path), level="INFO")
    try:
        get_logger("rest_errors.file").warning("written")
        for h in base.handlers:
            h.flush()
        assert "written" in path.read_text(encoding="utf-8")
    finally:
        base = configure_logger(file_path=None)
    assert not [h for h in base.handlers if getattr(h, "_rest_errors_file_handler", False)]
