from __future__ import annotations

import json
import logging

import pytest
from pydantic import ValidationError

from rest_errors import RestErrors, load_settings
from rest_errors.config import ENV_MAP, RestErrorsSettings, apply_logging
from rest_errors.config.env import parse_bool


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ENV_MAP.values():
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings == RestErrorsSettings()
    assert settings.log_level == "INFO"
    assert settings.json_logs is True
    assert settings.log_events is False
    assert settings.log_file is None


def test_env_values_are_applied(monkeypatch):
    monkeypatch.setenv("REST_ERRORS_LOG_LEVEL", "debug")
    monkeypatch.setenv("REST_ERRORS_JSON_LOGS", "no")
    monkeypatch.setenv("REST_ERRORS_LOG_EVENTS", "ON")
    monkeypatch.setenv("REST_ERRORS_LOG_FILE", "/tmp/rest-errors.log")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.json_logs is False
    assert settings.log_events is True
    assert settings.log_file == "/tmp/rest-errors.log"


def test_overrides_win_over_env(monkeypatch):
    monkeypatch.setenv("REST_ERRORS_LOG_EVENTS", "1")
    settings = load_settings({"log_events": False, "log_level": None})
    assert settings.log_events is False
    assert settings.log_level == "INFO"


def test_blank_env_values_fall_back(monkeypatch):
    monkeypatch.setenv("REST_ERRORS_LOG_LEVEL", "  ")
    monkeypatch.setenv("REST_ERRORS_LOG_EVENTS", "maybe")
    settings = load_settings()
    assert settings.log_level == "INFO"
    assert settings.log_events is False


def test_unknown_env_level_falls_back_and_warns(monkeypatch, log_stream):
    monkeypatch.setenv("REST_ERRORS_LOG_LEVEL", "verbose")
    assert load_settings().log_level == "INFO"
    assert RestErrors().not_found().status_code == 404
    warnings = [
        json.loads(line)
        for line in log_stream.getvalue().splitlines()
        if "config.invalid_log_level" in line
    ]
    assert warnings and warnings[0]["value"] == "verbose"
    assert warnings[0]["env"] == "REST_ERRORS_LOG_LEVEL"


def test_unknown_override_level_rejected():
    with pytest.raises(ValidationError):
        load_settings({"log_level": "chatty"})


def test_parse_bool_heuristics():
    assert parse_bool("Yes", False) is True
    assert parse_bool("off", True) is False
    assert parse_bool(None, True) is True
    assert parse_bool("2", False) is False


def test_rest_errors_reads_settings_from_env(monkeypatch):
    monkeypatch.setenv("REST_ERRORS_LOG_EVENTS", "true")
    assert RestErrors().settings.log_events is True


def test_apply_logging_sets_level():
    base = apply_logging(RestErrorsSettings(log_level="WARNING"))
    try:
        assert base.level == logging.WARNING
    finally:
        base.setLevel(logging.INFO)
