"""Settings for the error normalizer.

Sources are merged in a predictable order:
    1. Built-in defaults
    2. Environment variables (``REST_ERRORS_*``, see ``config.env.ENV_MAP``)
    3. In-code overrides passed to :func:`load_settings`

Public API
----------
* load_settings(overrides: dict | None = None) -> RestErrorsSettings
* apply_logging(settings) -> logging.Logger
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, field_validator

from ..base.logging import configure_logger, get_logger, log_event
from .env import ENV_MAP, parse_bool, read_env

_LEVELS = {"DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL"}

logger = get_logger("rest_errors.config")


class RestErrorsSettings(BaseModel):
    """Resolved settings.

    Attributes:
        log_level: Level name for the shared ``rest_errors`` logger.
        json_logs: Emit JSON lines instead of plain text.
        log_events: Log an ``error.normalized`` event for every notification.
        log_file: Optional path for a rotating log file.
    """

    log_level: str = "INFO"
    json_logs: bool = True
    log_events: bool = False
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        upper = value.strip().upper()
        if upper not in _LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return upper


def _from_env() -> Dict[str, Any]:
    defaults = RestErrorsSettings()
    values: Dict[str, Any] = {}
    level = read_env("log_level")
    if level is not None:
        if level.strip().upper() in _LEVELS:
            values["log_level"] = level
        else:
            # unknown env level keeps the default; overrides are still validated
            log_event(
                logger,
                "config.invalid_log_level",
                level="warning",
                env=ENV_MAP["log_level"],
                value=level,
            )
    values["json_logs"] = parse_bool(read_env("json_logs"), defaults.json_logs)
    values["log_events"] = parse_bool(read_env("log_events"), defaults.log_events)
    log_file = read_env("log_file")
    if log_file is not None:
        values["log_file"] = log_file
    return values


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> RestErrorsSettings:
    """Resolve settings from defaults, environment and ``overrides``."""
    merged = _from_env()
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})
    return RestErrorsSettings(**merged)


def apply_logging(settings: RestErrorsSettings) -> logging.Logger:
    """Configure the shared logger from ``settings``."""
    return configure_logger(
        level=settings.log_level,
        file_path=settings.log_file,
        json_mode=settings.json_logs,
    )


__all__ = [
    "ENV_MAP",
    "RestErrorsSettings",
    "load_settings",
    "apply_logging",
]
