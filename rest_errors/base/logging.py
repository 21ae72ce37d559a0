"""Base structured logging utilities for the error normalizer.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup in the normalizer, catalog and service adapter.

All loggers returned by :func:`get_logger` are children of the shared
``rest_errors`` logger, which owns a single stderr handler. The level can be
overridden with the ``REST_ERRORS_LOG_LEVEL`` environment variable.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import ErrorLogContext, JsonFormatter

BASE_LOGGER_NAME = "rest_errors"
LOG_LEVEL_ENV = "REST_ERRORS_LOG_LEVEL"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_BASE_LOGGER_ATTR = "_rest_errors_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_rest_errors_console_handler"
_FILE_HANDLER_ATTR = "_rest_errors_file_handler"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level name into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``rest_errors`` logger."""

    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        env_level = os.getenv(LOG_LEVEL_ENV)
        if env_level:
            logger.setLevel(_parse_level(env_level, default=logger.level))
        for existing in logger.handlers:
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            existing.setLevel(logger.level)
            # stderr may have been swapped (test capture, daemonization)
            if isinstance(existing, logging.StreamHandler) and existing.stream is not sys.stderr:
                existing.stream = sys.stderr
        return logger

    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a child of the shared logger, initializing it once."""
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared ``rest_errors`` logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g. "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a managed rotating file handler writes to this path.
        When ``None``, any previously attached managed file handler is removed.
    json_mode: bool
        Use the JSON formatter (default) or the plain text formatter for every
        managed handler.

    Returns
    -------
    logging.Logger
        The configured base logger. Handlers not attached by this module are
        left untouched.
    """
    logger = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)

    if level is not None:
        if isinstance(level, str):
            logger.setLevel(_parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)

    for h in logger.handlers:
        if getattr(h, _CONSOLE_HANDLER_ATTR, False):
            h.setLevel(logger.level)
            h.setFormatter(_formatter(json_mode))

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path else None

    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if abs_path is not None and getattr(h, "baseFilename", None) == abs_path:
            existing = h  # type: ignore[assignment]
            continue
        logger.removeHandler(h)
        with contextlib.suppress(OSError):
            h.close()

    if abs_path is None:
        return logger

    if existing is None:
        os.makedirs(os.path.dirname(abs_path), exist_ok=True)
        existing = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(existing, _FILE_HANDLER_ATTR, True)
        logger.addHandler(existing)
    existing.setFormatter(_formatter(json_mode))
    existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: ErrorLogContext | None = None,
    *,
    level: int | str = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (normally from :func:`get_logger`).
    event: str
        Event name (e.g. ``error.normalized``).
    ctx: ErrorLogContext | None
        Error context merged shallowly into the payload.
    level: int | str
        Log level for the record; names are parsed like ``REST_ERRORS_LOG_LEVEL``.
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    numeric_level = _parse_level(level) if isinstance(level, str) else level
    if not logger.isEnabledFor(numeric_level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(numeric_level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "ErrorLogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
