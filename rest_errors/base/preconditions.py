"""Precondition checks shared by the core modules.

:func:`assert_that` is the single place a :class:`UsageError` is raised from:
it logs the diagnostic at ERROR and then raises. It only depends on the
logging layer and the error types so formatting, challenge and normalizer
modules can all use it.
"""
from __future__ import annotations

import json
from typing import Any

from .errors_parts.usage_error import UsageError
from .logging import get_logger, log_event

logger = get_logger("rest_errors.preconditions")


def _render_part(part: Any) -> str:
    if isinstance(part, str):
        return part
    if isinstance(part, BaseException):
        return str(part)
    return json.dumps(part, default=repr)


def assert_that(condition: Any, *parts: Any) -> None:
    """Raise :class:`UsageError` built from ``parts`` unless ``condition`` holds.

    Empty-string parts are skipped; the remaining parts are joined with a
    space. Exceptions contribute their text and other non-string values are
    rendered as JSON.
    """
    if condition:
        return
    rendered = [_render_part(p) for p in parts if p != ""]
    diagnostic = " ".join(rendered) or "Unknown error"
    log_event(logger, "normalizer.usage_error", level="error", diagnostic=diagnostic)
    raise UsageError(diagnostic)


__all__ = ["assert_that"]
