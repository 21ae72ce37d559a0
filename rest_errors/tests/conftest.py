"""Pytest configuration for the rest_errors test suite.

Provides a normalizer with default settings (independent of the caller's
``REST_ERRORS_*`` environment), an event recorder, and a captured log stream
attached to the shared ``rest_errors`` logger for the duration of a test.
"""

from __future__ import annotations

import io
import logging
from typing import Iterator, List

import pytest

from rest_errors import NormalizedError, RestErrors, RestErrorsSettings
from rest_errors.base.logging import BASE_LOGGER_NAME, get_logger


@pytest.fixture()
def errors() -> RestErrors:
    """Return a fresh normalizer with default settings."""

    return RestErrors(settings=RestErrorsSettings())


@pytest.fixture()
def events(errors: RestErrors) -> List[NormalizedError]:
    """Record every ``errorOccur`` notification emitted by ``errors``."""

    seen: List[NormalizedError] = []
    errors.on("errorOccur", seen.append)
    return seen


@pytest.fixture()
def log_stream() -> Iterator[io.StringIO]:
    """Capture raw messages written to the shared logger at DEBUG level."""

    base_logger = get_logger(BASE_LOGGER_NAME)
    previous_level = base_logger.level
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(logging.DEBUG)
    base_logger.addHandler(handler)
    base_logger.setLevel(logging.DEBUG)
    try:
        yield stream
    finally:
        base_logger.removeHandler(handler)
        base_logger.setLevel(previous_level)
