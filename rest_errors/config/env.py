"""Environment variable names and parsing helpers for settings."""
from __future__ import annotations

import os
from typing import Dict, Optional

ENV_MAP: Dict[str, str] = {
    "log_level": "REST_ERRORS_LOG_LEVEL",
    "json_logs": "REST_ERRORS_JSON_LOGS",
    "log_events": "REST_ERRORS_LOG_EVENTS",
    "log_file": "REST_ERRORS_LOG_FILE",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_bool(value: Optional[str], default: bool) -> bool:
    """Parse a boolean env value; unknown or empty values yield ``default``."""
    if value is None:
        return default
    text = value.strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    return default


def read_env(field: str) -> Optional[str]:
    """Return the non-empty env value mapped to ``field``, else ``None``."""
    value = os.getenv(ENV_MAP[field])
    if value is None or not value.strip():
        return None
    return value.strip()


__all__ = ["ENV_MAP", "parse_bool", "read_env"]
