"""Base shared constants for error normalization.

Central location to avoid scattering magic strings across the normalizer,
the payload formatter and the catalog.
"""
from __future__ import annotations

# Payload message used for every 500 so internal detail is never exposed
INTERNAL_ERROR_MESSAGE = "An internal server error occurred"

# Reason phrase used when a status code is missing from the lookup table
UNKNOWN_REASON = "Unknown"

# Observer event emitted after every successful normalization
ERROR_OCCUR_EVENT = "errorOccur"

# Header populated by authentication challenges
WWW_AUTHENTICATE = "WWW-Authenticate"

DEFAULT_WRAP_STATUS = 500
DEFAULT_NORMALIZE_STATUS = 400
MIN_ERROR_STATUS = 400

__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "UNKNOWN_REASON",
    "ERROR_OCCUR_EVENT",
    "WWW_AUTHENTICATE",
    "DEFAULT_WRAP_STATUS",
    "DEFAULT_NORMALIZE_STATUS",
    "MIN_ERROR_STATUS",
]
