"""Core normalization building blocks.

Framework-agnostic: nothing under ``rest_errors.base`` imports the service
adapter or any web framework.
"""

from .challenge import ChallengeList, ChallengeResult, NamedScheme, build_challenge
from .errors import ErrorPayload, NormalizedError, UsageError
from .formatting import escape_header_attribute, format_payload, unescape_header_attribute
from .normalizer import normalize
from .observers import ErrorObservers
from .status_reasons import STATUS_REASONS, reason_phrase

__all__ = [
    "ChallengeList",
    "ChallengeResult",
    "NamedScheme",
    "build_challenge",
    "ErrorPayload",
    "NormalizedError",
    "UsageError",
    "escape_header_attribute",
    "format_payload",
    "unescape_header_attribute",
    "normalize",
    "ErrorObservers",
    "STATUS_REASONS",
    "reason_phrase",
]
