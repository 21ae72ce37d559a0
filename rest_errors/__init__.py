"""rest_errors package

Normalizes arbitrary exceptions into HTTP-transportable errors: each error
carries a status code, a client-safe payload and optional response headers.

Public API (re-exported):
    - Version: ``__version__``
    - Normalizer: :class:`RestErrors`
    - Types: :class:`NormalizedError`, :class:`ErrorPayload`,
      :class:`UsageError`, :class:`NamedScheme`, :class:`ChallengeList`
    - Helpers: :func:`normalize`, :func:`format_payload`,
      :func:`build_challenge`, :func:`escape_header_attribute`,
      :func:`unescape_header_attribute`, :func:`reason_phrase`
    - Settings: :class:`RestErrorsSettings`, :func:`load_settings`

The FastAPI adapter lives in ``rest_errors.service`` and is not imported here
so the core stays usable without a web framework installed.
"""

from .base import (
    ChallengeList,
    ChallengeResult,
    ErrorPayload,
    NamedScheme,
    NormalizedError,
    UsageError,
    build_challenge,
    escape_header_attribute,
    format_payload,
    normalize,
    reason_phrase,
    unescape_header_attribute,
)
from .base.constants import ERROR_OCCUR_EVENT, INTERNAL_ERROR_MESSAGE
from .catalog import RestErrors
from .config import RestErrorsSettings, load_settings

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "RestErrors",
    "NormalizedError",
    "ErrorPayload",
    "UsageError",
    "NamedScheme",
    "ChallengeList",
    "ChallengeResult",
    "normalize",
    "format_payload",
    "build_challenge",
    "escape_header_attribute",
    "unescape_header_attribute",
    "reason_phrase",
    "ERROR_OCCUR_EVENT",
    "INTERNAL_ERROR_MESSAGE",
    "RestErrorsSettings",
    "load_settings",
]
