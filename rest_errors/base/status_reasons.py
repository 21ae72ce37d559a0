"""Default status-code to reason-phrase table.

The normalizer treats this table as an external collaborator: any mapping of
integer status codes to reason phrases may be injected instead (see
``RestErrors(status_reasons=...)``). The default mirrors the standard library's
:class:`http.HTTPStatus` registry.
"""
from __future__ import annotations

from http import HTTPStatus
from types import MappingProxyType
from typing import Mapping, Optional

from .constants import UNKNOWN_REASON

STATUS_REASONS: Mapping[int, str] = MappingProxyType(
    {int(status): status.phrase for status in HTTPStatus}
)


def reason_phrase(status_code: int, reasons: Optional[Mapping[int, str]] = None) -> str:
    """Return the reason phrase for ``status_code`` or ``"Unknown"``."""
    table = STATUS_REASONS if reasons is None else reasons
    return table.get(status_code) or UNKNOWN_REASON


__all__ = ["STATUS_REASONS", "reason_phrase"]
