"""Client-safe error payload DTO.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()`` convenience.

Notes
-----
- Field names are snake_case in Python and camelCase on the wire
  (``statusCode``). Use :meth:`ErrorPayload.as_dict` to obtain the exact
  structure that may be serialized to a client.
- ``message`` is ``None`` when it could not be determined; it is then omitted
  from the serialized form entirely rather than rendered as an empty string.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorPayload(BaseModel):
    """Public-facing error body: status code, reason phrase and message."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    status_code: int = Field(alias="statusCode", ge=400)
    error: str
    message: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        """Return the wire form, omitting ``message`` when absent."""
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = ["ErrorPayload"]
