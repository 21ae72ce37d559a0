"""``WWW-Authenticate`` challenge construction.

A challenge is one of two shapes:

* :class:`NamedScheme` - a scheme token plus optional attributes, rendered as
  ``Scheme a="1", b="x", error="message"``. Attribute values and the message
  are escaped with :func:`escape_header_attribute`.
* :class:`ChallengeList` - pre-formatted challenges joined with ``", "``
  verbatim.

:func:`as_challenge` maps the loose ``scheme`` argument accepted by
``RestErrors.unauthorized`` (string or list of strings) onto these variants.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from .formatting import escape_header_attribute
from .preconditions import assert_that


@dataclass(frozen=True)
class NamedScheme:
    """Scheme token with attributes rendered in insertion order."""

    scheme: str
    attributes: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class ChallengeList:
    """Pre-formatted challenge strings."""

    items: Tuple[str, ...]


Challenge = Union[NamedScheme, ChallengeList]


@dataclass(frozen=True)
class ChallengeResult:
    header_value: str
    is_missing_credentials: bool = False


def as_challenge(
    scheme: Union[str, Sequence[str], Challenge, None],
    attributes: Optional[Mapping[str, Any]] = None,
) -> Optional[Challenge]:
    """Coerce a loose ``scheme`` argument into a :data:`Challenge`.

    Returns ``None`` when no scheme was given (``None`` or empty string).

    Raises:
        UsageError: for values that are neither a string nor a sequence of
            strings.
    """
    if scheme is None or scheme == "":
        return None
    if isinstance(scheme, (NamedScheme, ChallengeList)):
        return scheme
    if isinstance(scheme, str):
        return NamedScheme(scheme, attributes)
    assert_that(
        isinstance(scheme, Sequence) and all(isinstance(item, str) for item in scheme),
        f"Challenge scheme must be a string or a list of strings: {scheme!r}",
    )
    return ChallengeList(tuple(scheme))


def _render_value(value: Any) -> str:
    return "" if value is None else str(value)


def _render_named(challenge: NamedScheme, message: Optional[str]) -> ChallengeResult:
    header = challenge.scheme
    attributes = challenge.attributes or {}
    rendered = [
        f'{name}="{escape_header_attribute(_render_value(value))}"'
        for name, value in attributes.items()
    ]
    if rendered:
        header += " " + ", ".join(rendered)

    if not message:
        return ChallengeResult(header, is_missing_credentials=True)

    header += ("," if rendered else "") + f' error="{escape_header_attribute(message)}"'
    return ChallengeResult(header)


def build_challenge(
    scheme: Union[str, Sequence[str], Challenge],
    attributes: Optional[Mapping[str, Any]] = None,
    message: Optional[str] = None,
) -> ChallengeResult:
    """Build a ``WWW-Authenticate`` header value.

    Parameters:
        scheme: Scheme token, list of pre-formatted challenges, or a
            :data:`Challenge` variant.
        attributes: Attributes for the named-scheme form; ignored for lists.
        message: Error description added as ``error="..."`` in the
            named-scheme form. When empty, ``is_missing_credentials`` is set.

    Returns:
        :class:`ChallengeResult` with the header value and the missing
        credentials flag (always ``False`` for the list form).
    """
    challenge = as_challenge(scheme, attributes)
    assert_that(challenge is not None, "Challenge scheme is required")
    if isinstance(challenge, ChallengeList):
        return ChallengeResult(", ".join(challenge.items))
    return _render_named(challenge, message)


__all__ = [
    "NamedScheme",
    "ChallengeList",
    "Challenge",
    "ChallengeResult",
    "as_challenge",
    "build_challenge",
]
