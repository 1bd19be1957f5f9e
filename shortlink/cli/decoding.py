"""
Response Decoding.

Turns backend responses into explicit outcomes. Decoders never raise on a
malformed body: they return a DecodeFailure carrying the raw text, and the
caller branches on the variant.

Resolve responses are classified into one of five tagged outcomes because
the backend may answer either with a redirect or with a 200 and the long
URL in the body.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from shortlink.schemas.url import ShortUrlRecord
from shortlink.schemas.user import UserIdentity

T = TypeVar("T")

REDIRECT_STATUS_CODES = frozenset({
    httpx.codes.MOVED_PERMANENTLY,
    httpx.codes.FOUND,
    httpx.codes.SEE_OTHER,
    httpx.codes.TEMPORARY_REDIRECT,
    httpx.codes.PERMANENT_REDIRECT,
})

_records_adapter = TypeAdapter(list[ShortUrlRecord])


@dataclass(frozen=True)
class Decoded(Generic[T]):
    """Body matched the expected shape."""

    value: T


@dataclass(frozen=True)
class DecodeFailure:
    """Body did not match the expected shape."""

    raw: str
    reason: str


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "body"
    return f"{location}: {first['msg']}"


def decode_identity(body: str) -> Decoded[UserIdentity] | DecodeFailure:
    """Decode a login/creation response body into a UserIdentity."""
    try:
        identity = UserIdentity.model_validate_json(body)
    except ValidationError as e:
        return DecodeFailure(raw=body, reason=_describe(e))
    return Decoded(identity)


def decode_records(body: str) -> Decoded[list[ShortUrlRecord]] | DecodeFailure:
    """Decode a URL listing response body, keeping the server's order."""
    try:
        records = _records_adapter.validate_json(body)
    except ValidationError as e:
        return DecodeFailure(raw=body, reason=_describe(e))
    return Decoded(records)


class ResolveKind(str, Enum):
    """How the backend answered a resolve request."""

    REDIRECT = "redirect"
    REDIRECT_WITHOUT_LOCATION = "redirect_without_location"
    RESOLVED_IN_BODY = "resolved_in_body"
    RESOLVED_EMPTY_BODY = "resolved_empty_body"
    FAILED = "failed"


@dataclass(frozen=True)
class ResolveOutcome:
    """Classified resolve response."""

    kind: ResolveKind
    status_code: int
    long_url: str | None = None
    body: str = ""


def classify_resolve(response: httpx.Response) -> ResolveOutcome:
    """
    Classify a resolve response. Checked in order:

    1. redirect status with a Location header
    2. redirect status without one
    3. other 2xx with a non-blank body (long URL carried in the body)
    4. other 2xx with a blank body
    5. anything else
    """
    status = response.status_code

    if status in REDIRECT_STATUS_CODES:
        location = response.headers.get("location")
        if location:
            return ResolveOutcome(ResolveKind.REDIRECT, status, long_url=location)
        return ResolveOutcome(ResolveKind.REDIRECT_WITHOUT_LOCATION, status)

    if response.is_success:
        body = response.text
        if body.strip():
            return ResolveOutcome(ResolveKind.RESOLVED_IN_BODY, status, body=body)
        return ResolveOutcome(ResolveKind.RESOLVED_EMPTY_BODY, status)

    return ResolveOutcome(ResolveKind.FAILED, status, body=response.text)
