"""Envelope unwrapping rules for dashboard API responses.

Decision table applied by ``unwrap_response``:

=========  ===========================  ==============================================
status     body                         result
=========  ===========================  ==============================================
2xx        empty                        ``None``
2xx        not JSON                     raise ``MalformedPayload``
2xx        JSON object with ``data``    ``body["data"]``
2xx        any other JSON               the parsed body (unwrapped endpoints)
non-2xx    JSON object                  raise ``ServerFailure`` with the envelope's
                                        message, else error, else a generic message
non-2xx    other JSON                   raise ``ServerFailure`` with a generic message
non-2xx    empty or not JSON            raise ``ServerFailure`` with
                                        "Invalid response format from server"
=========  ===========================  ==============================================
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from src.models.responses import Envelope
from src.transport.errors import (
    DEFAULT_ERROR_MESSAGE,
    INVALID_RESPONSE_MESSAGE,
    MalformedPayload,
    ServerFailure,
)

T = TypeVar("T")

# Marker for bodies that could not be decoded as JSON
_UNPARSEABLE = object()


def is_success(status: int) -> bool:
    return 200 <= status < 300


def parse_body(content: bytes) -> Any:
    """Decode a response body, returning ``_UNPARSEABLE`` instead of raising."""
    if not content.strip():
        return _UNPARSEABLE
    try:
        return json.loads(content)
    except (ValueError, UnicodeDecodeError):
        return _UNPARSEABLE


def error_from_body(status: int, body: Any) -> ServerFailure:
    """Build the ``ServerFailure`` for a rejected request."""
    if body is _UNPARSEABLE:
        return ServerFailure(INVALID_RESPONSE_MESSAGE, status)
    if not isinstance(body, dict):
        return ServerFailure(DEFAULT_ERROR_MESSAGE, status)

    try:
        envelope = Envelope[Any].model_validate(body)
    except ValidationError:
        return ServerFailure(DEFAULT_ERROR_MESSAGE, status)

    return ServerFailure(
        envelope.error_message() or DEFAULT_ERROR_MESSAGE,
        status,
        envelope.error_code(),
    )


def unwrap_response(status: int, content: bytes) -> Any:
    """Apply the decision table to one HTTP response."""
    body = parse_body(content)

    if not is_success(status):
        raise error_from_body(status, body)

    if body is _UNPARSEABLE:
        if not content.strip():
            return None
        raise MalformedPayload(INVALID_RESPONSE_MESSAGE, status)

    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


def validate_payload(adapter: TypeAdapter[T], payload: Any, name: str) -> T:
    """Validate an unwrapped payload against its declared resource shape.

    Shape checks only run on successful responses, so the raised
    ``MalformedPayload`` keeps its default 200 status.
    """
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise MalformedPayload(
            f"Unexpected {name} payload from server ({exc.error_count()} invalid fields)"
        ) from exc
