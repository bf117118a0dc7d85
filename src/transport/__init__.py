"""HTTP transport, credential binding and typed errors."""

from src.transport.binder import BoundClient, bind
from src.transport.client import ApiClient
from src.transport.envelope import unwrap_response
from src.transport.errors import (
    NOT_AUTHENTICATED,
    ApiError,
    MalformedPayload,
    NotAuthenticatedError,
    ServerFailure,
    TransportFailure,
)
from src.transport.options import DEFAULT_HEADERS, RequestOptions

__all__ = [
    "ApiClient",
    "ApiError",
    "BoundClient",
    "DEFAULT_HEADERS",
    "MalformedPayload",
    "NOT_AUTHENTICATED",
    "NotAuthenticatedError",
    "RequestOptions",
    "ServerFailure",
    "TransportFailure",
    "bind",
    "unwrap_response",
]
