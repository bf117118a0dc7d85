"""Typed error hierarchy for dashboard API calls.

Every failure surfaced by the transport is an ``ApiError`` carrying a
human-readable ``message``, an integer ``status`` and an optional
server-defined ``code``:

- ``TransportFailure``: no HTTP response was obtained (status 0).
- ``ServerFailure``: the server answered with a non-2xx status.
- ``MalformedPayload``: the server answered 2xx but the body is unusable.
"""

from __future__ import annotations

NOT_AUTHENTICATED = "Not authenticated"
DEFAULT_ERROR_MESSAGE = "An error occurred"
INVALID_RESPONSE_MESSAGE = "Invalid response format from server"
NETWORK_ERROR_MESSAGE = "Network error occurred"

# Status reserved for failures where no HTTP response exists
TRANSPORT_STATUS = 0


class ApiError(Exception):
    """Base error for all dashboard API failures."""

    status: int = 500
    message: str = DEFAULT_ERROR_MESSAGE

    def __init__(
        self,
        message: str | None = None,
        status: int | None = None,
        code: str | None = None,
    ) -> None:
        self.message = message or self.__class__.message
        if status is not None:
            self.status = status
        self.code = code
        super().__init__(self.message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"status={self.status!r}, code={self.code!r})"
        )


class TransportFailure(ApiError):
    """Network, DNS, timeout or malformed-URL failure before any response."""

    status = TRANSPORT_STATUS
    message = NETWORK_ERROR_MESSAGE


class ServerFailure(ApiError):
    """Response obtained but the request was rejected."""

    message = DEFAULT_ERROR_MESSAGE


class MalformedPayload(ApiError):
    """Successful response whose body is not JSON or not the expected shape."""

    status = 200
    message = INVALID_RESPONSE_MESSAGE

    def __init__(
        self,
        message: str | None = None,
        status: int | None = None,
        code: str | None = "MALFORMED_PAYLOAD",
    ) -> None:
        super().__init__(message, status, code)


class NotAuthenticatedError(ApiError):
    """No bearer token is available; raised before any network call."""

    status = 401
    message = NOT_AUTHENTICATED
