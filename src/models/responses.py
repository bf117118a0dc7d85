"""Generic API response envelope model.

Every dashboard API response is wrapped in this envelope:
{ success: bool, data?: T, message?: str, error?: str | {message, code}, code?: str }
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Structured error object some endpoints send instead of a plain string."""

    message: str | None = None
    code: str | None = None
    details: Any = None


class Envelope(BaseModel, Generic[T]):
    """JSON envelope around every response body."""

    success: bool = False
    data: T | None = None
    message: str | None = None
    error: str | ErrorDetail | None = None
    code: str | None = None

    def error_message(self) -> str | None:
        """Server-supplied message, preferring ``message`` over ``error``."""
        if self.message:
            return self.message
        if isinstance(self.error, ErrorDetail):
            return self.error.message or None
        return self.error or None

    def error_code(self) -> str | None:
        if self.code:
            return self.code
        if isinstance(self.error, ErrorDetail):
            return self.error.code
        return None
