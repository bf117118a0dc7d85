"""Unit tests for the typed error hierarchy."""

from __future__ import annotations

import pytest

from src.transport.errors import (
    NOT_AUTHENTICATED,
    ApiError,
    MalformedPayload,
    NotAuthenticatedError,
    ServerFailure,
    TransportFailure,
)


class TestDefaults:
    @pytest.mark.parametrize(
        "cls,status,message",
        [
            (ApiError, 500, "An error occurred"),
            (TransportFailure, 0, "Network error occurred"),
            (ServerFailure, 500, "An error occurred"),
            (MalformedPayload, 200, "Invalid response format from server"),
            (NotAuthenticatedError, 401, NOT_AUTHENTICATED),
        ],
    )
    def test_class_defaults(self, cls: type[ApiError], status: int, message: str):
        err = cls()
        assert err.status == status
        assert err.message == message
        assert str(err) == message

    def test_all_errors_are_api_errors(self):
        for cls in (TransportFailure, ServerFailure, MalformedPayload, NotAuthenticatedError):
            assert issubclass(cls, ApiError)


class TestFields:
    def test_custom_message_status_and_code(self):
        err = ServerFailure("Unauthorized", 401, "AUTH_REQUIRED")
        assert err.message == "Unauthorized"
        assert err.status == 401
        assert err.code == "AUTH_REQUIRED"

    def test_code_defaults_to_none(self):
        assert ServerFailure("boom", 500).code is None

    def test_malformed_payload_has_machine_code(self):
        assert MalformedPayload().code == "MALFORMED_PAYLOAD"

    def test_instance_status_does_not_leak_to_class(self):
        ServerFailure("x", 418)
        assert ServerFailure().status == 500

    def test_repr_includes_status(self):
        assert "status=401" in repr(ServerFailure("Unauthorized", 401))
