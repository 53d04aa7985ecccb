"""Unit tests for error to HTTP status mapping."""

import pytest

from toplist.domain.error import (
    DomainError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    RateLimitedError,
    UnauthenticatedError,
)
from toplist.interface.api.errors import validation_message
from toplist.interface.error import status_code_for


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (InvalidArgumentError("bad"), 400),
        (UnauthenticatedError("who"), 401),
        (NotFoundError("Server", "1"), 404),
        (RateLimitedError("slow down", retry_after=10), 429),
        (InternalError("boom"), 500),
        (DomainError("unmapped"), 500),
    ],
)
def test_status_code_for(error, status_code):
    assert status_code_for(error) == status_code


def test_subclass_uses_parent_status():
    class ServerGoneError(NotFoundError):
        pass

    assert status_code_for(ServerGoneError("Server", "9")) == 404


class TestValidationMessage:
    """Tests for validation_message."""

    def test_missing_field(self):
        errors = [{"type": "missing", "loc": ("body", "serverId"), "msg": "Field required"}]

        assert validation_message(errors) == "serverId is required."

    def test_missing_body(self):
        errors = [{"type": "missing", "loc": ("body",), "msg": "Field required"}]

        assert validation_message(errors) == "Request body is required."

    def test_invalid_json(self):
        errors = [{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"}]

        assert validation_message(errors) == "Request body is not valid JSON."

    def test_wrong_type(self):
        errors = [
            {
                "type": "int_type",
                "loc": ("body", "serverId"),
                "msg": "Input should be a valid integer",
            }
        ]

        assert (
            validation_message(errors)
            == "Invalid serverId: Input should be a valid integer."
        )
