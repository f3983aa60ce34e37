"""Unit tests for ErrorResponseBuilder (domain error -> HTTP response)."""

import json

import pytest

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    RateLimitedError,
    ValidationError,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder


@pytest.mark.unit
class TestStatusMapping:
    """Test error class to status code mapping."""

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (ValidationError(code=ErrorCode.INVALID_EMAIL, message="m"), 400),
            (
                ConflictError(
                    code=ErrorCode.EMAIL_EXISTS, message="m", resource_type="User"
                ),
                400,
            ),
            (AuthenticationError(code=ErrorCode.INVALID_CREDENTIALS, message="m"), 401),
            (AuthorizationError(code=ErrorCode.ACCOUNT_NOT_VERIFIED, message="m"), 403),
            (
                NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="m",
                    resource_type="User",
                    resource_id="1",
                ),
                404,
            ),
            (
                RateLimitedError(code=ErrorCode.RATE_LIMITED, message="m", retry_after=5),
                429,
            ),
            (DomainError(code=ErrorCode.EMAIL_SEND_FAILED, message="m"), 500),
            (DomainError(code=ErrorCode.INVALID_TOKEN, message="m"), 500),
        ],
    )
    def test_status_code_for(self, error, status_code):
        assert ErrorResponseBuilder.status_code_for(error) == status_code

    def test_user_not_found_on_refresh_is_401(self):
        """Test an AuthenticationError with USER_NOT_FOUND keeps its class status."""
        error = AuthenticationError(code=ErrorCode.USER_NOT_FOUND, message="User not found")
        assert ErrorResponseBuilder.status_code_for(error) == 401


@pytest.mark.unit
class TestBody:
    """Test error body shape."""

    def test_minimal_body(self):
        error = AuthenticationError(
            code=ErrorCode.INVALID_CREDENTIALS, message="Invalid email or password"
        )
        assert ErrorResponseBuilder.body(error) == {
            "error": "Invalid email or password",
            "code": "INVALID_CREDENTIALS",
        }

    def test_validation_errors_listed_as_details(self):
        error = ValidationError(
            code=ErrorCode.WEAK_PASSWORD,
            message="Password does not meet requirements",
            errors=("too short", "no digit"),
        )
        assert ErrorResponseBuilder.body(error)["details"] == ["too short", "no digit"]

    def test_rate_limited_body_and_header(self):
        error = RateLimitedError(
            code=ErrorCode.RATE_LIMITED, message="Slow down", retry_after=42
        )

        response = ErrorResponseBuilder.from_domain_error(error)

        assert response.status_code == 429
        assert response.headers["Retry-After"] == "42"
        body = json.loads(response.body)
        assert body == {"error": "Slow down", "code": "RATE_LIMITED", "retryAfter": 42}

    def test_extra_keys_merged(self):
        error = DomainError(code=ErrorCode.EMAIL_SEND_FAILED, message="Email failed")
        body = ErrorResponseBuilder.body(error, user={"id": 1})
        assert body["user"] == {"id": 1}
        assert body["code"] == "EMAIL_SEND_FAILED"
