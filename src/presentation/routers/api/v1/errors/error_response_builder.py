"""Error response builder for `{error, code}` bodies.

This module converts domain errors returned by handlers into HTTP
responses. The status code is chosen by error class; a few codes override
the class mapping.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

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

# Checked in order; first isinstance match wins
_STATUS_BY_ERROR_CLASS: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (RateLimitedError, status.HTTP_429_TOO_MANY_REQUESTS),
)

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.EMAIL_SEND_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.AUTH_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ErrorResponseBuilder:
    """Build `{error, code}` error responses.

    Example:
        >>> error = ValidationError(
        ...     code=ErrorCode.INVALID_EMAIL,
        ...     message="Invalid email format",
        ... )
        >>> response = ErrorResponseBuilder.from_domain_error(error)
        >>> # 400 {"error": "Invalid email format", "code": "INVALID_EMAIL"}
    """

    @staticmethod
    def status_code_for(error: DomainError) -> int:
        """Map a domain error to its HTTP status code.

        Example:
            >>> ErrorResponseBuilder.status_code_for(
            ...     NotFoundError(code=ErrorCode.USER_NOT_FOUND, message="User not found",
            ...                   resource_type="User", resource_id="7")
            ... )
            404
        """
        if error.code in _STATUS_BY_CODE:
            return _STATUS_BY_CODE[error.code]
        for error_class, status_code in _STATUS_BY_ERROR_CLASS:
            if isinstance(error, error_class):
                return status_code
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    @staticmethod
    def body(error: DomainError, **extra: Any) -> dict[str, Any]:
        """Build the JSON body for a domain error.

        Args:
            error: Domain error.
            **extra: Additional top-level keys (e.g. user).

        Returns:
            Dict with error, code and any optional keys.
        """
        content: dict[str, Any] = {"error": error.message, "code": error.code.value}
        if isinstance(error, ValidationError) and error.errors:
            content["details"] = list(error.errors)
        elif error.details:
            content["details"] = error.details
        if isinstance(error, RateLimitedError):
            content["retryAfter"] = error.retry_after
        content.update(extra)
        return content

    @staticmethod
    def from_domain_error(error: DomainError, **extra: Any) -> JSONResponse:
        """Convert a DomainError to a JSON error response.

        Args:
            error: Domain error returned by a handler.
            **extra: Additional top-level body keys.

        Returns:
            JSONResponse with the mapped status code. Rate limit errors also
            carry a Retry-After header.
        """
        headers = None
        if isinstance(error, RateLimitedError):
            headers = {"Retry-After": str(error.retry_after)}
        return JSONResponse(
            status_code=ErrorResponseBuilder.status_code_for(error),
            content=ErrorResponseBuilder.body(error, **extra),
            headers=headers,
        )
