"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures (400)
- NotFoundError: Resource not found (404)
- ConflictError: Duplicate unique key (400)
- AuthenticationError: Bad/expired/missing credentials or tokens (401)
- AuthorizationError: Insufficient role or verification (403)
- RateLimitedError: Fixed-window limit exceeded (429)

The HTTP status for each class is decided in the presentation layer
(ErrorResponseBuilder); these classes only carry data.

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Invalid email format",
        field="email",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        errors: Individual rule violations (e.g. password strength rules).
        details: Additional context.
    """

    field: str | None = None
    errors: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (User, RefreshToken).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate unique key).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, token expired/revoked).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        details: Additional context.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (role or verification state).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        required_permission: Permission that was required.
        details: Additional context.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitedError(DomainError):
    """Request rejected by a fixed-window rate limit.

    Attributes:
        code: ErrorCode enum (RATE_LIMITED).
        message: Human-readable message.
        retry_after: Whole seconds until the window resets.
        details: Additional context.
    """

    retry_after: int
