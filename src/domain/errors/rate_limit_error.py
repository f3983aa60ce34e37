"""Rate Limit error types.

Used when rate limiting operations fail (Redis errors during an
administrative reset, etc.).

Usage:
    from src.domain.errors import RateLimitError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=RateLimitError(
        code=ErrorCode.RATE_LIMIT_RESET_FAILED,
        message="Failed to reset rate limit: Redis connection lost",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitError(DomainError):
    """Rate limit system failure.

    Note that a rejected request is NOT an error - it is a successful check
    that returns allowed=False. This error class is for actual storage
    failures on operations that must not fail open (reset).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        details: Additional context (key, etc.).
    """

    pass  # Inherits all fields from DomainError
