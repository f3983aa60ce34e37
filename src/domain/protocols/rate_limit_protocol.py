"""Rate Limit protocol (port) for fixed-window rate limiting.

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Infrastructure provides ADAPTERS (InMemoryRateLimitStorage, RedisRateLimitStorage)
- Presentation layer uses the protocol (doesn't know about specific adapters)

Usage:
    from src.domain.protocols import RateLimitProtocol

    rate_limit: RateLimitProtocol = Depends(get_rate_limit)

    result = await rate_limit.check(
        key="login:203.0.113.7:a@x.com",
        window_seconds=900,
        max_requests=5,
    )
    if not result.allowed:
        # 429 with Retry-After: result.retry_after
        ...
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import RateLimitError
from src.domain.value_objects import RateLimitResult


class RateLimitProtocol(Protocol):
    """Protocol for fixed-window rate limiting storage.

    Fail-Open Design:
        check() MUST return allowed=True if the backing store fails.
        Rate limit failures should NEVER cause denial-of-service.
    """

    async def check(
        self,
        key: str,
        window_seconds: int,
        max_requests: int,
    ) -> RateLimitResult:
        """Count one hit against a key and decide.

        Args:
            key: Counter key (rule name plus caller identity).
            window_seconds: Window length.
            max_requests: Hits allowed per window.

        Returns:
            RateLimitResult. When rejected, retry_after is the whole number
            of seconds (rounded up) until the window resets.
        """
        ...

    async def reset(self, key: str) -> Result[bool, RateLimitError]:
        """Forget the counter for a key (admin/testing operation).

        Returns:
            Success(True) if a counter existed, Success(False) otherwise,
            Failure(RateLimitError) if the store is unavailable.
        """
        ...
