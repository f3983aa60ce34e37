"""Fixed-window rate limiting for auth endpoints.

Routes call `enforce_rate_limit` with a rule from RATE_LIMIT_RULES and the
caller identity parts (IP, normalized email). A rejected request raises
HTTPException 429 with a `{error, code, retryAfter}` body and a
Retry-After header.

Fail-Open Design:
    Storage failures are absorbed by the storage adapter (allowed=True).

Usage:
    @router.post("/login")
    async def login(
        request: Request,
        data: LoginRequest,
        rate_limit: RateLimitProtocol = Depends(get_rate_limit),
    ):
        await enforce_rate_limit(rate_limit, LOGIN_RULE, get_client_ip(request), email)
"""

from fastapi import HTTPException, status

from src.core.config import settings
from src.core.container import get_logger
from src.core.enums import ErrorCode
from src.core.errors import RateLimitedError
from src.domain.protocols import RateLimitProtocol
from src.domain.value_objects import RateLimitRule
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder


async def enforce_rate_limit(
    rate_limit: RateLimitProtocol,
    rule: RateLimitRule,
    *key_parts: str,
) -> None:
    """Count one hit against the rule and reject if over the limit.

    Args:
        rate_limit: Counter storage.
        rule: Rule to apply.
        *key_parts: Caller identity parts appended to the rule name.

    Raises:
        HTTPException: 429 RATE_LIMITED when the window is exhausted.
    """
    if not settings.rate_limit_enabled:
        return

    key = rule.key(*key_parts)
    result = await rate_limit.check(
        key=key,
        window_seconds=rule.window_seconds,
        max_requests=rule.max_requests,
    )
    if result.allowed:
        return

    get_logger().warning(
        "rate_limit_exceeded",
        rule=rule.name,
        retry_after=result.retry_after,
    )
    error = RateLimitedError(
        code=ErrorCode.RATE_LIMITED,
        message=rule.message,
        retry_after=result.retry_after,
    )
    raise HTTPException(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        detail=ErrorResponseBuilder.body(error),
        headers={
            "Retry-After": str(result.retry_after),
            "X-RateLimit-Limit": str(result.limit),
            "X-RateLimit-Remaining": str(result.remaining),
        },
    )
