"""Redis-backed fixed-window rate limit storage.

One Redis key per counter. A transactional pipeline runs

    INCR   rate_limit:<key>
    PEXPIRE rate_limit:<key> <window_ms> NX
    PTTL   rate_limit:<key>

so the first hit of a window sets the expiry and later hits only count.
The key expiring is the lazy window reset.

Fail-open policy:
    check() returns allowed=True on any Redis failure (logged). reset()
    reports real errors as Failure(RateLimitError), since an admin reset
    that silently did nothing would be misleading.
"""

from __future__ import annotations

import math
from typing import Any

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import RateLimitError
from src.domain.protocols import LoggerProtocol
from src.domain.value_objects import RateLimitResult

KEY_PREFIX = "rate_limit"


class RedisRateLimitStorage:
    """Redis fixed-window counters implementing RateLimitProtocol.

    Args:
        redis_client: An async Redis client (redis.asyncio.Redis compatible).
        logger: Logger for fail-open events.
    """

    def __init__(self, *, redis_client: Any, logger: LoggerProtocol) -> None:
        self.redis = redis_client
        self._logger = logger

    async def check(
        self,
        key: str,
        window_seconds: int,
        max_requests: int,
    ) -> RateLimitResult:
        """Count one hit and decide (see RateLimitProtocol.check).

        Fail-open:
            On Redis errors, returns allowed=True with a full window.
        """
        redis_key = f"{KEY_PREFIX}:{key}"
        window_ms = window_seconds * 1000
        try:
            pipe = self.redis.pipeline(transaction=True)
            pipe.incr(redis_key)
            pipe.pexpire(redis_key, window_ms, nx=True)
            pipe.pttl(redis_key)
            count, _, ttl_ms = await pipe.execute()
            count = int(count)
            ttl_ms = int(ttl_ms)
            if ttl_ms < 0:
                # Key lost its expiry; start a fresh window length
                await self.redis.pexpire(redis_key, window_ms)
                ttl_ms = window_ms
        except Exception as exc:  # Fail-open
            self._logger.warning(
                "rate_limit_storage_unavailable",
                key=key,
                error_type=type(exc).__name__,
            )
            return RateLimitResult(
                allowed=True,
                retry_after=0,
                remaining=max_requests,
                limit=max_requests,
                reset_seconds=window_seconds,
            )

        reset_seconds = max(0, math.ceil(ttl_ms / 1000))
        if count > max_requests:
            return RateLimitResult(
                allowed=False,
                retry_after=max(1, reset_seconds),
                remaining=0,
                limit=max_requests,
                reset_seconds=reset_seconds,
            )
        return RateLimitResult(
            allowed=True,
            retry_after=0,
            remaining=max_requests - count,
            limit=max_requests,
            reset_seconds=reset_seconds,
        )

    async def reset(self, key: str) -> Result[bool, RateLimitError]:
        """Delete the counter for a key.

        Unlike check operations, reset reports real errors to callers.
        """
        try:
            deleted = await self.redis.delete(f"{KEY_PREFIX}:{key}")
            return Success(value=int(deleted) > 0)
        except Exception as exc:
            return Failure(
                error=RateLimitError(
                    code=ErrorCode.RATE_LIMIT_RESET_FAILED,
                    message=f"Failed to reset rate limit for '{key}': {exc}",
                    details={"key": key},
                )
            )
