"""In-memory fixed-window rate limit storage.

Counters live in a process-local dict. Every check runs without awaiting, so
on a single event loop each check-and-increment is atomic.

Limitations:
    - Not shared between processes or server instances
    - Stale windows are swept opportunistically (about 1% of calls), so
      memory is reclaimed lazily
"""

import math
import random
import time
from collections.abc import Callable
from dataclasses import dataclass

from src.core.result import Result, Success
from src.domain.errors import RateLimitError
from src.domain.value_objects import RateLimitResult


@dataclass(slots=True)
class _Window:
    """Counter state for one key."""

    count: int
    reset_at: float


class InMemoryRateLimitStorage:
    """Process-local fixed-window counters implementing RateLimitProtocol.

    Args:
        clock: Monotonic time source in seconds (injectable for tests).
        sweep_probability: Chance per call of sweeping expired windows.

    Example:
        >>> limiter = InMemoryRateLimitStorage()
        >>> result = await limiter.check("login:1.2.3.4:a@x.com", 900, 5)
        >>> result.allowed
        True
    """

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.monotonic,
        sweep_probability: float = 0.01,
    ) -> None:
        self._clock = clock
        self._sweep_probability = sweep_probability
        self._windows: dict[str, _Window] = {}

    async def check(
        self,
        key: str,
        window_seconds: int,
        max_requests: int,
    ) -> RateLimitResult:
        """Count one hit and decide (see RateLimitProtocol.check)."""
        now = self._clock()
        if random.random() < self._sweep_probability:
            self._sweep(now)

        window = self._windows.get(key)
        if window is None or now >= window.reset_at:
            window = _Window(count=1, reset_at=now + window_seconds)
            self._windows[key] = window
        else:
            window.count += 1

        reset_seconds = max(0, math.ceil(window.reset_at - now))
        if window.count > max_requests:
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
            remaining=max_requests - window.count,
            limit=max_requests,
            reset_seconds=reset_seconds,
        )

    async def reset(self, key: str) -> Result[bool, RateLimitError]:
        """Forget the counter for a key."""
        return Success(value=self._windows.pop(key, None) is not None)

    def clear(self) -> None:
        """Drop every counter (test isolation)."""
        self._windows.clear()

    def __len__(self) -> int:
        return len(self._windows)

    def _sweep(self, now: float) -> None:
        expired = [key for key, w in self._windows.items() if now >= w.reset_at]
        for key in expired:
            del self._windows[key]
