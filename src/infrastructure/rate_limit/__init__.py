"""Rate limit infrastructure adapters.

Exports:
    InMemoryRateLimitStorage: Process-local fixed-window counters.
    RedisRateLimitStorage: Redis fixed-window counters (fail-open).
    RATE_LIMIT_RULES: Rule name to RateLimitRule mapping (SSOT).
"""

from src.infrastructure.rate_limit.config import RATE_LIMIT_RULES
from src.infrastructure.rate_limit.memory_storage import InMemoryRateLimitStorage
from src.infrastructure.rate_limit.redis_storage import RedisRateLimitStorage

__all__ = [
    "RATE_LIMIT_RULES",
    "InMemoryRateLimitStorage",
    "RedisRateLimitStorage",
]
