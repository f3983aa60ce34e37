"""Domain value objects.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.rate_limit_rule import RateLimitResult, RateLimitRule
from src.domain.value_objects.token_claims import (
    RefreshTokenClaims,
    TokenClaims,
    TokenVerification,
)

__all__ = [
    "RateLimitResult",
    "RateLimitRule",
    "RefreshTokenClaims",
    "TokenClaims",
    "TokenVerification",
]
