"""Rate limit rule value objects.

Immutable configuration for a single fixed-window rule, and the outcome of a
rate limit check.

Fixed Window Algorithm:
    - First request in a window stores count=1 and reset_at=now+window
    - Each later request increments the count
    - Requests beyond max_requests are rejected until reset_at
    - The window resets lazily on the first request after reset_at

Known limitation:
    A burst straddling a window boundary may admit up to 2x max_requests.
    Counters kept in process memory are not shared between server
    instances. Both are accepted trade-offs, not bugs.

Usage:
    from src.domain.value_objects import RateLimitRule

    login_rule = RateLimitRule(
        name="login",
        max_requests=5,
        window_seconds=15 * 60,
        message="Too many login attempts. Please try again later.",
    )
    key = login_rule.key("203.0.113.7", "a@x.com")  # "login:203.0.113.7:a@x.com"
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitRule:
    """Fixed-window rate limit rule (value object).

    Attributes:
        name: Rule name, also the key prefix (e.g. "login").
        max_requests: Requests allowed per window.
        window_seconds: Window length in seconds.
        message: Message returned with 429 responses.

    Raises:
        ValueError: If max_requests <= 0 or window_seconds <= 0.
    """

    name: str
    max_requests: int
    window_seconds: int
    message: str = "Too many requests, please try again later"

    def __post_init__(self) -> None:
        """Validate rule parameters."""
        if self.max_requests <= 0:
            raise ValueError("max_requests must be positive")
        if self.window_seconds <= 0:
            raise ValueError("window_seconds must be positive")

    def key(self, *parts: str) -> str:
        """Build the counter key for this rule.

        Args:
            *parts: Caller identity parts (IP address, normalized email).

        Returns:
            Colon-joined key prefixed with the rule name.
        """
        return ":".join((self.name, *parts))


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitResult:
    """Result of a rate limit check.

    Attributes:
        allowed: Whether the request is allowed.
        retry_after: Whole seconds until retry allowed (0 if allowed).
        remaining: Requests remaining in the current window.
        limit: Maximum requests per window.
        reset_seconds: Seconds until the current window resets.
    """

    allowed: bool
    retry_after: int = 0
    remaining: int = 0
    limit: int = 0
    reset_seconds: int = 0
