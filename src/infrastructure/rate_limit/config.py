"""Rate limit rules configuration (single source of truth).

Each auth endpoint has one fixed-window rule. The rule name is also the
counter key prefix; the presentation layer appends the caller identity.

    rule             limit          key
    login            5 / 15 min     login:<ip>:<email>
    refresh          10 / 1 min     refresh:<ip>
    register         3 / 1 hour     register:<ip>
    forgot-password  3 / 1 hour     forgot-password:<ip>:<email>
    reset-password   5 / 15 min     reset-password:<ip>

Usage:
    from src.infrastructure.rate_limit.config import RATE_LIMIT_RULES

    rule = RATE_LIMIT_RULES["login"]
    key = rule.key(client_ip, email)
"""

from src.domain.value_objects import RateLimitRule

_MINUTE = 60
_HOUR = 60 * _MINUTE

LOGIN_RULE = RateLimitRule(
    name="login",
    max_requests=5,
    window_seconds=15 * _MINUTE,
    message="Too many login attempts. Please try again later.",
)

REFRESH_RULE = RateLimitRule(
    name="refresh",
    max_requests=10,
    window_seconds=_MINUTE,
    message="Too many token refresh requests. Please try again later.",
)

REGISTER_RULE = RateLimitRule(
    name="register",
    max_requests=3,
    window_seconds=_HOUR,
    message="Too many registration attempts. Please try again later.",
)

FORGOT_PASSWORD_RULE = RateLimitRule(
    name="forgot-password",
    max_requests=3,
    window_seconds=_HOUR,
    message="Too many password reset requests. Please try again later.",
)

RESET_PASSWORD_RULE = RateLimitRule(
    name="reset-password",
    max_requests=5,
    window_seconds=15 * _MINUTE,
    message="Too many password reset attempts. Please try again later.",
)

RATE_LIMIT_RULES: dict[str, RateLimitRule] = {
    rule.name: rule
    for rule in (
        LOGIN_RULE,
        REFRESH_RULE,
        REGISTER_RULE,
        FORGOT_PASSWORD_RULE,
        RESET_PASSWORD_RULE,
    )
}
