"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Token lengths: Fixed sizes for cryptographic tokens
- One-time token lifetimes: Password setup / reset windows
- Cookies and headers: Names shared by routers and guards
- Messages: Fixed user-facing strings that must never vary

Example:
    >>> from src.core.constants import TOKEN_BYTES, BEARER_PREFIX
    >>> token = secrets.token_hex(TOKEN_BYTES)
    >>> header = f"{BEARER_PREFIX}{access_token}"
"""

from datetime import timedelta

# =============================================================================
# Token Lengths
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of bytes for one-time token generation (32 bytes = 256 bits)."""

MIN_SECRET_BYTES: int = 32
"""Minimum JWT signing secret length (256 bits for HS256)."""

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""


# =============================================================================
# One-Time Token Lifetimes
# =============================================================================

PASSWORD_SETUP_TOKEN_TTL: timedelta = timedelta(hours=24)
"""Admin-issued password setup token lifetime."""

PASSWORD_RESET_TOKEN_TTL: timedelta = timedelta(hours=1)
"""Self-service password reset token lifetime."""


# =============================================================================
# Cookies and Headers
# =============================================================================

REFRESH_TOKEN_COOKIE: str = "refreshToken"
ACCESS_TOKEN_COOKIE: str = "accessToken"
REFRESH_TOKEN_HEADER: str = "X-Refresh-Token"
BEARER_PREFIX: str = "Bearer "
UNKNOWN_CLIENT: str = "unknown"


# =============================================================================
# Fixed Messages
# =============================================================================

FORGOT_PASSWORD_MESSAGE: str = (
    "If an account exists with this email, a password reset link has been sent."
)
"""Generic forgot-password response (identical for every outcome)."""

MIN_NAME_LENGTH: int = 2
