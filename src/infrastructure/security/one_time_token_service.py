"""One-time token service for password setup and reset links.

Tokens are opaque random strings, not JWTs, stored in plain text on the user
row (already unguessable). Each kind has its own lifetime:

    SETUP: 24 hours (issued when an admin verifies the account)
    RESET: 1 hour (self-service forgot-password)
"""

import secrets
from datetime import UTC, datetime, timedelta

from src.core.constants import (
    PASSWORD_RESET_TOKEN_TTL,
    PASSWORD_SETUP_TOKEN_TTL,
    TOKEN_BYTES,
)
from src.domain.enums import OneTimeTokenKind


class OneTimeTokenService:
    """One-time token generation service.

    Usage:
        service = OneTimeTokenService()
        token = service.generate_token()
        expires_at = service.calculate_expiration(OneTimeTokenKind.RESET)
        await token_store.store(OneTimeTokenKind.RESET, user.id, token, expires_at)
    """

    def __init__(
        self,
        setup_ttl: timedelta = PASSWORD_SETUP_TOKEN_TTL,
        reset_ttl: timedelta = PASSWORD_RESET_TOKEN_TTL,
    ) -> None:
        self._ttls = {
            OneTimeTokenKind.SETUP: setup_ttl,
            OneTimeTokenKind.RESET: reset_ttl,
        }

    def generate_token(self) -> str:
        """Generate a one-time token.

        Returns:
            64-character hex string (32 bytes of entropy).

        Example:
            >>> token = OneTimeTokenService().generate_token()
            >>> len(token)
            64
        """
        return secrets.token_hex(TOKEN_BYTES)

    def calculate_expiration(self, kind: OneTimeTokenKind) -> datetime:
        """Calculate the absolute expiry for a new token of the given kind."""
        return datetime.now(UTC) + self._ttls[kind]
