"""One-time token issuer.

Generates a setup or reset token, stores it with its absolute expiry in the
user's slot, and returns the token string for the email link. Issuing a
token replaces whatever token the slot held before.
"""

from src.domain.enums import OneTimeTokenKind
from src.domain.protocols import OneTimeTokenServiceProtocol, OneTimeTokenStore


class OneTimeTokenIssuer:
    """Issue password setup (24h) and reset (1h) tokens."""

    def __init__(
        self,
        token_store: OneTimeTokenStore,
        token_service: OneTimeTokenServiceProtocol,
    ) -> None:
        self._token_store = token_store
        self._token_service = token_service

    async def issue_setup_token(self, user_id: int) -> str:
        """Store a fresh setup token for the user and return it."""
        return await self._issue(OneTimeTokenKind.SETUP, user_id)

    async def issue_reset_token(self, user_id: int) -> str:
        """Store a fresh reset token for the user and return it."""
        return await self._issue(OneTimeTokenKind.RESET, user_id)

    async def _issue(self, kind: OneTimeTokenKind, user_id: int) -> str:
        token = self._token_service.generate_token()
        expires_at = self._token_service.calculate_expiration(kind)
        await self._token_store.store(kind, user_id, token, expires_at)
        return token
