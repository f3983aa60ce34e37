"""Token codec protocol (port) for signed access and refresh tokens.

Access and refresh tokens are signed with independent secrets, so a token of
one kind never verifies as the other. Verification results are Result types;
nothing here raises for a bad token.
"""

from datetime import datetime
from typing import Protocol

from src.core.result import Result
from src.domain.errors import TokenError
from src.domain.value_objects import (
    RefreshTokenClaims,
    TokenClaims,
    TokenVerification,
)


class TokenCodecProtocol(Protocol):
    """Signed token issuing and verification.

    Implementations:
        - JWTTokenCodec: HS256 JWT with issuer/audience checks (production)
    """

    def issue_access(self, user_id: int, email: str, role: str = "USER") -> str:
        """Mint a short-lived access token.

        Args:
            user_id: Subject user id (`userId` claim).
            email: Subject email (`email` claim).
            role: Cached role hint (`role` claim).

        Returns:
            Signed access token.
        """
        ...

    def issue_refresh(self, user_id: int, email: str, token_id: int) -> str:
        """Mint a refresh token bound to a ledger record.

        Args:
            user_id: Subject user id.
            email: Subject email.
            token_id: Ledger record id (`tokenId` claim).

        Returns:
            Signed refresh token carrying a fresh `jti`.
        """
        ...

    def verify_access(self, token: str) -> Result[TokenClaims, TokenError]:
        """Verify signature, expiry, issuer and audience of an access token."""
        ...

    def verify_refresh(self, token: str) -> Result[RefreshTokenClaims, TokenError]:
        """Verify a refresh token (requires the `tokenId` claim)."""
        ...

    def peek_expiry(self, token: str) -> datetime | None:
        """Read the `exp` claim without verifying the signature.

        Returns:
            Expiry time, or None when the token or claim is unreadable.
        """
        ...

    def is_expired_unverified(self, token: str) -> bool:
        """Cheap pre-check: True when expired or expiry unreadable."""
        ...

    def verify_safe(self, token: str) -> TokenVerification:
        """Verify an access token without ever raising."""
        ...
