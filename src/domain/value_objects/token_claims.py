"""Decoded token claims (value objects).

Claim names on the wire are camelCase (`userId`, `tokenId`) to stay
compatible with existing clients; these objects expose them as attributes.
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.errors import TokenErrorKind


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenClaims:
    """Verified access token claims.

    Attributes:
        user_id: `userId` claim.
        email: `email` claim.
        issued_at: `iat` claim.
        expires_at: `exp` claim.
        role: Cached role hint (never trusted for admin decisions).
    """

    user_id: int
    email: str
    issued_at: datetime
    expires_at: datetime
    role: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class RefreshTokenClaims:
    """Verified refresh token claims.

    Attributes:
        user_id: `userId` claim.
        email: `email` claim.
        token_id: `tokenId` claim (ledger record id).
        jti: Unique token identifier (audit only).
        issued_at: `iat` claim.
        expires_at: `exp` claim.
    """

    user_id: int
    email: str
    token_id: int
    jti: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenVerification:
    """Non-raising verification outcome for optional-auth paths.

    Attributes:
        valid: Whether the token verified.
        claims: Claims when valid.
        error_kind: Failure category when invalid.
    """

    valid: bool
    claims: TokenClaims | None = None
    error_kind: TokenErrorKind | None = None
