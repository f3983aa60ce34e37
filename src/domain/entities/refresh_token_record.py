"""Refresh token ledger record (session record).

Each record is one live device session. The record id is embedded in the
signed refresh token as `tokenId`; rotation decisions join on that id,
never on the signed string.

Lifecycle:
    created (token=None) -> finalized (token set)
    -> consumed by rotation (deleted, replacement created)
    | revoked (logout, logout-all, replay detection, password reset)
    | expired (deleted on the next rotation attempt)
"""

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass
class RefreshTokenRecord:
    """Server-side refresh token record.

    Attributes:
        id: Numeric record id (the `tokenId` claim).
        user_id: Owning user.
        expires_at: Absolute expiry.
        token: Signed refresh token string (None until finalized).
        revoked: Revocation flag.
        revoked_at: When the record was revoked.
        ip_address: Client IP at issuance.
        user_agent: Client User-Agent at issuance.
        created_at: Creation timestamp.
    """

    id: int
    user_id: int
    expires_at: datetime
    token: str | None = None
    revoked: bool = False
    revoked_at: datetime | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    created_at: datetime | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the record is past its absolute expiry."""
        return self.expires_at <= (now or datetime.now(UTC))

    def is_live(self, now: datetime | None = None) -> bool:
        """Not revoked and not expired."""
        return not self.revoked and not self.is_expired(now)
