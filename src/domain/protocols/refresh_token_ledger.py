"""RefreshTokenLedger protocol for server-side refresh token records.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol (RefreshTokenRepository).

Rotation Semantics:
    consume_and_rotate is atomic: either the presented record is consumed and
    a replacement exists, or nothing changed. Of two concurrent rotations of
    the same record exactly one succeeds; the other sees NOT_FOUND.

Replay Detection:
    Presenting a record that is already revoked revokes every other live
    record of the same user before failing with REVOKED.
"""

from datetime import datetime
from typing import Protocol

from src.core.result import Result
from src.domain.entities import RefreshTokenRecord
from src.domain.errors import LedgerError


class RefreshTokenLedger(Protocol):
    """Refresh token ledger protocol (port).

    Methods:
        create: Phase one of issuance (record without token)
        finalize: Phase two of issuance (store signed token)
        consume_and_rotate: Atomically consume a record and create its successor
        revoke: Revoke one record
        revoke_all_for_user: Revoke every live record of a user
        find_by_id: Lookup by record id
    """

    async def create(
        self,
        user_id: int,
        expires_at: datetime,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> RefreshTokenRecord:
        """Insert a new record with no token yet.

        The record id must exist before the token that embeds it is signed.

        Args:
            user_id: Owning user.
            expires_at: Absolute expiry.
            ip_address: Client IP (optional).
            user_agent: Client User-Agent (optional).

        Returns:
            Created record (token is None).
        """
        ...

    async def finalize(self, token_id: int, token: str) -> None:
        """Store the signed token string on a record created by create()."""
        ...

    async def consume_and_rotate(
        self,
        token_id: int,
        user_id: int,
        expires_at: datetime,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> Result[RefreshTokenRecord, LedgerError]:
        """Consume a live record and create its replacement in one transaction.

        Args:
            token_id: Record id from the verified refresh token.
            user_id: User id from the verified refresh token.
            expires_at: Absolute expiry for the replacement.
            ip_address: Client IP for the replacement.
            user_agent: Client User-Agent for the replacement.

        Returns:
            Success(replacement record, token None) or
            Failure(LedgerError) with kind NOT_FOUND, REVOKED or EXPIRED.
        """
        ...

    async def revoke(self, token_id: int) -> None:
        """Revoke a record (idempotent, unknown ids ignored)."""
        ...

    async def revoke_all_for_user(self, user_id: int) -> int:
        """Revoke every non-revoked record of a user.

        Returns:
            Number of records revoked by this call.
        """
        ...

    async def find_by_id(self, token_id: int) -> RefreshTokenRecord | None:
        """Find a record by id."""
        ...
