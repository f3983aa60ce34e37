"""RefreshTokenRepository - refresh token ledger (SQLAlchemy).

Implements the RefreshTokenLedger protocol.

Two-Phase Issuance:
    create() inserts a row with token NULL so its id exists before the
    refresh token that embeds it is signed; finalize() stores the string.

Rotation (consume_and_rotate):
    1. Claim: DELETE the row WHERE id, user_id match AND not revoked AND not
       expired. The row count decides the winner of concurrent rotations.
    2. Claimed: insert the replacement and commit both in one transaction.
    3. Not claimed: re-read the row to classify the failure
         absent  -> NOT_FOUND
         revoked -> replay: revoke the user's other live rows, REVOKED
         expired -> delete the row, EXPIRED
    Any exception rolls the transaction back (old row survives).
"""

from datetime import UTC, datetime
from typing import Any, cast

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.result import Failure, Result, Success
from src.domain.entities import RefreshTokenRecord
from src.domain.errors import LedgerError, LedgerErrorKind
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.refresh_token import RefreshToken


def _to_record(model: RefreshToken) -> RefreshTokenRecord:
    """Convert database model to domain entity."""
    return RefreshTokenRecord(
        id=model.id,
        user_id=model.user_id,
        token=model.token,
        expires_at=cast(datetime, as_utc(model.expires_at)),
        revoked=model.revoked,
        revoked_at=as_utc(model.revoked_at),
        ip_address=model.ip_address,
        user_agent=model.user_agent,
        created_at=as_utc(model.created_at),
    )


class RefreshTokenRepository:
    """SQLAlchemy implementation of the refresh token ledger.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> repo = RefreshTokenRepository(session)
        >>> record = await repo.create(user_id=1, expires_at=expires_at)
        >>> await repo.finalize(record.id, codec.issue_refresh(1, email, record.id))
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(
        self,
        user_id: int,
        expires_at: datetime,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> RefreshTokenRecord:
        """Insert a record with no token yet (phase one)."""
        model = RefreshToken(
            user_id=user_id,
            expires_at=expires_at,
            revoked=False,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return _to_record(model)

    async def finalize(self, token_id: int, token: str) -> None:
        """Store the signed token on the record (phase two)."""
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.id == token_id)
            .values(token=token)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def consume_and_rotate(
        self,
        token_id: int,
        user_id: int,
        expires_at: datetime,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> Result[RefreshTokenRecord, LedgerError]:
        """Atomically consume a live record and insert its replacement.

        Returns:
            Success(replacement record) or Failure(LedgerError).
        """
        now = datetime.now(UTC)
        try:
            claim = (
                delete(RefreshToken)
                .where(
                    RefreshToken.id == token_id,
                    RefreshToken.user_id == user_id,
                    RefreshToken.revoked.is_(False),
                    RefreshToken.expires_at > now,
                )
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(claim)

            if (cast(Any, result).rowcount or 0) == 1:
                replacement = RefreshToken(
                    user_id=user_id,
                    expires_at=expires_at,
                    revoked=False,
                    ip_address=ip_address,
                    user_agent=user_agent,
                )
                self.session.add(replacement)
                await self.session.commit()
                await self.session.refresh(replacement)
                return Success(value=_to_record(replacement))

            failure = await self._classify_unclaimed(token_id, user_id, now)
            await self.session.commit()
            return Failure(error=failure)
        except Exception:
            await self.session.rollback()
            raise

    async def _classify_unclaimed(
        self, token_id: int, user_id: int, now: datetime
    ) -> LedgerError:
        """Explain why the claim matched nothing, applying side effects."""
        stmt = select(RefreshToken).where(
            RefreshToken.id == token_id,
            RefreshToken.user_id == user_id,
        )
        model = (await self.session.execute(stmt)).scalar_one_or_none()

        if model is None:
            return LedgerError(kind=LedgerErrorKind.NOT_FOUND, token_id=token_id)

        if model.revoked:
            # Replay of a revoked token: end every other session of the user
            await self.session.execute(
                update(RefreshToken)
                .where(
                    RefreshToken.user_id == user_id,
                    RefreshToken.revoked.is_(False),
                    RefreshToken.id != token_id,
                )
                .values(revoked=True, revoked_at=now)
                .execution_options(synchronize_session=False)
            )
            return LedgerError(kind=LedgerErrorKind.REVOKED, token_id=token_id)

        if cast(datetime, as_utc(model.expires_at)) <= now:
            await self.session.execute(
                delete(RefreshToken)
                .where(RefreshToken.id == token_id)
                .execution_options(synchronize_session=False)
            )
            return LedgerError(kind=LedgerErrorKind.EXPIRED, token_id=token_id)

        # Live row that the claim missed: it changed underneath us
        return LedgerError(kind=LedgerErrorKind.NOT_FOUND, token_id=token_id)

    async def revoke(self, token_id: int) -> None:
        """Revoke one record (idempotent)."""
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.id == token_id, RefreshToken.revoked.is_(False))
            .values(revoked=True, revoked_at=datetime.now(UTC))
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def revoke_all_for_user(self, user_id: int) -> int:
        """Revoke every non-revoked record of a user.

        Used by logout-all and password reset.

        Returns:
            Number of records revoked by this call.
        """
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.user_id == user_id, RefreshToken.revoked.is_(False))
            .values(revoked=True, revoked_at=datetime.now(UTC))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return cast(Any, result).rowcount or 0

    async def find_by_id(self, token_id: int) -> RefreshTokenRecord | None:
        """Find a record by id."""
        stmt = select(RefreshToken).where(RefreshToken.id == token_id)
        model = (await self.session.execute(stmt)).scalar_one_or_none()
        return _to_record(model) if model is not None else None

