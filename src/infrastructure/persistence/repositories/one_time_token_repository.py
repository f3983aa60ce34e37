"""OneTimeTokenRepository - password setup / reset token slots.

Implements the OneTimeTokenStore protocol on top of the users table. Each
token kind maps to a (token, expires_at) column pair.

Lookup:
    `find_owner` resolves a token to its user without spending it, so the
    caller can check the account before committing to the consume.

Consumption:
    The final clear is a guarded UPDATE (`WHERE id = :id AND <slot> = :token`).
    If two requests race on the same token, only one UPDATE matches a row;
    the other reports NOT_FOUND.
"""

from datetime import UTC, datetime
from typing import Any, cast

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from src.core.result import Failure, Result, Success
from src.domain.enums import OneTimeTokenKind
from src.domain.errors import OneTimeTokenError, OneTimeTokenErrorKind
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.user import User as UserModel


def _slot(
    kind: OneTimeTokenKind,
) -> tuple[InstrumentedAttribute[str | None], InstrumentedAttribute[datetime | None]]:
    """Return the (token, expires_at) columns for a token kind."""
    if kind == OneTimeTokenKind.SETUP:
        return (
            UserModel.password_setup_token,
            UserModel.password_setup_token_expires_at,
        )
    return (
        UserModel.password_reset_token,
        UserModel.password_reset_token_expires_at,
    )


def _token_error(
    kind: OneTimeTokenErrorKind, token_kind: OneTimeTokenKind
) -> OneTimeTokenError:
    return OneTimeTokenError(kind=kind, token_kind=token_kind)


class OneTimeTokenRepository:
    """SQLAlchemy implementation of OneTimeTokenStore protocol.

    Example:
        >>> repo = OneTimeTokenRepository(session)
        >>> await repo.store(OneTimeTokenKind.SETUP, user.id, token, expires_at)
        >>> match await repo.consume(OneTimeTokenKind.SETUP, token):
        ...     case Success(value=user_id):
        ...         ...
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def store(
        self,
        kind: OneTimeTokenKind,
        user_id: int,
        token: str,
        expires_at: datetime,
    ) -> None:
        """Write a token into the user's slot (replaces any previous one)."""
        token_col, expires_col = _slot(kind)
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values({token_col: token, expires_col: expires_at})
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def find_owner(
        self, kind: OneTimeTokenKind, token: str
    ) -> Result[int, OneTimeTokenError]:
        """Return the id of the user holding a live token; the slot is kept.

        An expired token is cleared and reported as EXPIRED.
        """
        found = await self._lookup(kind, token)
        if found is None:
            return Failure(error=_token_error(OneTimeTokenErrorKind.NOT_FOUND, kind))

        user_id, expired = found
        if expired:
            await self._clear_if_matches(kind, user_id, token)
            return Failure(error=_token_error(OneTimeTokenErrorKind.EXPIRED, kind))
        return Success(value=user_id)

    async def consume(
        self, kind: OneTimeTokenKind, token: str
    ) -> Result[int, OneTimeTokenError]:
        """Consume a token and clear its slot.

        Returns:
            Success(user_id) or Failure(OneTimeTokenError) with kind
            NOT_FOUND or EXPIRED.
        """
        found = await self._lookup(kind, token)
        if found is None:
            return Failure(error=_token_error(OneTimeTokenErrorKind.NOT_FOUND, kind))

        user_id, expired = found
        cleared = await self._clear_if_matches(kind, user_id, token)

        if expired:
            return Failure(error=_token_error(OneTimeTokenErrorKind.EXPIRED, kind))
        if not cleared:
            # Another request consumed it first
            return Failure(error=_token_error(OneTimeTokenErrorKind.NOT_FOUND, kind))
        return Success(value=user_id)

    async def clear(self, kind: OneTimeTokenKind, user_id: int) -> None:
        """Clear a slot unconditionally."""
        token_col, expires_col = _slot(kind)
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values({token_col: None, expires_col: None})
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def _lookup(
        self, kind: OneTimeTokenKind, token: str
    ) -> tuple[int, bool] | None:
        """Return (user_id, expired) for the row holding the token, if any."""
        token_col, expires_col = _slot(kind)
        stmt = select(UserModel.id, expires_col).where(token_col == token)
        row = (await self.session.execute(stmt)).one_or_none()
        if row is None:
            return None

        user_id, expires_at = row
        expires_at = as_utc(expires_at)
        return user_id, expires_at is None or expires_at <= datetime.now(UTC)

    async def _clear_if_matches(
        self, kind: OneTimeTokenKind, user_id: int, token: str
    ) -> bool:
        token_col, expires_col = _slot(kind)
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id, token_col == token)
            .values({token_col: None, expires_col: None})
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return (cast(Any, result).rowcount or 0) > 0
