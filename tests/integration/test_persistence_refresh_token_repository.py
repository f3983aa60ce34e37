"""Integration tests for the refresh token ledger (RefreshTokenRepository)."""

import asyncio
from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import select

from src.core.result import Failure, Success
from src.domain.errors import LedgerErrorKind
from src.infrastructure.persistence.models.refresh_token import RefreshToken
from src.infrastructure.persistence.repositories import (
    RefreshTokenRepository,
    UserRepository,
)


def _in(delta: timedelta) -> datetime:
    return datetime.now(UTC) + delta


@pytest.fixture
async def user_id(test_database):
    async with test_database.get_session() as session:
        result = await UserRepository(session=session).create(
            email="ada@example.com", name="Ada Lovelace"
        )
    return result.value.id


async def _records(db, user_id):
    async with db.get_session() as session:
        stmt = (
            select(RefreshToken)
            .where(RefreshToken.user_id == user_id)
            .order_by(RefreshToken.id)
        )
        return list((await session.execute(stmt)).scalars().all())


async def _issue(db, user_id, expires_in=timedelta(days=7)):
    async with db.get_session() as session:
        repo = RefreshTokenRepository(session=session)
        record = await repo.create(
            user_id=user_id,
            expires_at=_in(expires_in),
            ip_address="203.0.113.7",
            user_agent="pytest",
        )
        await repo.finalize(record.id, f"signed-{record.id}")
    return record


@pytest.mark.integration
class TestIssue:
    """Test two-phase record creation."""

    async def test_create_then_finalize(self, test_database, user_id):
        async with test_database.get_session() as session:
            repo = RefreshTokenRepository(session=session)
            record = await repo.create(user_id=user_id, expires_at=_in(timedelta(days=7)))
            assert record.token is None

            await repo.finalize(record.id, "signed")

        async with test_database.get_session() as session:
            stored = await RefreshTokenRepository(session=session).find_by_id(record.id)

        assert stored.token == "signed"
        assert stored.revoked is False
        assert stored.is_live() is True


@pytest.mark.integration
class TestConsumeAndRotate:
    """Test atomic rotation."""

    async def test_rotation_replaces_record(self, test_database, user_id):
        record = await _issue(test_database, user_id)

        async with test_database.get_session() as session:
            repo = RefreshTokenRepository(session=session)
            result = await repo.consume_and_rotate(
                record.id, user_id, _in(timedelta(days=7)), "198.51.100.1", "ua"
            )
            old = await repo.find_by_id(record.id)

        assert isinstance(result, Success)
        assert result.value.id != record.id
        assert result.value.ip_address == "198.51.100.1"
        assert old is None

    async def test_rotation_chain_keeps_one_record(self, test_database, user_id):
        """Test N sequential rotations leave exactly the newest record."""
        original = await _issue(test_database, user_id)
        current_id = original.id

        for _ in range(4):
            async with test_database.get_session() as session:
                repo = RefreshTokenRepository(session=session)
                result = await repo.consume_and_rotate(
                    current_id, user_id, _in(timedelta(days=7))
                )
                assert isinstance(result, Success)
                await repo.finalize(result.value.id, f"signed-{result.value.id}")
            current_id = result.value.id

        records = await _records(test_database, user_id)

        assert [r.id for r in records] == [current_id]
        assert original.id not in {r.id for r in records}
        assert records[0].revoked is False

    async def test_second_rotation_not_found(self, test_database, user_id):
        record = await _issue(test_database, user_id)

        async with test_database.get_session() as session:
            repo = RefreshTokenRepository(session=session)
            first = await repo.consume_and_rotate(record.id, user_id, _in(timedelta(days=7)))
            second = await repo.consume_and_rotate(record.id, user_id, _in(timedelta(days=7)))

        assert isinstance(first, Success)
        assert isinstance(second, Failure)
        assert second.error.kind == LedgerErrorKind.NOT_FOUND

    async def test_concurrent_rotation_single_winner(self, test_database, user_id):
        record = await _issue(test_database, user_id)

        async def rotate():
            async with test_database.get_session() as session:
                return await RefreshTokenRepository(session=session).consume_and_rotate(
                    record.id, user_id, _in(timedelta(days=7))
                )

        results = await asyncio.gather(rotate(), rotate(), rotate())

        winners = [r for r in results if isinstance(r, Success)]
        losers = [r for r in results if isinstance(r, Failure)]
        assert len(winners) == 1
        assert all(r.error.kind == LedgerErrorKind.NOT_FOUND for r in losers)

    async def test_foreign_user_not_found(self, test_database, user_id):
        record = await _issue(test_database, user_id)

        async with test_database.get_session() as session:
            repo = RefreshTokenRepository(session=session)
            result = await repo.consume_and_rotate(
                record.id, user_id + 1, _in(timedelta(days=7))
            )
            still_there = await repo.find_by_id(record.id)

        assert result.error.kind == LedgerErrorKind.NOT_FOUND
        assert still_there is not None

    async def test_revoked_replay_revokes_other_sessions(self, test_database, user_id):
        stolen = await _issue(test_database, user_id)
        other = await _issue(test_database, user_id)

        async with test_database.get_session() as session:
            repo = RefreshTokenRepository(session=session)
            await repo.revoke(stolen.id)
            result = await repo.consume_and_rotate(stolen.id, user_id, _in(timedelta(days=7)))
            other_after = await repo.find_by_id(other.id)

        assert result.error.kind == LedgerErrorKind.REVOKED
        assert other_after.revoked is True
        assert other_after.revoked_at is not None

    async def test_expired_record_deleted(self, test_database, user_id):
        record = await _issue(test_database, user_id, expires_in=timedelta(seconds=-1))

        async with test_database.get_session() as session:
            repo = RefreshTokenRepository(session=session)
            result = await repo.consume_and_rotate(record.id, user_id, _in(timedelta(days=7)))
            gone = await repo.find_by_id(record.id)

        assert result.error.kind == LedgerErrorKind.EXPIRED
        assert gone is None


@pytest.mark.integration
class TestRevocation:
    """Test revoke and revoke_all_for_user."""

    async def test_revoke_idempotent(self, test_database, user_id):
        record = await _issue(test_database, user_id)

        async with test_database.get_session() as session:
            repo = RefreshTokenRepository(session=session)
            await repo.revoke(record.id)
            await repo.revoke(record.id)
            await repo.revoke(123456)
            stored = await repo.find_by_id(record.id)

        assert stored.revoked is True

    async def test_revoke_all_counts_live_records(self, test_database, user_id):
        for _ in range(3):
            await _issue(test_database, user_id)

        async with test_database.get_session() as session:
            repo = RefreshTokenRepository(session=session)
            first = await repo.revoke_all_for_user(user_id)
            second = await repo.revoke_all_for_user(user_id)

        records = await _records(test_database, user_id)

        assert first == 3
        assert second == 0
        assert len(records) == 3
        assert all(r.revoked for r in records)
