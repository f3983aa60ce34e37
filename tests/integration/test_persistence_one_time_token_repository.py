"""Integration tests for OneTimeTokenRepository (password setup/reset slots)."""

import asyncio
from datetime import UTC, datetime, timedelta

import pytest

from src.core.result import Failure, Success
from src.domain.enums import OneTimeTokenKind
from src.domain.errors import OneTimeTokenErrorKind
from src.infrastructure.persistence.repositories import (
    OneTimeTokenRepository,
    UserRepository,
)

SETUP_TOKEN = "s" * 64
RESET_TOKEN = "r" * 64


@pytest.fixture
async def user_id(test_database):
    async with test_database.get_session() as session:
        result = await UserRepository(session=session).create(
            email="ada@example.com", name="Ada Lovelace"
        )
    return result.value.id


async def _store(db, kind, user_id, token, expires_in=timedelta(hours=1)):
    async with db.get_session() as session:
        await OneTimeTokenRepository(session=session).store(
            kind, user_id, token, datetime.now(UTC) + expires_in
        )


@pytest.mark.integration
class TestConsume:
    """Test single-use consumption."""

    async def test_consume_returns_user_and_clears_slot(self, test_database, user_id):
        await _store(test_database, OneTimeTokenKind.SETUP, user_id, SETUP_TOKEN)

        async with test_database.get_session() as session:
            store = OneTimeTokenRepository(session=session)
            first = await store.consume(OneTimeTokenKind.SETUP, SETUP_TOKEN)
            second = await store.consume(OneTimeTokenKind.SETUP, SETUP_TOKEN)
            user = await UserRepository(session=session).find_by_id(user_id)

        assert first == Success(value=user_id)
        assert isinstance(second, Failure)
        assert second.error.kind == OneTimeTokenErrorKind.NOT_FOUND
        assert user.password_setup_token is None
        assert user.password_setup_token_expires_at is None

    async def test_slots_are_separate(self, test_database, user_id):
        await _store(test_database, OneTimeTokenKind.RESET, user_id, RESET_TOKEN)

        async with test_database.get_session() as session:
            result = await OneTimeTokenRepository(session=session).consume(
                OneTimeTokenKind.SETUP, RESET_TOKEN
            )

        assert result.error.kind == OneTimeTokenErrorKind.NOT_FOUND

    async def test_expired_token_cleared(self, test_database, user_id):
        await _store(
            test_database,
            OneTimeTokenKind.RESET,
            user_id,
            RESET_TOKEN,
            expires_in=timedelta(seconds=-1),
        )

        async with test_database.get_session() as session:
            store = OneTimeTokenRepository(session=session)
            expired = await store.consume(OneTimeTokenKind.RESET, RESET_TOKEN)
            again = await store.consume(OneTimeTokenKind.RESET, RESET_TOKEN)

        assert expired.error.kind == OneTimeTokenErrorKind.EXPIRED
        assert again.error.kind == OneTimeTokenErrorKind.NOT_FOUND

    async def test_new_token_replaces_old(self, test_database, user_id):
        await _store(test_database, OneTimeTokenKind.RESET, user_id, RESET_TOKEN)
        await _store(test_database, OneTimeTokenKind.RESET, user_id, "n" * 64)

        async with test_database.get_session() as session:
            store = OneTimeTokenRepository(session=session)
            old = await store.consume(OneTimeTokenKind.RESET, RESET_TOKEN)
            new = await store.consume(OneTimeTokenKind.RESET, "n" * 64)

        assert isinstance(old, Failure)
        assert new == Success(value=user_id)

    async def test_concurrent_consume_single_winner(self, test_database, user_id):
        await _store(test_database, OneTimeTokenKind.SETUP, user_id, SETUP_TOKEN)

        async def consume():
            async with test_database.get_session() as session:
                return await OneTimeTokenRepository(session=session).consume(
                    OneTimeTokenKind.SETUP, SETUP_TOKEN
                )

        results = await asyncio.gather(consume(), consume())

        assert sum(isinstance(r, Success) for r in results) == 1

    async def test_clear(self, test_database, user_id):
        await _store(test_database, OneTimeTokenKind.SETUP, user_id, SETUP_TOKEN)

        async with test_database.get_session() as session:
            store = OneTimeTokenRepository(session=session)
            await store.clear(OneTimeTokenKind.SETUP, user_id)
            result = await store.consume(OneTimeTokenKind.SETUP, SETUP_TOKEN)

        assert result.error.kind == OneTimeTokenErrorKind.NOT_FOUND


@pytest.mark.integration
class TestFindOwner:
    """Test the non-consuming lookup."""

    async def test_find_owner_keeps_token(self, test_database, user_id):
        await _store(test_database, OneTimeTokenKind.SETUP, user_id, SETUP_TOKEN)

        async with test_database.get_session() as session:
            store = OneTimeTokenRepository(session=session)
            owner = await store.find_owner(OneTimeTokenKind.SETUP, SETUP_TOKEN)
            consumed = await store.consume(OneTimeTokenKind.SETUP, SETUP_TOKEN)

        assert owner == Success(value=user_id)
        assert consumed == Success(value=user_id)

    async def test_find_owner_unknown_token(self, test_database, user_id):
        async with test_database.get_session() as session:
            result = await OneTimeTokenRepository(session=session).find_owner(
                OneTimeTokenKind.RESET, RESET_TOKEN
            )

        assert result.error.kind == OneTimeTokenErrorKind.NOT_FOUND

    async def test_find_owner_clears_expired_token(self, test_database, user_id):
        await _store(
            test_database,
            OneTimeTokenKind.RESET,
            user_id,
            RESET_TOKEN,
            expires_in=timedelta(seconds=-1),
        )

        async with test_database.get_session() as session:
            store = OneTimeTokenRepository(session=session)
            expired = await store.find_owner(OneTimeTokenKind.RESET, RESET_TOKEN)
            again = await store.find_owner(OneTimeTokenKind.RESET, RESET_TOKEN)

        assert expired.error.kind == OneTimeTokenErrorKind.EXPIRED
        assert again.error.kind == OneTimeTokenErrorKind.NOT_FOUND
