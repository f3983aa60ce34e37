"""Unit tests for RequestPasswordResetHandler (forgot-password).

Tests cover:
- Missing email is the only reported failure
- Unknown, unverified and password-less accounts are skipped silently
- Malformed email is a silent success
- Eligible account gets a 1h RESET token and an email
- Email failure clears the stored token
- Unexpected storage errors never leak to the caller
- Every branch is padded to the same minimum duration
"""

import asyncio
import time
from datetime import UTC, datetime, timedelta
from unittest.mock import Mock

import pytest

from src.application.commands.auth_commands import RequestPasswordReset
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import OneTimeTokenKind
from tests.conftest import create_user

RESET_TOKEN = "c" * 64


@pytest.fixture
def token_service():
    service = Mock()
    service.generate_token.return_value = RESET_TOKEN
    service.calculate_expiration.return_value = datetime.now(UTC) + timedelta(hours=1)
    return service


@pytest.fixture
def handler(mock_user_repo, mock_token_store, token_service, mock_email_service, mock_logger):
    return RequestPasswordResetHandler(
        user_repo=mock_user_repo,
        token_store=mock_token_store,
        token_service=token_service,
        email_service=mock_email_service,
        logger=mock_logger,
        frontend_url="https://app.example.com",
        min_duration_seconds=0,
    )


@pytest.mark.unit
class TestRequestPasswordResetHandler:
    """Test forgot-password."""

    @pytest.mark.parametrize("email", [None, "", "   "])
    async def test_missing_email(self, handler, email):
        result = await handler.handle(RequestPasswordReset(email=email))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MISSING_EMAIL

    async def test_malformed_email_is_silent_success(self, handler, mock_user_repo):
        result = await handler.handle(RequestPasswordReset(email="not-an-email"))

        assert isinstance(result, Success)
        mock_user_repo.find_by_email.assert_not_awaited()

    async def test_unknown_email_is_silent_success(
        self, handler, mock_token_store, mock_email_service
    ):
        result = await handler.handle(RequestPasswordReset(email="ghost@example.com"))

        assert isinstance(result, Success)
        mock_token_store.store.assert_not_awaited()
        mock_email_service.send_password_reset_email.assert_not_awaited()

    @pytest.mark.parametrize(
        "user",
        [
            create_user(is_verified=False),
            create_user(password_hash=None),
        ],
        ids=["unverified", "no-password"],
    )
    async def test_ineligible_account_skipped(
        self, handler, mock_user_repo, mock_token_store, mock_email_service, user
    ):
        mock_user_repo.find_by_email.return_value = user

        result = await handler.handle(RequestPasswordReset(email=user.email))

        assert isinstance(result, Success)
        mock_token_store.store.assert_not_awaited()
        mock_email_service.send_password_reset_email.assert_not_awaited()

    async def test_eligible_account_gets_reset_email(
        self, handler, mock_user_repo, mock_token_store, token_service, mock_email_service
    ):
        mock_user_repo.find_by_email.return_value = create_user(user_id=9)

        result = await handler.handle(RequestPasswordReset(email=" ADA@example.com "))

        assert isinstance(result, Success)
        mock_user_repo.find_by_email.assert_awaited_once_with("ada@example.com")
        token_service.calculate_expiration.assert_called_once_with(OneTimeTokenKind.RESET)
        kind, user_id, token, _ = mock_token_store.store.await_args.args
        assert (kind, user_id, token) == (OneTimeTokenKind.RESET, 9, RESET_TOKEN)
        mock_email_service.send_password_reset_email.assert_awaited_once_with(
            to_email="ada@example.com",
            name="Ada Lovelace",
            reset_url=f"https://app.example.com/reset-password?token={RESET_TOKEN}",
        )

    async def test_email_failure_clears_token(
        self, handler, mock_user_repo, mock_token_store, mock_email_service, mock_logger
    ):
        """Test a token whose email never arrived is not left usable."""
        mock_user_repo.find_by_email.return_value = create_user(user_id=9)
        mock_email_service.send_password_reset_email.side_effect = RuntimeError("down")

        result = await handler.handle(RequestPasswordReset(email="ada@example.com"))

        assert isinstance(result, Success)
        mock_token_store.clear.assert_awaited_once_with(OneTimeTokenKind.RESET, 9)
        mock_logger.error.assert_called_once()

    async def test_storage_error_is_swallowed(
        self, handler, mock_user_repo, mock_logger
    ):
        mock_user_repo.find_by_email.side_effect = RuntimeError("db gone")

        result = await handler.handle(RequestPasswordReset(email="ada@example.com"))

        assert isinstance(result, Success)
        mock_logger.error.assert_called_once()


@pytest.mark.unit
class TestRequestPasswordResetTiming:
    """Test forgot-password response time does not depend on the account."""

    FLOOR = 0.15

    @pytest.fixture
    def padded_handler(
        self, mock_user_repo, mock_token_store, token_service, mock_email_service, mock_logger
    ):
        async def slow_send(**kwargs):
            await asyncio.sleep(0.05)

        mock_email_service.send_password_reset_email.side_effect = slow_send
        return RequestPasswordResetHandler(
            user_repo=mock_user_repo,
            token_store=mock_token_store,
            token_service=token_service,
            email_service=mock_email_service,
            logger=mock_logger,
            frontend_url="https://app.example.com",
            min_duration_seconds=self.FLOOR,
        )

    async def _timed(self, handler, email):
        started = time.perf_counter()
        result = await handler.handle(RequestPasswordReset(email=email))
        assert isinstance(result, Success)
        return time.perf_counter() - started

    async def test_eligible_and_unknown_accounts_take_the_same_time(
        self, padded_handler, mock_user_repo, mock_email_service
    ):
        mock_user_repo.find_by_email.return_value = None
        unknown = await self._timed(padded_handler, "nobody@example.com")
        malformed = await self._timed(padded_handler, "not-an-email")

        mock_user_repo.find_by_email.return_value = create_user(user_id=9)
        eligible = await self._timed(padded_handler, "ada@example.com")

        mock_email_service.send_password_reset_email.assert_awaited_once()
        for elapsed in (unknown, malformed, eligible):
            assert elapsed >= self.FLOOR
        assert abs(eligible - unknown) < 0.05
        assert abs(eligible - malformed) < 0.05

    async def test_work_slower_than_floor_is_logged(
        self, mock_user_repo, mock_token_store, token_service, mock_email_service, mock_logger
    ):
        handler = RequestPasswordResetHandler(
            user_repo=mock_user_repo,
            token_store=mock_token_store,
            token_service=token_service,
            email_service=mock_email_service,
            logger=mock_logger,
            frontend_url="https://app.example.com",
            min_duration_seconds=0.5,
            clock=Mock(side_effect=[10.0, 12.0]),
        )

        result = await handler.handle(RequestPasswordReset(email="nobody@example.com"))

        assert isinstance(result, Success)
        mock_logger.warning.assert_called_once_with(
            "password_reset_slower_than_floor", elapsed_ms=2000
        )
