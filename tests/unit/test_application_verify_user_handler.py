"""Unit tests for VerifyUserHandler (admin verification).

Tests cover:
- Marks verified, stores a 24h SETUP token, emails the setup link
- Unknown user
- Email failure keeps the verification (email_sent=False)
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import Mock

import pytest

from src.application.commands.admin_commands import VerifyUser
from src.application.commands.handlers.verify_user_handler import VerifyUserHandler
from src.application.dtos import VerifyUserResult
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.enums import OneTimeTokenKind
from tests.conftest import create_user

SETUP_TOKEN = "a" * 64


@pytest.fixture
def token_service():
    service = Mock()
    service.generate_token.return_value = SETUP_TOKEN
    service.calculate_expiration.return_value = datetime.now(UTC) + timedelta(hours=24)
    return service


@pytest.fixture
def handler(mock_user_repo, mock_token_store, token_service, mock_email_service, mock_logger):
    return VerifyUserHandler(
        user_repo=mock_user_repo,
        token_store=mock_token_store,
        token_service=token_service,
        email_service=mock_email_service,
        logger=mock_logger,
        frontend_url="https://app.example.com",
    )


@pytest.mark.unit
class TestVerifyUserHandler:
    """Test admin verification."""

    async def test_verify_success(
        self, handler, mock_user_repo, mock_token_store, token_service, mock_email_service
    ):
        """Test the user is verified and receives a setup link."""
        mock_user_repo.find_by_id.return_value = create_user(
            user_id=5, password_hash=None, is_verified=False
        )

        result = await handler.handle(VerifyUser(user_id=5))

        assert isinstance(result, Success)
        assert isinstance(result.value, VerifyUserResult)
        assert result.value.email_sent is True
        assert result.value.user.is_verified is True
        mock_user_repo.mark_verified.assert_awaited_once_with(5)
        token_service.calculate_expiration.assert_called_once_with(OneTimeTokenKind.SETUP)
        mock_token_store.store.assert_awaited_once()
        kind, user_id, token, _ = mock_token_store.store.await_args.args
        assert (kind, user_id, token) == (OneTimeTokenKind.SETUP, 5, SETUP_TOKEN)
        mock_email_service.send_password_setup_email.assert_awaited_once_with(
            to_email="ada@example.com",
            name="Ada Lovelace",
            setup_url=f"https://app.example.com/setup-password?token={SETUP_TOKEN}",
        )

    async def test_verify_unknown_user(self, handler, mock_user_repo, mock_token_store):
        result = await handler.handle(VerifyUser(user_id=404))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.USER_NOT_FOUND
        mock_user_repo.mark_verified.assert_not_awaited()
        mock_token_store.store.assert_not_awaited()

    async def test_email_failure_keeps_verification(
        self, handler, mock_user_repo, mock_token_store, mock_email_service, mock_logger
    ):
        """Test a delivery failure is reported but not rolled back."""
        mock_user_repo.find_by_id.return_value = create_user(
            user_id=5, password_hash=None, is_verified=False
        )
        mock_email_service.send_password_setup_email.side_effect = RuntimeError(
            "SMTP down"
        )

        result = await handler.handle(VerifyUser(user_id=5))

        assert isinstance(result, Success)
        assert result.value.email_sent is False
        assert result.value.email_error == "SMTP down"
        assert result.value.user.is_verified is True
        mock_user_repo.mark_verified.assert_awaited_once_with(5)
        mock_token_store.store.assert_awaited_once()
        mock_token_store.clear.assert_not_awaited()
        mock_logger.error.assert_called_once()

    async def test_reverify_issues_fresh_token(self, handler, mock_user_repo, mock_token_store):
        """Test verifying an already verified user replaces the setup token."""
        mock_user_repo.find_by_id.return_value = create_user(user_id=5, is_verified=True)

        result = await handler.handle(VerifyUser(user_id=5))

        assert isinstance(result, Success)
        mock_token_store.store.assert_awaited_once()
