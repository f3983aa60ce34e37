"""Unit tests for RegisterUserHandler.

Tests cover:
- Successful registration (unverified, no password, lower-cased email)
- Missing fields
- Invalid email / name
- Duplicate email (ConflictError from the repository)
"""

from unittest.mock import Mock

import pytest

from src.application.commands.auth_commands import RegisterUser
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.application.dtos import UserProfile
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, ValidationError
from src.core.result import Failure, Success
from tests.conftest import create_user


@pytest.mark.unit
class TestRegisterUserHandler:
    """Test registration."""

    async def test_register_success_returns_profile(self, mock_user_repo, mock_logger):
        """Test a new user is created unverified and without a password."""
        mock_user_repo.create.return_value = Success(
            value=create_user(
                user_id=7,
                email="ada@example.com",
                name="Ada",
                password_hash=None,
                is_verified=False,
            )
        )
        handler = RegisterUserHandler(user_repo=mock_user_repo, logger=mock_logger)

        result = await handler.handle(RegisterUser(email=" Ada@Example.com ", name=" Ada "))

        assert isinstance(result, Success)
        assert isinstance(result.value, UserProfile)
        assert result.value.id == 7
        assert result.value.is_verified is False
        assert result.value.role == "USER"
        mock_user_repo.create.assert_awaited_once_with(email="ada@example.com", name="Ada")
        mock_logger.info.assert_called_once()

    @pytest.mark.parametrize(
        ("email", "name"), [(None, "Ada"), ("ada@example.com", None), ("", "")]
    )
    async def test_missing_fields(self, mock_user_repo, mock_logger, email, name):
        handler = RegisterUserHandler(user_repo=mock_user_repo, logger=mock_logger)

        result = await handler.handle(RegisterUser(email=email, name=name))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.MISSING_FIELDS
        mock_user_repo.create.assert_not_awaited()

    async def test_invalid_email(self, mock_user_repo, mock_logger):
        handler = RegisterUserHandler(user_repo=mock_user_repo, logger=mock_logger)

        result = await handler.handle(RegisterUser(email="not-an-email", name="Ada"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_EMAIL
        mock_user_repo.create.assert_not_awaited()

    async def test_invalid_name(self, mock_user_repo, mock_logger):
        handler = RegisterUserHandler(user_repo=mock_user_repo, logger=mock_logger)

        result = await handler.handle(RegisterUser(email="ada@example.com", name=" A "))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_NAME

    async def test_duplicate_email_conflict(self, mock_user_repo, mock_logger):
        """Test the repository's unique-email conflict is passed through."""
        conflict = ConflictError(
            code=ErrorCode.EMAIL_EXISTS,
            message="Email already registered",
            resource_type="User",
            conflicting_field="email",
        )
        mock_user_repo.create.return_value = Failure(error=conflict)
        handler = RegisterUserHandler(user_repo=mock_user_repo, logger=Mock())

        result = await handler.handle(RegisterUser(email="ada@example.com", name="Ada"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_EXISTS
