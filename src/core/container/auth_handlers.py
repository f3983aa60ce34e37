"""Authentication handler dependency factories.

Request-scoped handler instances for authentication operations:
- Registration, admin verification
- Password setup, forgot/reset password
- Login, refresh, logout, logout-all
- Current user lookup

Handlers receive repositories bound to the request's database session and
application-scoped services from the infrastructure factories.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.infrastructure import (
    get_db_session,
    get_dummy_password_hash,
    get_email_service,
    get_logger,
    get_one_time_token_service,
    get_password_service,
    get_token_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.application.commands.handlers.logout_all_sessions_handler import (
        LogoutAllSessionsHandler,
    )
    from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.application.commands.handlers.reset_password_handler import (
        ResetPasswordHandler,
    )
    from src.application.commands.handlers.setup_password_handler import (
        SetupPasswordHandler,
    )
    from src.application.commands.handlers.verify_user_handler import (
        VerifyUserHandler,
    )
    from src.application.queries.handlers.get_current_user_handler import (
        GetCurrentUserHandler,
    )
    from src.application.services import PasswordTokenRedeemer


# ============================================================================
# Registration and Verification
# ============================================================================


async def get_register_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped).

    Args:
        session: Database session (injected by FastAPI).

    Returns:
        RegisterUserHandler instance.
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return RegisterUserHandler(
        user_repo=UserRepository(session=session),
        logger=get_logger(),
    )


async def get_verify_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "VerifyUserHandler":
    """Get VerifyUser command handler (request-scoped, admin)."""
    from src.application.commands.handlers.verify_user_handler import (
        VerifyUserHandler,
    )
    from src.infrastructure.persistence.repositories import (
        OneTimeTokenRepository,
        UserRepository,
    )

    return VerifyUserHandler(
        user_repo=UserRepository(session=session),
        token_store=OneTimeTokenRepository(session=session),
        token_service=get_one_time_token_service(),
        email_service=get_email_service(),
        logger=get_logger(),
        frontend_url=settings.frontend_url,
    )


# ============================================================================
# Password Setup / Reset
# ============================================================================


def _build_redeemer(session: AsyncSession) -> "PasswordTokenRedeemer":
    from src.application.services import PasswordTokenRedeemer
    from src.infrastructure.persistence.repositories import (
        OneTimeTokenRepository,
        UserRepository,
    )

    return PasswordTokenRedeemer(
        user_repo=UserRepository(session=session),
        token_store=OneTimeTokenRepository(session=session),
        password_service=get_password_service(),
    )


async def get_setup_password_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "SetupPasswordHandler":
    """Get SetupPassword command handler (request-scoped)."""
    from src.application.commands.handlers.setup_password_handler import (
        SetupPasswordHandler,
    )

    return SetupPasswordHandler(
        redeemer=_build_redeemer(session),
        logger=get_logger(),
    )


async def get_request_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RequestPasswordResetHandler":
    """Get RequestPasswordReset command handler (request-scoped)."""
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.infrastructure.persistence.repositories import (
        OneTimeTokenRepository,
        UserRepository,
    )

    return RequestPasswordResetHandler(
        user_repo=UserRepository(session=session),
        token_store=OneTimeTokenRepository(session=session),
        token_service=get_one_time_token_service(),
        email_service=get_email_service(),
        logger=get_logger(),
        frontend_url=settings.frontend_url,
        min_duration_seconds=settings.password_reset_min_response_ms / 1000,
    )


async def get_reset_password_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ResetPasswordHandler":
    """Get ResetPassword command handler (request-scoped)."""
    from src.application.commands.handlers.reset_password_handler import (
        ResetPasswordHandler,
    )
    from src.infrastructure.persistence.repositories import RefreshTokenRepository

    return ResetPasswordHandler(
        redeemer=_build_redeemer(session),
        ledger=RefreshTokenRepository(session=session),
        logger=get_logger(),
    )


# ============================================================================
# Sessions (login / refresh / logout)
# ============================================================================


async def get_login_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped)."""
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.infrastructure.persistence.repositories import (
        RefreshTokenRepository,
        UserRepository,
    )

    return LoginUserHandler(
        user_repo=UserRepository(session=session),
        ledger=RefreshTokenRepository(session=session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
        refresh_ttl=settings.refresh_token_ttl,
        dummy_password_hash=get_dummy_password_hash(),
        failure_delay_seconds=settings.login_failure_delay_ms / 1000,
    )


async def get_refresh_token_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RefreshAccessTokenHandler":
    """Get RefreshAccessToken command handler (request-scoped)."""
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from src.infrastructure.persistence.repositories import (
        RefreshTokenRepository,
        UserRepository,
    )

    return RefreshAccessTokenHandler(
        user_repo=UserRepository(session=session),
        ledger=RefreshTokenRepository(session=session),
        token_service=get_token_service(),
        logger=get_logger(),
        refresh_ttl=settings.refresh_token_ttl,
    )


async def get_logout_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LogoutUserHandler":
    """Get LogoutUser command handler (request-scoped)."""
    from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
    from src.infrastructure.persistence.repositories import RefreshTokenRepository

    return LogoutUserHandler(
        ledger=RefreshTokenRepository(session=session),
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_logout_all_sessions_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LogoutAllSessionsHandler":
    """Get LogoutAllSessions command handler (request-scoped)."""
    from src.application.commands.handlers.logout_all_sessions_handler import (
        LogoutAllSessionsHandler,
    )
    from src.infrastructure.persistence.repositories import RefreshTokenRepository

    return LogoutAllSessionsHandler(
        ledger=RefreshTokenRepository(session=session),
        logger=get_logger(),
    )


# ============================================================================
# Queries
# ============================================================================


async def get_current_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetCurrentUserHandler":
    """Get GetCurrentUser query handler (request-scoped)."""
    from src.application.queries.handlers.get_current_user_handler import (
        GetCurrentUserHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return GetCurrentUserHandler(user_repo=UserRepository(session=session))
