"""LoginUser command handler.

Flow:
1. Require email and password (MISSING_CREDENTIALS)
2. Find user by normalized email
3. Verify password (against a dummy hash when the user is missing)
4. Check verified, then password set, then password match
5. Create ledger record, mint refresh token bound to it, finalize record
6. Mint access token carrying the role hint
7. Return Success(AuthTokens)

Timing Uniformity:
    Every failure path pays one bcrypt verification and the same fixed
    delay, so response time does not reveal whether an email is registered.
"""

import asyncio
from datetime import UTC, datetime, timedelta

from src.application.commands.auth_commands import LoginUser
from src.application.dtos import AuthTokens
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, AuthorizationError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    RefreshTokenLedger,
    TokenCodecProtocol,
    UserRepository,
)
from src.domain.validators import normalize_email

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class LoginUserHandler:
    """Handler for user login."""

    def __init__(
        self,
        user_repo: UserRepository,
        ledger: RefreshTokenLedger,
        password_service: PasswordHashingProtocol,
        token_service: TokenCodecProtocol,
        logger: LoggerProtocol,
        refresh_ttl: timedelta,
        dummy_password_hash: str,
        failure_delay_seconds: float = 0.1,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            user_repo: User repository.
            ledger: Refresh token ledger.
            password_service: Password hashing service.
            token_service: Token codec.
            logger: Structured logger.
            refresh_ttl: Refresh token lifetime (ledger record expiry).
            dummy_password_hash: Hash verified when the email is unknown.
            failure_delay_seconds: Fixed delay awaited on every failure.
        """
        self._user_repo = user_repo
        self._ledger = ledger
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger
        self._refresh_ttl = refresh_ttl
        self._dummy_password_hash = dummy_password_hash
        self._failure_delay_seconds = failure_delay_seconds

    async def handle(
        self, cmd: LoginUser
    ) -> Result[AuthTokens, ValidationError | AuthenticationError | AuthorizationError]:
        """Handle login.

        Returns:
            Success(AuthTokens) on success.
            Failure(ValidationError) for MISSING_CREDENTIALS.
            Failure(AuthenticationError) for INVALID_CREDENTIALS.
            Failure(AuthorizationError) for ACCOUNT_NOT_VERIFIED, PASSWORD_NOT_SET.
        """
        if not cmd.email or not cmd.password:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.MISSING_CREDENTIALS,
                    message="Email and password are required",
                )
            )

        email = normalize_email(cmd.email)
        user = await self._user_repo.find_by_email(email)

        if user is None:
            self._password_service.verify_password(cmd.password, self._dummy_password_hash)
            return await self._fail(
                AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message=INVALID_CREDENTIALS_MESSAGE,
                ),
                user_id=None,
            )

        password_ok = self._password_service.verify_password(
            cmd.password, user.password_hash or self._dummy_password_hash
        )

        if not user.is_verified:
            return await self._fail(
                AuthorizationError(
                    code=ErrorCode.ACCOUNT_NOT_VERIFIED,
                    message="Account not verified. Please wait for admin verification.",
                ),
                user_id=user.id,
            )

        if not user.has_password():
            return await self._fail(
                AuthorizationError(
                    code=ErrorCode.PASSWORD_NOT_SET,
                    message=(
                        "Password not set. Please check your email for "
                        "password setup instructions."
                    ),
                ),
                user_id=user.id,
            )

        if not password_ok:
            return await self._fail(
                AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message=INVALID_CREDENTIALS_MESSAGE,
                ),
                user_id=user.id,
            )

        record = await self._ledger.create(
            user_id=user.id,
            expires_at=datetime.now(UTC) + self._refresh_ttl,
            ip_address=cmd.ip_address,
            user_agent=cmd.user_agent,
        )
        refresh_token = self._token_service.issue_refresh(user.id, user.email, record.id)
        await self._ledger.finalize(record.id, refresh_token)
        access_token = self._token_service.issue_access(user.id, user.email, user.role.value)

        self._logger.info("user_login_succeeded", user_id=user.id, token_id=record.id)
        return Success(
            value=AuthTokens(
                access_token=access_token,
                refresh_token=refresh_token,
                user_id=user.id,
            )
        )

    async def _fail(
        self,
        error: AuthenticationError | AuthorizationError,
        user_id: int | None,
    ) -> Failure[AuthenticationError | AuthorizationError]:
        self._logger.warning(
            "user_login_failed", reason=error.code.value, user_id=user_id
        )
        await asyncio.sleep(self._failure_delay_seconds)
        return Failure(error=error)
