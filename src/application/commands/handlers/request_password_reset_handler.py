"""RequestPasswordReset command handler (forgot-password).

Flow:
1. Require an email (MISSING_EMAIL)
2. Look up the user; stop silently unless verified with a password
3. Generate a 1h reset token and store it in the reset slot
4. Email the reset link ({frontend_url}/reset-password?token=...)
5. Return Success(None)

Every outcome after step 1 is indistinguishable to the caller, so the
endpoint cannot be used to discover which emails are registered. Internal
failures are logged and still reported as success.

Timing Uniformity:
    Steps 2-4 are padded to a fixed minimum duration, so the extra writes
    and the email send of an eligible account do not show in the response
    time.
"""

import asyncio
import time
from collections.abc import Callable

from src.application.commands.auth_commands import RequestPasswordReset
from src.application.services import OneTimeTokenIssuer
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import OneTimeTokenKind
from src.domain.protocols import (
    EmailProtocol,
    LoggerProtocol,
    OneTimeTokenServiceProtocol,
    OneTimeTokenStore,
    UserRepository,
)
from src.domain.validators import EMAIL_PATTERN, normalize_email


class RequestPasswordResetHandler:
    """Handler for password reset requests."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_store: OneTimeTokenStore,
        token_service: OneTimeTokenServiceProtocol,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        frontend_url: str,
        min_duration_seconds: float = 0.5,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize forgot-password handler.

        Args:
            user_repo: User repository.
            token_store: One-time token store (reset slot).
            token_service: One-time token generator.
            email_service: Email delivery.
            logger: Structured logger.
            frontend_url: Base URL of the reset link.
            min_duration_seconds: Floor every request is padded to.
            clock: Monotonic clock (seconds).
        """
        self._user_repo = user_repo
        self._token_store = token_store
        self._issuer = OneTimeTokenIssuer(token_store, token_service)
        self._email_service = email_service
        self._logger = logger
        self._frontend_url = frontend_url
        self._min_duration_seconds = min_duration_seconds
        self._clock = clock

    async def handle(self, cmd: RequestPasswordReset) -> Result[None, ValidationError]:
        """Handle a forgot-password request.

        Returns:
            Success(None) for every outcome except a missing email.
            Failure(ValidationError) with MISSING_EMAIL.
        """
        if not cmd.email or not cmd.email.strip():
            return Failure(
                error=ValidationError(
                    code=ErrorCode.MISSING_EMAIL,
                    message="Email is required",
                    field="email",
                )
            )

        started = self._clock()
        email = normalize_email(cmd.email)
        if EMAIL_PATTERN.match(email):
            try:
                await self._issue_reset(email)
            except Exception as e:
                self._logger.error("password_reset_request_failed", error=e)

        elapsed = self._clock() - started
        if elapsed < self._min_duration_seconds:
            await asyncio.sleep(self._min_duration_seconds - elapsed)
        elif self._min_duration_seconds > 0:
            self._logger.warning(
                "password_reset_slower_than_floor", elapsed_ms=int(elapsed * 1000)
            )
        return Success(value=None)

    async def _issue_reset(self, email: str) -> None:
        user = await self._user_repo.find_by_email(email)
        if user is None or not user.is_verified or not user.has_password():
            self._logger.info("password_reset_skipped")
            return

        token = await self._issuer.issue_reset_token(user.id)

        try:
            await self._email_service.send_password_reset_email(
                to_email=user.email,
                name=user.name,
                reset_url=f"{self._frontend_url}/reset-password?token={token}",
            )
        except Exception as e:
            # Token is useless without the email
            await self._token_store.clear(OneTimeTokenKind.RESET, user.id)
            self._logger.error("password_reset_email_failed", error=e, user_id=user.id)
            return

        self._logger.info("password_reset_requested", user_id=user.id)
