"""VerifyUser command handler (admin).

Flow:
1. Find user (USER_NOT_FOUND if missing)
2. Mark user verified
3. Generate 24h password setup token and store it in the setup slot
4. Email the setup link ({frontend_url}/setup-password?token=...)
5. Return Success(VerifyUserResult)

An email delivery failure does NOT undo the verification or the stored
token; the result reports email_sent=False and the administrator can
retry.
"""

from src.application.commands.admin_commands import VerifyUser
from src.application.dtos import UserProfile, VerifyUserResult
from src.application.services import OneTimeTokenIssuer
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    EmailProtocol,
    LoggerProtocol,
    OneTimeTokenServiceProtocol,
    OneTimeTokenStore,
    UserRepository,
)


class VerifyUserHandler:
    """Handler for admin user verification."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_store: OneTimeTokenStore,
        token_service: OneTimeTokenServiceProtocol,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        frontend_url: str,
    ) -> None:
        self._user_repo = user_repo
        self._issuer = OneTimeTokenIssuer(token_store, token_service)
        self._email_service = email_service
        self._logger = logger
        self._frontend_url = frontend_url

    async def handle(self, cmd: VerifyUser) -> Result[VerifyUserResult, NotFoundError]:
        """Verify the user and send the password setup email.

        Returns:
            Success(VerifyUserResult) (email_sent tells whether delivery worked).
            Failure(NotFoundError) if the user does not exist.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(cmd.user_id),
                )
            )

        await self._user_repo.mark_verified(user.id)
        user.is_verified = True

        token = await self._issuer.issue_setup_token(user.id)

        self._logger.info("user_verified", user_id=user.id)

        setup_url = f"{self._frontend_url}/setup-password?token={token}"
        try:
            await self._email_service.send_password_setup_email(
                to_email=user.email,
                name=user.name,
                setup_url=setup_url,
            )
        except Exception as e:
            self._logger.error("password_setup_email_failed", error=e, user_id=user.id)
            return Success(
                value=VerifyUserResult(
                    user=UserProfile.from_user(user),
                    email_sent=False,
                    email_error=str(e),
                )
            )

        return Success(
            value=VerifyUserResult(user=UserProfile.from_user(user), email_sent=True)
        )
