"""ResetPassword command handler.

Flow:
1. Validate token/password presence and password strength
2. Look up the RESET token (1h) and require a verified user
3. Hash the new password, then consume the token (single use)
4. Store the new hash
5. Revoke every refresh token of the user (log out all devices)
"""

from src.application.commands.auth_commands import ResetPassword
from src.application.services import PasswordTokenRedeemer
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import OneTimeTokenKind
from src.domain.protocols import LoggerProtocol, RefreshTokenLedger


class ResetPasswordHandler:
    """Handler for password reset with a reset token."""

    def __init__(
        self,
        redeemer: PasswordTokenRedeemer,
        ledger: RefreshTokenLedger,
        logger: LoggerProtocol,
    ) -> None:
        self._redeemer = redeemer
        self._ledger = ledger
        self._logger = logger

    async def handle(self, cmd: ResetPassword) -> Result[None, ValidationError]:
        """Handle password reset.

        Returns:
            Success(None) after the password changed and sessions were revoked.
            Failure(ValidationError) otherwise.
        """
        match await self._redeemer.redeem(OneTimeTokenKind.RESET, cmd.token, cmd.password):
            case Failure(error=error):
                self._logger.info("password_reset_rejected", reason=error.code.value)
                return Failure(error=error)
            case Success(value=user):
                revoked_count = await self._ledger.revoke_all_for_user(user.id)
                self._logger.info(
                    "password_reset_completed",
                    user_id=user.id,
                    revoked_count=revoked_count,
                )
                return Success(value=None)
