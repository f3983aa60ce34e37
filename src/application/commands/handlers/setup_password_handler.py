"""SetupPassword command handler.

Flow:
1. Validate token/password presence and password strength
2. Look up the SETUP token (24h) and require a verified user
3. Hash the password, then consume the token (single use)
4. Store the hash

Existing sessions are left alone (a user in this state has none).
"""

from src.application.commands.auth_commands import SetupPassword
from src.application.services import PasswordTokenRedeemer
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import OneTimeTokenKind
from src.domain.protocols import LoggerProtocol


class SetupPasswordHandler:
    """Handler for first-time password setup."""

    def __init__(self, redeemer: PasswordTokenRedeemer, logger: LoggerProtocol) -> None:
        self._redeemer = redeemer
        self._logger = logger

    async def handle(self, cmd: SetupPassword) -> Result[None, ValidationError]:
        """Handle password setup.

        Returns:
            Success(None) when the password was stored.
            Failure(ValidationError) otherwise (always a 400-class error).
        """
        match await self._redeemer.redeem(OneTimeTokenKind.SETUP, cmd.token, cmd.password):
            case Failure(error=error):
                self._logger.info("password_setup_rejected", reason=error.code.value)
                return Failure(error=error)
            case Success(value=user):
                self._logger.info("password_setup_completed", user_id=user.id)
                return Success(value=None)
