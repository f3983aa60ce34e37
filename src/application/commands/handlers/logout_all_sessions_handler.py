"""LogoutAllSessions command handler.

Revokes every live refresh token record of the authenticated user. Access
tokens already issued stay valid until they expire.
"""

from src.application.commands.auth_commands import LogoutAllSessions
from src.core.result import Result, Success
from src.domain.protocols import LoggerProtocol, RefreshTokenLedger


class LogoutAllSessionsHandler:
    """Handler for logout from all devices."""

    def __init__(self, ledger: RefreshTokenLedger, logger: LoggerProtocol) -> None:
        self._ledger = ledger
        self._logger = logger

    async def handle(self, cmd: LogoutAllSessions) -> Result[int, None]:
        """Revoke all sessions.

        Returns:
            Success(number of records revoked).
        """
        revoked_count = await self._ledger.revoke_all_for_user(cmd.user_id)
        self._logger.info(
            "user_logged_out_everywhere",
            user_id=cmd.user_id,
            revoked_count=revoked_count,
        )
        return Success(value=revoked_count)
