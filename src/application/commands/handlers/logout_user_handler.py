"""LogoutUser command handler.

Flow:
1. If a refresh token was presented and verifies, revoke its record
2. Always return Success(None)

Logout never fails: missing, malformed, expired or already-revoked tokens
are ignored, and storage errors are logged and swallowed so the client can
always clear its cookies.
"""

from src.application.commands.auth_commands import LogoutUser
from src.core.result import Result, Success
from src.domain.protocols import LoggerProtocol, RefreshTokenLedger, TokenCodecProtocol


class LogoutUserHandler:
    """Handler for single-session logout."""

    def __init__(
        self,
        ledger: RefreshTokenLedger,
        token_service: TokenCodecProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._ledger = ledger
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LogoutUser) -> Result[None, None]:
        """Revoke the presented session, if any."""
        if not cmd.refresh_token:
            return Success(value=None)

        match self._token_service.verify_refresh(cmd.refresh_token):
            case Success(value=claims):
                try:
                    await self._ledger.revoke(claims.token_id)
                except Exception as e:
                    self._logger.error(
                        "logout_revoke_failed", error=e, token_id=claims.token_id
                    )
                else:
                    self._logger.info(
                        "user_logged_out",
                        user_id=claims.user_id,
                        token_id=claims.token_id,
                    )
            case _:
                self._logger.debug("logout_token_ignored")

        return Success(value=None)
