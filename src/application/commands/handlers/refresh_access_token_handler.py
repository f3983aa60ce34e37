"""RefreshAccessToken command handler.

Flow:
1. Require a refresh token (NO_REFRESH_TOKEN)
2. Verify signature/expiry/issuer/audience (INVALID_REFRESH_TOKEN)
3. Atomically consume the ledger record and create its replacement
4. Load the user (revoke the replacement if the user is gone)
5. Mint refresh token for the replacement and finalize it
6. Mint access token with the live role
7. Return Success(AuthTokens)

Replay Detection:
    Presenting a revoked record revokes every other live record of the
    user inside the ledger; this handler only reports TOKEN_REVOKED and logs
    the incident.
"""

from datetime import UTC, datetime, timedelta

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.dtos import AuthTokens
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.errors import LedgerErrorKind
from src.domain.protocols import (
    LoggerProtocol,
    RefreshTokenLedger,
    TokenCodecProtocol,
    UserRepository,
)

LEDGER_FAILURES: dict[LedgerErrorKind, tuple[ErrorCode, str]] = {
    LedgerErrorKind.NOT_FOUND: (ErrorCode.TOKEN_NOT_FOUND, "Refresh token not found"),
    LedgerErrorKind.REVOKED: (ErrorCode.TOKEN_REVOKED, "Refresh token has been revoked"),
    LedgerErrorKind.EXPIRED: (ErrorCode.TOKEN_EXPIRED, "Refresh token has expired"),
}


class RefreshAccessTokenHandler:
    """Handler for refresh token rotation."""

    def __init__(
        self,
        user_repo: UserRepository,
        ledger: RefreshTokenLedger,
        token_service: TokenCodecProtocol,
        logger: LoggerProtocol,
        refresh_ttl: timedelta,
    ) -> None:
        self._user_repo = user_repo
        self._ledger = ledger
        self._token_service = token_service
        self._logger = logger
        self._refresh_ttl = refresh_ttl

    async def handle(self, cmd: RefreshAccessToken) -> Result[AuthTokens, AuthenticationError]:
        """Rotate the presented refresh token.

        Returns:
            Success(AuthTokens) with a new access and refresh token.
            Failure(AuthenticationError) for every rejection (always 401).
        """
        if not cmd.refresh_token:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.NO_REFRESH_TOKEN,
                    message="Refresh token required",
                )
            )

        match self._token_service.verify_refresh(cmd.refresh_token):
            case Failure(error=token_error):
                self._logger.info("refresh_token_rejected", reason=token_error.kind.value)
                return Failure(
                    error=AuthenticationError(
                        code=ErrorCode.INVALID_REFRESH_TOKEN,
                        message="Invalid or expired refresh token",
                    )
                )
            case Success(value=claims):
                pass

        rotated = await self._ledger.consume_and_rotate(
            token_id=claims.token_id,
            user_id=claims.user_id,
            expires_at=datetime.now(UTC) + self._refresh_ttl,
            ip_address=cmd.ip_address,
            user_agent=cmd.user_agent,
        )
        match rotated:
            case Failure(error=ledger_error):
                if ledger_error.kind == LedgerErrorKind.REVOKED:
                    self._logger.warning(
                        "refresh_token_replay_detected",
                        user_id=claims.user_id,
                        token_id=claims.token_id,
                        client_ip=cmd.ip_address,
                    )
                code, message = LEDGER_FAILURES[ledger_error.kind]
                return Failure(error=AuthenticationError(code=code, message=message))
            case Success(value=record):
                pass

        user = await self._user_repo.find_by_id(claims.user_id)
        if user is None:
            await self._ledger.revoke(record.id)
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                )
            )

        refresh_token = self._token_service.issue_refresh(user.id, user.email, record.id)
        await self._ledger.finalize(record.id, refresh_token)
        access_token = self._token_service.issue_access(user.id, user.email, user.role.value)

        self._logger.info(
            "refresh_token_rotated",
            user_id=user.id,
            old_token_id=claims.token_id,
            token_id=record.id,
        )
        return Success(
            value=AuthTokens(
                access_token=access_token,
                refresh_token=refresh_token,
                user_id=user.id,
            )
        )
