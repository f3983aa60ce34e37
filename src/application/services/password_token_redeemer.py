"""Password token redeemer.

Shared by SetupPasswordHandler and ResetPasswordHandler: both validate the
new password, consume a one-time token from their own slot, and store a
fresh hash. They differ only in the slot and the expired-token message.

Order:
    The token is looked up first and only spent once the user is verified
    and the new hash exists, so a rejected request leaves the link usable.

Reasons are reported as ValidationError so that every failure of these two
endpoints renders as 400.
"""

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.enums import OneTimeTokenKind
from src.domain.errors import OneTimeTokenError, OneTimeTokenErrorKind
from src.domain.protocols import (
    OneTimeTokenStore,
    PasswordHashingProtocol,
    UserRepository,
)
from src.domain.validators import password_strength_errors

EXPIRED_MESSAGES: dict[OneTimeTokenKind, str] = {
    OneTimeTokenKind.SETUP: "Token has expired. Please contact an administrator.",
    OneTimeTokenKind.RESET: "Token has expired. Please request a new password reset.",
}


def _token_rejected(kind: OneTimeTokenKind, error: OneTimeTokenError) -> ValidationError:
    if error.kind == OneTimeTokenErrorKind.EXPIRED:
        return ValidationError(
            code=ErrorCode.TOKEN_EXPIRED,
            message=EXPIRED_MESSAGES[kind],
            field="token",
        )
    return ValidationError(
        code=ErrorCode.INVALID_TOKEN,
        message="Invalid or expired token",
        field="token",
    )


class PasswordTokenRedeemer:
    """Redeem a one-time token for a new password."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_store: OneTimeTokenStore,
        password_service: PasswordHashingProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_store = token_store
        self._password_service = password_service

    async def redeem(
        self,
        kind: OneTimeTokenKind,
        token: str | None,
        password: str | None,
    ) -> Result[User, ValidationError]:
        """Validate input, consume the token and store the new password hash.

        Args:
            kind: Slot the token belongs to.
            token: Token from the email link.
            password: New plaintext password.

        Returns:
            Success(User) whose password was replaced, or Failure with
            MISSING_FIELDS, WEAK_PASSWORD, INVALID_TOKEN, TOKEN_EXPIRED or
            USER_NOT_VERIFIED.
        """
        if not token or not password:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.MISSING_FIELDS,
                    message="Token and password are required",
                )
            )

        violations = password_strength_errors(password)
        if violations:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.WEAK_PASSWORD,
                    message="Password does not meet requirements",
                    field="password",
                    errors=tuple(violations),
                )
            )

        match await self._token_store.find_owner(kind, token):
            case Failure(error=error):
                return Failure(error=_token_rejected(kind, error))
            case Success(value=user_id):
                user = await self._user_repo.find_by_id(user_id)

        if user is None or not user.is_verified:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.USER_NOT_VERIFIED,
                    message="User account is not verified",
                )
            )

        password_hash = self._password_service.hash_password(password)

        match await self._token_store.consume(kind, token):
            case Failure(error=error):
                return Failure(error=_token_rejected(kind, error))
            case Success():
                pass

        await self._user_repo.set_password(user.id, password_hash)
        user.password_hash = password_hash
        return Success(value=user)
