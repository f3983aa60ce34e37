"""RegisterUser command handler.

Flow:
1. Require email and name
2. Normalize and validate email format
3. Trim and validate name length
4. Create user (unverified, no password)
5. Return Success(UserProfile) or Failure(error)

A registered user cannot log in until an administrator verifies the account
and the user completes password setup from the emailed link.
"""

from src.application.commands.auth_commands import RegisterUser
from src.application.dtos import UserProfile
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, UserRepository
from src.domain.validators import validate_email, validate_name


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: User repository (protocol).
            logger: Structured logger (protocol).
        """
        self._user_repo = user_repo
        self._logger = logger

    async def handle(
        self, cmd: RegisterUser
    ) -> Result[UserProfile, ValidationError | ConflictError]:
        """Handle user registration.

        Args:
            cmd: RegisterUser command.

        Returns:
            Success(UserProfile) for the new account.
            Failure(ValidationError) for MISSING_FIELDS, INVALID_EMAIL, INVALID_NAME.
            Failure(ConflictError) for EMAIL_EXISTS.
        """
        if not cmd.email or not cmd.name:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.MISSING_FIELDS,
                    message="Email and name are required",
                )
            )

        try:
            email = validate_email(cmd.email)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EMAIL, message=str(e), field="email"
                )
            )

        try:
            name = validate_name(cmd.name)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_NAME, message=str(e), field="name"
                )
            )

        match await self._user_repo.create(email=email, name=name):
            case Failure(error=error):
                self._logger.info("user_registration_rejected", reason=error.code.value)
                return Failure(error=error)
            case Success(value=user):
                self._logger.info("user_registered", user_id=user.id)
                return Success(value=UserProfile.from_user(user))
