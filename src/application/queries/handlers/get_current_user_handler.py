"""GetCurrentUser query handler.

Returns the safe profile of a user. The password hash and one-time token
slots never leave this handler.
"""

from src.application.dtos import UserProfile
from src.application.queries.user_queries import GetCurrentUser
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import UserRepository


class GetCurrentUserHandler:
    """Handler for user profile lookup."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetCurrentUser) -> Result[UserProfile, NotFoundError]:
        """Fetch user profile.

        Returns:
            Success(UserProfile) or Failure(NotFoundError) with USER_NOT_FOUND.
        """
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(query.user_id),
                )
            )
        return Success(value=UserProfile.from_user(user))
