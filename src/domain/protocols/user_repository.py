"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol

from src.core.errors import ConflictError
from src.core.result import Result
from src.domain.entities import User
from src.domain.enums import UserRole


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by email (case-insensitive)
        create: Insert a new user
        update: Persist changes to an existing user
        get_role: Read the live role (authorization re-check)
        set_password: Store a new password hash
        mark_verified: Set the verification flag
    """

    async def find_by_id(self, user_id: int) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's numeric identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Email comparison is case-insensitive.

        Args:
            email: User's email address.

        Returns:
            User if found, None otherwise.

        Example:
            >>> user = await repo.find_by_email("Ada@Example.com")
            >>> if user:
            ...     print(user.id)
        """
        ...

    async def create(self, email: str, name: str) -> Result[User, ConflictError]:
        """Insert a new unverified user without a password.

        Args:
            email: Normalized email address.
            name: Trimmed display name.

        Returns:
            Success(created user with its generated id), or
            Failure(ConflictError) if the email is already taken (including
            a concurrent registration losing on the unique constraint).
        """
        ...

    async def update(self, user: User) -> None:
        """Persist mutable fields of an existing user.

        Args:
            user: User entity with updated fields.
        """
        ...

    async def get_role(self, user_id: int) -> UserRole | None:
        """Read the user's current role.

        Returns:
            Live role, or None if the user no longer exists.
        """
        ...

    async def set_password(self, user_id: int, password_hash: str) -> None:
        """Store a new password hash for the user."""
        ...

    async def mark_verified(self, user_id: int) -> None:
        """Set is_verified=True for the user."""
        ...
