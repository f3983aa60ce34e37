"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import ConflictError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.enums import UserRole
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: int) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's numeric identifier.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Compares lower-cased values (exact match, no LIKE wildcards).

        Args:
            email: User's email address (case-insensitive).

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(
            func.lower(UserModel.email) == email.strip().lower()
        )
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def create(self, email: str, name: str) -> Result[User, ConflictError]:
        """Insert a new unverified user without a password.

        A unique-constraint violation (email taken, possibly by a concurrent
        registration) rolls the session back and returns ConflictError.
        """
        user_model = UserModel(
            email=email,
            name=name,
            role=UserRole.USER.value,
            is_verified=False,
        )
        self.session.add(user_model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_EXISTS,
                    message="Email already registered",
                    resource_type="User",
                    conflicting_field="email",
                )
            )
        await self.session.refresh(user_model)
        return Success(value=self._to_domain(user_model))

    async def update(self, user: User) -> None:
        """Update existing user in database.

        Email and id are immutable and never written here.

        Raises:
            NoResultFound: If user doesn't exist.
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        user_model.name = user.name
        user_model.password_hash = user.password_hash
        user_model.role = user.role.value
        user_model.is_verified = user.is_verified
        user_model.password_setup_token = user.password_setup_token
        user_model.password_setup_token_expires_at = (
            user.password_setup_token_expires_at
        )
        user_model.password_reset_token = user.password_reset_token
        user_model.password_reset_token_expires_at = (
            user.password_reset_token_expires_at
        )

        await self.session.commit()
        await self.session.refresh(user_model)

    async def get_role(self, user_id: int) -> UserRole | None:
        """Read the live role of a user (None if the user is gone)."""
        stmt = select(UserModel.role).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        role = result.scalar_one_or_none()
        return UserRole(role) if role is not None else None

    async def set_password(self, user_id: int, password_hash: str) -> None:
        """Store a new password hash."""
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(password_hash=password_hash)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def mark_verified(self, user_id: int) -> None:
        """Set is_verified=True."""
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(is_verified=True)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def exists_by_email(self, email: str) -> bool:
        """Check if user with email exists (case-insensitive)."""
        stmt = select(UserModel.id).where(
            func.lower(UserModel.email) == email.strip().lower()
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def count_admins(self) -> int:
        """Count users holding the ADMIN role (used by the admin seeder)."""
        stmt = select(func.count()).select_from(UserModel).where(
            UserModel.role == UserRole.ADMIN.value
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=user_model.id,
            email=user_model.email,
            name=user_model.name,
            password_hash=user_model.password_hash,
            role=UserRole(user_model.role),
            is_verified=user_model.is_verified,
            password_setup_token=user_model.password_setup_token,
            password_setup_token_expires_at=as_utc(
                user_model.password_setup_token_expires_at
            ),
            password_reset_token=user_model.password_reset_token,
            password_reset_token_expires_at=as_utc(
                user_model.password_reset_token_expires_at
            ),
            created_at=as_utc(user_model.created_at),
            updated_at=as_utc(user_model.updated_at),
        )
