"""User database model for authentication.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - password_hash is NULL until the user completes password setup
    - is_verified: Admin verification required before login

One-Time Tokens:
    Setup and reset tokens live in their own column pairs (token + absolute
    expiry). Both columns are unique so a token resolves to one user.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model for authentication and account management.

    Fields:
        id: Integer primary key (from BaseMutableModel)
        created_at: Timestamp when user registered (from BaseMutableModel)
        updated_at: Timestamp when user last updated (from BaseMutableModel)
        email: Unique email address (lowercase, indexed)
        name: Display name
        password_hash: Bcrypt hashed password (nullable until setup)
        role: USER or ADMIN
        is_verified: Admin verification status (blocks login if False)
        password_setup_token / password_setup_token_expires_at
        password_reset_token / password_reset_token_expires_at

    Relationships:
        - refresh_tokens: One-to-many (ON DELETE CASCADE on the child FK)

    Example:
        result = await session.execute(
            select(User).where(User.email == "user@example.com")
        )
        user = result.scalar_one_or_none()
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )

    password_hash: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        default=None,
        comment="Bcrypt hashed password (NULL until password setup)",
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="USER",
        server_default="USER",
        comment="USER or ADMIN",
    )

    is_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        index=True,
        comment="Admin verification status (must be True to login)",
    )

    password_setup_token: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        unique=True,
        default=None,
        comment="One-time password setup token (hex)",
    )

    password_setup_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="Setup token absolute expiry (24h after issue)",
    )

    password_reset_token: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        unique=True,
        default=None,
        comment="One-time password reset token (hex)",
    )

    password_reset_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="Reset token absolute expiry (1h after issue)",
    )

    def __repr__(self) -> str:
        """String representation for debugging (never includes secrets)."""
        return (
            f"<User("
            f"id={self.id}, "
            f"email={self.email!r}, "
            f"role={self.role}, "
            f"is_verified={self.is_verified}"
            f")>"
        )
