"""Authentication DTOs (Data Transfer Objects).

Response/result dataclasses for authentication command and query handlers.
These carry data from handlers back to the presentation layer.
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.entities import User


@dataclass(frozen=True, kw_only=True)
class UserProfile:
    """Safe projection of a user.

    Never carries the password hash or one-time token fields.
    """

    id: int
    email: str
    name: str
    role: str
    is_verified: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        """Project a domain user onto its safe fields."""
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role.value,
            is_verified=user.is_verified,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Tokens produced by login and refresh.

    Attributes:
        access_token: Signed access token (returned in the body).
        refresh_token: Signed refresh token (set as HttpOnly cookie).
        user_id: Session owner.
    """

    access_token: str
    refresh_token: str
    user_id: int


@dataclass(frozen=True, kw_only=True)
class VerifyUserResult:
    """Outcome of admin verification.

    Attributes:
        user: Verified user's profile.
        email_sent: False when the setup email could not be delivered; the
            verification itself is kept.
        email_error: Delivery error message when email_sent is False.
    """

    user: UserProfile
    email_sent: bool
    email_error: str | None = None
