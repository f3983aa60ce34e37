"""Repository implementations (SQLAlchemy adapters for domain protocols)."""

from src.infrastructure.persistence.repositories.one_time_token_repository import (
    OneTimeTokenRepository,
)
from src.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "OneTimeTokenRepository",
    "RefreshTokenRepository",
    "UserRepository",
]
