"""Database models for persistence layer.

Models Organization:
    - user.py: User model (credentials, verification, one-time token slots)
    - refresh_token.py: Refresh token ledger model

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models (SQLAlchemy) live here in src/infrastructure/persistence/models/
    They are separate and mapped via repository layer.
"""

from src.infrastructure.persistence.models.refresh_token import RefreshToken
from src.infrastructure.persistence.models.user import User

__all__ = [
    "RefreshToken",
    "User",
]
