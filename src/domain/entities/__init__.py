"""Domain entities.

Pure dataclasses carrying business rules; persistence models are mapped to
and from these in the infrastructure layer.
"""

from src.domain.entities.refresh_token_record import RefreshTokenRecord
from src.domain.entities.user import User

__all__ = [
    "RefreshTokenRecord",
    "User",
]
