"""Domain enums for business logic.

Available Enums:
    - UserRole: USER / ADMIN
    - OneTimeTokenKind: Password setup / password reset token slots
"""

from src.domain.enums.one_time_token_kind import OneTimeTokenKind
from src.domain.enums.user_role import UserRole

__all__ = [
    "OneTimeTokenKind",
    "UserRole",
]
