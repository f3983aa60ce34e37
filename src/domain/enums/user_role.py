"""User roles for authorization.

Role Hierarchy:
    ADMIN > USER

    - ADMIN: May verify users (issues password setup tokens)
    - USER: Standard account

The role carried inside an access token is only a hint; admin-only
operations always re-read the live role from the user record.

Usage:
    from src.domain.enums import UserRole

    if user.role == UserRole.ADMIN:
        # Admin-only logic
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    String Enum:
        Inherits from str so the value serializes directly into JWT claims
        and JSON responses.
    """

    USER = "USER"
    ADMIN = "ADMIN"
