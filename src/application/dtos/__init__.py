"""Application DTOs."""

from src.application.dtos.auth_dtos import AuthTokens, UserProfile, VerifyUserResult

__all__ = [
    "AuthTokens",
    "UserProfile",
    "VerifyUserResult",
]
