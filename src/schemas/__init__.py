"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import LoginRequest, AccessTokenResponse
"""

from src.schemas.auth_schemas import (
    AccessTokenResponse,
    ForgotPasswordRequest,
    LoginRequest,
    LogoutRequest,
    PasswordTokenRequest,
    RegisterRequest,
    RegisterResponse,
    UserEnvelope,
    UserResponse,
    VerifyUserResponse,
)
from src.schemas.common_schemas import CamelModel, ErrorResponse, MessageResponse

__all__ = [
    # Auth
    "AccessTokenResponse",
    "ForgotPasswordRequest",
    "LoginRequest",
    "LogoutRequest",
    "PasswordTokenRequest",
    "RegisterRequest",
    "RegisterResponse",
    "UserEnvelope",
    "UserResponse",
    "VerifyUserResponse",
    # Common
    "CamelModel",
    "ErrorResponse",
    "MessageResponse",
]
