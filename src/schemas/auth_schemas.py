"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Request fields are optional at this layer: a missing or empty field is
reported by the handler with a specific code (MISSING_FIELDS,
MISSING_CREDENTIALS, MISSING_EMAIL) rather than as a generic
validation failure.

Endpoints:
    POST /auth/register         - RegisterRequest -> RegisterResponse (201)
    POST /auth/login            - LoginRequest -> AccessTokenResponse
    POST /auth/refresh          - (cookie) -> AccessTokenResponse
    POST /auth/logout           - LogoutRequest -> MessageResponse
    POST /auth/logout-all       - MessageResponse
    GET  /auth/me               - UserEnvelope
    POST /auth/setup-password   - PasswordTokenRequest -> MessageResponse
    POST /auth/forgot-password  - ForgotPasswordRequest -> MessageResponse
    POST /auth/reset-password   - PasswordTokenRequest -> MessageResponse
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos import UserProfile
from src.schemas.common_schemas import CamelModel


# =============================================================================
# User representation
# =============================================================================


class UserResponse(CamelModel):
    """Safe user representation (no password hash, no one-time tokens)."""

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="Email address (lower-cased)")
    name: str = Field(..., description="Display name")
    role: str = Field(..., description="USER or ADMIN")
    is_verified: bool = Field(..., description="Admin verification status")
    created_at: datetime | None = Field(default=None, description="Creation time")
    updated_at: datetime | None = Field(default=None, description="Last update time")

    @classmethod
    def from_dto(cls, profile: UserProfile) -> "UserResponse":
        """Build from the application-layer profile."""
        return cls(
            id=profile.id,
            email=profile.email,
            name=profile.name,
            role=profile.role,
            is_verified=profile.is_verified,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class UserEnvelope(BaseModel):
    """`{"user": {...}}` response."""

    user: UserResponse


# =============================================================================
# Registration
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for registration (no password yet)."""

    email: str | None = Field(default=None, examples=["ada@example.com"])
    name: str | None = Field(default=None, examples=["Ada Lovelace"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "ada@example.com", "name": "Ada Lovelace"}
        }
    )


class RegisterResponse(BaseModel):
    """Response schema for registration (201 Created)."""

    message: str = Field(
        default="Registration successful. Please wait for admin verification.",
    )
    user: UserResponse


# =============================================================================
# Login / Refresh
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login."""

    email: str | None = Field(default=None, examples=["ada@example.com"])
    password: str | None = Field(default=None, examples=["Passw0rd"])


class AccessTokenResponse(CamelModel):
    """Login/refresh response; the refresh token travels only as a cookie."""

    message: str
    access_token: str = Field(..., description="Short-lived access token")


# =============================================================================
# Logout
# =============================================================================


class LogoutRequest(CamelModel):
    """Optional logout body (cookie and X-Refresh-Token header also accepted)."""

    refresh_token: str | None = Field(default=None)


# =============================================================================
# Password setup / reset
# =============================================================================


class PasswordTokenRequest(BaseModel):
    """Request schema for setup-password and reset-password."""

    token: str | None = Field(default=None, description="Token from the email link")
    password: str | None = Field(
        default=None,
        description="New password (8+ chars, upper, lower, digit)",
    )


class ForgotPasswordRequest(BaseModel):
    """Request schema for forgot-password."""

    email: str | None = Field(default=None, examples=["ada@example.com"])


# =============================================================================
# Admin verification
# =============================================================================


class VerifyUserResponse(BaseModel):
    """Response schema for admin verification."""

    message: str = Field(
        default="User verified successfully. Password setup email sent.",
    )
    user: UserResponse
