"""Common schemas used across multiple API endpoints.

Every error body shares one shape:

    {"error": "<message>", "code": "<UPPER_SNAKE_CODE>"}

with optional `details`, `retryAfter` and `user` keys.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys.

    Python attributes stay snake_case; JSON uses camelCase (isVerified,
    accessToken, refreshToken). Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(CamelModel):
    """Error body returned by every failing endpoint."""

    error: str = Field(..., description="Human-readable message")
    code: str = Field(..., description="Machine-readable error code")
    details: list[str] | list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None,
        description="Rule violations or field errors",
    )
    retry_after: int | None = Field(
        default=None,
        description="Seconds until retry is allowed (429 only)",
    )


class MessageResponse(BaseModel):
    """Plain success message."""

    message: str = Field(..., description="Success message")
