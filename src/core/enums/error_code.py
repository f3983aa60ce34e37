"""Machine-readable error codes (the HTTP error contract).

Every error response body carries one of these codes. Values are
STABLE_UPPER_SNAKE strings: clients branch on the code, never on the message.

Categories:
- Validation errors (MISSING_*, INVALID_*, WEAK_PASSWORD)
- Conflict errors (EMAIL_EXISTS)
- Authentication errors (credentials, access/refresh tokens)
- Authorization errors (INSUFFICIENT_PERMISSIONS, *_NOT_VERIFIED)
- Resource errors (*_NOT_FOUND)
- Operational errors (RATE_LIMITED, EMAIL_SEND_FAILED, INTERNAL_ERROR)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    MISSING_FIELDS = "MISSING_FIELDS"
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"
    MISSING_EMAIL = "MISSING_EMAIL"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_NAME = "INVALID_NAME"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    VALIDATION_FAILED = "VALIDATION_FAILED"

    # Conflict errors
    EMAIL_EXISTS = "EMAIL_EXISTS"

    # Credential errors
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    ACCOUNT_NOT_VERIFIED = "ACCOUNT_NOT_VERIFIED"
    PASSWORD_NOT_SET = "PASSWORD_NOT_SET"

    # Access token errors (auth guards)
    NO_TOKEN = "NO_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    AUTH_ERROR = "AUTH_ERROR"

    # Refresh token errors
    NO_REFRESH_TOKEN = "NO_REFRESH_TOKEN"
    INVALID_REFRESH_TOKEN = "INVALID_REFRESH_TOKEN"
    TOKEN_NOT_FOUND = "TOKEN_NOT_FOUND"
    TOKEN_REVOKED = "TOKEN_REVOKED"

    # Authorization errors
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"
    EMAIL_NOT_VERIFIED = "EMAIL_NOT_VERIFIED"
    USER_NOT_VERIFIED = "USER_NOT_VERIFIED"

    # Resource errors
    USER_NOT_FOUND = "USER_NOT_FOUND"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # Operational errors
    RATE_LIMITED = "RATE_LIMITED"
    RATE_LIMIT_RESET_FAILED = "RATE_LIMIT_RESET_FAILED"
    EMAIL_SEND_FAILED = "EMAIL_SEND_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"
