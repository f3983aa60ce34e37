"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and validation
- Fields arrive as sent by the client (possibly empty); handlers report
  missing or malformed input with specific error codes
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account (no password yet).

    Attributes:
        email: Email address as entered (trimmed and lower-cased by handler).
        name: Display name as entered (trimmed by handler).

    Example:
        >>> command = RegisterUser(email="Ada@Example.com", name="Ada")
        >>> result = await handler.handle(command)
    """

    email: str | None
    name: str | None


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate credentials and open a session.

    Attributes:
        email: Email address as entered.
        password: Plaintext password.
        ip_address: Client IP (stored on the ledger record).
        user_agent: Client User-Agent (stored on the ledger record).
    """

    email: str | None
    password: str | None
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Rotate a refresh token and mint a new access token.

    Attributes:
        refresh_token: Signed refresh token from the cookie (None if absent).
        ip_address: Client IP for the replacement record.
        user_agent: Client User-Agent for the replacement record.
    """

    refresh_token: str | None
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """End one session (best effort).

    Attributes:
        refresh_token: Refresh token from body, cookie or header, if any.
    """

    refresh_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class LogoutAllSessions:
    """End every session of the authenticated user.

    Attributes:
        user_id: Authenticated user.
    """

    user_id: int


@dataclass(frozen=True, kw_only=True)
class SetupPassword:
    """Set the first password using the admin-issued setup token.

    Attributes:
        token: One-time setup token from the email link.
        password: New plaintext password.
    """

    token: str | None
    password: str | None


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Request a password reset email (forgot-password).

    Attributes:
        email: Email address as entered.
    """

    email: str | None


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Replace the password using a reset token.

    Attributes:
        token: One-time reset token from the email link.
        password: New plaintext password.
    """

    token: str | None
    password: str | None
