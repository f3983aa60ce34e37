"""User domain entity for authentication.

Pure business logic, no framework dependencies.

Lifecycle:
    Registered-Unverified  (is_verified=False, password_hash=None)
    -> Verified-NoPassword (admin verification, setup token issued)
    -> Verified-WithPassword (setup/reset completed)

One-Time Tokens:
    Two independent slots (setup, reset), each an opaque token plus an
    absolute expiry. Both may be outstanding at the same time.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from src.domain.enums import OneTimeTokenKind, UserRole


@dataclass
class User:
    """User domain entity with authentication business rules.

    Attributes:
        id: Numeric user identifier (immutable)
        email: Lower-cased email address (unique, immutable)
        name: Display name
        password_hash: Bcrypt hash, None until the password is set up
        role: USER or ADMIN
        is_verified: Admin verification status
        password_setup_token: Outstanding setup token (None if none)
        password_setup_token_expires_at: Setup token absolute expiry
        password_reset_token: Outstanding reset token (None if none)
        password_reset_token_expires_at: Reset token absolute expiry
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated

    Example:
        >>> user = User(id=1, email="a@x.com", name="Ada")
        >>> user.has_password()
        False
        >>> user.can_login()
        False
    """

    id: int
    email: str
    name: str
    password_hash: str | None = None
    role: UserRole = UserRole.USER
    is_verified: bool = False
    password_setup_token: str | None = None
    password_setup_token_expires_at: datetime | None = None
    password_reset_token: str | None = None
    password_reset_token_expires_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_password(self) -> bool:
        """Check whether the password setup step has been completed."""
        return self.password_hash is not None

    def is_admin(self) -> bool:
        """Check the ADMIN role on this (live) record."""
        return self.role == UserRole.ADMIN

    def can_login(self) -> bool:
        """Verified and has a password (credential check still required)."""
        return self.is_verified and self.has_password()

    def token_expiry(self, kind: OneTimeTokenKind) -> datetime | None:
        """Return the absolute expiry of the given one-time token slot."""
        if kind == OneTimeTokenKind.SETUP:
            return self.password_setup_token_expires_at
        return self.password_reset_token_expires_at

    def is_token_expired(
        self, kind: OneTimeTokenKind, now: datetime | None = None
    ) -> bool:
        """Check whether the one-time token in a slot is past its expiry.

        A slot without an expiry is treated as expired.

        Args:
            kind: Token slot to inspect.
            now: Reference time (defaults to current UTC time).

        Returns:
            bool: True if the token can no longer be consumed.
        """
        expires_at = self.token_expiry(kind)
        if expires_at is None:
            return True
        current = now or datetime.now(UTC)
        return expires_at <= current
