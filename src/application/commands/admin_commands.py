"""Admin commands (CQRS write operations performed by administrators)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class VerifyUser:
    """Verify a registered user and send the password setup email.

    Attributes:
        user_id: User to verify.

    Example:
        >>> result = await handler.handle(VerifyUser(user_id=42))
    """

    user_id: int
