"""EmailProtocol - Port for email service implementations.

Infrastructure layer provides concrete implementations (StubEmailService).
"""

from typing import Protocol


class EmailProtocol(Protocol):
    """Email service protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Both methods raise on delivery failure; handlers decide how a failed
    delivery affects the operation.

    Example Implementation:
        >>> class StubEmailService:
        ...     async def send_password_setup_email(
        ...         self, to_email: str, name: str, setup_url: str
        ...     ) -> None:
        ...         print(f"[STUB] Setup email to {to_email}")
    """

    async def send_password_setup_email(
        self,
        to_email: str,
        name: str,
        setup_url: str,
    ) -> None:
        """Send the password setup link after admin verification.

        Args:
            to_email: Recipient email address.
            name: Recipient display name.
            setup_url: Full URL with the setup token.

        Example:
            >>> await email_service.send_password_setup_email(
            ...     to_email="user@example.com",
            ...     name="Ada",
            ...     setup_url="https://app.com/setup-password?token=abc123",
            ... )
        """
        ...

    async def send_password_reset_email(
        self,
        to_email: str,
        name: str,
        reset_url: str,
    ) -> None:
        """Send the password reset link.

        Args:
            to_email: Recipient email address.
            name: Recipient display name.
            reset_url: Full URL with the reset token.
        """
        ...
