"""Plain-text email templates for password setup and reset links."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class RenderedEmail:
    """Subject and body ready to hand to a mail transport."""

    subject: str
    text: str


def password_setup_email(name: str, setup_url: str) -> RenderedEmail:
    """Email sent after an administrator verifies the account."""
    return RenderedEmail(
        subject="Set Up Your Password",
        text=(
            f"Welcome, {name}!\n\n"
            "Your account has been verified by an administrator. You can now "
            "set up your password to complete your registration.\n\n"
            f"Set up your password here:\n{setup_url}\n\n"
            "Note: This link will expire in 24 hours. If you didn't request "
            "this email, please ignore it.\n"
        ),
    )


def password_reset_email(name: str, reset_url: str) -> RenderedEmail:
    """Email sent for a self-service password reset."""
    return RenderedEmail(
        subject="Reset Your Password",
        text=(
            f"Hello {name},\n\n"
            "We received a request to reset your password. If you didn't make "
            "this request, you can safely ignore this email.\n\n"
            f"Reset your password here:\n{reset_url}\n\n"
            "Note: This link will expire in 1 hour.\n"
        ),
    )
