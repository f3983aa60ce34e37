"""Stub email service (development/testing).

Implements EmailProtocol without a mail transport: every message is
rendered, appended to an in-memory outbox and logged. The log event carries
the recipient and template but never the link, since the link contains a
one-time token.

Usage:
    >>> email_service = StubEmailService(logger=get_logger())
    >>> await email_service.send_password_setup_email(
    ...     to_email="user@example.com",
    ...     name="Ada",
    ...     setup_url="http://localhost:3000/setup-password?token=abc",
    ... )
    >>> email_service.outbox[-1].url
    'http://localhost:3000/setup-password?token=abc'
"""

from dataclasses import dataclass

from src.domain.protocols import LoggerProtocol
from src.infrastructure.email.templates import (
    password_reset_email,
    password_setup_email,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class SentEmail:
    """A message captured by the stub."""

    template: str
    to_email: str
    subject: str
    text: str
    url: str


class StubEmailService:
    """Email service that records messages instead of delivering them.

    Attributes:
        outbox: Messages "sent" so far, oldest first.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self.outbox: list[SentEmail] = []

    async def send_password_setup_email(
        self,
        to_email: str,
        name: str,
        setup_url: str,
    ) -> None:
        """Record the password setup email."""
        rendered = password_setup_email(name, setup_url)
        self._record("password_setup", to_email, rendered.subject, rendered.text, setup_url)

    async def send_password_reset_email(
        self,
        to_email: str,
        name: str,
        reset_url: str,
    ) -> None:
        """Record the password reset email."""
        rendered = password_reset_email(name, reset_url)
        self._record("password_reset", to_email, rendered.subject, rendered.text, reset_url)

    def _record(
        self, template: str, to_email: str, subject: str, text: str, url: str
    ) -> None:
        self.outbox.append(
            SentEmail(
                template=template,
                to_email=to_email,
                subject=subject,
                text=text,
                url=url,
            )
        )
        self._logger.info(
            "email_would_be_sent",
            template=template,
            to_email=to_email,
            subject=subject,
        )
