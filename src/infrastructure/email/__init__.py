"""Email service implementations.

- StubEmailService: records and logs messages (development/testing)
"""

from src.infrastructure.email.stub_email_service import SentEmail, StubEmailService

__all__ = [
    "SentEmail",
    "StubEmailService",
]
