"""One-time token service protocol.

Generates the opaque token strings and their expiry times. Persisting them
is the job of OneTimeTokenStore.
"""

from datetime import datetime
from typing import Protocol

from src.domain.enums import OneTimeTokenKind


class OneTimeTokenServiceProtocol(Protocol):
    """Token generation for password setup / reset links."""

    def generate_token(self) -> str:
        """Generate a cryptographically random 64-character hex token."""
        ...

    def calculate_expiration(self, kind: OneTimeTokenKind) -> datetime:
        """Absolute expiry for a token of the given kind (24h setup, 1h reset)."""
        ...
