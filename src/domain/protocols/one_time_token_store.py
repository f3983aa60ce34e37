"""OneTimeTokenStore protocol for password setup / reset tokens.

Tokens are opaque random strings stored in a per-kind slot on the user row.
A token is usable exactly once and only before its absolute expiry.
"""

from datetime import datetime
from typing import Protocol

from src.core.result import Result
from src.domain.enums import OneTimeTokenKind
from src.domain.errors import OneTimeTokenError


class OneTimeTokenStore(Protocol):
    """One-time token store protocol (port)."""

    async def store(
        self,
        kind: OneTimeTokenKind,
        user_id: int,
        token: str,
        expires_at: datetime,
    ) -> None:
        """Write a token and its expiry into the user's slot.

        Replaces any token previously outstanding in the same slot.
        """
        ...

    async def find_owner(
        self, kind: OneTimeTokenKind, token: str
    ) -> Result[int, OneTimeTokenError]:
        """Look up the user holding a live token without spending it.

        Returns:
            Success(user_id), or Failure with NOT_FOUND or EXPIRED (slot
            cleared as a side effect).
        """
        ...

    async def consume(
        self, kind: OneTimeTokenKind, token: str
    ) -> Result[int, OneTimeTokenError]:
        """Consume a token and clear its slot.

        Returns:
            Success(user_id), or Failure with NOT_FOUND (unknown token or a
            lost race) or EXPIRED (slot cleared as a side effect).
        """
        ...

    async def clear(self, kind: OneTimeTokenKind, user_id: int) -> None:
        """Clear a slot unconditionally."""
        ...
