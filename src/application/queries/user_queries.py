"""User queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetCurrentUser:
    """Fetch the safe profile of a user.

    Used by GET /auth/me (the authenticated user) and by the admin user
    lookup.

    Attributes:
        user_id: User to fetch.
    """

    user_id: int
