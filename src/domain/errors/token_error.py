"""Token codec error types.

Signed token verification fails with one of four distinguishable kinds.
Handlers collapse these into caller-visible codes (INVALID_TOKEN,
TOKEN_EXPIRED, INVALID_REFRESH_TOKEN); the kind is kept for logging and for
the guard's expired-vs-invalid distinction.

Usage:
    from src.domain.errors import TokenError, TokenErrorKind

    match codec.verify_access(token):
        case Failure(error=TokenError(kind=TokenErrorKind.EXPIRED)):
            ...
"""

from dataclasses import dataclass
from enum import Enum


class TokenErrorKind(str, Enum):
    """Why a signed token was rejected."""

    EXPIRED = "expired"
    MALFORMED = "malformed"
    NOT_YET_VALID = "not_yet_valid"
    VERIFICATION_FAILED = "verification_failed"


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenError:
    """Signed token verification failure.

    Attributes:
        kind: Failure category.
        message: Human-readable message (safe to return to clients).
    """

    kind: TokenErrorKind
    message: str

    @property
    def is_expired(self) -> bool:
        """True for the EXPIRED kind."""
        return self.kind == TokenErrorKind.EXPIRED
