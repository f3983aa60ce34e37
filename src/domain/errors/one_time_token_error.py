"""One-time token (password setup / reset) error types."""

from dataclasses import dataclass
from enum import Enum

from src.domain.enums import OneTimeTokenKind


class OneTimeTokenErrorKind(str, Enum):
    """Why a one-time token could not be consumed."""

    NOT_FOUND = "not_found"
    EXPIRED = "expired"


@dataclass(frozen=True, slots=True, kw_only=True)
class OneTimeTokenError:
    """One-time token consumption failure.

    Attributes:
        kind: Failure category.
        token_kind: Slot the token was presented for.
    """

    kind: OneTimeTokenErrorKind
    token_kind: OneTimeTokenKind
