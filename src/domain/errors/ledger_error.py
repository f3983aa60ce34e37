"""Refresh token ledger error types.

Each kind maps to a distinct caller-visible code (TOKEN_NOT_FOUND,
TOKEN_REVOKED, TOKEN_EXPIRED) at the handler boundary.
"""

from dataclasses import dataclass
from enum import Enum


class LedgerErrorKind(str, Enum):
    """Why a refresh token record could not be rotated."""

    NOT_FOUND = "not_found"  # already consumed, never existed, or foreign
    REVOKED = "revoked"  # replay signal
    EXPIRED = "expired"  # record removed as a side effect


@dataclass(frozen=True, slots=True, kw_only=True)
class LedgerError:
    """Refresh token ledger failure.

    Attributes:
        kind: Failure category.
        token_id: Record id presented by the caller.
    """

    kind: LedgerErrorKind
    token_id: int
