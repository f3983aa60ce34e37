"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import LedgerError, LedgerErrorKind, TokenError
"""

from src.domain.errors.ledger_error import LedgerError, LedgerErrorKind
from src.domain.errors.one_time_token_error import (
    OneTimeTokenError,
    OneTimeTokenErrorKind,
)
from src.domain.errors.rate_limit_error import RateLimitError
from src.domain.errors.token_error import TokenError, TokenErrorKind

__all__ = [
    "LedgerError",
    "LedgerErrorKind",
    "OneTimeTokenError",
    "OneTimeTokenErrorKind",
    "RateLimitError",
    "TokenError",
    "TokenErrorKind",
]
