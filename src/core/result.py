"""Result types for railway-oriented programming.

Operations that can fail in expected ways (bad credentials, consumed refresh
token, expired one-time token) return a Result instead of raising. Callers
pattern-match on the outcome, which keeps every failure branch explicit.

Usage:
    def find_record(token_id: int) -> Result[RefreshTokenRecord, LedgerError]:
        record = records.get(token_id)
        if record is None:
            return Failure(error=LedgerError(kind=LedgerErrorKind.NOT_FOUND, token_id=token_id))
        return Success(value=record)

    match find_record(42):
        case Success(value=record):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
