"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, TokenCodecProtocol
    from src.domain.protocols import UserRepository, RefreshTokenLedger
"""

# Service protocols
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.one_time_token_service_protocol import (
    OneTimeTokenServiceProtocol,
)
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.rate_limit_protocol import RateLimitProtocol
from src.domain.protocols.token_codec_protocol import TokenCodecProtocol

# Repository protocols
from src.domain.protocols.one_time_token_store import OneTimeTokenStore
from src.domain.protocols.refresh_token_ledger import RefreshTokenLedger
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "EmailProtocol",
    "LoggerProtocol",
    "OneTimeTokenServiceProtocol",
    "PasswordHashingProtocol",
    "RateLimitProtocol",
    "TokenCodecProtocol",
    # Repository protocols
    "OneTimeTokenStore",
    "RefreshTokenLedger",
    "UserRepository",
]
