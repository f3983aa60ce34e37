# mypy: disable-error-code="arg-type"
"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL / SQLite)
- Password hashing (bcrypt)
- Token codec (JWT, two secrets)
- One-time tokens (password setup / reset)
- Email (stub)
- Rate limiting (fixed window, memory or Redis)
- Logging (console)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols import (
        EmailProtocol,
        LoggerProtocol,
        OneTimeTokenServiceProtocol,
        PasswordHashingProtocol,
        RateLimitProtocol,
    )
    from src.infrastructure.security import JWTTokenCodec


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor
    (BCRYPT_ROUNDS, default 12 = ~250ms per hash).
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_dummy_password_hash() -> str:
    """Hash verified by login when the email is unknown.

    Computed once per process with the configured cost factor, so failed
    logins for unknown and known emails cost the same bcrypt work.
    """
    return get_password_service().hash_password("timing-uniformity-placeholder")


@lru_cache()
def get_token_service() -> "JWTTokenCodec":
    """Get JWT token codec singleton (app-scoped).

    Access and refresh tokens use independent secrets and lifetimes; both
    carry the configured issuer and audience.
    """
    from src.infrastructure.security import JWTTokenCodec

    return JWTTokenCodec(
        access_secret=settings.access_token_secret,
        refresh_secret=settings.refresh_token_secret,
        access_ttl=settings.access_token_ttl,
        refresh_ttl=settings.refresh_token_ttl,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )


@lru_cache()
def get_one_time_token_service() -> "OneTimeTokenServiceProtocol":
    """Get one-time token service singleton (24h setup, 1h reset)."""
    from src.infrastructure.security import OneTimeTokenService

    return OneTimeTokenService()


# ============================================================================
# Email Service (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Every environment uses StubEmailService (logs instead of sending).
    A real delivery adapter plugs in here behind EmailProtocol.
    """
    from src.infrastructure.email import StubEmailService

    return StubEmailService(logger=get_logger())


# ============================================================================
# Rate Limiting (Application-Scoped)
# ============================================================================


@lru_cache()
def get_rate_limit() -> "RateLimitProtocol":
    """Get rate limiter singleton (app-scoped).

    Backend selected by RATE_LIMIT_BACKEND:
        - 'memory': InMemoryRateLimitStorage (per process, default)
        - 'redis': RedisRateLimitStorage (shared across instances)

    Fail-Open Design:
        The Redis backend allows requests when Redis is unreachable. Rate
        limiting should NEVER cause denial of service.
    """
    if settings.rate_limit_backend == "redis":
        from redis.asyncio import ConnectionPool, Redis

        from src.infrastructure.rate_limit import RedisRateLimitStorage

        pool = ConnectionPool.from_url(
            settings.redis_url,
            max_connections=20,
            decode_responses=False,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
        )
        return RedisRateLimitStorage(
            redis_client=Redis(connection_pool=pool),
            logger=get_logger(),
        )

    from src.infrastructure.rate_limit import InMemoryRateLimitStorage

    return InMemoryRateLimitStorage()


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
