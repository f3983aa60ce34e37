"""Pytest configuration for async testing.

This configuration ensures:
1. Required settings exist before `src.core.config` is first imported
2. Integration tests get a fresh SQLite database file per test
3. App-scoped singletons (rate limiter, email outbox) are reset between tests
4. Shared mock fixtures for unit tests

Environment:
    Signing secrets, a throwaway SQLite DATABASE_URL, the minimum bcrypt
    cost, a zero login failure delay and no forgot-password floor are set
    with setdefault, so a developer's own environment still wins.
"""

import os
import tempfile

_TEST_DB_DIR = tempfile.mkdtemp(prefix="auth-api-tests-")

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault(
    "ACCESS_TOKEN_SECRET", "test-access-secret-0123456789abcdef0123456789abcdef"
)
os.environ.setdefault(
    "REFRESH_TOKEN_SECRET", "test-refresh-secret-fedcba9876543210fedcba9876543210"
)
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB_DIR}/app.db")
os.environ.setdefault("BCRYPT_ROUNDS", "10")
os.environ.setdefault("LOGIN_FAILURE_DELAY_MS", "0")
os.environ.setdefault("PASSWORD_RESET_MIN_RESPONSE_MS", "0")
os.environ.setdefault("RATE_LIMIT_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import UTC, datetime  # noqa: E402
from unittest.mock import AsyncMock, Mock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.domain.entities import User  # noqa: E402
from src.domain.enums import UserRole  # noqa: E402

# Valid under the password rules (8+ chars, upper, lower, digit)
STRONG_PASSWORD = "Passw0rdA"


def create_user(
    user_id: int = 1,
    email: str = "ada@example.com",
    name: str = "Ada Lovelace",
    password_hash: str | None = "hashed_password",
    role: UserRole = UserRole.USER,
    is_verified: bool = True,
) -> User:
    """Helper to create a domain User for testing.

    Usage:
        # Verified user with a password (can log in)
        user = create_user()

        # Freshly registered user
        user = create_user(is_verified=False, password_hash=None)
    """
    now = datetime.now(UTC)
    return User(
        id=user_id,
        email=email,
        name=name,
        password_hash=password_hash,
        role=role,
        is_verified=is_verified,
        created_at=now,
        updated_at=now,
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")
    config.addinivalue_line("markers", "smoke: End-to-end smoke tests")


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a fresh Database on its own SQLite file.

    Tables are created from the models; the file is discarded with tmp_path.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                repo = UserRepository(session=session)
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path}/test.db")
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture(autouse=True)
def reset_app_singletons():
    """Clear process-wide state shared through the container.

    The in-memory rate limiter and the stub email outbox are lru_cache
    singletons; without this, counters and messages leak between tests.
    """
    from src.core.container import get_email_service, get_rate_limit

    get_rate_limit.cache_clear()
    get_email_service.cache_clear()
    yield
    get_rate_limit.cache_clear()
    get_email_service.cache_clear()


# =============================================================================
# Reusable Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Usage:
        def test_something(mock_logger):
            handler = MyHandler(logger=mock_logger)
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    return logger


@pytest.fixture
def mock_user_repo():
    """AsyncMock UserRepository (no users by default)."""
    repo = AsyncMock()
    repo.find_by_id.return_value = None
    repo.find_by_email.return_value = None
    return repo


@pytest.fixture
def mock_ledger():
    """AsyncMock refresh token ledger."""
    return AsyncMock()


@pytest.fixture
def mock_token_store():
    """AsyncMock one-time token store."""
    return AsyncMock()


@pytest.fixture
def mock_email_service():
    """AsyncMock email service (delivery succeeds by default)."""
    service = AsyncMock()
    service.send_password_setup_email.return_value = None
    service.send_password_reset_email.return_value = None
    return service
