"""Fixtures for HTTP tests through the FastAPI app.

Handlers are replaced with stubs through `app.dependency_overrides`, so
these tests cover routing, guards, cookies, rate limits and error shapes
without a database.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from src.core.container import get_token_service, get_user_repository
from src.main import app


def stub_handler(result=None) -> Mock:
    """Handler stand-in whose `handle` resolves to `result`."""
    handler = Mock()
    handler.handle = AsyncMock(return_value=result)
    return handler


@pytest.fixture
def client():
    """TestClient with dependency overrides cleared afterwards."""
    test_client = TestClient(app, raise_server_exceptions=False)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def override():
    """Register a dependency override that returns a fixed object.

    Usage:
        def test_login(client, override):
            override(get_login_user_handler, stub_handler(Success(value=tokens)))
    """

    def _override(dependency, value):
        app.dependency_overrides[dependency] = lambda: value
        return value

    return _override


@pytest.fixture
def user_repo(override, mock_user_repo):
    """Stub UserRepository behind the auth guards."""
    return override(get_user_repository, mock_user_repo)


@pytest.fixture
def codec():
    """The real access token codec the guards use."""
    return get_token_service()


@pytest.fixture
def bearer(codec):
    """Build an Authorization header for a user id."""

    def _bearer(user_id: int = 1, email: str = "ada@example.com", role: str = "USER"):
        return {"Authorization": f"Bearer {codec.issue_access(user_id, email, role)}"}

    return _bearer
