"""HTTP tests for the access token guards (real codec, stub user repository)."""

from typing import Annotated

import jwt
import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from freezegun import freeze_time

from src.application.dtos import UserProfile
from src.core.container import get_current_user_handler, get_user_repository
from src.core.result import Success
from src.domain.enums import UserRole
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user_optional,
    require_verified,
)
from src.presentation.routers.api.v1.errors import register_exception_handlers
from tests.api.conftest import stub_handler
from tests.conftest import create_user


@pytest.fixture
def profile_handler(override):
    user = create_user()
    return override(
        get_current_user_handler, stub_handler(Success(value=UserProfile.from_user(user)))
    )


@pytest.mark.api
class TestGetCurrentUser:
    """Test the authentication guard through GET /auth/me."""

    def test_missing_token(self, client, user_repo):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Access token required", "code": "NO_TOKEN"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_non_bearer_scheme_ignored(self, client, user_repo):
        response = client.get("/auth/me", headers={"Authorization": "Basic abc"})

        assert response.json()["code"] == "NO_TOKEN"

    def test_unreadable_token_rejected_by_expiry_precheck(self, client, user_repo):
        response = client.get("/auth/me", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_EXPIRED"

    def test_expired_token(self, client, user_repo, codec):
        with freeze_time("2026-01-01 12:00:00"):
            token = codec.issue_access(1, "ada@example.com")

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_EXPIRED"

    def test_wrong_signature(self, client, user_repo, codec):
        forged = jwt.encode(
            jwt.decode(
                codec.issue_access(1, "ada@example.com"),
                options={"verify_signature": False},
            ),
            "f" * 32,
            algorithm="HS256",
        )

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {forged}"})

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_refresh_token_not_accepted(self, client, user_repo, codec):
        token = codec.issue_refresh(1, "ada@example.com", token_id=1)

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.json()["code"] == "INVALID_TOKEN"

    def test_deleted_user(self, client, user_repo, bearer):
        user_repo.find_by_id.return_value = None

        response = client.get("/auth/me", headers=bearer(1))

        assert response.status_code == 401
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_valid_token(self, client, user_repo, bearer, profile_handler):
        user_repo.find_by_id.return_value = create_user()

        response = client.get("/auth/me", headers=bearer(1))

        assert response.status_code == 200

    def test_repository_failure_is_auth_error(self, client, user_repo, bearer):
        user_repo.find_by_id.side_effect = RuntimeError("db down")

        response = client.get("/auth/me", headers=bearer(1))

        assert response.status_code == 500
        assert response.json()["code"] == "AUTH_ERROR"


@pytest.mark.api
class TestRequireAdmin:
    """Test the admin guard (live role check)."""

    def test_user_role_forbidden(self, client, user_repo, bearer):
        user_repo.find_by_id.return_value = create_user(user_id=2)
        user_repo.get_role.return_value = UserRole.USER

        response = client.get("/admin/users/5", headers=bearer(2))

        assert response.status_code == 403
        assert response.json()["code"] == "INSUFFICIENT_PERMISSIONS"

    def test_stale_admin_claim_not_trusted(self, client, user_repo, bearer):
        """Test a token claiming ADMIN is rejected once the live role is USER."""
        user_repo.find_by_id.return_value = create_user(user_id=2)
        user_repo.get_role.return_value = UserRole.USER

        response = client.get("/admin/users/5", headers=bearer(2, role="ADMIN"))

        assert response.status_code == 403

    def test_admin_allowed(self, client, user_repo, bearer, profile_handler):
        user_repo.find_by_id.return_value = create_user(user_id=2, role=UserRole.ADMIN)
        user_repo.get_role.return_value = UserRole.ADMIN

        response = client.get("/admin/users/1", headers=bearer(2, role="USER"))

        assert response.status_code == 200
        assert profile_handler.handle.call_args.args[0].user_id == 1



@pytest.fixture
def guard_client(mock_user_repo):
    """Minimal app exposing the optional and verified-only guards."""
    guard_app = FastAPI()
    register_exception_handlers(guard_app)

    @guard_app.get("/verified-only")
    async def verified_only(
        user: Annotated[CurrentUser, Depends(require_verified)],
    ) -> dict[str, int]:
        return {"userId": user.user_id}

    @guard_app.get("/whoami")
    async def whoami(
        user: Annotated[CurrentUser | None, Depends(get_current_user_optional)],
    ) -> dict[str, object]:
        if user is None:
            return {"userId": None}
        return {"userId": user.user_id, "role": user.role, "isVerified": user.is_verified}

    guard_app.dependency_overrides[get_user_repository] = lambda: mock_user_repo
    return TestClient(guard_app, raise_server_exceptions=False)


@pytest.mark.api
class TestRequireVerified:
    """Test the verified-account guard (live check)."""

    def test_unverified_forbidden(self, guard_client, mock_user_repo, bearer):
        mock_user_repo.find_by_id.return_value = create_user(is_verified=False)

        response = guard_client.get("/verified-only", headers=bearer(1))

        assert response.status_code == 403
        assert response.json()["code"] == "EMAIL_NOT_VERIFIED"

    def test_verified_allowed(self, guard_client, mock_user_repo, bearer):
        mock_user_repo.find_by_id.return_value = create_user(is_verified=True)

        response = guard_client.get("/verified-only", headers=bearer(1))

        assert response.status_code == 200
        assert response.json() == {"userId": 1}


@pytest.mark.api
class TestGetCurrentUserOptional:
    """Test the optional identity guard."""

    def test_anonymous(self, guard_client):
        assert guard_client.get("/whoami").json() == {"userId": None}

    def test_invalid_token_is_anonymous(self, guard_client):
        response = guard_client.get("/whoami", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 200
        assert response.json() == {"userId": None}

    def test_valid_token_without_database(self, guard_client, mock_user_repo, bearer):
        response = guard_client.get("/whoami", headers=bearer(4, role="ADMIN"))

        assert response.json() == {"userId": 4, "role": "ADMIN", "isVerified": False}
        mock_user_repo.find_by_id.assert_not_awaited()
