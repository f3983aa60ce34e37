"""Unit tests for domain entities and value objects.

Tests cover:
- User lifecycle predicates (has_password, can_login, is_admin)
- One-time token slot expiry
- Refresh token record liveness
- Rate limit rule validation and key building
"""

from datetime import UTC, datetime, timedelta

import pytest

from src.domain.entities import RefreshTokenRecord, User
from src.domain.enums import OneTimeTokenKind, UserRole
from src.domain.value_objects import RateLimitRule


@pytest.mark.unit
class TestUserEntity:
    """Test User business rules."""

    def test_new_user_cannot_login(self):
        """Test a registered user has no password and is unverified."""
        user = User(id=1, email="a@x.com", name="Ada")
        assert not user.has_password()
        assert not user.is_verified
        assert not user.can_login()
        assert user.role == UserRole.USER

    def test_verified_user_without_password_cannot_login(self):
        user = User(id=1, email="a@x.com", name="Ada", is_verified=True)
        assert not user.can_login()

    def test_verified_user_with_password_can_login(self):
        user = User(
            id=1, email="a@x.com", name="Ada", is_verified=True, password_hash="$2b$..."
        )
        assert user.can_login()

    def test_is_admin(self):
        assert User(id=1, email="a@x.com", name="Ada", role=UserRole.ADMIN).is_admin()
        assert not User(id=2, email="b@x.com", name="Bob").is_admin()

    def test_token_slots_are_independent(self):
        """Test setup and reset expiries are read from their own slots."""
        now = datetime.now(UTC)
        user = User(
            id=1,
            email="a@x.com",
            name="Ada",
            password_setup_token_expires_at=now + timedelta(hours=24),
            password_reset_token_expires_at=now - timedelta(minutes=1),
        )
        assert not user.is_token_expired(OneTimeTokenKind.SETUP, now)
        assert user.is_token_expired(OneTimeTokenKind.RESET, now)

    def test_empty_slot_is_expired(self):
        user = User(id=1, email="a@x.com", name="Ada")
        assert user.is_token_expired(OneTimeTokenKind.SETUP)

    def test_expiry_boundary_is_expired(self):
        """Test a token is unusable exactly at its expiry instant."""
        now = datetime.now(UTC)
        user = User(
            id=1, email="a@x.com", name="Ada", password_reset_token_expires_at=now
        )
        assert user.is_token_expired(OneTimeTokenKind.RESET, now)


@pytest.mark.unit
class TestRefreshTokenRecord:
    """Test ledger record liveness."""

    def test_live_record(self):
        record = RefreshTokenRecord(
            id=1, user_id=1, expires_at=datetime.now(UTC) + timedelta(days=7)
        )
        assert record.is_live()

    def test_revoked_record_not_live(self):
        record = RefreshTokenRecord(
            id=1,
            user_id=1,
            expires_at=datetime.now(UTC) + timedelta(days=7),
            revoked=True,
        )
        assert not record.is_live()

    def test_expired_record_not_live(self):
        record = RefreshTokenRecord(
            id=1, user_id=1, expires_at=datetime.now(UTC) - timedelta(seconds=1)
        )
        assert record.is_expired()
        assert not record.is_live()


@pytest.mark.unit
class TestRateLimitRule:
    """Test fixed-window rule value object."""

    def test_key_joins_parts(self):
        rule = RateLimitRule(name="login", max_requests=5, window_seconds=900)
        assert rule.key("203.0.113.7", "a@x.com") == "login:203.0.113.7:a@x.com"

    def test_key_without_parts(self):
        rule = RateLimitRule(name="refresh", max_requests=10, window_seconds=60)
        assert rule.key() == "refresh"

    @pytest.mark.parametrize(
        ("max_requests", "window_seconds"), [(0, 60), (-1, 60), (5, 0)]
    )
    def test_invalid_rule_rejected(self, max_requests, window_seconds):
        with pytest.raises(ValueError, match="must be positive"):
            RateLimitRule(
                name="x", max_requests=max_requests, window_seconds=window_seconds
            )
