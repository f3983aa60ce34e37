"""Integration tests for BcryptPasswordService and OneTimeTokenService."""

from datetime import UTC, datetime, timedelta

import pytest

from src.domain.enums import OneTimeTokenKind
from src.infrastructure.security import BcryptPasswordService, OneTimeTokenService


@pytest.mark.integration
class TestBcryptPasswordService:
    """Test real bcrypt hashing (minimum cost for speed)."""

    @pytest.fixture
    def service(self):
        return BcryptPasswordService(cost_factor=10)

    def test_hash_and_verify(self, service):
        password_hash = service.hash_password("Passw0rdA")

        assert password_hash.startswith("$2b$10$")
        assert service.verify_password("Passw0rdA", password_hash) is True
        assert service.verify_password("Passw0rdB", password_hash) is False

    def test_hashes_are_salted(self, service):
        assert service.hash_password("Passw0rdA") != service.hash_password("Passw0rdA")

    def test_malformed_hash_is_false(self, service):
        assert service.verify_password("Passw0rdA", "not-a-bcrypt-hash") is False

    @pytest.mark.parametrize("cost", [9, 21])
    def test_cost_out_of_range(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)


@pytest.mark.integration
class TestOneTimeTokenService:
    """Test one-time token generation and expiry."""

    def test_token_is_64_hex_chars(self):
        token = OneTimeTokenService().generate_token()

        assert len(token) == 64
        int(token, 16)

    def test_tokens_unique(self):
        service = OneTimeTokenService()
        assert len({service.generate_token() for _ in range(50)}) == 50

    @pytest.mark.parametrize(
        ("kind", "ttl"),
        [
            (OneTimeTokenKind.SETUP, timedelta(hours=24)),
            (OneTimeTokenKind.RESET, timedelta(hours=1)),
        ],
    )
    def test_expiration_per_kind(self, kind, ttl):
        before = datetime.now(UTC)

        expires_at = OneTimeTokenService().calculate_expiration(kind)

        assert before + ttl <= expires_at <= datetime.now(UTC) + ttl
