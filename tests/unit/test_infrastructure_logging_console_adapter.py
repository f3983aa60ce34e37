"""Unit tests for ConsoleAdapter and the credential redaction processor."""

import json

import pytest
import structlog

from src.core.container import get_logger
from src.infrastructure.logging import ConsoleAdapter
from src.infrastructure.logging.console_adapter import redact_sensitive_values


@pytest.mark.unit
class TestRedaction:
    """Test redact_sensitive_values."""

    def test_credentials_redacted(self):
        event = {
            "event": "login",
            "password": "Passw0rd",
            "refresh_token": "eyJ...",
            "Authorization": "Bearer eyJ...",
            "client_secret": "s3cret",
            "set_cookie": "refreshToken=...",
        }

        result = redact_sensitive_values(None, "info", event)

        assert result["event"] == "login"
        for key in ("password", "refresh_token", "Authorization", "client_secret", "set_cookie"):
            assert result[key] == "[REDACTED]"

    def test_identifiers_and_counts_kept(self):
        event = {
            "event": "rotated",
            "token_id": 11,
            "token_kind": "setup",
            "revoked_count": 3,
            "user_id": 1,
        }

        result = redact_sensitive_values(None, "info", dict(event))

        assert result == event


@pytest.mark.unit
class TestConsoleAdapter:
    """Test ConsoleAdapter output."""

    @pytest.fixture(autouse=True)
    def restore_structlog(self):
        """ConsoleAdapter configures structlog globally; undo it after each test."""
        yield
        structlog.reset_defaults()
        get_logger.cache_clear()

    def test_json_output_redacts(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="DEBUG")

        logger.info("user_login_succeeded", user_id=1, access_token="eyJ.secret")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "user_login_succeeded"
        assert payload["user_id"] == 1
        assert payload["access_token"] == "[REDACTED]"
        assert payload["level"] == "info"

    def test_error_includes_exception_details(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="DEBUG")

        logger.error("email_failed", error=RuntimeError("SMTP down"))

        payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert payload["error_type"] == "RuntimeError"
        assert payload["error_message"] == "SMTP down"

    def test_bind_returns_new_adapter(self):
        logger = ConsoleAdapter(use_json=True)
        bound = logger.bind(request_id="abc")
        assert bound is not logger
        assert isinstance(bound, ConsoleAdapter)
