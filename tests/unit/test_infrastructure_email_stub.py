"""Unit tests for StubEmailService."""

import pytest

from src.infrastructure.email import StubEmailService


@pytest.mark.unit
class TestStubEmailService:
    """Test the recording email stub."""

    async def test_setup_email_recorded(self, mock_logger):
        service = StubEmailService(logger=mock_logger)
        url = "http://localhost:3000/setup-password?token=" + "a" * 64

        await service.send_password_setup_email(
            to_email="ada@example.com", name="Ada", setup_url=url
        )

        assert len(service.outbox) == 1
        sent = service.outbox[0]
        assert sent.template == "password_setup"
        assert sent.to_email == "ada@example.com"
        assert sent.url == url
        assert url in sent.text

    async def test_reset_email_recorded(self, mock_logger):
        service = StubEmailService(logger=mock_logger)
        url = "http://localhost:3000/reset-password?token=" + "b" * 64

        await service.send_password_reset_email(
            to_email="ada@example.com", name="Ada", reset_url=url
        )

        assert service.outbox[-1].template == "password_reset"
        assert service.outbox[-1].url == url

    async def test_log_event_omits_link(self, mock_logger):
        service = StubEmailService(logger=mock_logger)

        await service.send_password_setup_email(
            to_email="ada@example.com",
            name="Ada",
            setup_url="http://localhost:3000/setup-password?token=secret",
        )

        mock_logger.info.assert_called_once()
        _, kwargs = mock_logger.info.call_args
        assert "secret" not in " ".join(str(v) for v in kwargs.values())
