"""LoggerProtocol definition for structured logging.

Every log call is a short event message plus key-value context. The
protocol is backend-agnostic; the console adapter renders it with structlog.

Security:
    - NEVER log passwords or token values (access, refresh, setup, reset)
    - Log ids (user_id, token_id) and outcomes instead

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("user_login_succeeded", user_id=user.id)

    request_logger = logger.bind(client_ip=ip)
    request_logger.warning("rate_limit_exceeded", rule="login")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message (failed logins, replays, limits)."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event message.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.
        """
        ...
