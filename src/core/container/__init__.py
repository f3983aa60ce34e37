"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_login_user_handler, ...

The container is organized into modules:
- infrastructure: Core services (db, logging, security, email, rate limit)
- repositories: Repository factories
- auth_handlers: Authentication handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_dummy_password_hash,
    get_email_service,
    get_logger,
    get_one_time_token_service,
    get_password_service,
    get_rate_limit,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_user_repository,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_current_user_handler,
    get_login_user_handler,
    get_logout_all_sessions_handler,
    get_logout_user_handler,
    get_refresh_token_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_reset_password_handler,
    get_setup_password_handler,
    get_verify_user_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_dummy_password_hash",
    "get_email_service",
    "get_logger",
    "get_one_time_token_service",
    "get_password_service",
    "get_rate_limit",
    "get_token_service",
    # Repositories
    "get_user_repository",
    # Auth handlers
    "get_current_user_handler",
    "get_login_user_handler",
    "get_logout_all_sessions_handler",
    "get_logout_user_handler",
    "get_refresh_token_handler",
    "get_register_user_handler",
    "get_request_password_reset_handler",
    "get_reset_password_handler",
    "get_setup_password_handler",
    "get_verify_user_handler",
]
