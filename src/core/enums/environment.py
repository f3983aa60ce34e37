"""Application environment types.

Used by Settings to determine environment-specific behavior (cookie
security attributes, log rendering, security headers).

Environments:
- DEVELOPMENT: Local development, human-readable logs, lax cookies
- TESTING: Automated test execution with isolated database
- CI: Continuous integration environment
- PRODUCTION: Secure cookies, HSTS/CSP headers, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
