"""Auth cookie helpers.

Refresh cookie attributes:
    HttpOnly, Path=/, Max-Age = refresh token lifetime,
    Secure + SameSite=strict in production, SameSite=lax otherwise,
    Domain=COOKIE_DOMAIN when configured.
"""

from fastapi import Response

from src.core.config import settings
from src.core.constants import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE


def set_refresh_cookie(response: Response, refresh_token: str) -> None:
    """Attach the refresh token cookie to a response."""
    response.set_cookie(
        key=REFRESH_TOKEN_COOKIE,
        value=refresh_token,
        max_age=int(settings.refresh_token_ttl.total_seconds()),
        path="/",
        domain=settings.cookie_domain,
        secure=settings.is_production,
        httponly=True,
        samesite="strict" if settings.is_production else "lax",
    )


def clear_auth_cookies(response: Response) -> None:
    """Expire both auth cookies (same path/domain they were set with)."""
    for name in (ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE):
        response.delete_cookie(
            key=name,
            path="/",
            domain=settings.cookie_domain,
            secure=settings.is_production,
            httponly=True,
            samesite="strict" if settings.is_production else "lax",
        )
