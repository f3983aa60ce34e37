"""Security headers middleware.

Adds browser hardening headers to every response. Content-Security-Policy
and Strict-Transport-Security are only sent in production (HTTPS).
"""

from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

BASE_SECURITY_HEADERS: dict[str, str] = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
}

PRODUCTION_SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": (
        "default-src 'self'; script-src 'self'; style-src 'self' 'unsafe-inline';"
    ),
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains; preload",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that sets security headers on every response.

    Attributes:
        _headers: Headers applied to each response.
    """

    def __init__(self, app: ASGIApp, *, production: bool = False) -> None:
        """Initialize security headers middleware.

        Args:
            app: The ASGI application to wrap.
            production: Also send CSP and HSTS.
        """
        super().__init__(app)
        self._headers = dict(BASE_SECURITY_HEADERS)
        if production:
            self._headers.update(PRODUCTION_SECURITY_HEADERS)

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        for name, value in self._headers.items():
            response.headers.setdefault(name, value)
        return response
