"""Client metadata extracted from the request.

Client IP precedence: first X-Forwarded-For entry, then X-Real-IP, then the
socket peer, then "unknown". The forwarded headers are trusted as sent; the
service is expected to run behind a proxy that sets them.
"""

from fastapi import Request

from src.core.constants import UNKNOWN_CLIENT


def get_client_ip(request: Request) -> str:
    """Best-effort client IP for rate limit keys and session records."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_CLIENT


def get_user_agent(request: Request) -> str:
    """User-Agent header, or "unknown"."""
    return request.headers.get("user-agent") or UNKNOWN_CLIENT
