"""API v1 routers.

Resources:
    /auth/*         - Registration, sessions, password setup/reset
    /admin/users/*  - Admin verification and user lookup

All routes are mounted under API_PREFIX (default "", so paths are exactly
/auth/* and /admin/*).
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.admin_users import router as admin_users_router
from src.presentation.routers.api.v1.auth import router as auth_router

v1_router = APIRouter(prefix=settings.api_prefix)
v1_router.include_router(auth_router)
v1_router.include_router(admin_users_router)

__all__ = [
    "v1_router",
]
