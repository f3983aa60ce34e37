"""External-facing routers that are not part of the auth API (health)."""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
