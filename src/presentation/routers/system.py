"""System router for non-versioned application endpoints.

Provides the health endpoint used by load balancers and container
orchestrators. It is intentionally lightweight and side-effect free.
"""

from fastapi import APIRouter

from src.core.container import get_database

system_router = APIRouter(tags=["System"])


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Always answers 200; the database field reports whether a trivial query
    succeeded.

    Returns:
        dict[str, str]: Health status indicator.
    """
    database_ok = await get_database().check_connection()
    return {
        "status": "healthy",
        "database": "connected" if database_ok else "unavailable",
    }
