"""Database seeding package.

Provides idempotent seeders that run automatically after Alembic migrations.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from seeds.admin_seeder import seed_admin_user

logger = structlog.get_logger(__name__)


async def run_all_seeders(session: AsyncSession) -> None:
    """Run all database seeders. Called after Alembic migrations.

    All seeders are idempotent - safe to run on every migration.

    Args:
        session: Async database session.
    """
    logger.info("seeding_started")

    await seed_admin_user(session)

    logger.info("seeding_completed")


__all__ = ["run_all_seeders", "seed_admin_user"]
