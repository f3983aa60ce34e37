"""Bootstrap admin seeder.

Creates one verified ADMIN account from ADMIN_EMAIL / ADMIN_PASSWORD so a
fresh deployment has someone who can verify registrations. Skipped when
either variable is unset. Idempotent: an existing account with that email
is left untouched.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.domain.validators import password_strength_errors, validate_email
from src.infrastructure.persistence.repositories import UserRepository
from src.infrastructure.security import BcryptPasswordService

logger = structlog.get_logger(__name__)


async def seed_admin_user(session: AsyncSession) -> None:
    """Seed the bootstrap admin. Idempotent via existence check.

    Args:
        session: Async database session.

    Raises:
        ValueError: If ADMIN_EMAIL is malformed or ADMIN_PASSWORD is weak.
    """
    if not settings.admin_email or not settings.admin_password:
        logger.info("admin_seed_skipped", reason="credentials_not_configured")
        return

    email = validate_email(settings.admin_email)
    violations = password_strength_errors(settings.admin_password)
    if violations:
        raise ValueError(f"ADMIN_PASSWORD is too weak: {'; '.join(violations)}")

    user_repo = UserRepository(session=session)
    if await user_repo.exists_by_email(email):
        logger.info("admin_seed_skipped", reason="already_exists")
        return

    match await user_repo.create(email=email, name=settings.admin_name):
        case Failure(error=error):
            # Lost a race with a concurrent seeder or registration
            logger.warning("admin_seed_conflict", error_code=error.code.value)
            return
        case Success(value=user):
            pass

    user.role = UserRole.ADMIN
    user.is_verified = True
    user.password_hash = BcryptPasswordService(
        cost_factor=settings.bcrypt_rounds
    ).hash_password(settings.admin_password)
    await user_repo.update(user)

    logger.info(
        "admin_seeded",
        user_id=user.id,
        admin_count=await user_repo.count_admins(),
    )
