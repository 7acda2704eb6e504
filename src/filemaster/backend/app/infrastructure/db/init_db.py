import logging
from uuid import UUID

from sqlalchemy import select, text

from filemaster.backend.app.domain.common import utcnow
from filemaster.backend.app.infrastructure.db.base import Base
from filemaster.backend.app.infrastructure.db.engine import engine
from filemaster.backend.app.infrastructure.db.models.processed_file import ProcessedFileModel  # noqa: F401
from filemaster.backend.app.infrastructure.db.session import SessionLocal
from filemaster.backend.app.infrastructure.users.models import UserModel

logger = logging.getLogger(__name__)


async def init_db() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ensure_user(user_id: UUID, *, email: str, name: str) -> None:
    """Creates a password-less user row if missing. Used for the SKIP_AUTH dev user."""
    async with SessionLocal() as session:
        existing = await session.execute(select(UserModel.id).where(UserModel.id == user_id))
        if existing.scalar_one_or_none() is not None:
            return
        session.add(
            UserModel(
                id=user_id,
                email=email,
                name=name,
                hashed_password="!",
                is_active=True,
                created_at=utcnow(),
            )
        )
        await session.commit()
        logger.info("Created dev user %s", email)


async def check_db() -> bool:
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning("Database health check failed: %s", e)
        return False
