from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from filemaster.backend.app.infrastructure.db.models.processed_file import ProcessedFileModel


async def count_records(session: AsyncSession, owner_id: UUID) -> int:
    stmt = select(func.count()).select_from(ProcessedFileModel).where(ProcessedFileModel.owner_id == owner_id)
    res = await session.execute(stmt)
    return int(res.scalar_one())
