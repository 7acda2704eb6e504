from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from filemaster.backend.app.domain.processing import ProcessedFile
from filemaster.backend.app.domain.processing.errors import ProcessedFileNotFound
from filemaster.backend.app.infrastructure.db.models.processed_file import ProcessedFileModel
from filemaster.backend.app.infrastructure.processing.mappers import (
    processed_file_domain_to_model,
    processed_file_model_to_domain,
)


class SqlAlchemyProcessedFileRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, processed: ProcessedFile) -> ProcessedFile:
        model = processed_file_domain_to_model(processed)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return processed_file_model_to_domain(model)

    async def get_by_stored_name(self, stored_name: str) -> Optional[ProcessedFile]:
        stmt = (
            select(ProcessedFileModel)
            .where(ProcessedFileModel.stored_name == stored_name)
            .execution_options(populate_existing=True)
        )
        res = await self._session.execute(stmt)
        model = res.scalar_one_or_none()
        if model is None:
            return None
        return processed_file_model_to_domain(model)

    async def increment_download_count(self, processed_id: UUID) -> None:
        stmt = (
            update(ProcessedFileModel)
            .where(ProcessedFileModel.id == processed_id)
            .values(download_count=ProcessedFileModel.download_count + 1)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise ProcessedFileNotFound(str(processed_id))

