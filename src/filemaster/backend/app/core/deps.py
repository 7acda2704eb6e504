from functools import lru_cache
from pathlib import Path
from typing import AsyncIterator, Mapping

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from filemaster.backend.app.core.config import settings
from filemaster.backend.app.application.processing.interfaces import Previewer, ToolExecutor
from filemaster.backend.app.domain.common.uow import UnitOfWork
from filemaster.backend.app.domain.files.interfaces import FileStorage
from filemaster.backend.app.domain.processing import Tool
from filemaster.backend.app.infrastructure.db.session import SessionLocal
from filemaster.backend.app.infrastructure.db.uow import SqlAlchemyUnitOfWork
from filemaster.backend.app.infrastructure.executors import UploadPreviewer, build_executors
from filemaster.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage

UPLOADS_PREFIX = "/uploads"
PROCESSED_PREFIX = "/processed"


async def get_session() -> AsyncIterator[AsyncSession]:
    async with SessionLocal() as session:
        yield session


async def get_uow(
    session: AsyncSession = Depends(get_session),
) -> AsyncIterator[UnitOfWork]:
    # the transaction lifecycle (commit/rollback) is handled by UnitOfWork
    uow = SqlAlchemyUnitOfWork(session)
    yield uow


@lru_cache
def get_upload_storage() -> FileStorage:
    """
    Temporary upload area. Everything here is request-scoped and removed after dispatch.
    """
    base_dir = Path(settings.UPLOAD_DIR)
    base_dir.mkdir(parents=True, exist_ok=True)
    return FilesystemFileStorage(base_dir, UPLOADS_PREFIX)


@lru_cache
def get_output_storage() -> FileStorage:
    """
    Persistent area for produced artifacts, served for download.
    Swap implementation here (FS / S3) without touching use cases.
    """
    base_dir = Path(settings.PROCESSED_DIR)
    base_dir.mkdir(parents=True, exist_ok=True)
    return FilesystemFileStorage(base_dir, PROCESSED_PREFIX)


def get_executors(
    output_storage: FileStorage = Depends(get_output_storage),
) -> Mapping[Tool, ToolExecutor]:
    return build_executors(output_storage)


def get_previewer(
    upload_storage: FileStorage = Depends(get_upload_storage),
) -> Previewer:
    return UploadPreviewer(upload_storage)
