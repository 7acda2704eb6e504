from typing import Annotated, Mapping

from fastapi import Depends

from filemaster.backend.app.application.processing.interfaces import Previewer, ToolExecutor
from filemaster.backend.app.application.processing.use_cases import ProcessFilesUseCase, RecordDownloadUseCase
from filemaster.backend.app.core import settings
from filemaster.backend.app.core.deps import get_executors, get_output_storage, get_previewer, get_upload_storage, get_uow
from filemaster.backend.app.domain.common.uow import UnitOfWork
from filemaster.backend.app.domain.files.interfaces import FileStorage
from filemaster.backend.app.domain.processing import Tool


async def get_process_files_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        upload_storage: Annotated[FileStorage, Depends(get_upload_storage)],
        output_storage: Annotated[FileStorage, Depends(get_output_storage)],
        executors: Annotated[Mapping[Tool, ToolExecutor], Depends(get_executors)],
        previewer: Annotated[Previewer, Depends(get_previewer)],
) -> ProcessFilesUseCase:
    return ProcessFilesUseCase(
        uow,
        upload_storage,
        output_storage,
        executors,
        previewer,
        max_upload_bytes=settings.MAX_UPLOAD_BYTES,
        default_compress_level=settings.DEFAULT_COMPRESS_LEVEL,
    )


async def get_record_download_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        output_storage: Annotated[FileStorage, Depends(get_output_storage)],
) -> RecordDownloadUseCase:
    return RecordDownloadUseCase(uow, output_storage)
