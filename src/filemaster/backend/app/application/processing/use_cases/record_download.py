from __future__ import annotations

from filemaster.backend.app.application.processing.dto import DownloadDTO, DownloadInputDTO
from filemaster.backend.app.domain.common.uow import UnitOfWork
from filemaster.backend.app.domain.files.interfaces import FileStorage
from filemaster.backend.app.domain.processing.errors import ProcessedFileNotFound


class RecordDownloadUseCase:
    def __init__(self, uow: UnitOfWork, output_storage: FileStorage) -> None:
        self._uow = uow
        self._output_storage = output_storage

    async def execute(self, dto: DownloadInputDTO) -> DownloadDTO:
        async with self._uow:
            processed = await self._uow.processed_file_repo.get_by_stored_name(dto.stored_name)
            if processed is None or processed.owner_id != dto.owner_id:
                raise ProcessedFileNotFound(dto.stored_name)

            try:
                path = self._output_storage.path_for(processed.stored_name)
            except FileNotFoundError:
                raise ProcessedFileNotFound(dto.stored_name) from None
            if not path.is_file():
                raise ProcessedFileNotFound(dto.stored_name)

            # one call = one increment, both applied atomically in storage
            await self._uow.processed_file_repo.increment_download_count(processed.id)
            await self._uow.user_repo.increment_downloads(dto.owner_id)

            return DownloadDTO(
                path=path,
                display_name=processed.display_name,
                content_type=processed.content_type,
                download_count=processed.download_count + 1,
            )
