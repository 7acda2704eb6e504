from __future__ import annotations

import logging
from typing import Mapping, Optional

import anyio

from filemaster.backend.app.application.processing.cleanup import UploadCleanup
from filemaster.backend.app.application.processing.dto import (
    PreviewResultDTO,
    ProcessFilesInputDTO,
    ProcessResultDTO,
)
from filemaster.backend.app.application.processing.interfaces import Previewer, ToolExecutor
from filemaster.backend.app.application.processing.provenance import ProvenanceRecorder
from filemaster.backend.app.application.processing.state import DispatchRun, StateListener
from filemaster.backend.app.application.processing.stats import StatsAggregator
from filemaster.backend.app.application.processing.validator import (
    DEFAULT_COMPRESS_LEVEL,
    ValidatedRequest,
    validate_request,
)
from filemaster.backend.app.domain.common.uow import UnitOfWork
from filemaster.backend.app.domain.files.interfaces import FileStorage
from filemaster.backend.app.domain.processing import DispatchState, ExecutorOutput, Tool, UploadedFile
from filemaster.backend.app.domain.processing.errors import ProcessingFailure

logger = logging.getLogger(__name__)


class ProcessFilesUseCase:
    """
    Runs one request through validate -> ingest -> execute -> record -> clean up.
    Holds no state between calls.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        upload_storage: FileStorage,
        output_storage: FileStorage,
        executors: Mapping[Tool, ToolExecutor],
        previewer: Previewer,
        *,
        max_upload_bytes: int | None = None,
        default_compress_level: int = DEFAULT_COMPRESS_LEVEL,
        state_listener: Optional[StateListener] = None,
    ) -> None:
        self._uow = uow
        self._upload_storage = upload_storage
        self._output_storage = output_storage
        self._executors = executors
        self._previewer = previewer
        self._max_upload_bytes = max_upload_bytes
        self._default_compress_level = default_compress_level
        self._state_listener = state_listener

    async def execute(self, dto: ProcessFilesInputDTO) -> ProcessResultDTO | PreviewResultDTO:
        run = DispatchRun(self._state_listener)
        try:
            async with UploadCleanup(self._upload_storage, max_bytes=self._max_upload_bytes) as cleanup:
                try:
                    return await self._run(run, cleanup, dto)
                except BaseException:
                    run.fail()
                    raise
                finally:
                    run.advance(DispatchState.CLEANING_UP)
        finally:
            run.finish()

    async def _run(
        self,
        run: DispatchRun,
        cleanup: UploadCleanup,
        dto: ProcessFilesInputDTO,
    ) -> ProcessResultDTO | PreviewResultDTO:
        # 1) Validate on metadata only, before anything touches the disk
        request = validate_request(
            dto.tool,
            dto.files,
            dto.params,
            default_compress_level=self._default_compress_level,
        )
        run.advance(DispatchState.VALIDATED)

        # 2) Ingest uploads into scoped temporary storage
        uploads = await cleanup.ingest(dto.files)
        run.advance(DispatchState.EXECUTING)

        if request.tool is Tool.PREVIEW:
            return PreviewResultDTO(items=self._previewer.preview(uploads))

        # 3) Transform (codec work off the event loop)
        output = await self._transform(request, uploads, dto)
        original_size = sum(u.size for u in uploads)
        run.advance(DispatchState.RECORDING)

        # 4) Provenance + stats in one transaction
        recorded = False
        try:
            async with self._uow:
                processed = await ProvenanceRecorder(self._uow.processed_file_repo).record(
                    owner_id=dto.owner_id,
                    tool=request.tool,
                    original_size=original_size,
                    output=output,
                )
                await StatsAggregator(self._uow.user_repo).apply(
                    user_id=dto.owner_id,
                    original_size=original_size,
                    output_size=output.size,
                )
            recorded = True
        except Exception as e:
            logger.exception("Failed to record %s result for user %s", request.tool, dto.owner_id)
            raise ProcessingFailure() from e
        finally:
            if not recorded:
                await self._discard_output(output)

        logger.info(
            "User %s ran %s on %d file(s): %d -> %d bytes",
            dto.owner_id, request.tool, len(uploads), original_size, output.size,
        )
        return ProcessResultDTO(
            processed_file_id=processed.id,
            stored_name=processed.stored_name,
            display_name=processed.display_name,
            output_size=processed.output_size,
            original_size=processed.original_size,
            bytes_saved=processed.bytes_saved,
            compression_ratio=processed.compression_ratio,
            tool=request.tool,
        )

    async def _transform(
        self,
        request: ValidatedRequest,
        uploads: list[UploadedFile],
        dto: ProcessFilesInputDTO,
    ) -> ExecutorOutput:
        executor = self._executors[request.tool]
        try:
            return await anyio.to_thread.run_sync(executor.execute, uploads, request.params)
        except Exception as e:
            logger.exception("Tool %s failed for user %s", request.tool, dto.owner_id)
            raise ProcessingFailure() from e

    async def _discard_output(self, output: ExecutorOutput) -> None:
        with anyio.CancelScope(shield=True):
            try:
                await self._output_storage.delete(stored_name=output.stored_name)
            except Exception as e:
                logger.warning("Could not remove unrecorded output %s: %s", output.stored_name, e)
