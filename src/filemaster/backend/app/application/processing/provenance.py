from __future__ import annotations

from uuid import UUID

from filemaster.backend.app.domain.processing import ExecutorOutput, ProcessedFile, ProcessedFileRepository, Tool


class ProvenanceRecorder:
    def __init__(self, repo: ProcessedFileRepository) -> None:
        self._repo = repo

    async def record(
        self,
        *,
        owner_id: UUID,
        tool: Tool,
        original_size: int,
        output: ExecutorOutput,
    ) -> ProcessedFile:
        processed = ProcessedFile.record(
            owner_id=owner_id,
            tool=tool,
            stored_name=output.stored_name,
            display_name=output.display_name,
            original_size=original_size,
            output_size=output.size,
            content_type=output.content_type,
        )
        return await self._repo.add(processed)
