from __future__ import annotations

from typing import Optional, Protocol
from uuid import UUID

from .entities import ProcessedFile


class ProcessedFileRepository(Protocol):
    async def add(self, processed: ProcessedFile) -> ProcessedFile:
        ...

    async def get_by_stored_name(self, stored_name: str) -> Optional[ProcessedFile]:
        ...

    async def increment_download_count(self, processed_id: UUID) -> None:
        ...
