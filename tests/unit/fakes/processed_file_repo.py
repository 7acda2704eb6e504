from __future__ import annotations

from dataclasses import replace
from typing import Optional
from uuid import UUID

import anyio

from filemaster.backend.app.domain.processing import ProcessedFile
from filemaster.backend.app.domain.processing.errors import ProcessedFileNotFound


class FakeProcessedFileRepository:
    def __init__(self) -> None:
        self._by_id: dict[UUID, ProcessedFile] = {}
        self.fail_on_add: Exception | None = None
        self.add_delay: float | None = None

    async def add(self, processed: ProcessedFile) -> ProcessedFile:
        if self.add_delay is not None:
            await anyio.sleep(self.add_delay)
        if self.fail_on_add is not None:
            raise self.fail_on_add
        self._by_id[processed.id] = processed
        return processed

    async def get_by_stored_name(self, stored_name: str) -> Optional[ProcessedFile]:
        for processed in self._by_id.values():
            if processed.stored_name == stored_name:
                return processed
        return None

    async def increment_download_count(self, processed_id: UUID) -> None:
        processed = self._by_id.get(processed_id)
        if processed is None:
            raise ProcessedFileNotFound(str(processed_id))
        self._by_id[processed_id] = replace(processed, download_count=processed.download_count + 1)

    # ---------- test helpers ----------

    def all(self) -> list[ProcessedFile]:
        return list(self._by_id.values())

    def count_by_owner(self, owner_id: UUID) -> int:
        return sum(1 for p in self._by_id.values() if p.owner_id == owner_id)
