from __future__ import annotations

import logging
from types import TracebackType
from typing import Optional, Sequence

import anyio

from filemaster.backend.app.domain.files.errors import FailedToSaveFile
from filemaster.backend.app.domain.files.interfaces import FileStorage
from filemaster.backend.app.domain.processing import UploadedFile

logger = logging.getLogger(__name__)


class UploadCleanup:
    """
    Scopes the temporary copies of a request's uploads.

    Every file written through ``ingest`` is deleted when the ``async with`` block
    exits, whatever the outcome. Release runs shielded from cancellation so a timed-out
    request still removes its files. Failed deletions are logged and swallowed.
    """

    def __init__(self, storage: FileStorage, *, max_bytes: int | None = None) -> None:
        self._storage = storage
        self._max_bytes = max_bytes
        self._stored_names: list[str] = []

    @property
    def stored_names(self) -> list[str]:
        return list(self._stored_names)

    async def __aenter__(self) -> "UploadCleanup":
        return self

    async def __aexit__(
            self,
            exc_type: Optional[type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
    ) -> None:
        with anyio.CancelScope(shield=True):
            await self.release()

    async def ingest(self, files: Sequence[UploadedFile]) -> list[UploadedFile]:
        ingested: list[UploadedFile] = []
        for upload in files:
            if upload.is_ingested:
                ingested.append(upload)
                continue
            if upload.source is None:
                raise ValueError(f"Upload '{upload.name}' has no byte source")
            try:
                info = await self._storage.save_stream(
                    filename=upload.name,
                    source=upload.source,
                    content_type=upload.content_type,
                    max_bytes=self._max_bytes,
                )
            except OSError as e:
                logger.error("Could not store upload %s: %s", upload.name, e)
                raise FailedToSaveFile("Could not save uploaded file") from e
            self._stored_names.append(info.stored_filename)
            ingested.append(
                upload.ingested(location=info.path, stored_name=info.stored_filename, size=info.size_bytes)
            )
        return ingested

    async def release(self) -> None:
        while self._stored_names:
            stored_name = self._stored_names.pop()
            try:
                await self._storage.delete(stored_name=stored_name)
            except Exception as e:
                logger.warning("Cleanup error for upload %s: %s", stored_name, e)
