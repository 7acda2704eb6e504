from __future__ import annotations

from typing import Sequence

from filemaster.backend.app.domain.files.interfaces import FileStorage
from filemaster.backend.app.domain.processing import PreviewItem, UploadedFile


class UploadPreviewer:
    """Reflects upload metadata back to the caller; writes nothing."""

    def __init__(self, upload_storage: FileStorage) -> None:
        self._upload_storage = upload_storage

    def preview(self, files: Sequence[UploadedFile]) -> list[PreviewItem]:
        return [
            PreviewItem(
                display_name=f.name,
                size=f.size,
                content_type=f.content_type,
                transient_reference=self._upload_storage.reference_for(f.stored_name or ""),
            )
            for f in files
        ]
