from __future__ import annotations

import time
import zipfile
from pathlib import PurePosixPath
from typing import Sequence

from filemaster.backend.app.domain.files.interfaces import FileStorage
from filemaster.backend.app.domain.processing import ExecutionParams, ExecutorOutput, UploadedFile
from filemaster.backend.app.domain.processing.enums import ZIP_CONTENT_TYPE
from filemaster.backend.app.infrastructure.executors.base import partial_output, require_location


def entry_name(filename: str) -> str:
    # client names may carry directories; entries must stay at the archive root
    name = PurePosixPath(filename.replace("\\", "/")).name
    return name if name not in ("", "..") else "file"


class ZipCompressor:
    """
    Streams every input into one DEFLATE archive.
    ``ZipFile.write`` copies from disk in chunks, so memory stays flat for large uploads.
    """

    def __init__(self, output_storage: FileStorage) -> None:
        self._output_storage = output_storage

    def execute(self, files: Sequence[UploadedFile], params: ExecutionParams) -> ExecutorOutput:
        out_path = self._output_storage.allocate(suffix="compressed.zip")

        with partial_output(out_path):
            with zipfile.ZipFile(
                out_path,
                mode="w",
                compression=zipfile.ZIP_DEFLATED,
                compresslevel=params.compress_level,
            ) as archive:
                for upload in files:
                    archive.write(require_location(upload), arcname=entry_name(upload.name))

        if len(files) == 1:
            display_name = f"{files[0].stem}_compressed.zip"
        else:
            display_name = f"batch_{int(time.time() * 1000)}.zip"

        return ExecutorOutput(
            location=out_path,
            size=out_path.stat().st_size,
            content_type=ZIP_CONTENT_TYPE,
            display_name=display_name,
        )
