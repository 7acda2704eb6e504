from __future__ import annotations

import logging
from typing import Sequence

from pypdf import PdfReader, PdfWriter

from filemaster.backend.app.domain.files.interfaces import FileStorage
from filemaster.backend.app.domain.processing import ExecutionParams, ExecutorOutput, UploadedFile
from filemaster.backend.app.domain.processing.enums import PDF_CONTENT_TYPE
from filemaster.backend.app.infrastructure.executors.base import partial_output, require_location

logger = logging.getLogger(__name__)


def resolve_merge_order(files: Sequence[UploadedFile], order: Sequence[str] | None) -> list[UploadedFile]:
    """
    Maps requested names onto uploads. Without an explicit order the upload order is used.
    Names with no matching upload are skipped.
    """
    if not order:
        return list(files)

    by_name: dict[str, UploadedFile] = {}
    for upload in files:
        # first upload wins when two share a name
        by_name.setdefault(upload.name, upload)

    resolved: list[UploadedFile] = []
    for name in order:
        upload = by_name.get(name)
        if upload is None:
            logger.info("Merge order names unknown file %r; skipping", name)
            continue
        resolved.append(upload)
    return resolved


class PdfMerger:
    def __init__(self, output_storage: FileStorage) -> None:
        self._output_storage = output_storage

    def execute(self, files: Sequence[UploadedFile], params: ExecutionParams) -> ExecutorOutput:
        writer = PdfWriter()
        for upload in resolve_merge_order(files, params.order):
            reader = PdfReader(require_location(upload))
            for page in reader.pages:
                writer.add_page(page)

        out_path = self._output_storage.allocate(suffix="merged.pdf")
        with partial_output(out_path):
            with open(out_path, "wb") as fh:
                writer.write(fh)

        return ExecutorOutput(
            location=out_path,
            size=out_path.stat().st_size,
            content_type=PDF_CONTENT_TYPE,
            display_name="merged.pdf",
        )
