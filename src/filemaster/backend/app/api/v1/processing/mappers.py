import json
from typing import Optional
from uuid import UUID

from fastapi import UploadFile

from filemaster.backend.app.api.v1.processing.schemas import (
    PreviewFileResponse,
    PreviewResponse,
    ProcessResponse,
)
from filemaster.backend.app.application.processing.dto import (
    DownloadInputDTO,
    PreviewResultDTO,
    ProcessFilesInputDTO,
    ProcessResultDTO,
)
from filemaster.backend.app.domain.processing import ToolParams, UploadedFile
from filemaster.backend.app.domain.processing.errors import InvalidParameter

DOWNLOAD_PATH = "/api/v1/download"


def parse_order(raw: Optional[str]) -> Optional[tuple[str, ...]]:
    """``order`` arrives as a JSON array of original file names."""
    if raw is None or not raw.strip():
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidParameter("order", "Order must be a JSON array of file names") from e
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidParameter("order", "Order must be a JSON array of file names")
    return tuple(value)


def upload_to_domain(file: UploadFile) -> UploadedFile:
    return UploadedFile(
        name=file.filename or "upload",
        content_type=file.content_type or "application/octet-stream",
        size=file.size or 0,
        source=file.file,
    )


def get_process_files_input_dto(
        user_id: UUID,
        tool: Optional[str],
        files: list[UploadFile],
        compress_level: Optional[str],
        fmt: Optional[str],
        order: Optional[str],
) -> ProcessFilesInputDTO:
    return ProcessFilesInputDTO(
        owner_id=user_id,
        tool=tool or "",
        files=[upload_to_domain(f) for f in files],
        params=ToolParams(
            compress_level=compress_level,
            order=parse_order(order),
            format=fmt,
        ),
    )


def get_download_input_dto(user_id: UUID, file_name: str) -> DownloadInputDTO:
    return DownloadInputDTO(owner_id=user_id, stored_name=file_name)


def result_dto_to_response(result: ProcessResultDTO) -> ProcessResponse:
    return ProcessResponse(
        id=result.processed_file_id,
        download_url=f"{DOWNLOAD_PATH}/{result.stored_name}",
        file_name=result.display_name,
        size=result.output_size,
        original_size=result.original_size,
        savings=result.bytes_saved,
        compression_ratio=result.compression_ratio,
        tool=result.tool.value,
    )


def preview_dto_to_response(result: PreviewResultDTO) -> PreviewResponse:
    return PreviewResponse(
        files=[
            PreviewFileResponse(
                name=item.display_name,
                size=item.size,
                type=item.content_type,
                url=item.transient_reference,
            )
            for item in result.items
        ]
    )
