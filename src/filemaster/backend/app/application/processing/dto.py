from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from uuid import UUID

from filemaster.backend.app.domain.processing import PreviewItem, Tool, ToolParams, UploadedFile


@dataclass(frozen=True)
class ProcessFilesInputDTO:
    owner_id: UUID
    tool: str
    files: list[UploadedFile]
    params: ToolParams = field(default_factory=ToolParams)


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class ProcessResultDTO:
    processed_file_id: UUID
    stored_name: str
    display_name: str
    output_size: int
    original_size: int
    bytes_saved: int
    compression_ratio: float
    tool: Tool


@dataclass(frozen=True)
class PreviewResultDTO:
    items: list[PreviewItem]


@dataclass(frozen=True)
class DownloadInputDTO:
    owner_id: UUID
    stored_name: str


@dataclass(frozen=True)
class DownloadDTO:
    path: Path
    display_name: str
    content_type: str
    download_count: int
