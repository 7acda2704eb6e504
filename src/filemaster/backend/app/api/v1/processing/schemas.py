from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel


class ProcessResponse(BaseModel):
    success: bool = True
    id: UUID
    download_url: str
    file_name: str
    size: int
    original_size: int
    savings: int
    compression_ratio: float
    tool: str


class PreviewFileResponse(BaseModel):
    name: str
    size: int
    type: str
    url: str


class PreviewResponse(BaseModel):
    success: bool = True
    files: list[PreviewFileResponse]
