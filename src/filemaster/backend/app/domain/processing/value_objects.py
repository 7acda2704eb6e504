from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path, PurePath
from typing import BinaryIO, Optional


@dataclass(frozen=True, slots=True)
class UploadedFile:
    """
    A request-scoped upload.

    Before ingestion only ``source`` is set; after ingestion ``location`` points at the
    temporary copy on disk and ``stored_name`` is its name inside the upload directory.
    """
    name: str
    content_type: str
    size: int
    source: Optional[BinaryIO] = field(default=None, compare=False, repr=False)
    location: Optional[Path] = None
    stored_name: Optional[str] = None

    @property
    def stem(self) -> str:
        return PurePath(self.name).stem or "file"

    @property
    def is_ingested(self) -> bool:
        return self.location is not None

    def ingested(self, *, location: Path, stored_name: str, size: int) -> "UploadedFile":
        return replace(self, location=location, stored_name=stored_name, size=size, source=None)


@dataclass(frozen=True, slots=True)
class ToolParams:
    """Raw, client supplied options. Normalized by the validator."""
    compress_level: Optional[str | int] = None
    order: Optional[tuple[str, ...]] = None
    format: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ExecutionParams:
    """Options after validation: level clamped, format lower-cased."""
    compress_level: int = 6
    order: Optional[tuple[str, ...]] = None
    target_format: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ExecutorOutput:
    location: Path
    size: int
    content_type: str
    display_name: str

    @property
    def stored_name(self) -> str:
        return self.location.name


@dataclass(frozen=True, slots=True)
class PreviewItem:
    display_name: str
    size: int
    content_type: str
    transient_reference: str


def compression_ratio(original_size: int, output_size: int) -> float:
    if original_size <= 0:
        return 0.0
    return round((original_size - output_size) / original_size * 100, 2)
