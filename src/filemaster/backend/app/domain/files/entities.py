from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StoredFileInfo:
    original_filename: str
    stored_filename: str
    path: Path
    size_bytes: int
    content_type: str
