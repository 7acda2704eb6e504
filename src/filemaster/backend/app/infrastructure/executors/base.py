from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from filemaster.backend.app.domain.processing import UploadedFile


@contextmanager
def partial_output(path: Path) -> Iterator[Path]:
    """Removes ``path`` if the block fails, so no half-written output survives."""
    try:
        yield path
    except BaseException:
        path.unlink(missing_ok=True)
        raise


def require_location(upload: UploadedFile) -> Path:
    if upload.location is None:
        raise ValueError(f"Upload '{upload.name}' has not been ingested")
    return upload.location
