from __future__ import annotations

import re
import time
from pathlib import Path
from typing import BinaryIO
from uuid import uuid4

import anyio

from filemaster.backend.app.domain.files import StoredFileInfo
from filemaster.backend.app.domain.files.errors import FileTooLarge

CHUNK_SIZE = 1024 * 1024

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.\-]")


def safe_filename(filename: str) -> str:
    name = Path(filename or "").name
    return _UNSAFE_CHARS.sub("_", name) or "file"


def unique_prefix() -> str:
    return f"{int(time.time() * 1000)}-{uuid4().hex[:9]}"


def _copy_stream(source: BinaryIO, target: Path, max_bytes: int | None, filename: str) -> int:
    written = 0
    try:
        with open(target, "wb") as out:
            while True:
                chunk = source.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if max_bytes is not None and written > max_bytes:
                    raise FileTooLarge(filename, max_bytes)
                out.write(chunk)
    except BaseException:
        target.unlink(missing_ok=True)
        raise
    return written


class FilesystemFileStorage:
    def __init__(self, base_dir: Path, public_prefix: str) -> None:
        self.base_dir = base_dir
        self.public_prefix = public_prefix.rstrip("/")

    async def save_stream(
        self,
        *,
        filename: str,
        source: BinaryIO,
        content_type: str,
        max_bytes: int | None = None,
    ) -> StoredFileInfo:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        stored_filename = f"{unique_prefix()}-{safe_filename(filename)}"
        full_path = self.base_dir / stored_filename

        size = await anyio.to_thread.run_sync(_copy_stream, source, full_path, max_bytes, filename)

        return StoredFileInfo(
            original_filename=filename,
            stored_filename=stored_filename,
            path=full_path,
            size_bytes=size,
            content_type=content_type,
        )

    def allocate(self, *, suffix: str) -> Path:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        return self.base_dir / f"{unique_prefix()}-{suffix}"

    def path_for(self, stored_name: str) -> Path:
        # stored names never carry directories; anything else is rejected
        if not stored_name or Path(stored_name).name != stored_name:
            raise FileNotFoundError(stored_name)
        return self.base_dir / stored_name

    def reference_for(self, stored_name: str) -> str:
        return f"{self.public_prefix}/{stored_name}"

    async def delete(self, *, stored_name: str) -> None:
        full_path = self.path_for(stored_name)
        full_path.unlink(missing_ok=True)
