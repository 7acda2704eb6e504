from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Dict

from filemaster.backend.app.domain.files import StoredFileInfo
from filemaster.backend.app.domain.files.errors import FileTooLarge


class FakeFileStorage:
    """
    In-memory fake implementation of FileStorage for unit tests.
    Paths it hands out are never written to.
    """

    def __init__(self, base_dir: Path | None = None, public_prefix: str = "/uploads") -> None:
        self.base_dir = base_dir or Path("/fake")
        self.public_prefix = public_prefix
        self.fail_delete: Exception | None = None
        self.fail_save: Exception | None = None

        # stored name -> bytes
        self._files: Dict[str, bytes] = {}
        self.saved: list[str] = []
        self.deleted: list[str] = []
        self._counter = 0

    async def save_stream(
        self,
        *,
        filename: str,
        source: BinaryIO,
        content_type: str,
        max_bytes: int | None = None,
    ) -> StoredFileInfo:
        if self.fail_save is not None:
            raise self.fail_save
        content = source.read()
        if max_bytes is not None and len(content) > max_bytes:
            raise FileTooLarge(filename, max_bytes)
        self._counter += 1
        stored_name = f"{self._counter}-{filename}"
        self._files[stored_name] = content
        self.saved.append(stored_name)
        return StoredFileInfo(
            original_filename=filename,
            stored_filename=stored_name,
            path=self.base_dir / stored_name,
            size_bytes=len(content),
            content_type=content_type,
        )

    def allocate(self, *, suffix: str) -> Path:
        self._counter += 1
        return self.base_dir / f"{self._counter}-{suffix}"

    def path_for(self, stored_name: str) -> Path:
        return self.base_dir / stored_name

    def reference_for(self, stored_name: str) -> str:
        return f"{self.public_prefix}/{stored_name}"

    async def delete(self, *, stored_name: str) -> None:
        if self.fail_delete is not None:
            raise self.fail_delete
        self._files.pop(stored_name, None)
        self.deleted.append(stored_name)

    # ---------- test helpers (intentional) ----------

    def exists(self, stored_name: str) -> bool:
        return stored_name in self._files

    def count(self) -> int:
        return len(self._files)
