from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable

from filemaster.backend.app.domain.files import StoredFileInfo


@runtime_checkable
class FileStorage(Protocol):
    base_dir: Path
    public_prefix: str

    async def save_stream(
        self,
        *,
        filename: str,
        source: BinaryIO,
        content_type: str,
        max_bytes: int | None = None,
    ) -> StoredFileInfo:
        """
        Copies ``source`` in chunks under a unique stored name.
        Raises FileTooLarge when more than ``max_bytes`` would be written.
        """
        ...

    def allocate(self, *, suffix: str) -> Path:
        """Returns a fresh, not yet existing path inside the storage directory."""
        ...

    def path_for(self, stored_name: str) -> Path:
        ...

    def reference_for(self, stored_name: str) -> str:
        ...

    async def delete(self, *, stored_name: str) -> None:
        ...
