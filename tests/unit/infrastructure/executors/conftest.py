import pytest

from filemaster.backend.app.domain.processing import UploadedFile
from filemaster.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage


@pytest.fixture
def output_storage(tmp_path) -> FilesystemFileStorage:
    return FilesystemFileStorage(tmp_path / "processed", "/processed")


@pytest.fixture
def on_disk(tmp_path):
    """Writes bytes under the upload dir and returns an ingested UploadedFile."""
    upload_dir = tmp_path / "uploads"
    upload_dir.mkdir()

    def _make(name: str, content: bytes, content_type: str) -> UploadedFile:
        path = upload_dir / f"stored-{name}"
        path.write_bytes(content)
        return UploadedFile(
            name=name,
            content_type=content_type,
            size=len(content),
            location=path,
            stored_name=path.name,
        )

    return _make
