from filemaster.backend.app.infrastructure.executors import UploadPreviewer
from filemaster.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage


def test_preview_reflects_metadata(on_disk, tmp_path):
    upload_storage = FilesystemFileStorage(tmp_path / "uploads", "/uploads")
    a = on_disk("a.txt", b"12345", "text/plain")
    b = on_disk("b.pdf", b"%PDF-1.4", "application/pdf")

    items = UploadPreviewer(upload_storage).preview([a, b])

    assert [(i.display_name, i.size, i.content_type) for i in items] == [
        ("a.txt", 5, "text/plain"),
        ("b.pdf", 8, "application/pdf"),
    ]
    assert items[0].transient_reference == "/uploads/stored-a.txt"
    assert sorted(p.name for p in (tmp_path / "uploads").iterdir()) == ["stored-a.txt", "stored-b.pdf"]
