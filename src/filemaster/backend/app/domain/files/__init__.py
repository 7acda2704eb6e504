from filemaster.backend.app.domain.files.entities import StoredFileInfo

__all__ = ['StoredFileInfo']
