from .process_files import ProcessFilesUseCase
from .record_download import RecordDownloadUseCase

__all__ = [
    "ProcessFilesUseCase",
    "RecordDownloadUseCase",
]
