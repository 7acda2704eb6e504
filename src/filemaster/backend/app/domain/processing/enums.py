from __future__ import annotations

from enum import StrEnum

from filemaster.backend.app.domain.processing.errors import InvalidTool


class Tool(StrEnum):
    COMPRESS = "compress"
    MERGE = "merge"
    CONVERT = "convert"
    ENHANCE = "enhance"
    PREVIEW = "preview"

    @classmethod
    def parse(cls, raw: str | None) -> "Tool":
        try:
            return cls((raw or "").strip())
        except ValueError:
            raise InvalidTool(raw) from None


class DispatchState(StrEnum):
    RECEIVED = "received"
    VALIDATED = "validated"
    EXECUTING = "executing"
    RECORDING = "recording"
    CLEANING_UP = "cleaning_up"
    COMPLETED = "completed"
    ABORTED = "aborted"


PDF_CONTENT_TYPE = "application/pdf"
IMAGE_TYPE_PREFIX = "image/"
ZIP_CONTENT_TYPE = "application/zip"

IMAGE_FORMATS = frozenset({"jpg", "jpeg", "png", "webp"})
AUDIO_FORMATS = frozenset({"mp3", "wav"})
CONVERT_FORMATS = IMAGE_FORMATS | AUDIO_FORMATS

MIN_COMPRESS_LEVEL = 1
MAX_COMPRESS_LEVEL = 9
