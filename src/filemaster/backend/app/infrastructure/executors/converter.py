from __future__ import annotations

import shutil
from pathlib import Path
from typing import Sequence

from PIL import Image

from filemaster.backend.app.application.processing.interfaces import AudioTranscoder
from filemaster.backend.app.domain.files.interfaces import FileStorage
from filemaster.backend.app.domain.processing import ExecutionParams, ExecutorOutput, UploadedFile
from filemaster.backend.app.domain.processing.enums import AUDIO_FORMATS, IMAGE_FORMATS
from filemaster.backend.app.infrastructure.executors.base import partial_output, require_location

# format name -> (Pillow codec, mime subtype)
_IMAGE_CODECS: dict[str, tuple[str, str]] = {
    "jpg": ("JPEG", "jpeg"),
    "jpeg": ("JPEG", "jpeg"),
    "png": ("PNG", "png"),
    "webp": ("WEBP", "webp"),
}

# modes PNG and WebP cannot store
_NON_RGB_MODES = frozenset({"CMYK", "YCbCr", "LAB", "HSV"})

_AUDIO_CONTENT_TYPES: dict[str, str] = {
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
}


class ContainerCopyTranscoder:
    """Copies the bytes unchanged. No re-encoding is attempted."""

    def transcode(self, source: Path, target: Path, target_format: str) -> str:
        shutil.copyfile(source, target)
        return _AUDIO_CONTENT_TYPES[target_format]


def encode_image(source: Path, target: Path, target_format: str) -> str:
    codec, subtype = _IMAGE_CODECS[target_format]
    with Image.open(source) as img:
        img.load()
        if codec == "JPEG" and img.mode not in ("RGB", "L", "CMYK"):
            img = img.convert("RGB")
        elif codec != "JPEG" and img.mode in _NON_RGB_MODES:
            img = img.convert("RGB")
        img.save(target, format=codec)
    return f"image/{subtype}"


class FormatConverter:
    def __init__(self, output_storage: FileStorage, audio_transcoder: AudioTranscoder | None = None) -> None:
        self._output_storage = output_storage
        self._audio_transcoder = audio_transcoder or ContainerCopyTranscoder()

    def execute(self, files: Sequence[UploadedFile], params: ExecutionParams) -> ExecutorOutput:
        upload = files[0]
        ext = (params.target_format or "").lower()
        source = require_location(upload)
        out_path = self._output_storage.allocate(suffix=f"converted.{ext}")

        with partial_output(out_path):
            if ext in IMAGE_FORMATS:
                content_type = encode_image(source, out_path, ext)
            elif ext in AUDIO_FORMATS:
                content_type = self._audio_transcoder.transcode(source, out_path, ext)
            else:
                raise ValueError(f"No converter for format {ext!r}")

        return ExecutorOutput(
            location=out_path,
            size=out_path.stat().st_size,
            content_type=content_type,
            display_name=f"{upload.stem}_converted.{ext}",
        )
