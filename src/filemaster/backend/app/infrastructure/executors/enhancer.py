from __future__ import annotations

from typing import Sequence

from PIL import Image, ImageEnhance, ImageFilter, ImageOps

from filemaster.backend.app.domain.files.interfaces import FileStorage
from filemaster.backend.app.domain.processing import ExecutionParams, ExecutorOutput, UploadedFile
from filemaster.backend.app.infrastructure.executors.base import partial_output, require_location

BRIGHTNESS_FACTOR = 1.1
SATURATION_FACTOR = 1.2
WEBP_QUALITY = 90


def enhance_image(img: Image.Image) -> Image.Image:
    """Orientation fix, sharpen, then brightness and saturation, in that order."""
    img = ImageOps.exif_transpose(img)
    if img.mode not in ("RGB", "RGBA"):
        img = img.convert("RGBA" if img.mode in ("P", "LA", "PA") else "RGB")
    img = img.filter(ImageFilter.SHARPEN)
    img = ImageEnhance.Brightness(img).enhance(BRIGHTNESS_FACTOR)
    img = ImageEnhance.Color(img).enhance(SATURATION_FACTOR)
    return img


class ImageEnhancer:
    def __init__(self, output_storage: FileStorage) -> None:
        self._output_storage = output_storage

    def execute(self, files: Sequence[UploadedFile], params: ExecutionParams) -> ExecutorOutput:
        upload = files[0]
        out_path = self._output_storage.allocate(suffix="enhanced.webp")

        with partial_output(out_path):
            with Image.open(require_location(upload)) as img:
                enhanced = enhance_image(img)
                enhanced.save(out_path, format="WEBP", quality=WEBP_QUALITY)

        return ExecutorOutput(
            location=out_path,
            size=out_path.stat().st_size,
            content_type="image/webp",
            display_name=f"{upload.stem}_enhanced.webp",
        )
