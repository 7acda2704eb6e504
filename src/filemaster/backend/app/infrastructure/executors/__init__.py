from .compressor import ZipCompressor
from .converter import ContainerCopyTranscoder, FormatConverter
from .enhancer import ImageEnhancer
from .merger import PdfMerger
from .previewer import UploadPreviewer
from .registry import build_executors

__all__ = [
    "ZipCompressor",
    "ContainerCopyTranscoder",
    "FormatConverter",
    "ImageEnhancer",
    "PdfMerger",
    "UploadPreviewer",
    "build_executors",
]
