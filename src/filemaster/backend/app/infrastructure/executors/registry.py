from __future__ import annotations

from typing import Mapping

from filemaster.backend.app.application.processing.interfaces import AudioTranscoder, ToolExecutor
from filemaster.backend.app.domain.files.interfaces import FileStorage
from filemaster.backend.app.domain.processing import Tool
from filemaster.backend.app.infrastructure.executors.compressor import ZipCompressor
from filemaster.backend.app.infrastructure.executors.converter import FormatConverter
from filemaster.backend.app.infrastructure.executors.enhancer import ImageEnhancer
from filemaster.backend.app.infrastructure.executors.merger import PdfMerger


def build_executors(
    output_storage: FileStorage,
    audio_transcoder: AudioTranscoder | None = None,
) -> Mapping[Tool, ToolExecutor]:
    return {
        Tool.COMPRESS: ZipCompressor(output_storage),
        Tool.MERGE: PdfMerger(output_storage),
        Tool.CONVERT: FormatConverter(output_storage, audio_transcoder),
        Tool.ENHANCE: ImageEnhancer(output_storage),
    }
