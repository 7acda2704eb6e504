from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from filemaster.backend.app.domain.processing import ExecutionParams, ExecutorOutput, PreviewItem, UploadedFile


class ToolExecutor(Protocol):
    """
    One transformation. Implementations are synchronous (codec / file work)
    and are run off the event loop by the dispatcher.
    """

    def execute(self, files: Sequence[UploadedFile], params: ExecutionParams) -> ExecutorOutput: ...


class Previewer(Protocol):
    def preview(self, files: Sequence[UploadedFile]) -> list[PreviewItem]: ...


class AudioTranscoder(Protocol):
    """Writes ``source`` to ``target`` in ``target_format``; returns the output content type."""

    def transcode(self, source: Path, target: Path, target_format: str) -> str: ...
