from .entities import ProcessedFile
from .enums import Tool, DispatchState
from .value_objects import UploadedFile, ToolParams, ExecutionParams, ExecutorOutput, PreviewItem, compression_ratio
from .repositories import ProcessedFileRepository

__all__ = [
    "ProcessedFile",
    "Tool",
    "DispatchState",
    "UploadedFile",
    "ToolParams",
    "ExecutionParams",
    "ExecutorOutput",
    "PreviewItem",
    "compression_ratio",
    "ProcessedFileRepository",
]
