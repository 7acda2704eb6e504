from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Sequence

from filemaster.backend.app.domain.processing import ExecutionParams, Tool, ToolParams, UploadedFile
from filemaster.backend.app.domain.processing.enums import (
    CONVERT_FORMATS,
    IMAGE_TYPE_PREFIX,
    MAX_COMPRESS_LEVEL,
    MIN_COMPRESS_LEVEL,
    PDF_CONTENT_TYPE,
)
from filemaster.backend.app.domain.processing.errors import (
    CardinalityError,
    MissingParameter,
    TypeMismatch,
    UnsupportedFormat,
)

logger = logging.getLogger(__name__)

DEFAULT_COMPRESS_LEVEL = 6

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True, slots=True)
class ValidatedRequest:
    tool: Tool
    params: ExecutionParams


def clamp_compress_level(raw: str | int | None, default: int = DEFAULT_COMPRESS_LEVEL) -> int:
    """
    Out-of-range levels are clamped into [1, 9] instead of rejected.
    Only the leading integer counts, so "7.5" is 7 and "12abc" is 12.
    Missing or non-numeric values fall back to ``default``.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if match is None:
        logger.debug("Ignoring non-numeric compress level %r", raw)
        return default
    level = int(match.group(1))
    return max(MIN_COMPRESS_LEVEL, min(MAX_COMPRESS_LEVEL, level))


def _require_single(tool: Tool, files: Sequence[UploadedFile]) -> UploadedFile:
    if len(files) != 1:
        raise CardinalityError(f"{tool.value.capitalize()} requires exactly 1 file")
    return files[0]


def validate_request(
    tool_name: str | None,
    files: Sequence[UploadedFile],
    params: ToolParams,
    *,
    default_compress_level: int = DEFAULT_COMPRESS_LEVEL,
) -> ValidatedRequest:
    """
    Checks tool-specific cardinality, type and parameter rules.
    Only upload metadata is inspected; no file content is read.
    """
    tool = Tool.parse(tool_name)

    if not files:
        raise CardinalityError("No files uploaded")

    match tool:
        case Tool.PREVIEW:
            return ValidatedRequest(tool=tool, params=ExecutionParams())

        case Tool.MERGE:
            if len(files) < 2:
                raise CardinalityError("Merge requires at least 2 files")
            if any(f.content_type != PDF_CONTENT_TYPE for f in files):
                raise TypeMismatch("All files must be PDFs for merging")
            return ValidatedRequest(tool=tool, params=ExecutionParams(order=params.order))

        case Tool.CONVERT:
            _require_single(tool, files)
            fmt = (params.format or "").strip().lower()
            if not fmt:
                raise MissingParameter("format", "Format is required for conversion")
            if fmt not in CONVERT_FORMATS:
                raise UnsupportedFormat(fmt)
            return ValidatedRequest(tool=tool, params=ExecutionParams(target_format=fmt))

        case Tool.ENHANCE:
            upload = _require_single(tool, files)
            if not (upload.content_type or "").startswith(IMAGE_TYPE_PREFIX):
                raise TypeMismatch("Only images can be enhanced")
            return ValidatedRequest(tool=tool, params=ExecutionParams())

        case Tool.COMPRESS:
            level = clamp_compress_level(params.compress_level, default_compress_level)
            return ValidatedRequest(tool=tool, params=ExecutionParams(compress_level=level))

    raise AssertionError(f"Unhandled tool {tool!r}")
