from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from ..common import utcnow
from .enums import Tool
from .value_objects import compression_ratio


@dataclass(frozen=True, slots=True)
class ProcessedFile:
    stored_name: str
    display_name: str
    owner_id: UUID
    original_size: int
    output_size: int
    content_type: str
    tool_used: Tool
    compression_ratio: float = 0.0
    download_count: int = 0
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)

    @classmethod
    def record(
        cls,
        *,
        owner_id: UUID,
        tool: Tool,
        stored_name: str,
        display_name: str,
        original_size: int,
        output_size: int,
        content_type: str,
    ) -> "ProcessedFile":
        return cls(
            stored_name=stored_name,
            display_name=display_name,
            owner_id=owner_id,
            original_size=original_size,
            output_size=output_size,
            content_type=content_type,
            tool_used=tool,
            compression_ratio=compression_ratio(original_size, output_size),
        )

    @property
    def bytes_saved(self) -> int:
        return self.original_size - self.output_size
