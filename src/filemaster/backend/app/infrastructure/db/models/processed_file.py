from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from sqlalchemy import BigInteger, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy import UUID
from sqlalchemy.orm import Mapped, mapped_column

from filemaster.backend.app.infrastructure.db.base import Base


class ProcessedFileModel(Base):
    __tablename__ = "processed_files"

    id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )

    owner_id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    stored_name: Mapped[str] = mapped_column(String(512), nullable=False, unique=True, index=True)
    display_name: Mapped[str] = mapped_column(String(512), nullable=False)
    original_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    output_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    content_type: Mapped[str] = mapped_column(String(128), nullable=False)
    compression_ratio: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    tool_used: Mapped[str] = mapped_column(String(32), nullable=False)
    download_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
