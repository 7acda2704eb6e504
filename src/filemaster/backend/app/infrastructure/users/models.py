from __future__ import annotations

from datetime import datetime
from sqlalchemy import UUID
from sqlalchemy import BigInteger, Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from filemaster.backend.app.infrastructure.db.base import Base


class UserModel(Base):
    __tablename__ = "users"
    id: Mapped[UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # running totals, only ever changed with UPDATE ... SET col = col + n
    total_files: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_size: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    total_compressed: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    space_saved: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    total_downloads: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
