from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from .value_objects import UserEmail
from ..common import utcnow


@dataclass(slots=True, frozen=True)
class UserStats:
    """
    Running totals over all processed files of a user.
    Only ever changed through atomic increments in the user repository.
    """
    total_files: int = 0
    total_size: int = 0
    total_compressed: int = 0
    space_saved: int = 0
    total_downloads: int = 0


@dataclass(slots=True, frozen=True)
class User:
    email: UserEmail
    name: str
    hashed_password: str | None

    id: UUID = field(default_factory=uuid4)
    is_active: bool = True
    stats: UserStats = field(default_factory=UserStats)
    created_at: datetime = field(default_factory=utcnow)
