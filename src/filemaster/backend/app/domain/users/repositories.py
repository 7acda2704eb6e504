from __future__ import annotations
from typing import Protocol, Optional
from uuid import UUID
from .entities import User


class UserRepository(Protocol):
    async def get_by_email(self, email: str) -> Optional[User]:
        ...

    async def add(self, user: User) -> User:
        ...

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        ...

    async def increment_stats(self, user_id: UUID, *, original_size: int, output_size: int) -> None:
        """
        Atomic at the storage layer: files += 1, size += original, compressed += output,
        saved += original - output.
        """
        ...

    async def increment_downloads(self, user_id: UUID) -> None:
        ...
