from __future__ import annotations

from uuid import UUID

from filemaster.backend.app.domain.users.repositories import UserRepository


class StatsAggregator:
    """Applies one completed transform to the owner's running totals."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def apply(self, *, user_id: UUID, original_size: int, output_size: int) -> None:
        await self._user_repo.increment_stats(
            user_id,
            original_size=original_size,
            output_size=output_size,
        )
