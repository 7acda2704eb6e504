from types import TracebackType
from typing import Protocol, Optional

from filemaster.backend.app.domain.processing.repositories import ProcessedFileRepository
from filemaster.backend.app.domain.users.repositories import UserRepository


class UnitOfWork(Protocol):
    user_repo: UserRepository
    processed_file_repo: ProcessedFileRepository
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...

    async def __aenter__(self) -> "UnitOfWork": ...

    async def __aexit__(
            self,
            exc_type: Optional[type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
    ) -> None: ...
