# app/infrastructure/db/uow.py
from sqlalchemy.ext.asyncio import AsyncSession

from filemaster.backend.app.infrastructure.processing.repositories import SqlAlchemyProcessedFileRepository
from filemaster.backend.app.infrastructure.users.repositories import SqlAlchemyUserRepository


class SqlAlchemyUnitOfWork:
    def __init__(self, session: AsyncSession):
        self._session = session
        self.user_repo = SqlAlchemyUserRepository(session)
        self.processed_file_repo = SqlAlchemyProcessedFileRepository(session)

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc:
            await self.rollback()
        else:
            await self.commit()
