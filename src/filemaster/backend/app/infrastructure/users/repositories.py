# app/infrastructure/users/repositories.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from filemaster.backend.app.domain.users import User, RegistrationError, UserNotFoundError
from filemaster.backend.app.infrastructure.users.mappers import user_model_to_domain, user_domain_to_model
from filemaster.backend.app.infrastructure.users.models import UserModel


class SqlAlchemyUserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model: Optional[UserModel] = result.scalar_one_or_none()
        if model is None:
            return None
        return user_model_to_domain(model)

    async def add(self, user: User) -> User:
        model = user_domain_to_model(user)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # most likely UNIQUE(email)
            raise RegistrationError(f"Email {user.email} already exists") from e
        await self._session.refresh(model)
        return user_model_to_domain(model)

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model: Optional[UserModel] = result.scalar_one_or_none()
        if model is None:
            return None
        return user_model_to_domain(model)

    async def increment_stats(self, user_id: UUID, *, original_size: int, output_size: int) -> None:
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(
                total_files=UserModel.total_files + 1,
                total_size=UserModel.total_size + original_size,
                total_compressed=UserModel.total_compressed + output_size,
                space_saved=UserModel.space_saved + (original_size - output_size),
            )
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise UserNotFoundError()

    async def increment_downloads(self, user_id: UUID) -> None:
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(total_downloads=UserModel.total_downloads + 1)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise UserNotFoundError()
