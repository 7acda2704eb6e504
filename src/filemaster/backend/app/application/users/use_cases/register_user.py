from __future__ import annotations

from filemaster.backend.app.application.users import RegisterUserInput, RegisterUserOutput
from filemaster.backend.app.application.users.interfaces import PasswordHasher
from filemaster.backend.app.application.users.mappers import (
    register_domain_to_output_dto,
    register_input_dto_to_domain,
)
from filemaster.backend.app.domain.users import RegistrationError, UserEmail
from filemaster.backend.app.domain.common.uow import UnitOfWork


class RegisterUserUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
    ) -> None:
        self._uow = uow
        self._password_hasher = password_hasher

    async def execute(self, data: RegisterUserInput) -> RegisterUserOutput:
        async with self._uow:
            try:
                email = UserEmail(data.email)
            except ValueError as e:
                raise RegistrationError(str(e)) from e

            existing = await self._uow.user_repo.get_by_email(str(email))
            if existing is not None:
                raise RegistrationError(f"Email {email} is already in use")

            hashed = self._password_hasher.hash(data.password)
            user = register_input_dto_to_domain(data, hashed)

            saved = await self._uow.user_repo.add(user)
            return register_domain_to_output_dto(saved)
