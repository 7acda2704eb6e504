import pytest

from filemaster.backend.app.application.users import LoginUserInputDTO
from filemaster.backend.app.application.users.use_cases.login_user import LoginUserUseCase
from filemaster.backend.app.domain.users import User
from filemaster.backend.app.domain.users.value_objects import UserEmail
from filemaster.backend.app.domain.users.errors import InvalidCredentialsError, InactiveUserError


pytestmark = pytest.mark.asyncio


class PlaintextTestHasher:
    """
    Fast + deterministic for integration tests.
    The DB/UoW/repository path is still real; bcrypt cost is not paid.
    """
    def hash(self, raw_password: str) -> str:
        return raw_password

    def verify(self, raw_password: str, hashed_password: str) -> bool:
        return raw_password == hashed_password


async def seed_user(*, uow, email: str, name: str, hashed_password: str, is_active: bool = True):
    async with uow:
        user = User(
            email=UserEmail(email),
            name=name,
            hashed_password=hashed_password,
            is_active=is_active,
        )
        await uow.user_repo.add(user)
    return user


async def test_login_success_returns_output_dto(uow):
    password_hasher = PlaintextTestHasher()
    saved = await seed_user(
        uow=uow,
        email="amin@example.com",
        name="Amin",
        hashed_password=password_hasher.hash("secret123"),
    )

    use_case = LoginUserUseCase(uow=uow, password_hasher=password_hasher)
    out = await use_case.execute(LoginUserInputDTO(email="amin@example.com", password="secret123"))

    assert out.email == "amin@example.com"
    assert out.id == saved.id


async def test_login_unknown_email_raises_invalid_credentials(uow):
    use_case = LoginUserUseCase(uow=uow, password_hasher=PlaintextTestHasher())

    with pytest.raises(InvalidCredentialsError):
        await use_case.execute(LoginUserInputDTO(email="missing@example.com", password="whatever"))


async def test_login_inactive_user_raises_inactive_user_error(uow):
    password_hasher = PlaintextTestHasher()
    await seed_user(
        uow=uow,
        email="inactive@example.com",
        name="Amin",
        hashed_password=password_hasher.hash("secret"),
        is_active=False,
    )

    use_case = LoginUserUseCase(uow=uow, password_hasher=password_hasher)

    with pytest.raises(InactiveUserError):
        await use_case.execute(LoginUserInputDTO(email="inactive@example.com", password="secret"))
