from dataclasses import replace
from uuid import uuid4

import pytest

from filemaster.backend.app.application.users import LoginUserInputDTO
from filemaster.backend.app.application.users.use_cases import GetCurrentUserUseCase, LoginUserUseCase
from filemaster.backend.app.domain.users import InactiveUserError, InvalidCredentialsError, UserNotFoundError

pytestmark = pytest.mark.asyncio


async def test_login_with_correct_password(uow, hasher, owner):
    use_case = LoginUserUseCase(uow, hasher)

    out = await use_case.execute(LoginUserInputDTO(email="OWNER@example.com", password="secret123"))

    assert out.id == owner.id
    assert out.is_active is True


async def test_login_with_wrong_password(uow, hasher, owner):
    with pytest.raises(InvalidCredentialsError):
        await LoginUserUseCase(uow, hasher).execute(LoginUserInputDTO(email="owner@example.com", password="nope"))


async def test_login_unknown_user(uow, hasher):
    with pytest.raises(InvalidCredentialsError):
        await LoginUserUseCase(uow, hasher).execute(LoginUserInputDTO(email="ghost@example.com", password="x"))


async def test_login_inactive_user(uow, hasher, owner):
    await uow.user_repo.add(replace(owner, is_active=False))

    with pytest.raises(InactiveUserError):
        await LoginUserUseCase(uow, hasher).execute(LoginUserInputDTO(email="owner@example.com", password="secret123"))


async def test_current_user_includes_stats(uow, owner):
    await uow.user_repo.increment_stats(owner.id, original_size=1000, output_size=400)

    me = await GetCurrentUserUseCase(uow).execute(owner.id)

    assert me.email == "owner@example.com"
    assert me.stats.total_files == 1
    assert me.stats.space_saved == 600


async def test_current_user_missing(uow):
    with pytest.raises(UserNotFoundError):
        await GetCurrentUserUseCase(uow).execute(uuid4())
