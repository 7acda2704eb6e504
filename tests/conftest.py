from uuid import UUID

import pytest
import pytest_asyncio

from filemaster.backend.app.domain.users import User, UserEmail
from tests.unit.fakes.hasher import FakePasswordHasher
from tests.unit.fakes.uow import FakeUnitOfWork

OWNER_ID = UUID("11111111-1111-1111-1111-111111111111")


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest_asyncio.fixture
async def owner(uow) -> User:
    user = User(
        id=OWNER_ID,
        email=UserEmail("owner@example.com"),
        name="Owner",
        hashed_password="hashed::secret123",
    )
    await uow.user_repo.add(user)
    return user
