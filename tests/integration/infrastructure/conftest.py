import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from filemaster.backend.app.domain.users import User, UserEmail
from filemaster.backend.app.infrastructure.db.base import Base
from filemaster.backend.app.infrastructure.db.models.processed_file import ProcessedFileModel  # noqa: F401
from filemaster.backend.app.infrastructure.users.models import UserModel  # noqa: F401
from filemaster.backend.app.infrastructure.db.uow import SqlAlchemyUnitOfWork


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    # a file, not :memory:, so separate connections share one database
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncSession:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def uow(session):
    return SqlAlchemyUnitOfWork(session)


@pytest_asyncio.fixture
async def seeded_user(session_factory) -> User:
    """A committed user, visible from every session."""
    user = User(
        email=UserEmail("seeded@example.com"),
        name="Seeded",
        hashed_password="hashed-password-for-tests",
    )
    async with session_factory() as s:
        async with SqlAlchemyUnitOfWork(s) as seed_uow:
            await seed_uow.user_repo.add(user)
    return user
