import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from filemaster.backend.app.core.deps import get_output_storage, get_upload_storage, get_uow
from filemaster.backend.app.infrastructure.db.base import Base
from filemaster.backend.app.infrastructure.db.models.processed_file import ProcessedFileModel  # noqa: F401
from filemaster.backend.app.infrastructure.db.uow import SqlAlchemyUnitOfWork
from filemaster.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage
from filemaster.backend.app.infrastructure.users.models import UserModel  # noqa: F401
from filemaster.backend.app.main import create_app
from tests.api.helpers import register_and_login


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def upload_storage(tmp_path) -> FilesystemFileStorage:
    return FilesystemFileStorage(tmp_path / "uploads", "/uploads")


@pytest.fixture
def output_storage(tmp_path) -> FilesystemFileStorage:
    return FilesystemFileStorage(tmp_path / "processed", "/processed")


@pytest.fixture
def app(db_engine, upload_storage, output_storage):
    app = create_app()
    SessionLocal = async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_uow():
        async with SessionLocal() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_uow] = override_uow
    app.dependency_overrides[get_upload_storage] = lambda: upload_storage
    app.dependency_overrides[get_output_storage] = lambda: output_storage
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def auth_headers(client) -> dict[str, str]:
    return await register_and_login(client)
