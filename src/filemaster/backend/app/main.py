import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from filemaster.backend.app.api.v1.router import api_router
from filemaster.backend.app.api.v1.users.deps import DEV_USER
from filemaster.backend.app.core.config import settings
from filemaster.backend.app.core.deps import PROCESSED_PREFIX, UPLOADS_PREFIX
from filemaster.backend.app.core.logging_config import setup_logging
from filemaster.backend.app.exception_handlers import register_exception_handlers
from filemaster.backend.app.infrastructure.db.init_db import check_db, ensure_user, init_db

logger = logging.getLogger(__name__)


def create_app():
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        for directory in (settings.UPLOAD_DIR, settings.PROCESSED_DIR):
            Path(directory).mkdir(parents=True, exist_ok=True)
        await init_db()
        if settings.SKIP_AUTH:
            await ensure_user(DEV_USER.id, email=DEV_USER.email, name=DEV_USER.name)
        logger.info("FileMaster started (uploads=%s, processed=%s)", settings.UPLOAD_DIR, settings.PROCESSED_DIR)
        yield

    app = FastAPI(title="FileMaster", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    async def health():
        db_ok = await check_db()
        return {"status": "ok", "db": "OK" if db_ok else "DOWN"}

    # directories are created in the lifespan; mounting must not require them yet
    for prefix, directory in ((UPLOADS_PREFIX, settings.UPLOAD_DIR), (PROCESSED_PREFIX, settings.PROCESSED_DIR)):
        app.mount(prefix, StaticFiles(directory=directory, check_dir=False), name=prefix.strip("/"))

    register_exception_handlers(app)
    return app


app = create_app()
