from filemaster.backend.app.infrastructure.db.base import Base
from filemaster.backend.app.infrastructure.db.init_db import init_db
from filemaster.backend.app.infrastructure.db.engine import engine
from filemaster.backend.app.infrastructure.db.session import SessionLocal
from filemaster.backend.app.infrastructure.db.uow import SqlAlchemyUnitOfWork
from filemaster.backend.app.domain.common.uow import UnitOfWork

__all__ = ['init_db', 'Base', 'engine', 'SessionLocal', 'UnitOfWork', 'SqlAlchemyUnitOfWork']
