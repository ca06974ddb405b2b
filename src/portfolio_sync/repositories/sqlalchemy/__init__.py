"""SQLAlchemy repository implementations."""

from portfolio_sync.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    init_db_with_path,
    reset_database,
    Base,
)
from portfolio_sync.repositories.sqlalchemy.snapshot_store import SqlAlchemySnapshotStore

__all__ = [
    "get_engine",
    "get_session_factory",
    "init_db_with_path",
    "reset_database",
    "Base",
    "SqlAlchemySnapshotStore",
]
