"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, String, Text

from portfolio_sync.repositories.sqlalchemy.database import Base


class SnapshotEntryORM(Base):
    """Key/value row holding one half of the persisted snapshot."""

    __tablename__ = "snapshot_entries"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)
