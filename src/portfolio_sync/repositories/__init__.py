"""Repository layer - snapshot storage abstractions and implementations."""

from portfolio_sync.repositories.protocols import SnapshotStore

__all__ = [
    "SnapshotStore",
]
