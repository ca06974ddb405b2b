"""Repository protocol definitions (interfaces)."""

from portfolio_sync.repositories.protocols.snapshot_store import SnapshotStore

__all__ = [
    "SnapshotStore",
]
