"""Snapshot store protocol for the last fetched holdings."""

from typing import Optional, Protocol

from portfolio_sync.domain.models import Holding


class SnapshotStore(Protocol):
    """
    Interface for the time-bounded holdings snapshot.

    Implementations never raise: persistence failures degrade to "no data".
    """

    def save(self, holdings: list[Holding]) -> None:
        """Replace the snapshot with `holdings` captured now."""
        ...

    def load(self) -> Optional[list[Holding]]:
        """Return holdings if present and fresh; otherwise clear and return None."""
        ...

    def clear(self) -> None:
        """Remove the snapshot (idempotent)."""
        ...

    def has_data(self) -> bool:
        """Check whether a snapshot exists, ignoring its age."""
        ...
