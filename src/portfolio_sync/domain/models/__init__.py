"""Domain models package."""

from portfolio_sync.domain.models.holding import Holding

__all__ = [
    "Holding",
]
