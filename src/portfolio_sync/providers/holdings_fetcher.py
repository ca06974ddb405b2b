"""Holdings fetcher protocol."""

from typing import Protocol

from portfolio_sync.api.schemas import HoldingsEnvelope


class HoldingsFetcher(Protocol):
    """
    Protocol for remote holdings sources.

    Implementations make a single attempt with no internal retry and raise a
    `FetchError` subclass for every failure.
    """

    async def fetch(self, endpoint: str) -> HoldingsEnvelope:
        """Fetch and decode the holdings envelope from `endpoint`."""
        ...
