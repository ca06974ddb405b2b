"""Portfolio repository combining the remote fetcher and the snapshot store."""

import asyncio
import logging
from typing import Optional

from portfolio_sync.core.exceptions import FetchError
from portfolio_sync.domain.models import Holding
from portfolio_sync.providers.holdings_fetcher import HoldingsFetcher
from portfolio_sync.repositories.protocols import SnapshotStore

logger = logging.getLogger(__name__)


class PortfolioRepository:
    """
    Source of holdings for the engine.

    `fetch_holdings` is network-first with a silent snapshot fallback.
    `refresh_holdings` is network-only: a user-requested refresh must never
    be answered with stale data. Both write successful results through to
    the snapshot store.

    Snapshot reads and writes are blocking SQLite calls, so they run in a
    worker thread to keep the event loop free.
    """

    def __init__(
        self,
        fetcher: HoldingsFetcher,
        store: SnapshotStore,
        endpoint: str,
    ):
        self._fetcher = fetcher
        self._store = store
        self._endpoint = endpoint

    async def fetch_holdings(self) -> list[Holding]:
        """
        Fetch holdings, falling back to the snapshot on any fetch failure.

        Raises:
            FetchError: the original network error when the snapshot misses too.
        """
        try:
            return await self._fetch_and_store()
        except FetchError as e:
            cached = await asyncio.to_thread(self._store.load)
            if cached is None:
                raise
            logger.info(f"Serving {len(cached)} cached holdings after fetch failure: {e}")
            return cached

    async def refresh_holdings(self) -> list[Holding]:
        """Fetch holdings from the network only; errors propagate unchanged."""
        return await self._fetch_and_store()

    async def get_cached_holdings(self) -> Optional[list[Holding]]:
        """Return the fresh snapshot, if any."""
        return await asyncio.to_thread(self._store.load)

    async def _fetch_and_store(self) -> list[Holding]:
        envelope = await self._fetcher.fetch(self._endpoint)
        holdings = envelope.holdings()
        await asyncio.to_thread(self._store.save, holdings)
        return holdings
