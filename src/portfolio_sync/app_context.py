"""Application context wiring the fetcher, snapshot store, repository and engine.

Every collaborator is created here and passed to its consumer explicitly.
"""

from pathlib import Path
from typing import Optional

from portfolio_sync.config.settings import Settings, set_settings, get_settings
from portfolio_sync.providers import HttpHoldingsFetcher, StubHoldingsFetcher
from portfolio_sync.providers.holdings_fetcher import HoldingsFetcher
from portfolio_sync.repositories.sqlalchemy import (
    SqlAlchemySnapshotStore,
    get_session_factory,
    init_db_with_path,
    reset_database,
)
from portfolio_sync.services import PortfolioRepository, PortfolioStateEngine


class AppContext:
    """
    Composition root for the holdings engine.

    Presentation code builds one context, then talks only to `engine`.
    """

    def __init__(self, data_dir: Optional[Path] = None, offline: bool = False):
        """
        Args:
            data_dir: Optional data directory. If not provided, uses default.
            offline: Serve the stub portfolio instead of calling the endpoint.
        """
        self._data_dir = data_dir
        self._offline = offline
        self._initialized = False

        self._store: Optional[SqlAlchemySnapshotStore] = None
        self._repository: Optional[PortfolioRepository] = None
        self._engine: Optional[PortfolioStateEngine] = None

    def initialize(self, data_dir: Optional[Path] = None) -> None:
        """Initialize or reinitialize the snapshot database."""
        if data_dir:
            self._data_dir = data_dir

        settings = Settings(data_dir=self._data_dir) if self._data_dir else get_settings()
        set_settings(settings)

        reset_database()
        init_db_with_path(settings.get_data_dir() / "snapshot.db")

        self._store = None
        self._repository = None
        self._engine = None
        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def store(self) -> SqlAlchemySnapshotStore:
        """Get the snapshot store."""
        if self._store is None:
            self._store = SqlAlchemySnapshotStore(
                session_factory=get_session_factory(),
                ttl_seconds=get_settings().snapshot_ttl_seconds,
            )
        return self._store

    @property
    def repository(self) -> PortfolioRepository:
        """Get the portfolio repository."""
        if self._repository is None:
            self._repository = PortfolioRepository(
                fetcher=self._build_fetcher(),
                store=self.store,
                endpoint=get_settings().holdings_endpoint,
            )
        return self._repository

    @property
    def engine(self) -> PortfolioStateEngine:
        """Get the portfolio state engine."""
        if self._engine is None:
            self._engine = PortfolioStateEngine(
                repository=self.repository,
                debounce_seconds=get_settings().search_debounce_seconds,
            )
        return self._engine

    def _build_fetcher(self) -> HoldingsFetcher:
        if self._offline:
            return StubHoldingsFetcher()
        return HttpHoldingsFetcher(timeout_seconds=get_settings().request_timeout_seconds)

    def close(self) -> None:
        """Clean up resources."""
        if self._engine is not None:
            self._engine.close()
            self._engine = None
        reset_database()
