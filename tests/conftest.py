"""
Pytest configuration and fixtures for the holdings engine tests.

This module provides:
- Holding and envelope factory helpers
- A controllable clock for snapshot TTL tests
- Scripted fetchers (succeeding, failing, gated)
- In-memory SQLite and dict-backed snapshot stores
- Repository and engine fixtures
"""

import asyncio
from typing import Optional, Union

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker

from portfolio_sync.api.schemas import HoldingsEnvelope
from portfolio_sync.config.settings import reset_settings
from portfolio_sync.core.exceptions import FetchError, TransportError
from portfolio_sync.domain.models import Holding
from portfolio_sync.repositories.sqlalchemy.database import Base
# Import ORM models to register them with Base before creating tables
from portfolio_sync.repositories.sqlalchemy import orm_models  # noqa: F401
from portfolio_sync.repositories.sqlalchemy import SqlAlchemySnapshotStore
from portfolio_sync.services import PortfolioRepository, PortfolioStateEngine

TEST_ENDPOINT = "https://holdings.test/api"

# Short debounce keeps engine tests fast; tests sleep relative to it.
TEST_DEBOUNCE_SECONDS = 0.05


# =============================================================================
# FACTORY HELPERS
# =============================================================================


def make_holding(
    symbol: str,
    quantity: int = 1,
    ltp: float = 100.0,
    avg_price: float = 90.0,
    close: float = 95.0,
) -> Holding:
    """Create a Holding with sensible defaults."""
    return Holding(
        symbol=symbol,
        quantity=quantity,
        ltp=ltp,
        avg_price=avg_price,
        close=close,
    )


def make_envelope(holdings: list[Holding]) -> HoldingsEnvelope:
    """Wrap holdings in the wire envelope."""
    return HoldingsEnvelope.model_validate(
        {
            "data": {
                "userHolding": [
                    {
                        "symbol": h.symbol,
                        "quantity": h.quantity,
                        "ltp": h.ltp,
                        "avgPrice": h.avg_price,
                        "close": h.close,
                    }
                    for h in holdings
                ]
            }
        }
    )


HDFC = make_holding("HDFC", quantity=7, ltp=2497.20, avg_price=2800.00, close=2500.00)
ICICI = make_holding("ICICI", quantity=1, ltp=624.70, avg_price=500.00, close=600.00)
SBI = make_holding("SBI", quantity=150, ltp=550.05, avg_price=501.00, close=590.00)


@pytest.fixture
def sample_holdings() -> list[Holding]:
    """Holdings in non-alphabetical wire order."""
    return [SBI, HDFC, ICICI]


# =============================================================================
# CLOCK
# =============================================================================


class FakeClock:
    """Manually advanced epoch clock."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# FETCHERS
# =============================================================================


FetchOutcome = Union[list[Holding], FetchError]


class ScriptedFetcher:
    """
    Fetcher that replays scripted outcomes in order.

    The last outcome repeats once the script is exhausted. An outcome can be
    gated on an asyncio.Event to hold a request in flight.
    """

    def __init__(self, *outcomes: FetchOutcome):
        self._outcomes = list(outcomes)
        self._gates: dict[int, asyncio.Event] = {}
        self.calls: list[str] = []

    def gate(self, call_index: int) -> asyncio.Event:
        """Hold call number `call_index` (0-based) until the event is set."""
        event = asyncio.Event()
        self._gates[call_index] = event
        return event

    async def fetch(self, endpoint: str) -> HoldingsEnvelope:
        index = len(self.calls)
        self.calls.append(endpoint)

        gate = self._gates.get(index)
        if gate is not None:
            await gate.wait()

        outcome = self._outcomes[min(index, len(self._outcomes) - 1)]
        if isinstance(outcome, FetchError):
            raise outcome
        return make_envelope(outcome)


def network_down() -> TransportError:
    return TransportError(ConnectionError("Network unavailable"))


# =============================================================================
# SNAPSHOT STORES
# =============================================================================


class InMemorySnapshotStore:
    """Dict-backed store without TTL; counts reads."""

    def __init__(self, holdings: Optional[list[Holding]] = None):
        self.holdings = list(holdings) if holdings is not None else None
        self.load_calls = 0
        self.save_calls = 0

    def save(self, holdings: list[Holding]) -> None:
        self.save_calls += 1
        self.holdings = list(holdings)

    def load(self) -> Optional[list[Holding]]:
        self.load_calls += 1
        return list(self.holdings) if self.holdings is not None else None

    def clear(self) -> None:
        self.holdings = None

    def has_data(self) -> bool:
        return self.holdings is not None


@pytest.fixture
def memory_store() -> InMemorySnapshotStore:
    return InMemorySnapshotStore()


@pytest.fixture(scope="function")
def db_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def sqlite_store(session_factory, fake_clock) -> SqlAlchemySnapshotStore:
    """SQLite snapshot store with a 300s TTL and a fake clock."""
    return SqlAlchemySnapshotStore(
        session_factory=session_factory,
        ttl_seconds=300,
        clock=fake_clock,
    )


# =============================================================================
# REPOSITORY / ENGINE
# =============================================================================


def make_repository(fetcher, store) -> PortfolioRepository:
    return PortfolioRepository(fetcher=fetcher, store=store, endpoint=TEST_ENDPOINT)


def make_engine(fetcher, store) -> PortfolioStateEngine:
    return PortfolioStateEngine(
        repository=make_repository(fetcher, store),
        debounce_seconds=TEST_DEBOUNCE_SECONDS,
    )


async def settle(debounce: float = TEST_DEBOUNCE_SECONDS) -> None:
    """Sleep past one debounce window."""
    await asyncio.sleep(debounce * 3)
