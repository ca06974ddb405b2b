"""Stub holdings fetcher for offline/testing use."""

import logging
from typing import Optional

from portfolio_sync.api.schemas import HoldingsEnvelope

logger = logging.getLogger(__name__)


# Deterministic sample portfolio in wire format
_STUB_HOLDINGS: list[dict] = [
    {"symbol": "MAHABANK", "quantity": 990, "ltp": 38.05, "avgPrice": 35.0, "close": 40.0},
    {"symbol": "ICICI", "quantity": 100, "ltp": 118.25, "avgPrice": 110.0, "close": 105.0},
    {"symbol": "SBI", "quantity": 150, "ltp": 550.05, "avgPrice": 501.0, "close": 590.0},
    {"symbol": "TATA STEEL", "quantity": 200, "ltp": 137.0, "avgPrice": 110.65, "close": 100.05},
    {"symbol": "INFOSYS", "quantity": 121, "ltp": 1305.0, "avgPrice": 1245.45, "close": 1103.85},
    {"symbol": "HDFC", "quantity": 7, "ltp": 2497.20, "avgPrice": 2800.0, "close": 2500.0},
]


class StubHoldingsFetcher:
    """
    Stub fetcher with a fixed portfolio for offline operation.

    Ignores the endpoint; every call returns the same envelope.
    """

    def __init__(self, holdings: Optional[list[dict]] = None):
        self._payload = {"data": {"userHolding": holdings if holdings is not None else _STUB_HOLDINGS}}

    async def fetch(self, endpoint: str) -> HoldingsEnvelope:
        """Return the stub envelope."""
        logger.debug(f"Serving stub holdings instead of {endpoint}")
        return HoldingsEnvelope.model_validate(self._payload)
