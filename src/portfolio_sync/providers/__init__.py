"""Holdings providers module."""

from portfolio_sync.providers.holdings_fetcher import HoldingsFetcher
from portfolio_sync.providers.http_fetcher import HttpHoldingsFetcher
from portfolio_sync.providers.stub_provider import StubHoldingsFetcher

__all__ = [
    "HoldingsFetcher",
    "HttpHoldingsFetcher",
    "StubHoldingsFetcher",
]
