"""Pydantic schemas for the holdings endpoint payload."""

from portfolio_sync.api.schemas.holdings import (
    HoldingSchema,
    PortfolioDataSchema,
    HoldingsEnvelope,
    HoldingListAdapter,
)

__all__ = [
    "HoldingSchema",
    "PortfolioDataSchema",
    "HoldingsEnvelope",
    "HoldingListAdapter",
]
