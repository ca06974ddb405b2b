"""View models derived from holdings."""

from portfolio_sync.domain.views.portfolio import PortfolioSummary, EngineState

__all__ = [
    "PortfolioSummary",
    "EngineState",
]
