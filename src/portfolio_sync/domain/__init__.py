"""Domain layer - pure portfolio models with no external dependencies."""

from portfolio_sync.domain.models import Holding
from portfolio_sync.domain.views import PortfolioSummary, EngineState

__all__ = [
    "Holding",
    "PortfolioSummary",
    "EngineState",
]
