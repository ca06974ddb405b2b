"""Service layer - holdings retrieval and state orchestration."""

from portfolio_sync.services.portfolio_repository import PortfolioRepository
from portfolio_sync.services.portfolio_engine import PortfolioStateEngine, project_holdings

__all__ = [
    "PortfolioRepository",
    "PortfolioStateEngine",
    "project_holdings",
]
