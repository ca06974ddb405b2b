"""View models for the portfolio summary and the engine's observable state."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from portfolio_sync.domain.models import Holding


@dataclass(frozen=True)
class PortfolioSummary:
    """
    Aggregate figures over an ordered sequence of holdings.

    Always rebuilt from holdings via `from_holdings`; never edited in place.
    """

    current_value: float = 0.0
    total_investment: float = 0.0
    today_profit_and_loss: float = 0.0

    @classmethod
    def from_holdings(cls, holdings: Iterable[Holding]) -> "PortfolioSummary":
        current_value = 0.0
        total_investment = 0.0
        today_pnl = 0.0
        for holding in holdings:
            current_value += holding.current_value
            total_investment += holding.total_investment
            today_pnl += holding.today_profit_and_loss
        return cls(
            current_value=current_value,
            total_investment=total_investment,
            today_profit_and_loss=today_pnl,
        )

    @property
    def total_profit_and_loss(self) -> float:
        return self.current_value - self.total_investment

    @property
    def total_profit_and_loss_percentage(self) -> float:
        if self.total_investment <= 0:
            return 0.0
        return self.total_profit_and_loss / self.total_investment * 100


@dataclass(frozen=True)
class EngineState:
    """
    Snapshot of everything the presentation layer may observe.

    The engine replaces the whole object on every change, so
    `visible_holdings` and `summary` always belong to the same
    (`original_holdings`, `applied_query`, `sort_ascending`) triple.
    `search_query` is the raw input text and may run ahead of
    `applied_query` while a debounced recomputation is pending.
    """

    original_holdings: tuple[Holding, ...] = ()
    search_query: str = ""
    applied_query: str = ""
    sort_ascending: bool = True
    is_loading: bool = False
    error_message: Optional[str] = None
    visible_holdings: tuple[Holding, ...] = field(default_factory=tuple)
    summary: Optional[PortfolioSummary] = None
    is_summary_expanded: bool = False
