"""Holding model for a single equity position."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Holding:
    """
    One equity position as reported by the holdings endpoint.

    `symbol` identifies the holding within a portfolio. `quantity` may be zero
    or negative for short positions. Prices are per share.
    """

    symbol: str
    quantity: int
    ltp: float
    avg_price: float
    close: float

    @property
    def current_value(self) -> float:
        return self.quantity * self.ltp

    @property
    def total_investment(self) -> float:
        return self.quantity * self.avg_price

    @property
    def profit_and_loss(self) -> float:
        return self.current_value - self.total_investment

    @property
    def today_profit_and_loss(self) -> float:
        """P&L against the previous session's close."""
        return self.quantity * (self.ltp - self.close)

    @property
    def profit_and_loss_percentage(self) -> float:
        """P&L as a percentage of investment; 0 when nothing was invested."""
        if self.total_investment <= 0:
            return 0.0
        return self.profit_and_loss / self.total_investment * 100
