"""Display formatting for holdings rows (Indian rupee currency)."""

from dataclasses import dataclass

from portfolio_sync.domain.models import Holding


def _group_indian(digits: str) -> str:
    """Group an integer digit string as 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_inr(value: float) -> str:
    """Format a value as rupees with Indian digit grouping, e.g. ₹1,23,456.70."""
    sign = "-" if round(value, 2) < 0 else ""
    whole, fraction = f"{abs(value):.2f}".split(".")
    return f"{sign}₹{_group_indian(whole)}.{fraction}"


@dataclass(frozen=True)
class HoldingRowView:
    """Display strings for one holding row."""

    symbol: str
    quantity_text: str
    ltp_text: str
    profit_and_loss_text: str
    is_profit: bool

    @classmethod
    def from_holding(cls, holding: Holding) -> "HoldingRowView":
        pnl = holding.profit_and_loss
        sign = "+" if pnl >= 0 else ""
        return cls(
            symbol=holding.symbol,
            quantity_text=str(holding.quantity),
            ltp_text=format_inr(holding.ltp),
            profit_and_loss_text=f"{sign}{format_inr(pnl)}",
            is_profit=pnl >= 0,
        )
