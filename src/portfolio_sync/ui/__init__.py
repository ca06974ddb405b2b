"""Presentation helpers for holdings collaborators."""

from portfolio_sync.ui.formatting import HoldingRowView, format_inr

__all__ = [
    "HoldingRowView",
    "format_inr",
]
