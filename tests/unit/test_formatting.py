"""
Unit tests for rupee formatting and holding row views.
"""

import pytest

from portfolio_sync.ui import HoldingRowView, format_inr

from tests.conftest import HDFC, ICICI, make_holding


class TestFormatInr:
    """Tests for Indian-grouped currency strings."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "₹0.00"),
            (5.5, "₹5.50"),
            (999.999, "₹1,000.00"),
            (17480.40, "₹17,480.40"),
            (123456, "₹1,23,456.00"),
            (12345678.9, "₹1,23,45,678.90"),
            (-19.60, "-₹19.60"),
            (-2119.6, "-₹2,119.60"),
        ],
    )
    def test_format(self, value: float, expected: str):
        assert format_inr(value) == expected

    def test_negative_rounding_to_zero_has_no_sign(self):
        assert format_inr(-0.001) == "₹0.00"


class TestHoldingRowView:
    """Tests for row display strings."""

    def test_loss_row(self):
        row = HoldingRowView.from_holding(HDFC)

        assert row.symbol == "HDFC"
        assert row.quantity_text == "7"
        assert row.ltp_text == "₹2,497.20"
        assert row.profit_and_loss_text == "-₹2,119.60"
        assert row.is_profit is False

    def test_profit_row_has_plus_sign(self):
        row = HoldingRowView.from_holding(ICICI)

        assert row.profit_and_loss_text == "+₹124.70"
        assert row.is_profit is True

    def test_break_even_counts_as_profit(self):
        row = HoldingRowView.from_holding(make_holding("FLAT", quantity=2, ltp=50.0, avg_price=50.0))

        assert row.profit_and_loss_text == "+₹0.00"
        assert row.is_profit is True
