#!/usr/bin/env python3
"""Console entry point.

Run with: python -m portfolio_sync.main
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from portfolio_sync.app_context import AppContext
from portfolio_sync.config.logging_config import setup_logging
from portfolio_sync.config.settings import get_settings
from portfolio_sync.domain.views import EngineState
from portfolio_sync.ui import HoldingRowView, format_inr


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show portfolio holdings and P&L.")
    parser.add_argument("--search", default="", help="Only show symbols containing this text")
    parser.add_argument("--descending", action="store_true", help="Sort symbols Z to A")
    parser.add_argument("--refresh", action="store_true", help="Skip the cached snapshot")
    parser.add_argument("--offline", action="store_true", help="Use the built-in sample portfolio")
    return parser.parse_args(argv)


def _print_state(state: EngineState) -> None:
    if state.error_message:
        print(f"Error: {state.error_message}")

    for holding in state.visible_holdings:
        row = HoldingRowView.from_holding(holding)
        print(f"{row.symbol:<12} {row.quantity_text:>6}  LTP {row.ltp_text:>14}  P&L {row.profit_and_loss_text:>14}")

    summary = state.summary
    if summary is None:
        print("No holdings to show.")
        return

    print()
    print(f"Current value     {format_inr(summary.current_value)}")
    print(f"Total investment  {format_inr(summary.total_investment)}")
    print(f"Today's P&L       {format_inr(summary.today_profit_and_loss)}")
    print(
        f"Profit & Loss     {format_inr(summary.total_profit_and_loss)}"
        f" ({summary.total_profit_and_loss_percentage:.2f}%)"
    )


async def _run(context: AppContext, args: argparse.Namespace) -> EngineState:
    engine = context.engine
    task = engine.refresh() if args.refresh else engine.load()
    await task

    if args.descending:
        engine.toggle_sort()
    if args.search:
        engine.set_search_query(args.search)
        # Let the debounced projection fire
        await asyncio.sleep(get_settings().search_debounce_seconds + 0.05)
    return engine.state


def main(argv: Optional[list[str]] = None) -> None:
    """Load the portfolio once and print it."""
    setup_logging()
    logger = logging.getLogger(__name__)
    args = _parse_args(argv)

    context = AppContext(offline=args.offline)
    try:
        context.initialize()
        state = asyncio.run(_run(context, args))
        _print_state(state)
    except Exception as e:
        logger.exception(f"Application error: {e}")
        print(f"\nApplication error: {e}")
        sys.exit(1)
    finally:
        context.close()


if __name__ == "__main__":
    main()
