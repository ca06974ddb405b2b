"""Portfolio state engine: canonical holdings plus a filtered, sorted projection."""

import asyncio
import locale
import logging
from dataclasses import replace
from typing import Awaitable, Callable, Iterable, Optional

from portfolio_sync.core.exceptions import AppError
from portfolio_sync.domain.models import Holding
from portfolio_sync.domain.views import EngineState, PortfolioSummary
from portfolio_sync.services.portfolio_repository import PortfolioRepository

logger = logging.getLogger(__name__)

StateListener = Callable[[EngineState], None]


def _symbol_sort_key(holding: Holding) -> str:
    folded = holding.symbol.casefold()
    try:
        return locale.strxfrm(folded)
    except ValueError:
        # strxfrm rejects embedded NUL characters
        return folded


def project_holdings(
    holdings: Iterable[Holding],
    query: str,
    ascending: bool,
) -> tuple[tuple[Holding, ...], Optional[PortfolioSummary]]:
    """
    Filter, sort and summarize holdings.

    Keeps holdings whose symbol contains the trimmed query (case-insensitive),
    orders them by symbol with a stable sort, and summarizes the result.
    The summary is None when nothing is visible.
    """
    needle = query.strip().casefold()
    if needle:
        holdings = [h for h in holdings if needle in h.symbol.casefold()]

    visible = tuple(sorted(holdings, key=_symbol_sort_key, reverse=not ascending))
    summary = PortfolioSummary.from_holdings(visible) if visible else None
    return visible, summary


class PortfolioStateEngine:
    """
    Owns `EngineState` and the commands that change it.

    All state reads and writes happen on the event loop the commands are
    issued from. Load and refresh run as tasks on that loop; the search
    projection is debounced with a generation token so a superseded timer
    can never overwrite a newer projection.

    Overlapping load/refresh requests resolve by issuance order: only the
    most recently issued request may apply its result.
    """

    def __init__(
        self,
        repository: PortfolioRepository,
        debounce_seconds: float = 0.3,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self._repository = repository
        self._debounce = debounce_seconds
        self._loop = loop

        self._state = EngineState()
        self._listeners: list[StateListener] = []

        self._search_generation = 0
        self._debounce_handle: Optional[asyncio.TimerHandle] = None
        self._request_seq = 0
        self._tasks: set[asyncio.Task] = set()

    @property
    def state(self) -> EngineState:
        """Current state snapshot (immutable)."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with each new state.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Commands

    def load(self) -> asyncio.Task:
        """Fetch holdings (network first, snapshot fallback)."""
        return self._start_request(self._repository.fetch_holdings, recover_from_cache=True)

    def refresh(self) -> asyncio.Task:
        """Fetch holdings from the network only."""
        return self._start_request(self._repository.refresh_holdings, recover_from_cache=False)

    def set_search_query(self, text: str) -> None:
        """Record the raw text now; re-project after the debounce delay."""
        self._apply(search_query=text)

        self._cancel_pending_search()
        token = self._search_generation
        self._debounce_handle = self._get_loop().call_later(
            self._debounce, self._on_search_settled, token
        )

    def clear_search(self) -> None:
        self._apply(search_query="", reproject=True)

    def toggle_sort(self) -> None:
        self._apply(sort_ascending=not self._state.sort_ascending, reproject=True)

    def toggle_summary_expansion(self) -> None:
        self._apply(is_summary_expanded=not self._state.is_summary_expanded)

    def close(self) -> None:
        """Cancel pending work and drop listeners."""
        self._cancel_pending_search()
        for task in list(self._tasks):
            task.cancel()
        self._listeners.clear()

    # Internals

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def _start_request(
        self,
        operation: Callable[[], Awaitable[list[Holding]]],
        recover_from_cache: bool,
    ) -> asyncio.Task:
        self._request_seq += 1
        request_id = self._request_seq
        self._apply(is_loading=True, error_message=None)

        task = self._get_loop().create_task(
            self._run_request(request_id, operation, recover_from_cache)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run_request(
        self,
        request_id: int,
        operation: Callable[[], Awaitable[list[Holding]]],
        recover_from_cache: bool,
    ) -> None:
        try:
            holdings = await operation()
        except AppError as e:
            await self._on_request_failed(request_id, e.message, recover_from_cache)
            return
        except Exception as e:
            logger.exception(f"Unexpected error while loading holdings: {e}")
            await self._on_request_failed(request_id, str(e), recover_from_cache)
            return

        if request_id != self._request_seq:
            logger.debug(f"Discarding result of superseded request {request_id}")
            return

        try:
            self._apply(
                original_holdings=tuple(holdings),
                is_loading=False,
                reproject=True,
            )
        except Exception as e:
            logger.exception(f"Failed to project {len(holdings)} holdings: {e}")
            self._apply(error_message=str(e), is_loading=False)

    async def _on_request_failed(self, request_id: int, message: str, recover_from_cache: bool) -> None:
        if request_id != self._request_seq:
            logger.debug(f"Discarding failure of superseded request {request_id}: {message}")
            return

        logger.warning(f"Holdings request failed: {message}")
        recovered = await self._repository.get_cached_holdings() if recover_from_cache else None
        if request_id != self._request_seq:
            logger.debug(f"Discarding recovery of superseded request {request_id}")
            return

        if recovered:
            logger.info(f"Recovered {len(recovered)} holdings from snapshot")
            try:
                self._apply(
                    original_holdings=tuple(recovered),
                    error_message=message,
                    is_loading=False,
                    reproject=True,
                )
                return
            except Exception:
                logger.exception("Failed to project recovered holdings")
        self._apply(error_message=message, is_loading=False)

    def _on_search_settled(self, token: int) -> None:
        if token != self._search_generation:
            return
        self._debounce_handle = None
        self._apply(reproject=True)

    def _cancel_pending_search(self) -> None:
        self._search_generation += 1
        if self._debounce_handle is not None:
            self._debounce_handle.cancel()
            self._debounce_handle = None

    def _apply(self, reproject: bool = False, **changes) -> None:
        """Replace the state in one step, optionally re-running the projection."""
        state = replace(self._state, **changes)
        if reproject:
            self._cancel_pending_search()
            visible, summary = project_holdings(
                state.original_holdings,
                state.search_query,
                state.sort_ascending,
            )
            state = replace(
                state,
                applied_query=state.search_query,
                visible_holdings=visible,
                summary=summary,
            )
        self._state = state
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("State listener failed")
