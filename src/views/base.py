"""Base classes for the dashboard view controllers.

A view controller owns all mutable state of one dashboard view: fetch status,
the fetched snapshot, range selection and hover index.  Renderers read that
state; they never call the repository or the domain services directly.

Fetch lifecycle
---------------
refresh()  starts a fetch unless one is already pending, in which case the
           pending task is returned.
reload()   supersedes: the pending fetch is cancelled and a new one started.
           Every fetch carries a generation number; a result whose generation
           is no longer current is discarded without touching state.

Controllers are async context managers.  Leaving the context cancels any
pending fetch and releases an active drag, so nothing outlives the view.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import date, datetime, timezone
from typing import Any, Generic, TypeVar

from src.domain.errors import EmptySeries, FetchError, MarketDataError
from src.domain.models.enums import DataSource, DefaultWindow, DragHandle, ViewStatus
from src.domain.models.selection import SelectionRange
from src.domain.repositories.market_data import MarketDataRepository
from src.domain.services.range_selector import RangeSelector

logger = logging.getLogger(__name__)

P = TypeVar("P")


class ViewController(ABC):
    """Fetch lifecycle, status and hover state shared by every view."""

    #: Human-readable name of the primary series, used in logs and EmptySeries.
    series_name: str = "series"

    def __init__(
        self,
        repository: MarketDataRepository,
        source: DataSource = DataSource.YAHOO,
    ) -> None:
        self._repository = repository
        self.source = DataSource(source)
        self.status = ViewStatus.IDLE
        self.error: MarketDataError | None = None
        self.last_updated: datetime | None = None
        self.hover_index: int | None = None
        self._generation = 0
        self._pending: asyncio.Task[None] | None = None

    # ------------------------------------------------------------------ #
    # Fetch lifecycle                                                      #
    # ------------------------------------------------------------------ #

    @property
    def is_loading(self) -> bool:
        return self.status == ViewStatus.LOADING

    def refresh(self) -> asyncio.Task[None]:
        """Start a fetch, or return the one already in flight."""
        if self._pending is not None and not self._pending.done():
            return self._pending
        return self._start()

    def reload(self, source: DataSource | str | None = None) -> asyncio.Task[None]:
        """Supersede any pending fetch, optionally switching data source."""
        if source is not None:
            self.source = DataSource(source)
        self._cancel_pending()
        return self._start()

    def retry(self) -> asyncio.Task[None]:
        return self.refresh()

    async def load(self) -> None:
        """Fetch (or join the pending fetch) and wait for it to settle."""
        await self.refresh()

    async def close(self) -> None:
        self._teardown()
        task = self._cancel_pending()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def __aenter__(self) -> ViewController:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _start(self) -> asyncio.Task[None]:
        self._generation += 1
        self.status = ViewStatus.LOADING
        self.error = None
        self._pending = asyncio.create_task(self._run(self._generation, self.source))
        return self._pending

    def _cancel_pending(self) -> asyncio.Task[None] | None:
        task = self._pending
        self._pending = None
        if task is not None and not task.done():
            task.cancel()
            return task
        return None

    async def _run(self, generation: int, source: DataSource) -> None:
        try:
            result = await self._fetch(source)
        except FetchError as exc:
            if generation != self._generation:
                logger.debug("%s: discarding error from superseded fetch: %s", self.series_name, exc)
                return
            logger.warning("%s: fetch failed: %s", self.series_name, exc)
            self.status = ViewStatus.ERROR
            self.error = exc
            return
        except Exception as exc:
            if generation != self._generation:
                logger.debug("%s: discarding error from superseded fetch: %r", self.series_name, exc)
                return
            logger.exception("%s: unexpected error while fetching", self.series_name)
            error = MarketDataError(f"Unexpected {type(exc).__name__} while fetching {self.series_name}: {exc}")
            error.__cause__ = exc
            self.status = ViewStatus.ERROR
            self.error = error
            return

        if generation != self._generation:
            logger.debug("%s: discarding superseded fetch result", self.series_name)
            return

        usable = self._apply(result)
        self.last_updated = datetime.now(timezone.utc)
        if usable == 0:
            self.status = ViewStatus.EMPTY
            self.error = EmptySeries(self.series_name)
        else:
            self.status = ViewStatus.READY

    # ------------------------------------------------------------------ #
    # Hover                                                                #
    # ------------------------------------------------------------------ #

    def hover(self, index: int | None) -> int | None:
        """Highlight the chart element at `index`; out-of-range indices clear it."""
        if index is None or not 0 <= index < self._hover_count():
            self.hover_index = None
        else:
            self.hover_index = index
        return self.hover_index

    def clear_hover(self) -> None:
        self.hover_index = None

    # ------------------------------------------------------------------ #
    # Subclass hooks                                                       #
    # ------------------------------------------------------------------ #

    @abstractmethod
    async def _fetch(self, source: DataSource) -> Any:
        """Fetch the view's snapshot from the repository."""

    @abstractmethod
    def _apply(self, result: Any) -> int:
        """Adopt a fetched snapshot; return the number of usable points."""

    @abstractmethod
    def _hover_count(self) -> int:
        """Number of chart elements that can be hovered."""

    def _teardown(self) -> None:
        """Release interaction state when the view goes away."""


class RangedViewController(ViewController, Generic[P]):
    """View over a dated series with a range-selection slider."""

    default_window: DefaultWindow = DefaultWindow.FULL

    def __init__(
        self,
        repository: MarketDataRepository,
        source: DataSource = DataSource.YAHOO,
        start: date = date(2020, 1, 1),
        end: date | None = None,
    ) -> None:
        super().__init__(repository, source)
        self.start = start
        self.end = end
        self.selector = RangeSelector(self.default_window)
        self._history: list[P] = []

    @property
    def history(self) -> list[P]:
        return self._history

    @property
    def selection(self) -> SelectionRange | None:
        return self.selector.selection

    @property
    def window(self) -> list[P]:
        return self.selector.window(self._history)

    def _end_date(self) -> date:
        return self.end or date.today()

    def _replace_history(self, points: Sequence[P]) -> int:
        """Swap in a new snapshot; the selection is clamped, never reset."""
        self._history = list(points)
        self.selector.load(len(self._history))
        self.clear_hover()
        return len(self._history)

    def selected_dates(self) -> tuple[date | None, date | None]:
        """Dates under the left and right slider handles."""
        if not self._history:
            return None, None
        last = len(self._history) - 1
        start, end = self.selector.effective_range(len(self._history))
        first_point = self._history[min(max(0, start), last)]
        last_point = self._history[min(max(0, end), last)]
        return first_point.point_date, last_point.point_date

    # Slider gestures delegate to the selector; hover indices refer to the
    # previous window, so any move clears them.

    def begin_drag(self, handle: DragHandle | str) -> None:
        self.selector.begin_drag(handle)

    def drag_to(self, relative_position: float) -> SelectionRange | None:
        selection = self.selector.drag_to(relative_position)
        self.clear_hover()
        return selection

    def end_drag(self) -> None:
        self.selector.end_drag()

    def _teardown(self) -> None:
        self.selector.end_drag()
