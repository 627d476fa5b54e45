"""Correlation view: VIX close vs. S&P 500 daily change, with OLS trendline."""

from __future__ import annotations

import asyncio
from datetime import date

import numpy as np

from src.domain.models.enums import DataSource, DefaultWindow
from src.domain.models.market_data import CorrelationPoint, DailyPoint
from src.domain.models.trend import TrendPoint, TrendSegment
from src.domain.repositories.market_data import MarketDataRepository
from src.domain.services.alignment import AlignmentService
from src.domain.services.trend import TrendService

from .base import RangedViewController


class CorrelationView(RangedViewController[CorrelationPoint]):
    """Opens on the trailing 365 aligned sessions.

    VIX and S&P 500 histories are fetched concurrently and joined on date;
    a failure of either request fails the whole fetch and cancels the other.
    """

    series_name = "VIX/SPX"
    default_window = DefaultWindow.TRAILING_365

    def __init__(
        self,
        repository: MarketDataRepository,
        source: DataSource = DataSource.YAHOO,
        start: date = date(2020, 1, 1),
        end: date | None = None,
        alignment_service: AlignmentService | None = None,
        trend_service: TrendService | None = None,
    ) -> None:
        super().__init__(repository, source, start, end)
        self._alignment = alignment_service or AlignmentService()
        self._trends = trend_service or TrendService()

    @property
    def scatter(self) -> list[TrendPoint]:
        """Window as (x = VIX close, y = S&P change %) points."""
        return [TrendPoint(x=p.vix_close, y=p.spx_change_percent) for p in self.window]

    @property
    def trend(self) -> TrendSegment | None:
        return self._trends.fit_line(self.scatter)

    @property
    def hovered_point(self) -> CorrelationPoint | None:
        window = self.window
        if self.hover_index is None or self.hover_index >= len(window):
            return None
        return window[self.hover_index]

    def hover_nearest(self, vix_level: float) -> int | None:
        """Hover the window point whose VIX close is nearest `vix_level`."""
        window = self.window
        if not window:
            return self.hover(None)
        closes = np.fromiter((p.vix_close for p in window), dtype=float, count=len(window))
        return self.hover(int(np.argmin(np.abs(closes - vix_level))))

    async def _fetch(self, source: DataSource) -> tuple[list[DailyPoint], list[DailyPoint]]:
        end = self._end_date()
        requests = (
            asyncio.create_task(self._repository.get_vix_history(self.start, end, source)),
            asyncio.create_task(self._repository.get_spx_history(self.start, end, source)),
        )
        try:
            vix, spx = await asyncio.gather(*requests)
        except BaseException:
            # Neither request may outlive the fetch that started it.
            for task in requests:
                task.cancel()
            await asyncio.gather(*requests, return_exceptions=True)
            raise
        return vix, spx

    def _apply(self, result: tuple[list[DailyPoint], list[DailyPoint]]) -> int:
        vix, spx = result
        return self._replace_history(self._alignment.align(vix, spx))

    def _hover_count(self) -> int:
        return len(self.window)
