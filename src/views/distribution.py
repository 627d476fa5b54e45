"""Distribution view: histogram of VIX closes over the selected window."""

from __future__ import annotations

from datetime import date

from src.domain.models.distribution import Bucket, HistogramResult
from src.domain.models.enums import BinWidth, DataSource, DefaultWindow
from src.domain.models.market_data import DailyPoint
from src.domain.repositories.market_data import MarketDataRepository
from src.domain.services.histogram import HistogramService

from .base import RangedViewController


class DistributionView(RangedViewController[DailyPoint]):
    """Opens on the full fetched history; bin width defaults to 1 point."""

    series_name = "VIX"
    default_window = DefaultWindow.FULL

    def __init__(
        self,
        repository: MarketDataRepository,
        source: DataSource = DataSource.YAHOO,
        start: date = date(2020, 1, 1),
        end: date | None = None,
        bin_width: BinWidth = BinWidth.ONE,
        histogram_service: HistogramService | None = None,
    ) -> None:
        super().__init__(repository, source, start, end)
        self.bin_width = BinWidth(bin_width)
        self._histograms = histogram_service or HistogramService()

    def set_bin_width(self, bin_width: BinWidth | float) -> None:
        self.bin_width = BinWidth(bin_width)
        self.clear_hover()

    @property
    def histogram(self) -> HistogramResult:
        return self._histograms.histogram(self.window, self.bin_width)

    @property
    def hovered_bucket(self) -> Bucket | None:
        if self.hover_index is None:
            return None
        buckets = self.histogram.buckets
        return buckets[self.hover_index] if self.hover_index < len(buckets) else None

    async def _fetch(self, source: DataSource) -> list[DailyPoint]:
        return await self._repository.get_vix_history(self.start, self._end_date(), source)

    def _apply(self, result: list[DailyPoint]) -> int:
        return self._replace_history(result)

    def _hover_count(self) -> int:
        return len(self.histogram.buckets)
