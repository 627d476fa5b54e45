"""Futures view: VIX term structure with contango/backwardation reading."""

from __future__ import annotations

from src.domain.models.enums import DataSource, TimeRange
from src.domain.models.market_data import FuturesQuote
from src.domain.models.term_structure import TermStructureSummary
from src.domain.repositories.market_data import MarketDataRepository
from src.domain.services.term_structure import TermStructureService

from .base import ViewController


class FuturesView(ViewController):
    """Live curve when available, otherwise the illustrative curve for time_range."""

    series_name = "VIX futures"

    def __init__(
        self,
        repository: MarketDataRepository,
        source: DataSource = DataSource.YAHOO,
        time_range: TimeRange = TimeRange.ONE_YEAR,
        term_structure_service: TermStructureService | None = None,
    ) -> None:
        super().__init__(repository, source)
        self.time_range = TimeRange(time_range)
        self._term_structure = term_structure_service or TermStructureService()
        self._quotes: list[FuturesQuote] = []

    def set_time_range(self, time_range: TimeRange | str) -> None:
        self.time_range = TimeRange(time_range)
        self.clear_hover()

    @property
    def quotes(self) -> list[FuturesQuote]:
        return self._quotes

    @property
    def is_placeholder(self) -> bool:
        return not self._quotes

    @property
    def chart_data(self) -> list[FuturesQuote]:
        if self._quotes:
            return self._quotes
        return self._term_structure.placeholder_curve(self.time_range)

    @property
    def summary(self) -> TermStructureSummary:
        return self._term_structure.summarize(self.chart_data)

    @property
    def hovered_quote(self) -> FuturesQuote | None:
        data = self.chart_data
        if self.hover_index is None or self.hover_index >= len(data):
            return None
        return data[self.hover_index]

    async def _fetch(self, source: DataSource) -> list[FuturesQuote]:
        return await self._repository.get_futures_term_structure(source)

    def _apply(self, result: list[FuturesQuote]) -> int:
        self._quotes = list(result)
        self.clear_hover()
        return len(self._quotes)

    def _hover_count(self) -> int:
        return len(self.chart_data)
