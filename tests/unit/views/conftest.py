"""Shared fixtures for view controller tests."""

import asyncio
from datetime import date, timedelta

import pytest

from src.domain.models.enums import DataSource
from src.domain.models.market_data import DailyPoint, FuturesQuote
from src.domain.repositories.market_data import MarketDataRepository


class FakeMarketDataRepository(MarketDataRepository):
    """In-memory repository.

    `failures` maps an endpoint name to an exception raised on the next call.
    `gate`, when set, holds every call until the event fires; `holds` does
    the same for a single endpoint.  `tasks` records the task serving each call.
    """

    def __init__(self) -> None:
        self.vix: list[DailyPoint] = []
        self.spx: list[DailyPoint] = []
        self.futures: list[FuturesQuote] = []
        self.failures: dict[str, Exception] = {}
        self.gate: asyncio.Event | None = None
        self.holds: dict[str, asyncio.Event] = {}
        self.calls: list[tuple[str, DataSource]] = []
        self.tasks: list[asyncio.Task] = []

    async def _serve(self, name: str, source: DataSource, payload):
        self.calls.append((name, DataSource(source)))
        self.tasks.append(asyncio.current_task())
        if self.gate is not None:
            await self.gate.wait()
        if name in self.holds:
            await self.holds[name].wait()
        if name in self.failures:
            raise self.failures.pop(name)
        return list(payload)

    async def get_vix_history(self, start, end, source=DataSource.YAHOO):
        return await self._serve("vix", source, self.vix)

    async def get_spx_history(self, start, end, source=DataSource.YAHOO):
        return await self._serve("spx", source, self.spx)

    async def get_futures_term_structure(self, source=DataSource.YAHOO):
        return await self._serve("futures", source, self.futures)


def make_series(closes: list[float], start: date = date(2023, 1, 2)) -> list[DailyPoint]:
    return [
        DailyPoint(point_date=start + timedelta(days=i), close=c, year=(start + timedelta(days=i)).year)
        for i, c in enumerate(closes)
    ]


@pytest.fixture
def repository() -> FakeMarketDataRepository:
    return FakeMarketDataRepository()


@pytest.fixture
def series():
    return make_series
