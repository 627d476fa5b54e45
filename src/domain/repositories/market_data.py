"""Market data repository interface.

MarketDataRepository is a read-only, time-series interface over the
dashboard's data endpoints.  Each call returns one snapshot; there is no
caching, streaming or write path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from src.domain.models.enums import DataSource
from src.domain.models.market_data import DailyPoint, FuturesQuote


class MarketDataRepository(ABC):
    """Read interface for VIX / S&P 500 history and the VIX futures curve.

    Implementations raise FetchTimeout or FetchFailed (src.domain.errors) and
    never let transport-specific exceptions escape.
    """

    @abstractmethod
    async def get_vix_history(
        self,
        start: date,
        end: date,
        source: DataSource = DataSource.YAHOO,
    ) -> list[DailyPoint]:
        """Return daily VIX closes in ascending date order; start and end inclusive."""

    @abstractmethod
    async def get_spx_history(
        self,
        start: date,
        end: date,
        source: DataSource = DataSource.YAHOO,
    ) -> list[DailyPoint]:
        """Return daily S&P 500 closes in ascending date order; start and end inclusive."""

    @abstractmethod
    async def get_futures_term_structure(
        self,
        source: DataSource = DataSource.YAHOO,
    ) -> list[FuturesQuote]:
        """Return the current curve ordered Spot, M1, M2, …"""
