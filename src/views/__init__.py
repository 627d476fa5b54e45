"""Dashboard view controllers.

Exports the three controllers and the build_views() factory for wiring at
the application boundary.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from src.domain.repositories.market_data import MarketDataRepository
from src.infrastructure.config import Settings, get_settings

from .base import RangedViewController, ViewController
from .correlation import CorrelationView
from .distribution import DistributionView
from .futures import FuturesView


@dataclass
class Views:
    """All view controllers bound to a single repository."""

    distribution: DistributionView
    correlation: CorrelationView
    futures: FuturesView

    def __iter__(self) -> Iterator[ViewController]:
        return iter((self.distribution, self.correlation, self.futures))


def build_views(
    repository: MarketDataRepository,
    settings: Settings | None = None,
) -> Views:
    """Construct every view with the configured data source and history start.

        async with HttpMarketDataRepository.from_settings(settings) as repo:
            views = build_views(repo, settings)
            await views.distribution.load()
    """
    settings = settings or get_settings()
    return Views(
        distribution=DistributionView(
            repository, source=settings.data_source, start=settings.history_start
        ),
        correlation=CorrelationView(
            repository, source=settings.data_source, start=settings.history_start
        ),
        futures=FuturesView(repository, source=settings.data_source),
    )


__all__ = [
    "CorrelationView",
    "DistributionView",
    "FuturesView",
    "RangedViewController",
    "ViewController",
    "Views",
    "build_views",
]
