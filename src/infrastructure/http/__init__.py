"""HTTP implementations of the domain repository interfaces."""

from .market_data import HttpMarketDataRepository

__all__ = ["HttpMarketDataRepository"]
