"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in src/infrastructure/ and are wired at the
application boundary via dependency injection.
"""

from .market_data import MarketDataRepository

__all__ = [
    "MarketDataRepository",
]
