"""Domain error taxonomy.

FetchError subclasses are raised by MarketDataRepository implementations and
caught by view controllers, which surface them as an error state.

EmptySeries and DegenerateFit describe algorithmic edge cases.  They are
never propagated to callers: services return an empty/neutral result, and
controllers record EmptySeries on the view state instead of raising it.
"""

from __future__ import annotations


class MarketDataError(Exception):
    """Base class for all dashboard data errors."""


class FetchError(MarketDataError):
    """A request to the market-data endpoints did not produce usable data."""


class FetchTimeout(FetchError):
    def __init__(self, url: str, timeout: float) -> None:
        self.url = url
        self.timeout = timeout
        super().__init__(f"Request to {url} timed out after {timeout:g}s")


class FetchFailed(FetchError):
    """Non-2xx response, network failure, or malformed payload.

    status_code is None when no HTTP response was received or the body could
    not be decoded.
    """

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Request to {url} failed: {reason}")


class EmptySeries(MarketDataError):
    """A fetch succeeded but returned zero usable points."""

    def __init__(self, series: str) -> None:
        self.series = series
        super().__init__(f"No usable data points in {series} series")


class DegenerateFit(MarketDataError):
    """Trend line is undefined because every x value is identical."""
