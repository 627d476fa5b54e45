"""Domain enumerations for the VIX dashboard.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (Pydantic default behaviour).
"""

from enum import Enum


class DataSource(str, Enum):
    YAHOO = "yahoo"
    CBOE = "cboe"


class DefaultWindow(str, Enum):
    """Selection a view shows on first load, before any drag."""

    FULL = "FULL"
    TRAILING_365 = "TRAILING_365"

    def initial_range(self, length: int) -> tuple[int, int]:
        """(start, end) indices of the default window over a series of `length` points."""
        end = length - 1
        if self is DefaultWindow.TRAILING_365:
            return max(0, length - 365), end
        return 0, end


class DragHandle(str, Enum):
    START = "start"
    END = "end"


class BinWidth(float, Enum):
    """Histogram bucket granularity in index points."""

    ONE = 1.0
    HALF = 0.5
    TENTH = 0.1

    @property
    def decimals(self) -> int:
        """Decimal places used for bucket and tick labels."""
        return 0 if self is BinWidth.ONE else 1

    def format(self, value: float) -> str:
        return f"{value:.{self.decimals}f}"


class TimeRange(str, Enum):
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    FIVE_YEARS = "5Y"
    ALL = "ALL"


class TermStructureState(str, Enum):
    CONTANGO = "contango"
    BACKWARDATION = "backwardation"


class PercentKind(str, Enum):
    NUMERIC = "numeric"
    BELOW_THRESHOLD = "below_threshold"


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    EMPTY = "empty"
    ERROR = "error"
