"""Domain model package.

All domain objects are pure Python / Pydantic models with no HTTP or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .distribution import Bucket, HistogramResult, UpperTailPercent
from .enums import (
    BinWidth,
    DataSource,
    DefaultWindow,
    DragHandle,
    PercentKind,
    TermStructureState,
    TimeRange,
    ViewStatus,
)
from .market_data import CorrelationPoint, DailyPoint, FuturesQuote
from .selection import SelectionRange
from .term_structure import TermStructureSummary
from .trend import TrendPoint, TrendSegment

__all__ = [
    # enums
    "BinWidth",
    "DataSource",
    "DefaultWindow",
    "DragHandle",
    "PercentKind",
    "TermStructureState",
    "TimeRange",
    "ViewStatus",
    # market data
    "CorrelationPoint",
    "DailyPoint",
    "FuturesQuote",
    # distribution
    "Bucket",
    "HistogramResult",
    "UpperTailPercent",
    # selection
    "SelectionRange",
    # trend
    "TrendPoint",
    "TrendSegment",
    # term structure
    "TermStructureSummary",
]
