"""Domain services package."""

from .alignment import AlignmentService
from .histogram import HistogramService
from .range_selector import MIN_WINDOW, RangeSelector
from .term_structure import TermStructureService
from .trend import TrendService

__all__ = [
    "AlignmentService",
    "HistogramService",
    "MIN_WINDOW",
    "RangeSelector",
    "TermStructureService",
    "TrendService",
]
