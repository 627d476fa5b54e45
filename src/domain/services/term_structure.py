"""VIX futures term-structure service.

Summarizes the front of the curve (M1/M2 spread, contango vs. backwardation)
and provides the illustrative curve shown while no live quotes are available.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.domain.models.enums import TermStructureState, TimeRange
from src.domain.models.market_data import FuturesQuote
from src.domain.models.term_structure import TermStructureSummary

TENORS: tuple[str, ...] = ("Spot", "M1", "M2", "M3", "M4", "M5", "M6", "M7")

# Representative curve shapes per look-back preset: an inverted curve for the
# most recent month, progressively flatter/steeper contango further back.
_PLACEHOLDER_CURVES: dict[TimeRange, tuple[float, ...]] = {
    TimeRange.ONE_MONTH: (21.5, 20.8, 20.2, 19.8, 19.5, 19.2, 19.0, 18.9),
    TimeRange.THREE_MONTHS: (18.0, 18.2, 18.5, 18.9, 19.2, 19.4, 19.6, 19.8),
    TimeRange.SIX_MONTHS: (13.5, 14.8, 15.9, 16.7, 17.4, 17.9, 18.2, 18.5),
    TimeRange.ONE_YEAR: (14.5, 15.2, 16.1, 16.8, 17.2, 17.5, 17.7, 17.9),
    TimeRange.FIVE_YEARS: (16.0, 16.5, 17.2, 17.8, 18.2, 18.5, 18.8, 19.0),
    TimeRange.ALL: (19.5, 19.8, 20.1, 20.4, 20.6, 20.8, 21.0, 21.2),
}


class TermStructureService:
    """Pure computation service for futures curves.

    The class is stateless; all inputs are passed per-call.
    """

    def summarize(self, quotes: Sequence[FuturesQuote]) -> TermStructureSummary:
        """Front-spread reading of the curve.

        Missing M1 or M2 quotes are treated as 0.0, so an empty curve reads
        as flat contango (spread 0).
        """
        prices = {q.month: q.price for q in quotes}
        m1 = prices.get("M1", 0.0)
        m2 = prices.get("M2", 0.0)
        state = (
            TermStructureState.CONTANGO if m2 >= m1 else TermStructureState.BACKWARDATION
        )
        return TermStructureSummary(m1_price=m1, m2_price=m2, spread=m2 - m1, state=state)

    def placeholder_curve(self, time_range: TimeRange | str) -> list[FuturesQuote]:
        """Illustrative Spot..M7 curve for a look-back preset."""
        prices = _PLACEHOLDER_CURVES[TimeRange(time_range)]
        return [FuturesQuote(month=month, price=price) for month, price in zip(TENORS, prices)]
