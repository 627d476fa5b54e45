"""Series alignment service.

Joins the VIX and S&P 500 daily series on date and derives the S&P daily
percent change used by the correlation view.
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from src.domain.models.market_data import CorrelationPoint, DailyPoint

CHANGE_DECIMALS = 4


class AlignmentService:
    """Pure computation service that inner-joins two daily series by date.

    The class is stateless; all inputs are passed per-call.
    """

    def align(
        self,
        vix: Sequence[DailyPoint],
        spx: Sequence[DailyPoint],
    ) -> list[CorrelationPoint]:
        """Pair every VIX close with the S&P close of the same date.

        Join semantics:
          - Dates present in vix but not in spx are dropped (no gap filling).
          - Duplicate spx dates keep the last occurrence.
          - Output follows vix order.

        spx_change_percent is computed over the *joined* rows, so each change
        is relative to the previous emitted S&P close rather than the previous
        calendar day.  The first emitted row has change 0.

        Hash join (pandas merge), O(|vix| + |spx|).

        Args:
            vix: VIX daily points in ascending date order.
            spx: S&P 500 daily points (any order).

        Returns:
            list[CorrelationPoint] in ascending date order.
        """
        if not vix or not spx:
            return []

        left = pd.DataFrame(
            {
                "point_date": [p.point_date for p in vix],
                "vix_close": [p.close for p in vix],
                "year": [p.year for p in vix],
            }
        )
        right = pd.DataFrame(
            {
                "point_date": [p.point_date for p in spx],
                "spx_close": [p.close for p in spx],
            }
        ).drop_duplicates(subset="point_date", keep="last")

        merged = left.merge(right, on="point_date", how="inner", sort=False)
        if merged.empty:
            return []

        change = merged["spx_close"].pct_change(fill_method=None) * 100.0
        merged["spx_change_percent"] = change.fillna(0.0).round(CHANGE_DECIMALS)

        return [
            CorrelationPoint(
                point_date=row.point_date,
                vix_close=float(row.vix_close),
                spx_close=float(row.spx_close),
                spx_change_percent=float(row.spx_change_percent),
                year=int(row.year),
            )
            for row in merged.itertuples(index=False)
        ]
