"""Histogram service for the VIX distribution view.

Pipeline:
    histogram
        → _bucket_steps      (integer bucket index per close)
        → _build_buckets     (counts + upper-tail percent per bucket)
        → _ticks             (readable axis labels)

Bucket boundaries are handled as integer multiples of the bin width so that
stepping by 0.1 never accumulates floating-point drift into extra or missing
buckets.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from src.domain.models.distribution import Bucket, HistogramResult, UpperTailPercent
from src.domain.models.enums import BinWidth
from src.domain.models.market_data import DailyPoint

# Rounding applied to close / bin_width before floor/ceil; absorbs binary
# representation error such as 0.3 / 0.1 == 2.9999999999999996.
_STEP_PRECISION = 9


class HistogramService:
    """Pure computation service for bucket counts, window statistics and ticks.

    The class is stateless; all configuration is passed per-call.
    """

    # ------------------------------------------------------------------ #
    # Public API                                                           #
    # ------------------------------------------------------------------ #

    def histogram(
        self,
        points: Sequence[DailyPoint],
        bin_width: BinWidth = BinWidth.ONE,
    ) -> HistogramResult:
        """Bucket the closes of `points` at the given bin width.

        Statistics:
          mean   — arithmetic mean of close.
          median — upper median: sorted(close)[n // 2].

        Buckets span floor(min / w)·w … ceil(max / w)·w inclusive, one per
        multiple of w, including empty ones so the rendered axis has no gaps.
        Each bucket carries the percentage of the window at or above it.

        An empty window yields an empty result (no buckets, zero statistics);
        this method never raises for empty input.

        Args:
            points: The selected window of daily points.
            bin_width: Bucket granularity (1, 0.5 or 0.1).

        Returns:
            HistogramResult with buckets in ascending numeric order.
        """
        bin_width = BinWidth(bin_width)
        if not points:
            return HistogramResult.empty(bin_width)

        closes = np.fromiter((p.close for p in points), dtype=float, count=len(points))
        steps = self._bucket_steps(closes, bin_width)
        min_step = int(math.floor(round(float(closes.min()) / bin_width.value, _STEP_PRECISION)))
        max_step = int(math.ceil(round(float(closes.max()) / bin_width.value, _STEP_PRECISION)))

        buckets = self._build_buckets(steps, min_step, max_step, bin_width)
        ticks = self._ticks(
            round(min_step * bin_width.value, 1),
            round(max_step * bin_width.value, 1),
            bin_width,
        )

        return HistogramResult(
            bin_width=bin_width,
            buckets=buckets,
            mean=float(closes.mean()),
            median=float(np.sort(closes)[len(closes) // 2]),
            ticks=ticks,
            total_count=len(closes),
        )

    # ------------------------------------------------------------------ #
    # Pipeline stages                                                      #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _bucket_steps(closes: np.ndarray, bin_width: BinWidth) -> np.ndarray:
        """Integer k such that each close falls in bucket k·w."""
        return np.floor(np.round(closes / bin_width.value, _STEP_PRECISION)).astype(int)

    @staticmethod
    def _build_buckets(
        steps: np.ndarray,
        min_step: int,
        max_step: int,
        bin_width: BinWidth,
    ) -> list[Bucket]:
        """Count closes per bucket and attach the upper-tail percentage.

        Upper tail is accumulated from the highest bucket downward, so the
        percentage is non-decreasing as the bucket value decreases.
        """
        counts = np.bincount(steps - min_step, minlength=max_step - min_step + 1)
        total = int(counts.sum())
        at_or_above = np.cumsum(counts[::-1])[::-1]

        buckets: list[Bucket] = []
        for offset, count in enumerate(counts):
            value = (min_step + offset) * bin_width.value
            label = bin_width.format(value)
            pct = float(at_or_above[offset]) / total * 100.0 if total else 0.0
            buckets.append(
                Bucket(
                    index=offset,
                    label=label,
                    numeric_value=float(label),
                    count=int(count),
                    upper_tail=UpperTailPercent.from_percent(pct),
                )
            )
        return buckets

    @staticmethod
    def _ticks(min_bucket: float, max_bucket: float, bin_width: BinWidth) -> list[str]:
        """Ruler-style axis labels at integer levels divisible by a span-based step.

        span < 5 → 1, span < 15 → 2, span > 60 → 10, otherwise 5.
        """
        span = max_bucket - min_bucket
        if span < 5:
            step = 1
        elif span < 15:
            step = 2
        elif span > 60:
            step = 10
        else:
            step = 5

        return [
            bin_width.format(level)
            for level in range(math.floor(min_bucket), math.ceil(max_bucket) + 1)
            if level % step == 0
        ]
