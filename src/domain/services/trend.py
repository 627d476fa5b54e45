"""Trend estimation service.

Ordinary-least-squares line over an arbitrary point set, returned as the
two-point segment a scatter chart draws across the observed x domain.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from src.domain.errors import DegenerateFit
from src.domain.models.trend import TrendPoint, TrendSegment

logger = logging.getLogger(__name__)


class TrendService:
    """Pure computation service for OLS trendlines.

    The class is stateless; all inputs are passed per-call.
    """

    def fit_line(self, points: Sequence[TrendPoint]) -> TrendSegment | None:
        """Fit y = m·x + b and evaluate it at min(x) and max(x).

          m = (nΣxy − ΣxΣy) / (nΣx² − (Σx)²)
          b = (Σy − mΣx) / n

        Returns None (no line rendered) when fewer than two points are given
        or the fit is degenerate (every x identical).

        Args:
            points: Observations in any order.

        Returns:
            TrendSegment spanning the observed x domain, or None.
        """
        if len(points) < 2:
            return None

        x = np.fromiter((p.x for p in points), dtype=float, count=len(points))
        y = np.fromiter((p.y for p in points), dtype=float, count=len(points))

        try:
            slope, intercept = self._solve(x, y)
        except DegenerateFit as exc:
            logger.debug("Skipping trendline over %d points: %s", len(points), exc)
            return None

        x_min = float(x.min())
        x_max = float(x.max())
        return TrendSegment(
            start=TrendPoint(x=x_min, y=slope * x_min + intercept),
            end=TrendPoint(x=x_max, y=slope * x_max + intercept),
            slope=slope,
            intercept=intercept,
        )

    # ------------------------------------------------------------------ #
    # Internals                                                            #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _solve(x: np.ndarray, y: np.ndarray) -> tuple[float, float]:
        """Return (slope, intercept); raise DegenerateFit when undefined."""
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise DegenerateFit("non-finite input values")
        if float(np.ptp(x)) == 0.0:
            raise DegenerateFit(f"all x values equal {x[0]:g}")

        n = float(len(x))
        sum_x = float(x.sum())
        sum_y = float(y.sum())
        sum_xy = float((x * y).sum())
        sum_x2 = float((x * x).sum())

        denominator = n * sum_x2 - sum_x * sum_x
        if denominator == 0.0:
            raise DegenerateFit("zero variance in x")

        slope = (n * sum_xy - sum_x * sum_y) / denominator
        intercept = (sum_y - slope * sum_x) / n
        if not (np.isfinite(slope) and np.isfinite(intercept)):
            raise DegenerateFit("non-finite slope or intercept")
        return slope, intercept
