"""Trendline domain models.

TrendPoint   — an (x, y) observation or line endpoint
TrendSegment — the fitted OLS line evaluated at the observed min and max x
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class TrendPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class TrendSegment(BaseModel):
    """Straight segment spanning the observed x domain of the fitted window.

    slope and intercept are retained so renderers can annotate the line.
    """

    model_config = ConfigDict(frozen=True)

    start: TrendPoint
    end: TrendPoint
    slope: float
    intercept: float

    @model_validator(mode="after")
    def _ordered(self) -> TrendSegment:
        if self.start.x > self.end.x:
            raise ValueError(
                f"segment start x ({self.start.x}) must not exceed end x ({self.end.x})"
            )
        return self

    @property
    def points(self) -> tuple[TrendPoint, TrendPoint]:
        return self.start, self.end
