"""Distribution (histogram) domain models.

UpperTailPercent — share of observations at or above a bucket, as a tagged variant
Bucket           — one histogram bar
HistogramResult  — buckets plus window statistics and axis ticks
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .enums import BinWidth, PercentKind

BELOW_THRESHOLD_LABEL = "<0.1"


class UpperTailPercent(BaseModel):
    """Percentage of days at or above a bucket's level.

    Values strictly between 0 and 0.1 are too small to show with one decimal
    and are carried as kind=BELOW_THRESHOLD with no value.  Formatting to a
    display string happens only in display().
    """

    model_config = ConfigDict(frozen=True)

    kind: PercentKind
    value: float | None = Field(default=None, ge=0.0, le=100.0)

    @classmethod
    def from_percent(cls, pct: float) -> UpperTailPercent:
        if 0.0 < pct < 0.1:
            return cls(kind=PercentKind.BELOW_THRESHOLD)
        return cls(kind=PercentKind.NUMERIC, value=pct)

    def display(self) -> str:
        if self.kind == PercentKind.BELOW_THRESHOLD:
            return BELOW_THRESHOLD_LABEL
        return f"{self.value:.1f}"


class Bucket(BaseModel):
    """One histogram bar.

    index is the bar's position in HistogramResult.buckets; renderers use it
    for hover correlation instead of matching on label.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    label: str
    numeric_value: float
    count: int = Field(ge=0)
    upper_tail: UpperTailPercent


class HistogramResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    bin_width: BinWidth
    buckets: list[Bucket] = Field(default_factory=list)
    mean: float = 0.0
    median: float = 0.0
    ticks: list[str] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)

    @property
    def is_empty(self) -> bool:
        return not self.buckets

    @classmethod
    def empty(cls, bin_width: BinWidth) -> HistogramResult:
        return cls(bin_width=bin_width)
