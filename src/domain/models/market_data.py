"""Market data domain models.

DailyPoint       — one daily close of an index (VIX or S&P 500) as returned by the data endpoints.
CorrelationPoint — a VIX close joined with the same day's S&P 500 close and its daily change.
FuturesQuote     — one point of the VIX futures term structure (Spot, M1..M7).

All are immutable value objects (no identity beyond their natural key).
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class DailyPoint(BaseModel):
    """Daily close for one index.

    point_date is read from the endpoint's `date` field (ISO yyyy-mm-dd).
    close is the only field used in analytics; open/high/low are optional
    because the endpoints omit them for some sessions.
    year is the calendar year of point_date as reported by the endpoint.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    point_date: date = Field(alias="date")
    close: float = Field(gt=0.0)
    year: int
    open: float | None = Field(default=None, gt=0.0)
    high: float | None = Field(default=None, gt=0.0)
    low: float | None = Field(default=None, gt=0.0)


class CorrelationPoint(BaseModel):
    """VIX close paired with the S&P 500 close of the same date.

    spx_change_percent is the percent change from the previous *paired* S&P
    close, rounded to 4 decimal places; 0 for the first point of a series.
    """

    model_config = ConfigDict(frozen=True)

    point_date: date
    vix_close: float
    spx_close: float
    spx_change_percent: float
    year: int


class FuturesQuote(BaseModel):
    """Settlement price for one tenor of the VIX term structure.

    month is "Spot" for the cash index, "M1".."M7" for successive futures.
    """

    model_config = ConfigDict(frozen=True)

    month: str = Field(pattern=r"^(Spot|M[1-7])$")
    price: float = Field(ge=0.0)
