"""Tests for src/domain/models/market_data.py."""

from datetime import date

import pytest
from pydantic import ValidationError

from src.domain.models.market_data import CorrelationPoint, DailyPoint, FuturesQuote


# --- DailyPoint ---

def test_daily_point_reads_date_alias():
    point = DailyPoint.model_validate({"date": "2024-01-15", "close": 13.2, "year": 2024})
    assert point.point_date == date(2024, 1, 15)


def test_daily_point_accepts_field_name():
    point = DailyPoint(point_date=date(2024, 1, 15), close=13.2, year=2024)
    assert point.close == 13.2


def test_daily_point_optional_ohlc_default_to_none():
    point = DailyPoint(point_date=date(2024, 1, 15), close=13.2, year=2024)
    assert point.open is None
    assert point.high is None
    assert point.low is None


def test_daily_point_close_zero_raises():
    with pytest.raises(ValidationError):
        DailyPoint(point_date=date(2024, 1, 15), close=0.0, year=2024)


def test_daily_point_close_negative_raises():
    with pytest.raises(ValidationError):
        DailyPoint(point_date=date(2024, 1, 15), close=-1.0, year=2024)


def test_daily_point_is_frozen():
    point = DailyPoint(point_date=date(2024, 1, 15), close=13.2, year=2024)
    with pytest.raises(ValidationError):
        point.close = 99.0  # type: ignore[misc]


# --- CorrelationPoint ---

def test_correlation_point_allows_negative_change():
    point = CorrelationPoint(
        point_date=date(2024, 1, 15),
        vix_close=20.0,
        spx_close=4700.0,
        spx_change_percent=-1.25,
        year=2024,
    )
    assert point.spx_change_percent == -1.25


# --- FuturesQuote ---

@pytest.mark.parametrize("month", ["Spot", "M1", "M7"])
def test_futures_quote_accepts_known_tenors(month):
    assert FuturesQuote(month=month, price=15.0).month == month


@pytest.mark.parametrize("month", ["M0", "M8", "spot", ""])
def test_futures_quote_rejects_unknown_tenors(month):
    with pytest.raises(ValidationError):
        FuturesQuote(month=month, price=15.0)


def test_futures_quote_negative_price_raises():
    with pytest.raises(ValidationError):
        FuturesQuote(month="M1", price=-0.5)
