"""Tests for FuturesView (term structure and placeholder curve)."""

import pytest

from src.domain.errors import EmptySeries, FetchTimeout
from src.domain.models.enums import TermStructureState, TimeRange, ViewStatus
from src.domain.models.market_data import FuturesQuote
from src.views.futures import FuturesView

LIVE_CURVE = [
    FuturesQuote(month=m, price=p)
    for m, p in zip(("Spot", "M1", "M2", "M3"), (19.0, 18.2, 17.6, 17.4))
]


@pytest.fixture
def view(repository) -> FuturesView:
    return FuturesView(repository)


async def test_live_quotes_replace_placeholder(view, repository):
    repository.futures = LIVE_CURVE
    await view.load()
    assert view.status == ViewStatus.READY
    assert not view.is_placeholder
    assert view.chart_data == LIVE_CURVE


async def test_summary_reads_m1_and_m2(view, repository):
    repository.futures = LIVE_CURVE
    await view.load()
    summary = view.summary
    assert summary.m1_price == 18.2
    assert summary.m2_price == 17.6
    assert summary.state == TermStructureState.BACKWARDATION


async def test_no_quotes_shows_placeholder_for_range(view):
    await view.load()
    assert view.status == ViewStatus.EMPTY
    assert isinstance(view.error, EmptySeries)
    assert view.is_placeholder
    assert len(view.chart_data) == 8
    assert view.summary.state == TermStructureState.CONTANGO


async def test_time_range_switches_placeholder(view):
    await view.load()
    one_year = view.chart_data
    view.hover(2)
    view.set_time_range("1M")
    assert view.time_range is TimeRange.ONE_MONTH
    assert view.chart_data != one_year
    assert view.summary.state == TermStructureState.BACKWARDATION
    assert view.hover_index is None


def test_invalid_time_range_rejected(view):
    with pytest.raises(ValueError):
        view.set_time_range("2Y")


async def test_hover_quote_by_index(view, repository):
    repository.futures = LIVE_CURVE
    await view.load()
    view.hover(1)
    assert view.hovered_quote.month == "M1"
    view.hover(4)
    assert view.hovered_quote is None


async def test_timeout_keeps_previous_curve(view, repository):
    repository.futures = LIVE_CURVE
    await view.load()
    repository.failures["futures"] = FetchTimeout("http://t/api/futures", 10.0)
    await view.reload()
    assert view.status == ViewStatus.ERROR
    assert isinstance(view.error, FetchTimeout)
    assert view.quotes == LIVE_CURVE
