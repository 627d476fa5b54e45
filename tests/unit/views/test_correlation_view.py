"""Tests for CorrelationView (aligned VIX/SPX scatter and trendline)."""

import asyncio
from datetime import date

import pytest

from src.domain.errors import FetchFailed
from src.domain.models.enums import DataSource, ViewStatus
from src.views.correlation import CorrelationView


@pytest.fixture
def view(repository) -> CorrelationView:
    return CorrelationView(repository, end=date(2024, 12, 31))


async def test_fetches_both_series_with_source(repository, series):
    repository.vix = series([15.0, 16.0])
    repository.spx = series([4000.0, 4040.0])
    view = CorrelationView(repository, source=DataSource.CBOE)
    await view.load()
    assert sorted(repository.calls) == [("spx", DataSource.CBOE), ("vix", DataSource.CBOE)]


async def test_history_is_date_aligned(view, repository, series):
    repository.vix = series([15.0, 20.0, 18.0])
    repository.spx = [p for i, p in enumerate(series([100.0, 95.0, 99.0])) if i != 1]
    await view.load()
    assert view.status == ViewStatus.READY
    assert [p.vix_close for p in view.history] == [15.0, 18.0]
    assert view.history[0].spx_change_percent == 0.0
    assert view.history[1].spx_change_percent == pytest.approx(-1.0)


async def test_opens_on_trailing_year(view, repository, series):
    repository.vix = series([float(12 + i % 9) for i in range(400)])
    repository.spx = series([4000.0 + i for i in range(400)])
    await view.load()
    assert (view.selection.start_index, view.selection.end_index) == (35, 399)
    assert len(view.scatter) == 365


async def test_scatter_maps_vix_to_x_and_change_to_y(view, repository, series):
    repository.vix = series([15.0, 16.0])
    repository.spx = series([100.0, 102.0])
    await view.load()
    assert [(p.x, p.y) for p in view.scatter] == [(15.0, 0.0), (16.0, 2.0)]


async def test_trend_spans_window_x_range(view, repository, series):
    repository.vix = series([10.0, 20.0, 30.0])
    repository.spx = series([100.0, 99.0, 97.02])
    await view.load()
    trend = view.trend
    assert trend.start.x == 10.0
    assert trend.end.x == 30.0
    assert trend.slope < 0


async def test_constant_vix_window_has_no_trend(view, repository, series):
    repository.vix = series([15.0, 15.0, 15.0])
    repository.spx = series([100.0, 101.0, 99.0])
    await view.load()
    assert view.trend is None


async def test_hover_nearest_picks_closest_vix(view, repository, series):
    repository.vix = series([12.0, 25.0, 18.0])
    repository.spx = series([100.0, 97.0, 98.0])
    await view.load()
    assert view.hover_nearest(19.1) == 2
    assert view.hovered_point.vix_close == 18.0


async def test_hover_nearest_on_empty_window(view):
    await view.load()
    assert view.hover_nearest(20.0) is None


async def test_failure_of_either_series_fails_view(view, repository, series):
    repository.vix = series([15.0, 16.0])
    repository.spx = series([100.0, 101.0])
    repository.failures["spx"] = FetchFailed("http://t/api/spx", "API Error: 500", 500)
    await view.load()
    assert view.status == ViewStatus.ERROR
    assert isinstance(view.error, FetchFailed)
    assert view.history == []


async def test_failed_request_cancels_its_sibling(view, repository, series):
    repository.spx = series([100.0, 101.0])
    repository.failures["vix"] = FetchFailed("http://t/api/vix", "API Error: 500", 500)
    repository.holds["spx"] = asyncio.Event()
    await view.load()
    assert view.status == ViewStatus.ERROR
    assert len(repository.tasks) == 2
    assert all(task.done() for task in repository.tasks)
    assert repository.tasks[1].cancelled()


async def test_retry_after_failure_has_one_request_per_series(view, repository, series):
    repository.vix = series([15.0, 16.0])
    repository.spx = series([100.0, 101.0])
    repository.failures["vix"] = FetchFailed("http://t/api/vix", "API Error: 500", 500)
    repository.holds["spx"] = asyncio.Event()
    await view.load()
    pending = view.retry()
    for _ in range(3):
        await asyncio.sleep(0)
    live = [task for task in repository.tasks if not task.done()]
    assert len(live) == 1
    assert [name for name, _ in repository.calls].count("spx") == 2
    repository.holds["spx"].set()
    await pending
    assert view.status == ViewStatus.READY


async def test_close_cancels_both_requests(view, repository):
    repository.gate = asyncio.Event()
    view.refresh()
    for _ in range(3):
        await asyncio.sleep(0)
    await view.close()
    assert len(repository.tasks) == 2
    assert all(task.cancelled() for task in repository.tasks)


async def test_disjoint_dates_are_empty(view, repository, series):
    repository.vix = series([15.0, 16.0], start=date(2023, 1, 2))
    repository.spx = series([100.0, 101.0], start=date(2023, 6, 1))
    await view.load()
    assert view.status == ViewStatus.EMPTY
    assert view.trend is None
