"""Unit tests for TrendService (OLS trendline)."""

import pytest

from src.domain.models.trend import TrendPoint
from src.domain.services.trend import TrendService


@pytest.fixture
def service() -> TrendService:
    return TrendService()


class TestFitLine:
    def test_points_on_known_line_round_trip(self, service):
        """y = 2x + 1 is recovered exactly at both endpoints."""
        points = [TrendPoint(x=x, y=2 * x + 1) for x in (3.0, -1.0, 7.5, 0.0, 12.0)]
        segment = service.fit_line(points)
        assert segment is not None
        for p in segment.points:
            assert p.y == pytest.approx(2 * p.x + 1)
        assert segment.slope == pytest.approx(2.0)
        assert segment.intercept == pytest.approx(1.0)

    def test_endpoints_span_observed_domain(self, service):
        points = [TrendPoint(x=x, y=-x) for x in (14.0, 30.0, 22.0)]
        segment = service.fit_line(points)
        assert segment.start.x == 14.0
        assert segment.end.x == 30.0

    def test_noisy_points_match_least_squares(self, service):
        points = [
            TrendPoint(x=1.0, y=1.0),
            TrendPoint(x=2.0, y=2.0),
            TrendPoint(x=3.0, y=2.0),
        ]
        segment = service.fit_line(points)
        # slope = (3·11 − 6·5) / (3·14 − 36) = 0.5, intercept = (5 − 0.5·6) / 3
        assert segment.slope == pytest.approx(0.5)
        assert segment.intercept == pytest.approx(2.0 / 3.0)

    def test_fewer_than_two_points_returns_none(self, service):
        assert service.fit_line([]) is None
        assert service.fit_line([TrendPoint(x=1.0, y=1.0)]) is None

    def test_identical_x_returns_none(self, service):
        points = [TrendPoint(x=20.0, y=y) for y in (-1.0, 0.5, 2.0)]
        assert service.fit_line(points) is None

    def test_non_finite_input_returns_none(self, service):
        points = [TrendPoint(x=1.0, y=1.0), TrendPoint(x=float("inf"), y=2.0)]
        assert service.fit_line(points) is None
