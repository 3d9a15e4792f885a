"""
Tests for historical trend analysis.
"""

from datetime import timedelta
from unittest.mock import Mock

import pytest

from src.coastal_monitor.models import ParameterKind, TrendDirection
from src.coastal_monitor.services.trend_analyzer import (
    TrendAnalyzer,
    least_squares_slope,
    slope_direction,
)


@pytest.mark.unit
class TestLeastSquaresSlope:
    """Test cases for the slope fit."""

    def test_exact_line(self):
        assert least_squares_slope([0, 1, 2, 3], [1.0, 3.0, 5.0, 7.0]) == pytest.approx(2.0)

    def test_shared_timestamp_gives_zero(self):
        assert least_squares_slope([5, 5, 5], [1.0, 2.0, 3.0]) == 0.0

    def test_single_point_gives_zero(self):
        assert least_squares_slope([5], [1.0]) == 0.0

    @pytest.mark.parametrize("slope, expected", [
        (0.0011, TrendDirection.INCREASING),
        (0.001, TrendDirection.STABLE),
        (-0.001, TrendDirection.STABLE),
        (-0.0011, TrendDirection.DECREASING),
    ])
    def test_direction_thresholds(self, slope, expected):
        assert slope_direction(slope) == expected


@pytest.mark.unit
class TestTrendAnalyzer:
    """Test cases for TrendAnalyzer."""

    @pytest.fixture
    def provider(self):
        return Mock()

    @pytest.fixture
    def analyzer(self, provider):
        return TrendAnalyzer(provider=provider, logger=Mock())

    def _ms_spaced(self, make_response, values):
        """Response whose observations are one millisecond apart."""
        response = make_response(values)
        start = response.data[0].timestamp
        from dataclasses import replace
        data = tuple(
            replace(o, timestamp=start + timedelta(milliseconds=i))
            for i, o in enumerate(response.data)
        )
        return replace(response, data=data)

    def test_increasing_millisecond_series(self, analyzer, provider, make_response, fixed_now):
        provider.fetch.return_value = self._ms_spaced(make_response, [0.0, 0.5, 1.0, 1.5])
        result = analyzer.analyze(ParameterKind.SST, days=30, now=fixed_now)

        stats = result.statistics
        assert stats.slope == pytest.approx(0.5)
        assert stats.trend == TrendDirection.INCREASING
        assert stats.min == 0.0
        assert stats.max == 1.5
        assert stats.average == pytest.approx(0.75)
        assert stats.data_points == 4

    def test_decreasing_millisecond_series(self, analyzer, provider, make_response, fixed_now):
        provider.fetch.return_value = self._ms_spaced(make_response, [3.0, 2.0, 1.0])
        result = analyzer.analyze(ParameterKind.WIND, now=fixed_now)

        assert result.statistics.slope == pytest.approx(-1.0)
        assert result.statistics.trend == TrendDirection.DECREASING

    def test_direction_uses_unrounded_slope(self, analyzer, provider, make_response, fixed_now):
        # 0.0010004 reports as 0.001 but still clears the threshold
        provider.fetch.return_value = self._ms_spaced(
            make_response, [0.0, 0.0010004, 0.0020008]
        )
        result = analyzer.analyze(ParameterKind.SST, now=fixed_now)

        assert result.statistics.trend == TrendDirection.INCREASING
        assert result.statistics.slope == pytest.approx(0.001)

    def test_hourly_series_is_stable(self, analyzer, provider, make_response, fixed_now):
        # a rise of 10 units per hour is far below 0.001 units per millisecond
        provider.fetch.return_value = make_response([0.0, 10.0, 20.0])
        result = analyzer.analyze(ParameterKind.SST, now=fixed_now)

        assert result.statistics.trend == TrendDirection.STABLE
        assert result.statistics.slope == pytest.approx(0.000003, abs=1e-6)

    def test_flat_series(self, analyzer, provider, make_response, fixed_now):
        provider.fetch.return_value = make_response([4.0, 4.0, 4.0])
        result = analyzer.analyze(ParameterKind.SST, now=fixed_now)

        assert result.statistics.slope == 0.0
        assert result.statistics.trend == TrendDirection.STABLE

    def test_query_window(self, analyzer, provider, make_response, fixed_now):
        provider.fetch.return_value = make_response([1.0])
        result = analyzer.analyze(ParameterKind.CHLOROPHYLL, days=7, now=fixed_now)

        kind, query = provider.fetch.call_args[0]
        assert kind == ParameterKind.CHLOROPHYLL
        assert query.start_date == fixed_now - timedelta(days=7)
        assert query.end_date == fixed_now
        assert result.time_range == (query.start_date, query.end_date)

    def test_empty_data_gives_none(self, analyzer, provider, make_response, fixed_now):
        provider.fetch.return_value = make_response([])
        assert analyzer.analyze(ParameterKind.SST, now=fixed_now) is None

    def test_error_gives_none(self, analyzer, provider, make_response, fixed_now):
        provider.fetch.return_value = make_response([], error="down")
        assert analyzer.analyze(ParameterKind.SST, now=fixed_now) is None

    def test_to_dict_omits_data_by_default(self, analyzer, provider, make_response, fixed_now):
        provider.fetch.return_value = make_response([1.0, 2.0])
        result = analyzer.analyze(ParameterKind.SST, now=fixed_now)

        assert "data" not in result.to_dict()
        assert len(result.to_dict(include_data=True)["data"]) == 2
        assert result.to_dict()["statistics"]["trend"] == "stable"
