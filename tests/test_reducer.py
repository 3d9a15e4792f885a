"""
Tests for per-parameter reduction and risk classification.
"""

import pytest

from src.coastal_monitor.core import NoDataError
from src.coastal_monitor.models import (
    ParameterKind,
    RainfallIntensity,
    RiskLevel,
    TrendDirection,
)
from src.coastal_monitor.processing import DataProcessor
from src.coastal_monitor.processing.reducer import ParameterReducer, endpoint_trend
from src.coastal_monitor.processing.risk import bloom_risk, classify_risk, clamp


@pytest.mark.unit
class TestClassifyRisk:
    """Threshold boundaries for every parameter."""

    @pytest.mark.parametrize("kind, value, expected", [
        (ParameterKind.SST, 27.99, RiskLevel.LOW),
        (ParameterKind.SST, 28.0, RiskLevel.MEDIUM),
        (ParameterKind.SST, 30.0, RiskLevel.MEDIUM),
        (ParameterKind.SST, 30.01, RiskLevel.HIGH),
        (ParameterKind.SEA_LEVEL, 0.29, RiskLevel.LOW),
        (ParameterKind.SEA_LEVEL, 0.5, RiskLevel.MEDIUM),
        (ParameterKind.SEA_LEVEL, -0.6, RiskLevel.HIGH),
        (ParameterKind.CHLOROPHYLL, 0.49, RiskLevel.LOW),
        (ParameterKind.CHLOROPHYLL, 1.0, RiskLevel.MEDIUM),
        (ParameterKind.CHLOROPHYLL, 1.2, RiskLevel.HIGH),
        (ParameterKind.WIND, 9.9, RiskLevel.LOW),
        (ParameterKind.WIND, 10.0, RiskLevel.MEDIUM),
        (ParameterKind.WIND, 15.1, RiskLevel.HIGH),
        (ParameterKind.RAINFALL, 24.9, RiskLevel.LOW),
        (ParameterKind.RAINFALL, 50.0, RiskLevel.MEDIUM),
        (ParameterKind.RAINFALL, 50.5, RiskLevel.HIGH),
    ])
    def test_boundaries(self, kind, value, expected):
        assert classify_risk(kind, value) == expected

    @pytest.mark.parametrize("concentration, expected", [
        (0.5, RiskLevel.LOW),
        (0.51, RiskLevel.MEDIUM),
        (1.0, RiskLevel.MEDIUM),
        (1.01, RiskLevel.HIGH),
    ])
    def test_bloom_risk_thresholds_are_exclusive(self, concentration, expected):
        assert bloom_risk(concentration) == expected

    def test_clamp_open_sides(self):
        assert clamp(-5.0, 0.0, None) == 0.0
        assert clamp(500.0, None, None) == 500.0
        assert clamp(3.0, 0.0, 2.0) == 2.0


@pytest.mark.unit
class TestParameterReducer:
    """Test cases for ParameterReducer."""

    @pytest.fixture
    def reducer(self):
        return ParameterReducer()

    def test_empty_raises(self, reducer):
        with pytest.raises(NoDataError) as exc_info:
            reducer.reduce(ParameterKind.SST, [])
        assert exc_info.value.kind == "sst"

    def test_mean_for_instantaneous_parameters(self, reducer, make_observation):
        observations = [make_observation(27.0, 0), make_observation(29.0, 1)]
        summary = reducer.reduce(ParameterKind.SST, observations)

        assert summary.value == 28.0
        assert summary.risk == RiskLevel.MEDIUM
        assert summary.unit == "°C"
        assert summary.trend == TrendDirection.INCREASING

    def test_upper_medium_bound_is_inclusive(self, reducer, make_observation):
        summary = reducer.reduce(ParameterKind.SST, [make_observation(30.0)])
        assert summary.risk == RiskLevel.MEDIUM

    def test_risk_uses_unrounded_value(self, reducer, make_observation):
        summary = reducer.reduce(ParameterKind.SST, [make_observation(30.004)])

        assert summary.value == 30.0
        assert summary.risk == RiskLevel.HIGH

    def test_rainfall_is_summed(self, reducer, make_observation):
        observations = [
            make_observation(20.0, 0, accumulation=20.0, intensity=RainfallIntensity.MODERATE),
            make_observation(10.0, 1, accumulation=10.0, intensity=RainfallIntensity.LIGHT),
        ]
        summary = reducer.reduce(ParameterKind.RAINFALL, observations)

        assert summary.value == 30.0
        assert summary.risk == RiskLevel.MEDIUM
        assert summary.intensity == RainfallIntensity.MODERATE
        assert summary.trend == TrendDirection.DECREASING

    def test_wind_uses_speed(self, reducer, make_observation):
        observations = [
            make_observation(0.0, 0, speed=16.0, direction=90.0),
            make_observation(0.0, 1, speed=18.0, direction=270.0),
        ]
        summary = reducer.reduce(ParameterKind.WIND, observations)

        assert summary.value == 17.0
        assert summary.risk == RiskLevel.HIGH
        assert summary.direction == 90.0

    def test_sea_level_negative_mean_is_high(self, reducer, make_observation):
        observations = [make_observation(-0.6, 0, trend=0.003), make_observation(-0.7, 1)]
        summary = reducer.reduce(ParameterKind.SEA_LEVEL, observations)

        assert summary.value == -0.65
        assert summary.risk == RiskLevel.HIGH
        assert summary.trend_rate == 0.003

    def test_chlorophyll_bloom_risk(self, reducer, make_observation):
        observations = [make_observation(1.2, 0, bloom_risk=RiskLevel.HIGH)]
        summary = reducer.reduce(ParameterKind.CHLOROPHYLL, observations)

        assert summary.bloom_risk == RiskLevel.HIGH
        assert summary.risk == RiskLevel.HIGH

    def test_sst_mean_anomaly(self, reducer, make_observation):
        observations = [
            make_observation(27.0, 0, anomaly=0.2),
            make_observation(27.0, 1, anomaly=0.4),
        ]
        summary = reducer.reduce(ParameterKind.SST, observations)

        assert summary.anomaly == pytest.approx(0.3)

    def test_presentation_rounding(self, reducer, make_observation):
        assert reducer.reduce(ParameterKind.SST, [make_observation(25.12345)]).value == 25.12
        assert reducer.reduce(ParameterKind.WIND, [make_observation(0, speed=7.26)]).value == 7.3
        assert reducer.reduce(ParameterKind.SEA_LEVEL, [make_observation(0.12345)]).value == 0.123

    def test_not_a_fallback(self, reducer, make_observation):
        summary = reducer.reduce(ParameterKind.SST, [make_observation(25.0)])
        assert summary.is_fallback is False

    def test_processor_facade(self, make_observation):
        processor = DataProcessor()
        summary = processor.reduce(ParameterKind.WIND, [make_observation(0, speed=5.0)])

        assert summary.risk == RiskLevel.LOW
        assert processor.assess(None) is None


@pytest.mark.unit
@pytest.mark.parametrize("values, expected", [
    ([], TrendDirection.STABLE),
    ([1.0], TrendDirection.STABLE),
    ([1.0, 1.0], TrendDirection.STABLE),
    ([1.0, 5.0, 2.0], TrendDirection.INCREASING),
    ([3.0, 9.0, 2.0], TrendDirection.DECREASING),
])
def test_endpoint_trend(values, expected):
    assert endpoint_trend(values) == expected
