"""
Tests for short-range parameter forecasts.
"""

from dataclasses import replace
from unittest.mock import Mock

import pytest

from src.coastal_monitor.models import DataQuality, ParameterKind, RiskLevel
from src.coastal_monitor.services.prediction import ParameterForecaster, forecast_details


def with_parameter(summary, kind, **changes):
    parameters = dict(summary.parameters)
    parameters[kind] = replace(parameters[kind], **changes)
    return replace(summary, parameters=parameters)


@pytest.mark.unit
class TestParameterForecaster:
    """Test cases for ParameterForecaster."""

    @pytest.fixture
    def forecaster(self):
        return ParameterForecaster(logger=Mock())

    @pytest.fixture
    def summary(self, make_summary):
        quality = {kind: DataQuality(completeness=0.9, accuracy=0.87) for kind in ParameterKind}
        return replace(make_summary(), data_quality=quality)

    def test_no_summary_gives_none(self, forecaster):
        assert forecaster.generate(ParameterKind.SST, None) is None
        assert forecaster.generate_all(None) == []

    def test_confidence_from_reported_accuracy(self, forecaster, summary):
        forecast = forecaster.generate(ParameterKind.WIND, summary)

        assert forecast.confidence == 87

    def test_confidence_without_reported_quality(self, forecaster, make_summary):
        summary = with_parameter(make_summary(), ParameterKind.SST, quality=0.81)

        assert forecaster.generate(ParameterKind.SST, summary).confidence == 81
        assert forecaster.generate(ParameterKind.CHLOROPHYLL, summary).confidence == 75

    @pytest.mark.parametrize("kind, hours", [
        (ParameterKind.SST, 6),
        (ParameterKind.SEA_LEVEL, 12),
        (ParameterKind.CHLOROPHYLL, 48),
        (ParameterKind.WIND, 24),
        (ParameterKind.RAINFALL, 12),
    ])
    def test_timeframes(self, forecaster, summary, kind, hours):
        assert forecaster.generate(kind, summary).timeframe_hours == hours

    def test_risk_comes_from_summary(self, forecaster, make_summary):
        summary = make_summary({ParameterKind.RAINFALL: RiskLevel.HIGH})

        assert forecaster.generate(ParameterKind.RAINFALL, summary).risk == RiskLevel.HIGH

    def test_headlines(self, forecaster, summary):
        summary = with_parameter(summary, ParameterKind.SST, value=29.4)

        assert forecaster.generate(ParameterKind.SST, summary).prediction == "29.4°C"
        assert forecaster.generate(ParameterKind.WIND, summary).prediction == "1.0 m/s"
        assert forecaster.generate(ParameterKind.CHLOROPHYLL, summary).prediction == "Normal levels"

    def test_high_bloom_headline(self, forecaster, summary):
        summary = with_parameter(summary, ParameterKind.CHLOROPHYLL, bloom_risk=RiskLevel.HIGH)
        forecast = forecaster.generate(ParameterKind.CHLOROPHYLL, summary)

        assert forecast.prediction == "High bloom risk"
        assert forecast.details == "High algal bloom risk - monitor water quality"

    def test_generate_all_in_parameter_order(self, forecaster, summary):
        forecasts = forecaster.generate_all(summary)

        assert [f.kind for f in forecasts] == list(ParameterKind)

    def test_serializes(self, forecaster, summary):
        result = forecaster.generate(ParameterKind.SEA_LEVEL, summary).to_dict()

        assert result["kind"] == "sea_level"
        assert result["risk"] == "low"
        assert result["details"] == "Normal conditions expected"


@pytest.mark.unit
class TestForecastDetails:
    """Severity rules behind the detail text."""

    @pytest.mark.parametrize("kind, changes, expected", [
        (ParameterKind.SST, {"value": 30.0}, "Temperature within normal seasonal range"),
        (ParameterKind.SST, {"value": 30.1}, "Elevated temperatures may impact marine life"),
        (ParameterKind.WIND, {"value": 20.5}, "Strong winds may affect marine operations"),
        (ParameterKind.WIND, {"value": 20.0}, "Normal conditions expected"),
        (ParameterKind.RAINFALL, {"value": 5.2}, "Heavy rainfall may cause runoff issues"),
        (ParameterKind.SEA_LEVEL, {"trend_rate": 0.25}, "Elevated sea levels may cause coastal flooding"),
        (ParameterKind.SEA_LEVEL, {"trend_rate": None}, "Normal conditions expected"),
        (ParameterKind.CHLOROPHYLL, {"bloom_risk": RiskLevel.MEDIUM}, "Normal conditions expected"),
    ])
    def test_details(self, make_summary, kind, changes, expected):
        summary = with_parameter(make_summary(), kind, **changes)

        assert forecast_details(summary.parameter(kind)) == expected
