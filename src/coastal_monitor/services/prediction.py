"""
Short-range parameter forecasts.

Turns the current summary of one parameter into a headline prediction
with a confidence taken from the provider's reported accuracy.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from ..core import constants
from ..models import (
    OceanographicSummary,
    ParameterForecast,
    ParameterKind,
    ParameterSummary,
    RiskLevel,
)

NORMAL_DETAILS = "Normal conditions expected"

# Per-parameter (is_severe(summary), severe wording, normal wording)
_DETAILS: Dict[ParameterKind, Tuple[Callable[[ParameterSummary], bool], str, str]] = {
    ParameterKind.SST: (
        lambda p: p.value > 30,
        "Elevated temperatures may impact marine life",
        "Temperature within normal seasonal range",
    ),
    ParameterKind.SEA_LEVEL: (
        lambda p: (p.trend_rate or 0.0) > constants.FORECAST_SEA_LEVEL_RISE_ABOVE,
        "Elevated sea levels may cause coastal flooding",
        NORMAL_DETAILS,
    ),
    ParameterKind.CHLOROPHYLL: (
        lambda p: p.bloom_risk == RiskLevel.HIGH,
        "High algal bloom risk - monitor water quality",
        NORMAL_DETAILS,
    ),
    ParameterKind.WIND: (
        lambda p: p.value > 20,
        "Strong winds may affect marine operations",
        NORMAL_DETAILS,
    ),
    ParameterKind.RAINFALL: (
        lambda p: p.value > 5,
        "Heavy rainfall may cause runoff issues",
        NORMAL_DETAILS,
    ),
}


def forecast_details(parameter: ParameterSummary) -> str:
    is_severe, severe, normal = _DETAILS[parameter.kind]
    return severe if is_severe(parameter) else normal


def _headline(parameter: ParameterSummary) -> str:
    if parameter.kind == ParameterKind.CHLOROPHYLL:
        return "High bloom risk" if parameter.bloom_risk == RiskLevel.HIGH else "Normal levels"
    if parameter.kind == ParameterKind.SST:
        return f"{parameter.value}{parameter.unit}"
    return f"{parameter.value} {parameter.unit}"


class ParameterForecaster:
    """Derive short-range forecasts from an oceanographic summary."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def confidence(self, kind: ParameterKind, summary: OceanographicSummary) -> int:
        """
        Reported accuracy of the parameter as a percentage.

        Falls back to the parameter's own quality, then to its baseline
        quality, when the provider reported none.
        """
        quality = summary.data_quality.get(kind)
        if quality is not None:
            accuracy = quality.accuracy
        else:
            parameter = summary.parameter(kind)
            accuracy = parameter.quality
            if accuracy is None:
                accuracy = constants.FALLBACK_BASELINES[kind.value]["quality"]
            self.logger.debug(f"No reported accuracy for {kind.value}, using {accuracy}")
        return int(round(accuracy * 100))

    def generate(
        self,
        kind: ParameterKind,
        summary: Optional[OceanographicSummary]
    ) -> Optional[ParameterForecast]:
        """
        Forecast one parameter over its fixed timeframe.

        Args:
            kind: Parameter kind
            summary: Current summary

        Returns:
            Forecast, or None when there is no summary
        """
        if summary is None:
            self.logger.debug(f"No current summary, skipping {kind.value} forecast")
            return None

        parameter = summary.parameter(kind)
        return ParameterForecast(
            kind=kind,
            prediction=_headline(parameter),
            value=parameter.value,
            unit=parameter.unit,
            confidence=self.confidence(kind, summary),
            timeframe_hours=constants.FORECAST_TIMEFRAME_HOURS[kind.value],
            risk=parameter.risk,
            details=forecast_details(parameter),
        )

    def generate_all(self, summary: Optional[OceanographicSummary]) -> List[ParameterForecast]:
        if summary is None:
            return []
        return [self.generate(kind, summary) for kind in ParameterKind]
