"""
Forward-looking prediction timeline.

Projects each parameter a number of days ahead from its fallback baseline
using a per-parameter oscillation plus drift.
"""

import logging
import math
import random
from datetime import date, timedelta
from typing import Callable, Dict, List, Optional, Tuple

from ..core import constants, DateUtils
from ..models import (
    OceanographicSummary,
    ParameterKind,
    RiskLevel,
    TimelinePoint,
    TrendDirection,
)
from ..processing.risk import clamp


# Per-parameter (variation(i), trend(i)) for day offset i
_PROJECTIONS: Dict[ParameterKind, Tuple[Callable[[int], float], Callable[[int], TrendDirection]]] = {
    ParameterKind.SST: (
        lambda i: math.sin(i * 0.9) * 2 + i * 0.1,
        lambda i: TrendDirection.INCREASING if i > 3 else TrendDirection.STABLE,
    ),
    ParameterKind.SEA_LEVEL: (
        lambda i: math.sin(i * 1.4) * 0.1 + i * 0.002,
        lambda i: TrendDirection.INCREASING,
    ),
    ParameterKind.CHLOROPHYLL: (
        lambda i: math.sin(i * 0.7) * 0.5 + i * 0.05,
        lambda i: TrendDirection.INCREASING if i > 5 else TrendDirection.STABLE,
    ),
    ParameterKind.WIND: (
        lambda i: math.sin(i * 1.2) * 5 + i * 0.3,
        lambda i: TrendDirection.DECREASING if i > 2 else TrendDirection.STABLE,
    ),
    ParameterKind.RAINFALL: (
        lambda i: math.sin(i * 0.8) * 3 + i * 0.2,
        lambda i: TrendDirection.INCREASING if i > 4 else TrendDirection.STABLE,
    ),
}

# Projected values above these are flagged medium risk
_ELEVATED_ABOVE = {
    ParameterKind.SST: 30.0,
    ParameterKind.CHLOROPHYLL: 1.5,
    ParameterKind.WIND: 20.0,
    ParameterKind.RAINFALL: 5.0,
}

# Share of the horizon beyond which every point is at least medium risk
_DISTANT_HORIZON_SHARE = 0.7

_PREDICTIONS = {
    ParameterKind.SST: (
        "Normal temperature range maintained",
        "Slight temperature increase expected",
        "Above-average temperatures predicted",
    ),
    ParameterKind.SEA_LEVEL: (
        "Stable sea level conditions",
        "Gradual sea level rise continuing",
        "Accelerated sea level rise expected",
    ),
    ParameterKind.CHLOROPHYLL: (
        "Normal chlorophyll levels",
        "Moderate algal activity",
        "High algal bloom risk",
    ),
    ParameterKind.WIND: (
        "Calm wind conditions",
        "Moderate wind speeds",
        "Strong winds expected",
    ),
    ParameterKind.RAINFALL: (
        "Minimal precipitation",
        "Moderate rainfall expected",
        "Heavy rainfall predicted",
    ),
}


def prediction_text(kind: ParameterKind, day_offset: int) -> str:
    """Prediction wording; grows stronger with distance into the future."""
    low, medium, high = _PREDICTIONS[kind]
    if day_offset < 3:
        return low
    if day_offset < 7:
        return medium
    return high


class PredictionTimeline:
    """Generate day-by-day projections for one parameter."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize timeline generator.

        Args:
            rng: Random source for the confidence jitter
            logger: Logger instance
        """
        self.rng = rng or random.Random()
        self.logger = logger or logging.getLogger(__name__)

    def generate(
        self,
        kind: ParameterKind,
        days: int,
        summary: Optional[OceanographicSummary],
        start: Optional[date] = None
    ) -> List[TimelinePoint]:
        """
        Project a parameter ``days`` days ahead.

        Args:
            kind: Parameter kind
            days: Horizon, one of 7, 14 or 30
            summary: Current summary; no projection is made without one
            start: First projected date (defaults to today in UTC)

        Returns:
            One point per day, or an empty list when summary is None

        Raises:
            ValueError: If days is not a supported horizon
        """
        if days not in constants.TIMELINE_HORIZONS:
            raise ValueError(
                f"Unsupported horizon {days}; expected one of {constants.TIMELINE_HORIZONS}"
            )
        if summary is None:
            self.logger.debug("No current summary, skipping timeline")
            return []

        baseline = constants.FALLBACK_BASELINES[kind.value]
        variation, trend_at = _PROJECTIONS[kind]
        confidence_low, confidence_high = constants.TIMELINE_CONFIDENCE_RANGE
        first_day = start or DateUtils.now_utc().date()

        points = []
        for i in range(days):
            value = clamp(baseline["value"] + variation(i), baseline["min"], baseline["max"])
            confidence = clamp(
                90 - i * 2 + (self.rng.random() - 0.5) * 10,
                confidence_low,
                confidence_high,
            )

            risk = RiskLevel.LOW
            elevated = _ELEVATED_ABOVE.get(kind)
            if elevated is not None and value > elevated:
                risk = RiskLevel.MEDIUM
            if i > days * _DISTANT_HORIZON_SHARE:
                risk = RiskLevel.MEDIUM

            points.append(TimelinePoint(
                date=first_day + timedelta(days=i),
                value=round(value, 2),
                unit=constants.UNITS[kind.value],
                confidence=int(round(confidence)),
                risk=risk,
                trend=trend_at(i),
                prediction=prediction_text(kind, i),
                anomaly=round(value - baseline["value"], 2) if kind == ParameterKind.SST else None,
            ))

        self.logger.info(f"Generated {len(points)}-day {kind.value} timeline")
        return points
