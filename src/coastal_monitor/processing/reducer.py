"""
Per-parameter reduction.

Collapses an observation sequence into a single current-value summary.
"""

import logging
import statistics
from dataclasses import replace
from typing import Optional, Sequence

from ..core import constants, NoDataError
from ..models import (
    Observation,
    ParameterKind,
    ParameterSummary,
    TrendDirection,
)
from .risk import classify_risk, round_for_display


def observation_scalar(kind: ParameterKind, observation: Observation) -> float:
    """The number a parameter is judged on: speed for wind, value otherwise."""
    if kind == ParameterKind.WIND and observation.speed is not None:
        return observation.speed
    return observation.value


def endpoint_trend(values: Sequence[float]) -> TrendDirection:
    """Compare last against first value; fewer than two values is stable."""
    if len(values) < 2:
        return TrendDirection.STABLE
    if values[-1] > values[0]:
        return TrendDirection.INCREASING
    if values[-1] < values[0]:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


class ParameterReducer:
    """Reduce observations of one parameter to a ParameterSummary."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize reducer.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def reduce(
        self,
        kind: ParameterKind,
        observations: Sequence[Observation]
    ) -> ParameterSummary:
        """
        Summarize one parameter.

        Instantaneous parameters (SST, sea level, chlorophyll, wind) report the
        arithmetic mean; rainfall is cumulative and reports the sum of
        accumulations. The risk tier is taken from the unrounded figure; the
        reported value is rounded for presentation.

        Args:
            kind: Parameter kind
            observations: Observations in time order

        Returns:
            Parameter summary

        Raises:
            NoDataError: If observations is empty
        """
        if not observations:
            raise NoDataError(kind.value)

        values = [observation_scalar(kind, o) for o in observations]

        if kind == ParameterKind.RAINFALL:
            representative = sum(
                o.accumulation if o.accumulation is not None else o.value
                for o in observations
            )
        else:
            representative = statistics.fmean(values)

        risk = classify_risk(kind, representative)
        trend = endpoint_trend(values)
        first = observations[0]

        self.logger.debug(
            f"{kind.value}: {representative:.4f} over {len(observations)} samples "
            f"-> risk={risk.value}, trend={trend.value}"
        )

        summary = ParameterSummary(
            kind=kind,
            value=round_for_display(kind, representative),
            unit=constants.UNITS[kind.value],
            risk=risk,
            trend=trend,
        )

        if kind == ParameterKind.SST:
            anomalies = [o.anomaly for o in observations if o.anomaly is not None]
            if anomalies:
                summary = replace(summary, anomaly=round(statistics.fmean(anomalies), 2))
        elif kind == ParameterKind.SEA_LEVEL:
            if first.trend is not None:
                summary = replace(summary, trend_rate=first.trend)
        elif kind == ParameterKind.CHLOROPHYLL:
            summary = replace(summary, bloom_risk=first.bloom_risk or risk)
        elif kind == ParameterKind.WIND:
            summary = replace(summary, direction=first.direction if first.direction is not None else 0.0)
        elif kind == ParameterKind.RAINFALL:
            if first.intensity is not None:
                summary = replace(summary, intensity=first.intensity)

        return summary
