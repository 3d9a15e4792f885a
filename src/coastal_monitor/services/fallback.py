"""
Fallback parameter summaries.

Plausible values near fixed baselines, served while live data is late.
"""

import random
from typing import Dict, Optional

from ..core import constants
from ..models import ParameterKind, ParameterSummary, RainfallIntensity, TrendDirection
from ..processing.risk import classify_risk, clamp, round_for_display


class FallbackGenerator:
    """Generate fallback summaries; pure apart from the random source."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(self, kind: ParameterKind) -> ParameterSummary:
        """
        Generate a fallback summary for one parameter.

        The baseline value is scaled by a factor in [0.9, 1.1] and clamped
        into the parameter's range; quality is jittered by up to 0.05 and
        clamped into [0.70, 0.95].

        Args:
            kind: Parameter kind

        Returns:
            Summary flagged ``is_fallback``
        """
        baseline = constants.FALLBACK_BASELINES[kind.value]

        factor = self.rng.uniform(1 - constants.FALLBACK_VALUE_JITTER, 1 + constants.FALLBACK_VALUE_JITTER)
        value = clamp(baseline["value"] * factor, baseline["min"], baseline["max"])

        quality_low, quality_high = constants.FALLBACK_QUALITY_RANGE
        quality = clamp(
            baseline["quality"] + self.rng.uniform(
                -constants.FALLBACK_QUALITY_JITTER, constants.FALLBACK_QUALITY_JITTER
            ),
            quality_low,
            quality_high,
        )

        risk = classify_risk(kind, value)
        intensity = baseline.get("intensity")

        return ParameterSummary(
            kind=kind,
            value=round_for_display(kind, value),
            unit=constants.UNITS[kind.value],
            risk=risk,
            trend=TrendDirection.STABLE,
            bloom_risk=risk if kind == ParameterKind.CHLOROPHYLL else None,
            direction=baseline.get("direction"),
            intensity=RainfallIntensity(intensity) if intensity else None,
            anomaly=baseline.get("anomaly"),
            trend_rate=baseline.get("trend_rate"),
            quality=round(quality, 3),
            is_fallback=True,
        )

    def generate_all(self) -> Dict[ParameterKind, ParameterSummary]:
        """Fallback summary for every parameter."""
        return {kind: self.generate(kind) for kind in ParameterKind}
