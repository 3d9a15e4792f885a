"""
Threat assessment.

Additive heuristic score over the high-risk parameters of a summary.
"""

import logging
from typing import List, Optional

from ..core import constants
from ..models import (
    OceanographicSummary,
    ParameterKind,
    RiskLevel,
    ThreatAssessment,
    ThreatLevel,
)


def threat_level(score: int) -> ThreatLevel:
    """Map a threat score onto a level."""
    for floor, level in constants.THREAT_LEVEL_FLOORS:
        if score >= floor:
            return ThreatLevel(level)
    return ThreatLevel.LOW


class ThreatAssessor:
    """Score a summary against the fixed threat table."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def assess(self, summary: Optional[OceanographicSummary]) -> Optional[ThreatAssessment]:
        """
        Assess coastal threat from a summary.

        Each parameter at high risk adds its score delta, factor and
        recommendation, in fixed table order. The score is not clamped.

        Args:
            summary: Current summary, or None

        Returns:
            Assessment, or None when no summary is available
        """
        if summary is None:
            return None

        score = 0
        factors: List[str] = []
        recommendations: List[str] = []

        for kind_value, delta, factor, recommendation in constants.THREAT_RULES:
            parameter = summary.parameters.get(ParameterKind(kind_value))
            if parameter is None or parameter.risk != RiskLevel.HIGH:
                continue
            score += delta
            factors.append(factor)
            recommendations.append(recommendation)

        level = threat_level(score)
        self.logger.info(f"Threat score {score} ({level.value}), {len(factors)} factors")

        return ThreatAssessment(
            score=score,
            level=level,
            factors=tuple(factors),
            recommendations=tuple(recommendations),
            timestamp=summary.timestamp,
            bounding_box=summary.bounding_box,
            center=summary.center,
            parameters=dict(summary.parameters),
        )
