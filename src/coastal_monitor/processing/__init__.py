"""
Data processing module for coastal monitoring.

Provides risk classification, per-parameter reduction, summary aggregation
and threat assessment.
"""

import logging
from typing import Optional, Sequence

from ..models import (
    Observation,
    OceanographicSummary,
    ParameterKind,
    ParameterSummary,
    ThreatAssessment,
)
from .risk import bloom_risk, classify_risk, clamp, round_for_display
from .reducer import ParameterReducer
from .aggregator import OceanographicAggregator, overall_risk
from .threat import ThreatAssessor, threat_level


class DataProcessor:
    """
    Stateless processing steps that do not touch a data provider.

    This class provides a convenient interface to the reducer and the threat
    assessor.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize data processor.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.reducer = ParameterReducer(logger)
        self.assessor = ThreatAssessor(logger)

    def reduce(
        self,
        kind: ParameterKind,
        observations: Sequence[Observation]
    ) -> ParameterSummary:
        """
        Summarize one parameter's observations.

        Raises:
            NoDataError: If observations is empty
        """
        return self.reducer.reduce(kind, observations)

    def assess(self, summary: Optional[OceanographicSummary]) -> Optional[ThreatAssessment]:
        """Threat assessment of a summary; None in, None out."""
        return self.assessor.assess(summary)


__all__ = [
    "bloom_risk",
    "classify_risk",
    "clamp",
    "round_for_display",
    "ParameterReducer",
    "OceanographicAggregator",
    "overall_risk",
    "ThreatAssessor",
    "threat_level",
    "DataProcessor",
]
