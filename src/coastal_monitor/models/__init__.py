"""
Data models for the coastal monitoring system.

Contains DTOs for datasets, observations, summaries, assessments and trends.
"""

from .parameters import (
    ParameterKind,
    RiskLevel,
    ThreatLevel,
    TrendDirection,
    Quality,
    RainfallIntensity,
)
from .geo import BoundingBox
from .dataset import DatasetDescriptor, QualityMetrics, TemporalCoverage
from .observation import (
    Observation,
    DataQuality,
    ParameterQuery,
    QueryMetadata,
    ProviderResponse,
)
from .summary import ParameterSummary, OceanographicSummary, ThreatAssessment
from .trend import TrendStatistics, TrendResult, TimelinePoint, ParameterForecast
from .base import to_jsonable

__all__ = [
    "ParameterKind",
    "RiskLevel",
    "ThreatLevel",
    "TrendDirection",
    "Quality",
    "RainfallIntensity",
    "BoundingBox",
    "DatasetDescriptor",
    "QualityMetrics",
    "TemporalCoverage",
    "Observation",
    "DataQuality",
    "ParameterQuery",
    "QueryMetadata",
    "ProviderResponse",
    "ParameterSummary",
    "OceanographicSummary",
    "ThreatAssessment",
    "TrendStatistics",
    "TrendResult",
    "TimelinePoint",
    "ParameterForecast",
    "to_jsonable",
]
