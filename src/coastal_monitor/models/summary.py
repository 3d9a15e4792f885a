"""
Summary and assessment data models.

Contains DTOs produced by the reducer, aggregator and threat assessor.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple, Dict, Any

from .base import to_jsonable
from .geo import BoundingBox
from .observation import DataQuality
from .parameters import (
    ParameterKind,
    RiskLevel,
    ThreatLevel,
    TrendDirection,
    RainfallIntensity,
)


@dataclass(frozen=True)
class ParameterSummary:
    """Current-value summary of one parameter."""

    kind: ParameterKind
    value: float  # mean, or total for rainfall; rounded for presentation
    unit: str
    risk: RiskLevel
    trend: TrendDirection
    bloom_risk: Optional[RiskLevel] = None  # chlorophyll
    direction: Optional[float] = None  # wind, degrees
    intensity: Optional[RainfallIntensity] = None  # rainfall
    anomaly: Optional[float] = None  # SST, °C
    trend_rate: Optional[float] = None  # sea level, m/year
    quality: Optional[float] = None
    is_fallback: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)


@dataclass(frozen=True)
class OceanographicSummary:
    """Snapshot of all five parameters for one bounding box."""

    timestamp: datetime
    bounding_box: BoundingBox
    center: Tuple[float, float]
    parameters: Dict[ParameterKind, ParameterSummary]
    overall_risk: RiskLevel
    data_quality: Dict[ParameterKind, DataQuality] = field(default_factory=dict)

    def parameter(self, kind: ParameterKind) -> ParameterSummary:
        return self.parameters[kind]

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)


@dataclass(frozen=True)
class ThreatAssessment:
    """Weighted threat score derived from one summary."""

    score: int
    level: ThreatLevel
    factors: Tuple[str, ...]
    recommendations: Tuple[str, ...]
    timestamp: datetime
    bounding_box: BoundingBox
    center: Tuple[float, float]
    parameters: Dict[ParameterKind, ParameterSummary]

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)
