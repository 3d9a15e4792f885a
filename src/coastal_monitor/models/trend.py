"""
Historical trend, forecast timeline and short-range forecast models.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple, Dict, Any

from .base import to_jsonable
from .observation import Observation, QueryMetadata
from .parameters import ParameterKind, RiskLevel, TrendDirection


@dataclass(frozen=True)
class TrendStatistics:
    """Descriptive statistics and fitted slope of one series."""

    min: float
    max: float
    average: float
    trend: TrendDirection
    slope: float  # value units per millisecond, 6 dp
    data_points: int


@dataclass(frozen=True)
class TrendResult:
    """Trend analysis for one parameter over one window."""

    kind: ParameterKind
    time_range: Tuple[datetime, datetime]
    statistics: TrendStatistics
    data: Tuple[Observation, ...]
    metadata: QueryMetadata

    def to_dict(self, include_data: bool = False) -> Dict[str, Any]:
        result = to_jsonable(self)
        if not include_data:
            result.pop("data", None)
        return result


@dataclass(frozen=True)
class TimelinePoint:
    """One day of a forward-looking prediction timeline."""

    date: date
    value: float
    unit: str
    confidence: int  # percent
    risk: RiskLevel
    trend: TrendDirection
    prediction: str
    anomaly: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        result = to_jsonable(self)
        result["date"] = self.date.isoformat()
        return result


@dataclass(frozen=True)
class ParameterForecast:
    """Short-range outlook for one parameter, derived from the current summary."""

    kind: ParameterKind
    prediction: str
    value: float
    unit: str
    confidence: int  # percent, from the provider's reported accuracy
    timeframe_hours: int
    risk: RiskLevel
    details: str

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)
