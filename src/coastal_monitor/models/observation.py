"""
Observation data models.

Contains the per-sample DTO and the response envelope returned by data providers.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple, Dict, Any

from .base import to_jsonable
from .geo import BoundingBox
from .parameters import Quality, RiskLevel, RainfallIntensity


@dataclass(frozen=True)
class Observation:
    """One space-time sample of a parameter."""

    timestamp: datetime
    latitude: float
    longitude: float
    value: float
    unit: str
    quality: Quality
    source: str
    # SST
    depth: Optional[float] = None
    # SST and sea level
    anomaly: Optional[float] = None
    # Sea level, m/year
    trend: Optional[float] = None
    # Chlorophyll
    concentration: Optional[float] = None
    bloom_risk: Optional[RiskLevel] = None
    # Wind
    direction: Optional[float] = None
    speed: Optional[float] = None
    gust: Optional[float] = None
    # Rainfall
    intensity: Optional[RainfallIntensity] = None
    accumulation: Optional[float] = None
    duration: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)


@dataclass(frozen=True)
class DataQuality:
    """Completeness and accuracy, each in [0, 1]."""

    completeness: float
    accuracy: float


@dataclass(frozen=True)
class ParameterQuery:
    """Provider request for one parameter."""

    start_date: datetime
    end_date: datetime
    bounding_box: Optional[BoundingBox] = None
    dataset_id: Optional[str] = None


@dataclass(frozen=True)
class QueryMetadata:
    """Metadata accompanying a batch of observations."""

    total_count: int
    time_range: Tuple[datetime, datetime]
    bounding_box: BoundingBox
    resolution: str
    data_quality: DataQuality

    @classmethod
    def empty(cls, start: datetime, end: datetime) -> "QueryMetadata":
        """Zeroed metadata block used for failed requests."""
        return cls(
            total_count=0,
            time_range=(start, end),
            bounding_box=BoundingBox(0.0, 0.0, 0.0, 0.0),
            resolution="unknown",
            data_quality=DataQuality(completeness=0.0, accuracy=0.0),
        )


@dataclass(frozen=True)
class ProviderResponse:
    """Observations plus metadata, or an empty batch with an error message."""

    data: Tuple[Observation, ...]
    metadata: QueryMetadata
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def has_data(self) -> bool:
        return self.error is None and len(self.data) > 0

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)
