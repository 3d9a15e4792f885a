"""
Dataset catalog models.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple, Dict, Any

from .base import to_jsonable
from .parameters import ParameterKind


@dataclass(frozen=True)
class DatasetDescriptor:
    """Immutable catalog entry for one upstream dataset."""

    id: str
    kind: ParameterKind
    name: str
    description: str
    variables: Tuple[str, ...]
    temporal_resolution: str
    spatial_resolution: str
    last_updated: datetime

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)


@dataclass(frozen=True)
class QualityMetrics:
    """Dataset-level quality baselines, each in [0, 1]."""

    completeness: float
    accuracy: float
    timeliness: float
    spatial_coverage: float


@dataclass(frozen=True)
class TemporalCoverage:
    """Time span a dataset is available for."""

    start_date: datetime
    end_date: datetime
    temporal_resolution: str
    update_frequency: str
