"""
Dataset registry.

Immutable, injectable catalog of the datasets known to the monitoring engine.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from ..core import DateUtils, UnknownDatasetError
from ..models import (
    DatasetDescriptor,
    ParameterKind,
    QualityMetrics,
    TemporalCoverage,
)


# (id, kind, name, description, variables, temporal, spatial), primary first per kind
_CATALOG = (
    ("MUR_SST", ParameterKind.SST, "MUR Sea Surface Temperature",
     "Multi-scale Ultra-high Resolution Sea Surface Temperature",
     ("sst", "sst_anomaly"), "daily", "1km"),
    ("GHRSST_L4", ParameterKind.SST, "GHRSST Level 4 SST",
     "Group for High Resolution Sea Surface Temperature Level 4",
     ("sst", "quality"), "daily", "5km"),
    ("AVISO_SLA", ParameterKind.SEA_LEVEL, "AVISO Sea Level Anomaly",
     "Archiving, Validation and Interpretation of Satellite Oceanographic data",
     ("sla", "adt", "ugos", "vgos"), "daily", "0.25°"),
    ("JASON_SLA", ParameterKind.SEA_LEVEL, "Jason Sea Level Anomaly",
     "Jason satellite altimetry sea level data",
     ("sla", "wind_speed", "wave_height"), "10-day", "0.2°"),
    ("OCEANCOLOR_CHL", ParameterKind.CHLOROPHYLL, "Ocean Color Chlorophyll",
     "NASA Ocean Color chlorophyll-a concentration",
     ("chlor_a", "chlor_a_anom", "quality"), "8-day", "4km"),
    ("VIIRS_CHL", ParameterKind.CHLOROPHYLL, "VIIRS Chlorophyll",
     "Visible Infrared Imaging Radiometer Suite chlorophyll data",
     ("chlor_a", "nflh", "quality"), "daily", "750m"),
    ("ASCAT_WIND", ParameterKind.WIND, "ASCAT Wind",
     "Advanced Scatterometer wind vector data",
     ("wind_speed", "wind_direction", "quality"), "daily", "25km"),
    ("CCMP_WIND", ParameterKind.WIND, "CCMP Wind",
     "Cross-Calibrated Multi-Platform wind data",
     ("uwnd", "vwnd", "wind_speed", "quality"), "6-hourly", "0.25°"),
    ("IMERG_RAIN", ParameterKind.RAINFALL, "IMERG Rainfall",
     "Integrated Multi-satellitE Retrievals for GPM rainfall",
     ("precipitation", "precipitation_quality", "latent_heat"), "30-minute", "0.1°"),
    ("TRMM_RAIN", ParameterKind.RAINFALL, "TRMM Rainfall",
     "Tropical Rainfall Measuring Mission precipitation data",
     ("precipitation", "precipitation_quality", "latent_heat"), "3-hourly", "0.25°"),
)

# Dataset families adjust the generic quality baseline
_QUALITY_BASE = {
    "completeness": 0.9,
    "accuracy": 0.85,
    "timeliness": 0.95,
    "spatial_coverage": 0.88,
}
_QUALITY_ADJUSTMENTS = (
    ("SST", {"accuracy": 0.92, "timeliness": 0.98}),
    ("CHL", {"accuracy": 0.82, "completeness": 0.85}),
    ("WIND", {"accuracy": 0.87, "spatial_coverage": 0.92}),
    ("RAIN", {"accuracy": 0.90, "timeliness": 0.99}),
)

COVERAGE_YEARS = 5


class DatasetRegistry:
    """
    Lookup of dataset descriptors by id and by parameter kind.

    The registry is built once and never mutated. Construct it with
    ``DatasetRegistry.default()`` or pass custom descriptors for tests.
    """

    def __init__(
        self,
        descriptors: Iterable[DatasetDescriptor],
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize registry.

        Args:
            descriptors: Catalog entries. The first entry seen for each kind
                         becomes that kind's primary dataset.
            logger: Logger instance

        Raises:
            ValueError: On duplicate dataset ids
        """
        self.logger = logger or logging.getLogger(__name__)
        self._by_id: Dict[str, DatasetDescriptor] = {}
        self._primary: Dict[ParameterKind, str] = {}

        for descriptor in descriptors:
            if descriptor.id in self._by_id:
                raise ValueError(f"Duplicate dataset id: {descriptor.id}")
            self._by_id[descriptor.id] = descriptor
            self._primary.setdefault(descriptor.kind, descriptor.id)

    @classmethod
    def default(
        cls,
        last_updated: Optional[datetime] = None,
        logger: Optional[logging.Logger] = None
    ) -> "DatasetRegistry":
        """
        Build the standard ten-dataset catalog.

        Args:
            last_updated: Timestamp stamped on every entry (defaults to now, UTC)
            logger: Logger instance
        """
        stamp = last_updated or DateUtils.now_utc()
        descriptors = [
            DatasetDescriptor(
                id=ds_id,
                kind=kind,
                name=name,
                description=description,
                variables=variables,
                temporal_resolution=temporal,
                spatial_resolution=spatial,
                last_updated=stamp,
            )
            for ds_id, kind, name, description, variables, temporal, spatial in _CATALOG
        ]
        return cls(descriptors, logger=logger)

    def list(self) -> List[DatasetDescriptor]:
        """Get all datasets in catalog order."""
        return list(self._by_id.values())

    def get(self, dataset_id: str) -> Optional[DatasetDescriptor]:
        """Get a dataset by id, or None if unknown."""
        return self._by_id.get(dataset_id)

    def require(self, dataset_id: str) -> DatasetDescriptor:
        """
        Get a dataset by id.

        Raises:
            UnknownDatasetError: If the id is not in the registry
        """
        descriptor = self._by_id.get(dataset_id)
        if descriptor is None:
            raise UnknownDatasetError(dataset_id)
        return descriptor

    def primary_for(self, kind: ParameterKind) -> DatasetDescriptor:
        """Get the default dataset for a parameter kind."""
        dataset_id = self._primary.get(kind)
        if dataset_id is None:
            raise UnknownDatasetError(f"<primary {kind.value}>")
        return self._by_id[dataset_id]

    def for_kind(self, kind: ParameterKind) -> List[DatasetDescriptor]:
        """Get all datasets serving a parameter kind."""
        return [d for d in self._by_id.values() if d.kind == kind]

    def quality_metrics(self, dataset_id: str) -> QualityMetrics:
        """
        Get dataset-level quality baselines.

        Args:
            dataset_id: Dataset id

        Returns:
            Quality metrics adjusted for the dataset family

        Raises:
            UnknownDatasetError: If the id is not in the registry
        """
        self.require(dataset_id)

        metrics = dict(_QUALITY_BASE)
        for marker, overrides in _QUALITY_ADJUSTMENTS:
            if marker in dataset_id:
                metrics.update(overrides)
                break

        return QualityMetrics(**metrics)

    def temporal_coverage(
        self,
        dataset_id: str,
        now: Optional[datetime] = None
    ) -> TemporalCoverage:
        """
        Get the time span a dataset covers.

        Coverage starts on January 1st, five years before the current year.

        Raises:
            UnknownDatasetError: If the id is not in the registry
        """
        descriptor = self.require(dataset_id)
        end = DateUtils.to_utc(now) if now else DateUtils.now_utc()
        start = end.replace(
            year=end.year - COVERAGE_YEARS, month=1, day=1,
            hour=0, minute=0, second=0, microsecond=0
        )

        return TemporalCoverage(
            start_date=start,
            end_date=end,
            temporal_resolution=descriptor.temporal_resolution,
            update_frequency=descriptor.temporal_resolution,
        )

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, dataset_id: object) -> bool:
        return dataset_id in self._by_id
