"""
Parameter data providers.

A provider turns (parameter kind, query) into a batch of observations with
metadata. ``DataProvider`` implements the shared response envelope; the
synthetic implementation generates plausible values on a regular grid.
"""

import logging
import math
import random
from datetime import datetime, timedelta
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from ..core import constants, DateUtils, ProviderError
from ..models import (
    BoundingBox,
    DataQuality,
    DatasetDescriptor,
    Observation,
    ParameterKind,
    ParameterQuery,
    ProviderResponse,
    Quality,
    QueryMetadata,
    RainfallIntensity,
)
from ..processing.risk import bloom_risk, clamp
from .registry import DatasetRegistry


class DataProvider:
    """
    Base class for parameter data providers.

    Subclasses implement ``_fetch_observations``. ``fetch`` never raises for
    internal failures: they come back as an empty response with ``error`` set.
    """

    def __init__(
        self,
        registry: Optional[DatasetRegistry] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize provider.

        Args:
            registry: Dataset registry (defaults to the standard catalog)
            logger: Logger instance
        """
        self.registry = registry or DatasetRegistry.default()
        self.logger = logger or logging.getLogger(__name__)

    def fetch(self, kind: ParameterKind, query: ParameterQuery) -> ProviderResponse:
        """
        Fetch observations for one parameter.

        Args:
            kind: Parameter kind
            query: Time range, bounding box and optional dataset id

        Returns:
            Response with observations and metadata, or an empty response
            carrying an error message

        Raises:
            UnknownDatasetError: If query.dataset_id is not in the registry
        """
        if query.dataset_id:
            descriptor = self.registry.require(query.dataset_id)
        else:
            descriptor = self.registry.primary_for(kind)

        self.logger.debug(
            f"Fetching {kind.value} from {descriptor.id} "
            f"({query.start_date.isoformat()} to {query.end_date.isoformat()})"
        )

        try:
            observations, reported_quality = self._fetch_observations(kind, descriptor, query)
            quality = reported_quality or self._data_quality(kind)
        except Exception as e:
            self.logger.error(
                f"Failed to fetch {kind.value} data from {descriptor.id}: {e}",
                exc_info=True
            )
            return ProviderResponse(
                data=(),
                metadata=QueryMetadata.empty(query.start_date, query.end_date),
                error=str(e) or type(e).__name__,
            )

        self.logger.debug(f"Retrieved {len(observations)} {kind.value} observations")

        bbox = query.bounding_box or BoundingBox(*constants.GLOBAL_BOUNDING_BOX)
        return ProviderResponse(
            data=tuple(observations),
            metadata=QueryMetadata(
                total_count=len(observations),
                time_range=(query.start_date, query.end_date),
                bounding_box=bbox,
                resolution=descriptor.spatial_resolution,
                data_quality=quality,
            ),
        )

    def _fetch_observations(
        self,
        kind: ParameterKind,
        descriptor: DatasetDescriptor,
        query: ParameterQuery
    ) -> Tuple[List[Observation], Optional[DataQuality]]:
        """
        Retrieve observations and, if the source reports one, a data quality block.

        Raises on failure; fetch() converts the exception into an error response.
        """
        raise NotImplementedError

    def _data_quality(self, kind: ParameterKind) -> DataQuality:
        """Fixed per-kind completeness/accuracy baseline."""
        completeness, accuracy = constants.DATA_QUALITY_BASELINES[kind.value]
        return DataQuality(completeness=completeness, accuracy=accuracy)


def grid_axis(start: float, stop: float, step: float) -> List[float]:
    """
    Inclusive grid positions from start to stop.

    A zero-width axis yields one position; a reversed axis yields none.
    """
    if stop < start:
        return []
    count = int(math.floor((stop - start) / step + 1e-9)) + 1
    return [round(start + i * step, 6) for i in range(count)]


def time_axis(start: datetime, end: datetime, step: timedelta) -> Iterator[datetime]:
    """Inclusive timestamps from start to end."""
    current = start
    while current <= end:
        yield current
        current += step


class SyntheticDataProvider(DataProvider):
    """
    Generate plausible observations on a regular space-time grid.

    Values follow a smooth seasonal, tidal or diurnal base curve with bounded
    uniform noise, clamped to physically plausible ranges.
    """

    DEFAULT_BOUNDING_BOX = BoundingBox(*constants.DEFAULT_BOUNDING_BOX)

    def __init__(
        self,
        registry: Optional[DatasetRegistry] = None,
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize synthetic provider.

        Args:
            registry: Dataset registry
            rng: Random source (defaults to an unseeded ``random.Random``)
            logger: Logger instance
        """
        super().__init__(registry, logger)
        self.rng = rng or random.Random()
        self._generators: Dict[ParameterKind, Callable[..., Observation]] = {
            ParameterKind.SST: self._sst_sample,
            ParameterKind.SEA_LEVEL: self._sea_level_sample,
            ParameterKind.CHLOROPHYLL: self._chlorophyll_sample,
            ParameterKind.WIND: self._wind_sample,
            ParameterKind.RAINFALL: self._rainfall_sample,
        }

    def _fetch_observations(
        self,
        kind: ParameterKind,
        descriptor: DatasetDescriptor,
        query: ParameterQuery
    ) -> Tuple[List[Observation], Optional[DataQuality]]:
        if query.end_date.tzinfo is None or query.start_date.tzinfo is None:
            raise ProviderError("Query dates must be timezone-aware")

        bbox = query.bounding_box or self.DEFAULT_BOUNDING_BOX
        if not bbox.is_well_formed:
            self.logger.debug(f"Bounding box {bbox.as_tuple()} is inverted, no grid points")
        step = constants.SPATIAL_STEP_DEGREES[kind.value]
        latitudes = grid_axis(bbox.min_lat, bbox.max_lat, step)
        longitudes = grid_axis(bbox.min_lon, bbox.max_lon, step)
        time_step = timedelta(hours=constants.TEMPORAL_STEP_HOURS[kind.value])
        generate = self._generators[kind]

        observations: List[Observation] = []
        for timestamp in time_axis(query.start_date, query.end_date, time_step):
            millis = DateUtils.to_epoch_millis(timestamp)
            for lat in latitudes:
                for lon in longitudes:
                    observations.append(generate(timestamp, millis, lat, lon, descriptor.id))

        return observations, None

    def _noise(self, amplitude: float) -> float:
        """Uniform noise in [-amplitude, amplitude)."""
        return (self.rng.random() - 0.5) * 2 * amplitude

    def _quality(self, kind: ParameterKind) -> Quality:
        good_probability = constants.GOOD_QUALITY_PROBABILITY[kind.value]
        return Quality.GOOD if self.rng.random() > 1 - good_probability else Quality.FAIR

    def _limit(self, kind: ParameterKind, value: float) -> float:
        lower, upper = constants.PHYSICAL_RANGES[kind.value]
        return clamp(value, lower, upper)

    def _sst_sample(self, timestamp, millis, lat, lon, source) -> Observation:
        kind = ParameterKind.SST
        base = 25 + math.sin(millis / constants.MILLISECONDS_PER_YEAR * 2 * math.pi) * 5
        temp = self._limit(kind, base + self._noise(1.0))
        return Observation(
            timestamp=timestamp,
            latitude=lat,
            longitude=lon,
            value=round(temp, 2),
            unit=constants.UNITS[kind.value],
            quality=self._quality(kind),
            source=source,
            depth=0.0,
            anomaly=round(temp - base, 2),
        )

    def _sea_level_sample(self, timestamp, millis, lat, lon, source) -> Observation:
        kind = ParameterKind.SEA_LEVEL
        base = 0.5 + math.sin(millis / constants.TIDAL_PERIOD_MS * 2 * math.pi) * 0.3
        level = self._limit(kind, base + self._noise(0.05))
        return Observation(
            timestamp=timestamp,
            latitude=lat,
            longitude=lon,
            value=round(level, 3),
            unit=constants.UNITS[kind.value],
            quality=self._quality(kind),
            source=source,
            anomaly=round(level - base, 3),
            trend=constants.SEA_LEVEL_TREND_M_PER_YEAR,
        )

    def _chlorophyll_sample(self, timestamp, millis, lat, lon, source) -> Observation:
        kind = ParameterKind.CHLOROPHYLL
        base = 0.5 + math.sin(millis / constants.MILLISECONDS_PER_YEAR * 2 * math.pi) * 0.3
        chl = self._limit(kind, base + self._noise(0.1))
        return Observation(
            timestamp=timestamp,
            latitude=lat,
            longitude=lon,
            value=round(chl, 3),
            unit=constants.UNITS[kind.value],
            quality=self._quality(kind),
            source=source,
            concentration=round(chl, 3),
            bloom_risk=bloom_risk(chl),
        )

    def _wind_sample(self, timestamp, millis, lat, lon, source) -> Observation:
        kind = ParameterKind.WIND
        base = 8 + math.sin(millis / constants.MILLISECONDS_PER_DAY * 2 * math.pi) * 3
        speed = self._limit(kind, base + self._noise(2.0))
        direction = self.rng.random() * 360
        gust = speed + self.rng.random() * 5
        return Observation(
            timestamp=timestamp,
            latitude=lat,
            longitude=lon,
            value=round(speed, 1),
            unit=constants.UNITS[kind.value],
            quality=self._quality(kind),
            source=source,
            direction=float(round(direction) % 360),
            speed=round(speed, 1),
            gust=round(gust, 1),
        )

    def _rainfall_sample(self, timestamp, millis, lat, lon, source) -> Observation:
        kind = ParameterKind.RAINFALL
        if self.rng.random() < constants.RAINFALL_CHANCE:
            rainfall = self.rng.random() * constants.RAINFALL_MAX_MM
        else:
            rainfall = 0.0
        rainfall = round(self._limit(kind, rainfall), 2)
        return Observation(
            timestamp=timestamp,
            latitude=lat,
            longitude=lon,
            value=rainfall,
            unit=constants.UNITS[kind.value],
            quality=self._quality(kind),
            source=source,
            intensity=rainfall_intensity(rainfall),
            accumulation=rainfall,
            duration=float(constants.RAINFALL_DURATION_HOURS),
        )


def rainfall_intensity(amount_mm: float) -> RainfallIntensity:
    """Intensity label for one 3-hour accumulation."""
    if amount_mm > 30:
        return RainfallIntensity.HEAVY
    if amount_mm > 15:
        return RainfallIntensity.MODERATE
    return RainfallIntensity.LIGHT
