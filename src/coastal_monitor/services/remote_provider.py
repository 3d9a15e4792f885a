"""
HTTP-backed parameter data provider.

Maps the provider contract onto the ocean data service's observations endpoint.
"""

import logging
from typing import List, Optional, Tuple, TYPE_CHECKING

from ..core import constants, DateUtils, ProviderError
from ..api import helpers
from ..models import (
    DataQuality,
    DatasetDescriptor,
    Observation,
    ParameterKind,
    ParameterQuery,
)
from .data_provider import DataProvider
from .registry import DatasetRegistry

if TYPE_CHECKING:
    from ..api import OceanDataAPI


class HttpDataProvider(DataProvider):
    """Fetch observations from a remote JSON service."""

    def __init__(
        self,
        api_client: "OceanDataAPI",
        registry: Optional[DatasetRegistry] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize HTTP provider.

        Args:
            api_client: API client instance
            registry: Dataset registry
            logger: Logger instance
        """
        super().__init__(registry, logger)
        self.api_client = api_client

    def _fetch_observations(
        self,
        kind: ParameterKind,
        descriptor: DatasetDescriptor,
        query: ParameterQuery
    ) -> Tuple[List[Observation], Optional[DataQuality]]:
        start_iso = DateUtils.to_iso_with_timezone(query.start_date)
        end_iso = DateUtils.to_iso_with_timezone(query.end_date)
        bbox = query.bounding_box.to_query_param() if query.bounding_box else None

        records, metadata = self.api_client.get_observations(
            dataset_id=descriptor.id,
            start_date=start_iso,
            end_date=end_iso,
            bounding_box=bbox,
        )

        unit = constants.UNITS[kind.value]
        observations = []
        skipped = 0
        for record in records:
            try:
                observations.append(helpers.parse_observation(record, descriptor.id, unit))
            except ValueError as e:
                skipped += 1
                self.logger.debug(f"Skipping record: {e}")

        if records and not observations:
            raise ProviderError(
                f"All {len(records)} {kind.value} records from {descriptor.id} were malformed"
            )
        if skipped:
            self.logger.warning(f"Skipped {skipped} malformed {kind.value} records")

        return observations, helpers.parse_data_quality(metadata)
