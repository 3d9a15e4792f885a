"""
Oceanographic summary aggregation.

Fetches all five parameters in parallel and merges the per-parameter
reductions into one summary with an overall risk tier.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timedelta
from typing import Dict, Iterable, Optional, TYPE_CHECKING

from ..core import constants, DateUtils
from ..models import (
    BoundingBox,
    DataQuality,
    OceanographicSummary,
    ParameterKind,
    ParameterQuery,
    ParameterSummary,
    ProviderResponse,
    QueryMetadata,
    RiskLevel,
)
from .reducer import ParameterReducer

if TYPE_CHECKING:
    from ..services.data_provider import DataProvider


def overall_risk(risks: Iterable[RiskLevel]) -> RiskLevel:
    """
    Combine per-parameter tiers.

    More than two high parameters is high, one or two is medium, none is low.
    """
    high_count = sum(1 for risk in risks if risk == RiskLevel.HIGH)
    if high_count > 2:
        return RiskLevel.HIGH
    if high_count > 0:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


class OceanographicAggregator:
    """Build an OceanographicSummary from a data provider."""

    def __init__(
        self,
        provider: "DataProvider",
        reducer: Optional[ParameterReducer] = None,
        default_bounding_box: Optional[BoundingBox] = None,
        max_workers: int = constants.DEFAULT_MAX_WORKERS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize aggregator.

        Args:
            provider: Data provider queried once per parameter
            reducer: Per-parameter reducer
            default_bounding_box: Region used when summarize() gets none
            max_workers: Thread pool size for the parallel fetches
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.provider = provider
        self.reducer = reducer or ParameterReducer(self.logger)
        self.default_bounding_box = default_bounding_box or BoundingBox(
            *constants.DEFAULT_BOUNDING_BOX
        )
        self.max_workers = max_workers
        self.date_utils = DateUtils(self.logger)

    def fetch_all(self, query: ParameterQuery) -> Dict[ParameterKind, ProviderResponse]:
        """
        Fetch every parameter concurrently and wait for all of them.

        Args:
            query: Shared time range and region (dataset_id is ignored)

        Returns:
            Response per parameter kind; a provider that raises yields an
            error response for its kind
        """
        query = ParameterQuery(
            start_date=query.start_date,
            end_date=query.end_date,
            bounding_box=query.bounding_box,
        )
        responses: Dict[ParameterKind, ProviderResponse] = {}

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(self.provider.fetch, kind, query): kind
                for kind in ParameterKind
            }
            for future in as_completed(futures):
                kind = futures[future]
                try:
                    responses[kind] = future.result()
                except Exception as e:
                    self.logger.error(f"Provider raised while fetching {kind.value}: {e}", exc_info=True)
                    responses[kind] = ProviderResponse(
                        data=(),
                        metadata=QueryMetadata.empty(query.start_date, query.end_date),
                        error=str(e) or type(e).__name__,
                    )

        return responses

    def summarize(
        self,
        bounding_box: Optional[BoundingBox] = None,
        window: Optional[timedelta] = None,
        now: Optional[datetime] = None
    ) -> Optional[OceanographicSummary]:
        """
        Produce the current oceanographic summary for a region.

        Args:
            bounding_box: Region (defaults to the configured default box)
            window: Trailing window length (defaults to 24 hours)
            now: End of the window (defaults to the current UTC time)

        Returns:
            Summary, or None if any parameter came back with an error or
            without data
        """
        bbox = bounding_box or self.default_bounding_box
        window = window or timedelta(hours=constants.DEFAULT_SUMMARY_WINDOW_HOURS)
        start, end = self.date_utils.trailing_window(window, now)

        self.logger.info(
            f"Summarizing region {bbox.as_tuple()} from {start.isoformat()} to {end.isoformat()}"
        )

        responses = self.fetch_all(ParameterQuery(start, end, bbox))

        for kind in ParameterKind:
            response = responses[kind]
            if response.error:
                self.logger.warning(f"No summary: {kind.value} fetch failed: {response.error}")
                return None
            if not response.data:
                self.logger.warning(f"No summary: {kind.value} returned no observations")
                return None

        parameters: Dict[ParameterKind, ParameterSummary] = {
            kind: self.reducer.reduce(kind, responses[kind].data)
            for kind in ParameterKind
        }
        data_quality: Dict[ParameterKind, DataQuality] = {
            kind: responses[kind].metadata.data_quality
            for kind in ParameterKind
        }
        risk = overall_risk(summary.risk for summary in parameters.values())

        self.logger.info(f"Overall risk: {risk.value}")

        return OceanographicSummary(
            timestamp=end,
            bounding_box=bbox,
            center=bbox.center,
            parameters=parameters,
            overall_risk=risk,
            data_quality=data_quality,
        )
