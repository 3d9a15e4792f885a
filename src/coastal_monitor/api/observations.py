"""
Observation operations for the ocean data service.

Handles retrieval of point observations for one dataset.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple


class ObservationsAPI:
    """Mixin for observation-related API operations."""

    # Type hints for attributes provided by APIClient base class
    logger: logging.Logger
    get: Callable[..., Any]

    def get_observations(
        self,
        dataset_id: str,
        start_date: str,
        end_date: str,
        bounding_box: Optional[str] = None,
        **kwargs: Any
    ) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
        """
        Get observations of a dataset.

        Args:
            dataset_id: Dataset identifier (e.g. "MUR_SST")
            start_date: Start of period (ISO 8601 with timezone)
            end_date: End of period (ISO 8601 with timezone)
            bounding_box: "min_lat,min_lon,max_lat,max_lon"
            **kwargs: Additional query parameters

        Returns:
            Tuple of (observation records, response metadata)

        Example response:
            {
                "data": [
                    {"timestamp": "2024-01-01T00:00:00Z", "latitude": 18.0,
                     "longitude": 72.0, "value": 27.4, "unit": "°C",
                     "quality": "good", "source": "MUR_SST", "anomaly": 0.3}
                ],
                "metadata": {"dataQuality": {"completeness": 0.95, "accuracy": 0.92}}
            }
        """
        self.logger.info(f"Fetching observations for dataset {dataset_id}")
        endpoint = f"/datasets/{dataset_id}/observations"

        params: Dict[str, Any] = {
            "start": start_date,
            "end": end_date,
        }
        if bounding_box:
            params["bbox"] = bounding_box
        params.update(kwargs)

        result = self.get(endpoint, params=params)

        # API may return {"data": [...], "metadata": {...}} or just [...]
        if isinstance(result, dict):
            records = result.get("data") or []
            metadata = result.get("metadata") or {}
        elif isinstance(result, list):
            records, metadata = result, {}
        else:
            self.logger.warning(f"Unexpected observations format: {type(result)}")
            records, metadata = [], {}

        return records, metadata
