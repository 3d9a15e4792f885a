"""
Helper functions for API operations.

Provides parsing of observation records returned by the ocean data service.
"""

from typing import Dict, Any, Optional

from ..core import DateUtils
from ..models import (
    DataQuality,
    Observation,
    Quality,
    RainfallIntensity,
    RiskLevel,
)

# JSON field name -> Observation attribute for optional numeric fields
_NUMERIC_FIELDS = {
    "depth": "depth",
    "anomaly": "anomaly",
    "trend": "trend",
    "concentration": "concentration",
    "direction": "direction",
    "speed": "speed",
    "gust": "gust",
    "accumulation": "accumulation",
    "duration": "duration",
}


def parse_observation(record: Dict[str, Any], default_source: str, default_unit: str) -> Observation:
    """
    Convert one JSON observation record into an Observation.

    Accepts both camelCase ("bloomRisk") and snake_case ("bloom_risk") keys.

    Args:
        record: Observation record from the API
        default_source: Dataset id used when the record has no "source"
        default_unit: Unit used when the record has no "unit"

    Returns:
        Parsed observation

    Raises:
        ValueError: If timestamp, coordinates or value are missing or malformed
    """
    try:
        timestamp = DateUtils.parse_iso(str(record["timestamp"]))
        latitude = float(record["latitude"])
        longitude = float(record["longitude"])
        value = float(record["value"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Malformed observation record {record!r}: {e}")

    extras: Dict[str, Any] = {}
    for key, attr in _NUMERIC_FIELDS.items():
        if record.get(key) is not None:
            extras[attr] = float(record[key])

    bloom_risk = record.get("bloomRisk", record.get("bloom_risk"))
    if bloom_risk is not None:
        extras["bloom_risk"] = RiskLevel(bloom_risk)

    if record.get("intensity") is not None:
        extras["intensity"] = RainfallIntensity(record["intensity"])

    return Observation(
        timestamp=timestamp,
        latitude=latitude,
        longitude=longitude,
        value=value,
        unit=record.get("unit") or default_unit,
        quality=Quality(record.get("quality", Quality.GOOD.value)),
        source=record.get("source") or default_source,
        **extras
    )


def parse_data_quality(metadata: Dict[str, Any]) -> Optional[DataQuality]:
    """
    Extract the dataQuality block from response metadata.

    Returns:
        DataQuality, or None if the block is absent or incomplete
    """
    quality = metadata.get("dataQuality") or metadata.get("data_quality")
    if not isinstance(quality, dict):
        return None
    if quality.get("completeness") is None or quality.get("accuracy") is None:
        return None
    return DataQuality(
        completeness=float(quality["completeness"]),
        accuracy=float(quality["accuracy"]),
    )
