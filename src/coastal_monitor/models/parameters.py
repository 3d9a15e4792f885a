"""
Parameter and classification enums.

String-valued so they serialize directly to JSON.
"""

from enum import Enum


class ParameterKind(str, Enum):
    """The five monitored oceanographic parameters."""

    SST = "sst"
    SEA_LEVEL = "sea_level"
    CHLOROPHYLL = "chlorophyll"
    WIND = "wind"
    RAINFALL = "rainfall"

    @classmethod
    def parse(cls, value: str) -> "ParameterKind":
        """
        Parse a parameter name, accepting enum values, names and camelCase aliases.

        Raises:
            ValueError: If the name does not match any parameter
        """
        normalized = value.strip().replace("-", "_")
        aliases = {"sealevel": "sea_level", "seasurfacetemperature": "sst"}
        normalized = aliases.get(normalized.lower(), normalized)
        for kind in cls:
            if normalized.lower() in (kind.value, kind.name.lower()):
                return kind
        raise ValueError(
            f"Unknown parameter '{value}'. Expected one of: {', '.join(k.value for k in cls)}"
        )


class RiskLevel(str, Enum):
    """Risk tier of a single parameter."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ThreatLevel(str, Enum):
    """Aggregate threat level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TrendDirection(str, Enum):
    """Direction of change over a series."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class Quality(str, Enum):
    """Per-sample quality tag."""

    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class RainfallIntensity(str, Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"
    EXTREME = "extreme"
