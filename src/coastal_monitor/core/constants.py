"""
Application-wide constants for coastal monitoring.

This module defines the fixed thresholds, generator parameters and fallback
baselines used throughout the application. Keys are ``ParameterKind`` values.
"""

# Time units
MILLISECONDS_PER_HOUR = 60 * 60 * 1000
MILLISECONDS_PER_DAY = 24 * MILLISECONDS_PER_HOUR
MILLISECONDS_PER_YEAR = 365 * MILLISECONDS_PER_DAY
TIDAL_PERIOD_MS = 12.4 * MILLISECONDS_PER_HOUR  # semi-diurnal lunar tide

# Default region: Mumbai coast [min_lat, min_lon, max_lat, max_lon]
DEFAULT_BOUNDING_BOX = (18.0, 72.0, 20.0, 75.0)

# Box used when a query carries no bounding box (whole globe)
GLOBAL_BOUNDING_BOX = (-90.0, -180.0, 90.0, 180.0)

DEFAULT_SUMMARY_WINDOW_HOURS = 24
DEFAULT_TREND_DAYS = 30
DEFAULT_FALLBACK_TIMEOUT = 3.0  # seconds
DEFAULT_MAX_WORKERS = 5

# Risk thresholds as (medium_from, high_above).
# value < medium_from -> low, value > high_above -> high, otherwise medium.
# Sea level is compared on its absolute value.
RISK_THRESHOLDS = {
    "sst": (28.0, 30.0),  # °C
    "sea_level": (0.3, 0.5),  # m
    "chlorophyll": (0.5, 1.0),  # mg/m³
    "wind": (10.0, 15.0),  # m/s
    "rainfall": (25.0, 50.0),  # mm per 24h
}

# Decimal places used when reporting summary values
PRESENTATION_DECIMALS = {
    "sst": 2,
    "sea_level": 3,
    "chlorophyll": 3,
    "wind": 1,
    "rainfall": 2,
}

UNITS = {
    "sst": "°C",
    "sea_level": "m",
    "chlorophyll": "mg/m³",
    "wind": "m/s",
    "rainfall": "mm",
}

# Generator grid spacing in degrees
SPATIAL_STEP_DEGREES = {
    "sst": 0.1,
    "sea_level": 0.25,
    "chlorophyll": 0.04,
    "wind": 0.25,
    "rainfall": 0.1,
}

# Generator time step in hours
TEMPORAL_STEP_HOURS = {
    "sst": 24,
    "sea_level": 24,
    "chlorophyll": 8 * 24,
    "wind": 24,
    "rainfall": 3,
}

# Fixed (completeness, accuracy) reported with every response
DATA_QUALITY_BASELINES = {
    "sst": (0.95, 0.92),
    "sea_level": (0.88, 0.89),
    "chlorophyll": (0.82, 0.85),
    "wind": (0.91, 0.87),
    "rainfall": (0.94, 0.90),
}

# Physically plausible (min, max) for generated values; None means unbounded
PHYSICAL_RANGES = {
    "sst": (-2.0, 40.0),
    "sea_level": (None, None),
    "chlorophyll": (0.01, None),
    "wind": (0.5, None),
    "rainfall": (0.0, None),
}

# Probability that a generated sample is tagged "good" (otherwise "fair")
GOOD_QUALITY_PROBABILITY = {
    "sst": 0.9,
    "sea_level": 0.85,
    "chlorophyll": 0.8,
    "wind": 0.9,
    "rainfall": 0.9,
}

SEA_LEVEL_TREND_M_PER_YEAR = 0.003
RAINFALL_CHANCE = 0.3
RAINFALL_MAX_MM = 50.0
RAINFALL_DURATION_HOURS = 3

# Trend analyzer slope thresholds, value units per millisecond
TREND_SLOPE_THRESHOLD = 0.001
SLOPE_DECIMALS = 6

# Threat scoring: (score delta, factor, recommendation), in evaluation order
THREAT_RULES = (
    ("sst", 25, "Elevated sea surface temperature",
     "Monitor for coral bleaching and marine heat waves"),
    ("sea_level", 30, "Abnormal sea level variations",
     "Prepare for potential coastal flooding"),
    ("chlorophyll", 20, "High chlorophyll concentration",
     "Monitor for harmful algal blooms"),
    ("wind", 15, "High wind speeds",
     "Prepare for storm conditions"),
    ("rainfall", 20, "Heavy rainfall",
     "Monitor for runoff and water quality issues"),
)

# Threat level floors, evaluated in descending order
THREAT_LEVEL_FLOORS = (
    (80, "critical"),
    (60, "high"),
    (30, "medium"),
)

# Fallback baselines used when live data is late
FALLBACK_BASELINES = {
    "sst": {"value": 28.5, "min": 25.0, "max": 32.0, "quality": 0.85, "anomaly": 0.5},
    "sea_level": {"value": 0.12, "min": -0.2, "max": 0.3, "quality": 0.90, "trend_rate": 0.003},
    "chlorophyll": {"value": 0.8, "min": 0.1, "max": 2.0, "quality": 0.75},
    "wind": {"value": 12.5, "min": 5.0, "max": 25.0, "quality": 0.88, "direction": 180},
    "rainfall": {"value": 2.1, "min": 0.0, "max": 10.0, "quality": 0.82, "intensity": "light"},
}
FALLBACK_VALUE_JITTER = 0.10  # multiplicative, ±10%
FALLBACK_QUALITY_JITTER = 0.05  # additive, ±0.05
FALLBACK_QUALITY_RANGE = (0.70, 0.95)

# Prediction timeline
TIMELINE_HORIZONS = (7, 14, 30)
TIMELINE_CONFIDENCE_RANGE = (70, 95)

# Short-range parameter forecasts
FORECAST_TIMEFRAME_HOURS = {
    "sst": 6,
    "sea_level": 12,
    "chlorophyll": 48,
    "wind": 24,
    "rainfall": 12,
}
FORECAST_SEA_LEVEL_RISE_ABOVE = 0.2  # m/year
