"""
Coastal Monitoring System

This package produces oceanographic summaries and heuristic coastal threat
assessments from sea surface temperature, sea level, chlorophyll, wind and
rainfall observations.
"""

__version__ = "0.1.0"
__description__ = "Oceanographic summary and coastal threat assessment"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "CoastalMonitorApp":
        from .main import CoastalMonitorApp
        return CoastalMonitorApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CoastalMonitorApp",
]
