"""
Business logic services for coastal monitoring.

Services own the dataset catalog, the data providers and the higher-level
analyses built on top of them.
"""

from .registry import DatasetRegistry
from .data_provider import DataProvider, SyntheticDataProvider
from .remote_provider import HttpDataProvider
from .trend_analyzer import TrendAnalyzer
from .fallback import FallbackGenerator
from .timeline import PredictionTimeline
from .prediction import ParameterForecaster
from .monitor import CoastalMonitor, MonitorSnapshot

__all__ = [
    "DatasetRegistry",
    "DataProvider",
    "SyntheticDataProvider",
    "HttpDataProvider",
    "TrendAnalyzer",
    "FallbackGenerator",
    "PredictionTimeline",
    "ParameterForecaster",
    "CoastalMonitor",
    "MonitorSnapshot",
]
