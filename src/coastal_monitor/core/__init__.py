"""
Core utilities for the coastal monitoring system.

Provides configuration management, logging, errors and date helpers.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .exceptions import CoastalMonitorError, UnknownDatasetError, NoDataError, ProviderError

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "CoastalMonitorError",
    "UnknownDatasetError",
    "NoDataError",
    "ProviderError",
]
