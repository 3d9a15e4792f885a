"""
Configuration module for the coastal monitoring system.

Loads configuration from a JSON file and environment variables.
"""

import copy
import json
import os
from typing import Dict, Any, Optional, Tuple
from pathlib import Path

from . import constants


DEFAULT_CONFIG: Dict[str, Any] = {
    "provider": {
        "type": "synthetic",
        "random_seed": None,
    },
    "api": {
        "base_url": "",
        "timeout": 30,
        "max_retries": 3,
        "verify_ssl": True,
    },
    "monitoring": {
        "bounding_box": list(constants.DEFAULT_BOUNDING_BOX),
        "summary_window_hours": constants.DEFAULT_SUMMARY_WINDOW_HOURS,
        "fallback_timeout": constants.DEFAULT_FALLBACK_TIMEOUT,
        "max_workers": constants.DEFAULT_MAX_WORKERS,
        "trend_days": constants.DEFAULT_TREND_DAYS,
    },
    "logging": {
        "level": "INFO",
    },
}

PROVIDER_TYPES = ("synthetic", "http")


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'. A missing default file is not an
                        error; built-in defaults apply.
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self._explicit_file = config_file is not None or "CONFIG_FILE" in os.environ
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file and merge it over the defaults."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit_file:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(values)
            else:
                self.config[section] = values

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("COASTAL_PROVIDER"):
            self.config["provider"]["type"] = os.getenv("COASTAL_PROVIDER")

        if os.getenv("COASTAL_RANDOM_SEED"):
            self.config["provider"]["random_seed"] = int(os.getenv("COASTAL_RANDOM_SEED"))

        if os.getenv("COASTAL_API_BASE_URL"):
            self.config["api"]["base_url"] = os.getenv("COASTAL_API_BASE_URL")

        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present and sane."""
        required_config = {
            "provider": ["type"],
            "api": ["timeout", "max_retries"],
            "monitoring": ["bounding_box", "summary_window_hours", "fallback_timeout"],
        }

        missing_sections = [s for s in required_config if s not in self.config]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if key not in self.config[section]:
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        if self.provider_type not in PROVIDER_TYPES:
            raise ValueError(
                f"Invalid provider.type '{self.provider_type}'. "
                f"Expected one of: {', '.join(PROVIDER_TYPES)}"
            )

        if self.provider_type == "http" and not self.api_base_url:
            raise ValueError("HTTP provider requires 'api.base_url'")

        bbox = self.get("monitoring.bounding_box")
        if not isinstance(bbox, (list, tuple)) or len(bbox) != 4:
            raise ValueError(
                "monitoring.bounding_box must be [min_lat, min_lon, max_lat, max_lon]"
            )

        if self.fallback_timeout <= 0:
            raise ValueError("monitoring.fallback_timeout must be positive")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def provider_type(self) -> str:
        """Get data provider type ('synthetic' or 'http')."""
        return self.get("provider.type", "synthetic")

    @property
    def random_seed(self) -> Optional[int]:
        """Get random seed for the synthetic provider (None for unseeded)."""
        return self.get("provider.random_seed")

    @property
    def api_base_url(self) -> str:
        """Get API base URL."""
        return self.get("api.base_url", "")

    @property
    def api_timeout(self) -> int:
        """Get API timeout in seconds."""
        return self.get("api.timeout", 30)

    @property
    def api_max_retries(self) -> int:
        """Get maximum API retry attempts."""
        return self.get("api.max_retries", 3)

    @property
    def api_verify_ssl(self) -> bool:
        """Get API SSL verification setting."""
        return self.get("api.verify_ssl", True)

    @property
    def bounding_box(self) -> Tuple[float, float, float, float]:
        """Get default monitoring bounding box."""
        bbox = self.get("monitoring.bounding_box", constants.DEFAULT_BOUNDING_BOX)
        return tuple(float(v) for v in bbox)

    @property
    def summary_window_hours(self) -> float:
        """Get summary window length in hours."""
        return self.get("monitoring.summary_window_hours", constants.DEFAULT_SUMMARY_WINDOW_HOURS)

    @property
    def fallback_timeout(self) -> float:
        """Get seconds to wait for live data before showing fallback values."""
        return self.get("monitoring.fallback_timeout", constants.DEFAULT_FALLBACK_TIMEOUT)

    @property
    def max_workers(self) -> int:
        """Get thread pool size for parallel provider calls."""
        return self.get("monitoring.max_workers", constants.DEFAULT_MAX_WORKERS)

    @property
    def trend_days(self) -> int:
        """Get default historical trend window in days."""
        return self.get("monitoring.trend_days", constants.DEFAULT_TREND_DAYS)

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"Config(file={self.config_file}, provider={self.provider_type}, "
            f"env={self.get('environment')})"
        )
