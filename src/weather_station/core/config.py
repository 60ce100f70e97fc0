"""
Configuration module for the weather station library.

Loads configuration from an optional JSON file and environment variables.
"""

import copy
import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants

DEFAULT_CONFIG: Dict[str, Any] = {
    "units": {
        "temperature": constants.DEFAULT_TEMPERATURE_UNIT,
        "wind_speed": constants.DEFAULT_WIND_SPEED_UNIT,
        "rainfall": constants.DEFAULT_RAINFALL_UNIT,
    },
    "logging": {
        "level": "INFO",
    },
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Configuration manager for the library."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses the
                        WEATHER_STATION_CONFIG env var or defaults to 'config.json'.
                        Only an explicitly requested file is required to exist.
        """
        self._explicit = config_file is not None or bool(os.getenv("WEATHER_STATION_CONFIG"))
        self.config_file = config_file or os.getenv("WEATHER_STATION_CONFIG", "config.json")
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Merge configuration from JSON file over the defaults."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file must contain a JSON object: {self.config_file}")

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(values)
            else:
                self.config[section] = values

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("LOG_LEVEL"):
            self.config["logging"]["level"] = os.getenv("LOG_LEVEL").strip().upper()

        if os.getenv("WEATHER_TEMPERATURE_UNIT"):
            self.config["units"]["temperature"] = os.getenv("WEATHER_TEMPERATURE_UNIT")

        if os.getenv("WEATHER_WIND_SPEED_UNIT"):
            self.config["units"]["wind_speed"] = os.getenv("WEATHER_WIND_SPEED_UNIT")

        if os.getenv("WEATHER_RAINFALL_UNIT"):
            self.config["units"]["rainfall"] = os.getenv("WEATHER_RAINFALL_UNIT")

    def _validate_config(self) -> None:
        """Validate configured units and log level."""
        supported = {
            "temperature": constants.TEMPERATURE_UNITS,
            "wind_speed": constants.WIND_SPEED_UNITS,
            "rainfall": constants.RAINFALL_UNITS,
        }

        invalid = []
        for field, aliases in supported.items():
            unit = str(self.get(f"units.{field}", "")).strip().lower()
            if unit not in aliases:
                invalid.append(f"units.{field}={self.get(f'units.{field}')!r}")

        if invalid:
            raise ValueError(f"Unsupported units in configuration: {', '.join(invalid)}")

        level = str(self.get("logging.level", "")).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid logging.level {level!r}; expected one of {', '.join(_LOG_LEVELS)}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'units.temperature')
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
    def temperature_unit(self) -> str:
        """Get default source unit for temperatures."""
        return self.get("units.temperature", constants.DEFAULT_TEMPERATURE_UNIT)

    @property
    def wind_speed_unit(self) -> str:
        """Get default source unit for wind speed."""
        return self.get("units.wind_speed", constants.DEFAULT_WIND_SPEED_UNIT)

    @property
    def rainfall_unit(self) -> str:
        """Get default source unit for rainfall."""
        return self.get("units.rainfall", constants.DEFAULT_RAINFALL_UNIT)

    @property
    def source_units(self) -> Dict[str, str]:
        """Default source units keyed by reading field."""
        return {
            "temperature": self.temperature_unit,
            "wind_speed": self.wind_speed_unit,
            "rainfall": self.rainfall_unit,
        }

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO").upper()

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, units={self.source_units})"
