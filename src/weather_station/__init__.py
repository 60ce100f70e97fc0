"""
Weather Station Readings

This package models readings from a weather station and derives relative
humidity, heat index and wind chill from them.
"""

from .core.exceptions import (
    InvalidReading,
    InvalidConstructionError,
    InvalidDerivedMetricError,
)
from .models import WeatherReading, StevensonReading
from .processor import ReadingProcessor

__version__ = "0.1.0"
__description__ = "Weather station readings with derived comfort metrics"

__all__ = [
    "WeatherReading",
    "StevensonReading",
    "ReadingProcessor",
    "InvalidReading",
    "InvalidConstructionError",
    "InvalidDerivedMetricError",
]
