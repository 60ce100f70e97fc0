"""
Core utilities for the weather station library.

Provides configuration, logging, constants, rounding and the error hierarchy.
"""

from .config import Config
from .logger import setup_logger
from .rounding import round_half_up
from .exceptions import (
    InvalidReading,
    InvalidConstructionError,
    InvalidDerivedMetricError,
)
from . import constants

__all__ = [
    "Config",
    "setup_logger",
    "round_half_up",
    "InvalidReading",
    "InvalidConstructionError",
    "InvalidDerivedMetricError",
    "constants",
]
