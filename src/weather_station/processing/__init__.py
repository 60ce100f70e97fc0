"""
Input processing for weather station readings.

Provides unit conversion and validation of raw station values.
"""

from .converter import UnitConverter
from .validator import ReadingValidator, REQUIRED_FIELDS

__all__ = [
    "UnitConverter",
    "ReadingValidator",
    "REQUIRED_FIELDS",
]
