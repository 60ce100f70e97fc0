"""
Calculation algorithms for weather station readings.

Provides relative humidity, heat index and wind chill calculations.
"""

from .comfort import ComfortCalculator, ComfortComponents

__all__ = [
    "ComfortCalculator",
    "ComfortComponents",
]
