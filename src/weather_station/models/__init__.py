"""
Data models for the weather station library.
"""

from .reading import WeatherReading, StevensonReading

__all__ = [
    "WeatherReading",
    "StevensonReading",
]
