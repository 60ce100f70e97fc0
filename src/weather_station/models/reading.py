"""
Weather reading models.

Defines the WeatherReading contract and the Stevenson screen station reading.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..algorithms.comfort import ComfortCalculator, ComfortComponents
from ..core.rounding import round_half_up
from ..processing.validator import ReadingValidator

logger = logging.getLogger(__name__)

_validator = ReadingValidator(logger)


class WeatherReading(ABC):
    """
    A single reading from a weather station.

    Accessors report whole numbers: temperatures in °C, wind speed in mph and
    rain received over the last 24 hours in mm.
    """

    @abstractmethod
    def temperature(self) -> int:
        """Air temperature (°C)."""

    @abstractmethod
    def dew_point(self) -> int:
        """Dew point temperature (°C)."""

    @abstractmethod
    def wind_speed(self) -> int:
        """Wind speed (mph)."""

    @abstractmethod
    def total_rain(self) -> int:
        """Rain received in the last 24 hours (mm)."""

    @abstractmethod
    def relative_humidity(self) -> int:
        """Relative humidity (%)."""

    @abstractmethod
    def heat_index(self) -> int:
        """Heat index (°C)."""

    @abstractmethod
    def wind_chill(self) -> int:
        """Wind chill (°C)."""


@dataclass(frozen=True, init=False)
class StevensonReading(WeatherReading):
    """
    Reading taken from a Stevenson screen.

    Raw values are stored as given; equality and hashing use the raw values.
    """

    air_temp_celsius: float
    dew_point_celsius: float
    wind_speed_mph: float
    total_rain_mm: float

    def __init__(
        self,
        air_temp: float,
        dew_point: float,
        wind_speed: float,
        total_rain: float
    ):
        """
        Construct a validated reading.

        Args:
            air_temp: Air temperature (°C)
            dew_point: Dew point temperature (°C), not above air_temp
            wind_speed: Wind speed (mph), non-negative
            total_rain: Rain received in the last 24 hours (mm), non-negative

        Raises:
            InvalidConstructionError: If any argument is invalid
        """
        _validator.check(air_temp, dew_point, wind_speed, total_rain)

        object.__setattr__(self, "air_temp_celsius", air_temp)
        object.__setattr__(self, "dew_point_celsius", dew_point)
        object.__setattr__(self, "wind_speed_mph", wind_speed)
        object.__setattr__(self, "total_rain_mm", total_rain)

    def temperature(self) -> int:
        return round_half_up(self.air_temp_celsius)

    def dew_point(self) -> int:
        return round_half_up(self.dew_point_celsius)

    def wind_speed(self) -> int:
        return round_half_up(self.wind_speed_mph)

    def total_rain(self) -> int:
        return round_half_up(self.total_rain_mm)

    def relative_humidity(self) -> int:
        """
        Relative humidity from air temperature and dew point.

        Raises:
            InvalidDerivedMetricError: If the result lies outside 0-100 %
        """
        return ComfortCalculator.relative_humidity(self.air_temp_celsius, self.dew_point_celsius)

    def heat_index(self) -> int:
        """
        Heat index from air temperature and relative humidity, truncated.

        Raises:
            InvalidDerivedMetricError: If relative humidity is out of range
        """
        return ComfortCalculator.heat_index(self.air_temp_celsius, self.relative_humidity())

    def wind_chill(self) -> int:
        return ComfortCalculator.wind_chill(self.air_temp_celsius, self.wind_speed_mph)

    def components(self) -> ComfortComponents:
        """Derived metrics with their intermediate values."""
        return ComfortCalculator.calculate_with_components(
            self.air_temp_celsius, self.dew_point_celsius, self.wind_speed_mph
        )

    def __str__(self) -> str:
        return (
            f"Reading: T = {self.temperature()}, D = {self.dew_point()}, "
            f"v = {self.wind_speed()}, rain = {self.total_rain()}"
        )
