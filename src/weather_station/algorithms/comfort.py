"""
Comfort metric calculation module.

Derives relative humidity, heat index and wind chill from the raw values of a
station reading: air temperature and dew point (°C) and wind speed (mph).

The heat index follows the NWS procedure: Steadman's simple estimate is used
for mild conditions and the Rothfusz regression (Celsius coefficients) above
the 80 °F threshold.

References:
    Rothfusz, L.P. (1990). The Heat Index Equation. NWS Technical Attachment SR 90-23.
    Osczevski, R. & Bluestein, M. (2005). The new wind chill equivalent temperature
    chart. Bulletin of the American Meteorological Society, 86(10).
"""

from dataclasses import dataclass

from ..core import constants
from ..core.exceptions import InvalidDerivedMetricError
from ..core.rounding import round_half_up


@dataclass(frozen=True)
class ComfortComponents:
    """Container for comfort metrics and their intermediate values."""

    # Final results
    relative_humidity: int  # %
    heat_index: int  # °C, truncated
    wind_chill: int  # °C, rounded

    # Temperature
    air_temp_fahrenheit: float  # °F

    # Vapor pressure parameters
    saturated_vapor_pressure: float  # at air temperature
    actual_vapor_pressure: float  # at dew point
    relative_humidity_raw: float  # %, before rounding

    # Heat index parameters
    heat_index_raw: float  # °C, before truncation
    used_rothfusz: bool

    # Wind chill parameters
    wind_factor: float  # v^0.16
    wind_chill_raw: float  # °C, before rounding


class ComfortCalculator:
    """
    Calculator for derived comfort metrics of a weather reading.

    All methods are pure functions of their arguments.
    """

    # =========================================================================
    # SECTION 1: Temperature Scales
    # =========================================================================

    @staticmethod
    def celsius_to_fahrenheit(temperature: float) -> float:
        """Convert °C to °F."""
        return temperature * constants.FAHRENHEIT_SCALE + constants.FAHRENHEIT_OFFSET

    @staticmethod
    def fahrenheit_to_celsius(temperature: float) -> float:
        """Convert °F to °C."""
        return (temperature - constants.FAHRENHEIT_OFFSET) * (5.0 / 9.0)

    # =========================================================================
    # SECTION 2: Relative Humidity
    # =========================================================================

    @staticmethod
    def vapor_pressure(temperature: float) -> float:
        """
        Calculate the vapor pressure term for a temperature.

        Saturated vapor pressure when given the air temperature, actual vapor
        pressure when given the dew point.

        Args:
            temperature: Temperature (°C)

        Returns:
            Vapor pressure term
        """
        return constants.VAPOR_PRESSURE_BASE * constants.VAPOR_PRESSURE_SCALE * (
            (constants.MAGNUS_A * temperature) / (constants.MAGNUS_B + temperature)
        )

    @staticmethod
    def _relative_humidity_raw(air_temp: float, dew_point: float) -> float:
        for label, temperature in (("air temperature", air_temp), ("dew point", dew_point)):
            if constants.MAGNUS_B + temperature == 0:
                raise InvalidDerivedMetricError(
                    f"Relative humidity is undefined at {label} {temperature}"
                )

        saturated = ComfortCalculator.vapor_pressure(air_temp)
        if saturated == 0:
            raise InvalidDerivedMetricError(
                f"Relative humidity is undefined at air temperature {air_temp}"
            )
        actual = ComfortCalculator.vapor_pressure(dew_point)
        return (actual / saturated) * 100

    @staticmethod
    def relative_humidity(air_temp: float, dew_point: float) -> int:
        """
        Calculate relative humidity from air temperature and dew point.

        Args:
            air_temp: Air temperature (°C)
            dew_point: Dew point temperature (°C)

        Returns:
            Relative humidity (%), rounded half-up

        Raises:
            InvalidDerivedMetricError: If the result lies outside 0-100 %
        """
        humidity = round_half_up(ComfortCalculator._relative_humidity_raw(air_temp, dew_point))

        if not (constants.HUMIDITY_MIN <= humidity <= constants.HUMIDITY_MAX):
            raise InvalidDerivedMetricError(
                f"Relative humidity {humidity}% is outside "
                f"{constants.HUMIDITY_MIN}-{constants.HUMIDITY_MAX}%"
            )

        return humidity

    # =========================================================================
    # SECTION 3: Heat Index
    # =========================================================================

    @staticmethod
    def _steadman_estimate(temp_f: float, humidity: float) -> float:
        """Steadman's simple heat index estimate (°F)."""
        return 0.5 * (
            temp_f
            + constants.STEADMAN_OFFSET
            + (temp_f - constants.STEADMAN_REFERENCE_F) * constants.STEADMAN_TEMP_FACTOR
            + humidity * constants.STEADMAN_HUMIDITY_FACTOR
        )

    @staticmethod
    def _rothfusz(temperature: float, humidity: float) -> float:
        """Rothfusz regression with Celsius coefficients (°C)."""
        t = temperature
        r = humidity
        return (
            constants.HEAT_INDEX_C1
            + constants.HEAT_INDEX_C2 * t
            + constants.HEAT_INDEX_C3 * r
            + constants.HEAT_INDEX_C4 * t * r
            + constants.HEAT_INDEX_C5 * t ** 2
            + constants.HEAT_INDEX_C6 * r ** 2
            + constants.HEAT_INDEX_C7 * t ** 2 * r
            + constants.HEAT_INDEX_C8 * t * r ** 2
            + constants.HEAT_INDEX_C9 * t ** 2 * r ** 2
        )

    @staticmethod
    def _heat_index_raw(air_temp: float, humidity: int):
        temp_f = ComfortCalculator.celsius_to_fahrenheit(air_temp)
        estimate = ComfortCalculator._steadman_estimate(temp_f, humidity)

        if (estimate + temp_f) / 2 < constants.ROTHFUSZ_THRESHOLD_F:
            return ComfortCalculator.fahrenheit_to_celsius(estimate), False

        return ComfortCalculator._rothfusz(air_temp, humidity), True

    @staticmethod
    def heat_index(air_temp: float, humidity: int) -> int:
        """
        Calculate the heat index.

        Args:
            air_temp: Air temperature (°C)
            humidity: Relative humidity (%)

        Returns:
            Heat index (°C), truncated toward zero
        """
        value, _ = ComfortCalculator._heat_index_raw(air_temp, humidity)
        return int(value)

    # =========================================================================
    # SECTION 4: Wind Chill
    # =========================================================================

    @staticmethod
    def _wind_factor(wind_speed: float) -> float:
        # 0 ** 0.16 evaluates to 0.0
        return wind_speed ** constants.WIND_CHILL_EXPONENT

    @staticmethod
    def _wind_chill_raw(air_temp: float, wind_speed: float) -> float:
        temp_f = ComfortCalculator.celsius_to_fahrenheit(air_temp)
        factor = ComfortCalculator._wind_factor(wind_speed)

        chill_f = (
            constants.WIND_CHILL_A
            + constants.WIND_CHILL_B * temp_f
            - constants.WIND_CHILL_C * factor
            + constants.WIND_CHILL_D * temp_f * factor
        )
        return ComfortCalculator.fahrenheit_to_celsius(chill_f)

    @staticmethod
    def wind_chill(air_temp: float, wind_speed: float) -> int:
        """
        Calculate the wind chill.

        Args:
            air_temp: Air temperature (°C)
            wind_speed: Wind speed (mph), non-negative

        Returns:
            Wind chill (°C), rounded half-up
        """
        return round_half_up(ComfortCalculator._wind_chill_raw(air_temp, wind_speed))

    # =========================================================================
    # SECTION 5: Full Breakdown
    # =========================================================================

    @staticmethod
    def calculate_with_components(
        air_temp: float,
        dew_point: float,
        wind_speed: float
    ) -> ComfortComponents:
        """
        Calculate all comfort metrics with their intermediate values.

        Useful for debugging and for checking values against reference tables.

        Args:
            air_temp: Air temperature (°C)
            dew_point: Dew point temperature (°C)
            wind_speed: Wind speed (mph)

        Returns:
            ComfortComponents object containing all intermediate values

        Raises:
            InvalidDerivedMetricError: If relative humidity is out of range
        """
        humidity = ComfortCalculator.relative_humidity(air_temp, dew_point)
        heat_raw, used_rothfusz = ComfortCalculator._heat_index_raw(air_temp, humidity)
        chill_raw = ComfortCalculator._wind_chill_raw(air_temp, wind_speed)

        return ComfortComponents(
            relative_humidity=humidity,
            heat_index=int(heat_raw),
            wind_chill=round_half_up(chill_raw),
            air_temp_fahrenheit=ComfortCalculator.celsius_to_fahrenheit(air_temp),
            saturated_vapor_pressure=ComfortCalculator.vapor_pressure(air_temp),
            actual_vapor_pressure=ComfortCalculator.vapor_pressure(dew_point),
            relative_humidity_raw=ComfortCalculator._relative_humidity_raw(air_temp, dew_point),
            heat_index_raw=heat_raw,
            used_rothfusz=used_rothfusz,
            wind_factor=ComfortCalculator._wind_factor(wind_speed),
            wind_chill_raw=chill_raw,
        )
