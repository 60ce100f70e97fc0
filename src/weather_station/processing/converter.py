"""
Unit conversion module.

Converts raw station measurements into the canonical units of a reading.
"""

import logging
from typing import Any, Dict, Optional

from ..core import constants


class UnitConverter:
    """Convert between different meteorological units."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize unit converter.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _canonical(unit: str, aliases: Dict[str, str], kind: str) -> str:
        key = unit.strip().lower()
        if key not in aliases:
            raise ValueError(f"Unsupported {kind} unit: {unit!r}")
        return aliases[key]

    def convert_units(
        self,
        values: Dict[str, Any],
        source_units: Dict[str, str]
    ) -> Dict[str, Any]:
        """
        Convert raw reading values to canonical units.

        Target units:
        - Temperature (air_temp, dew_point): °C
        - Wind speed: mph
        - Rainfall (total_rain): mm

        Args:
            values: Dictionary with raw reading values
            source_units: Dictionary mapping temperature, wind_speed and rainfall
                          to their source units

        Returns:
            Dictionary with converted values
        """
        converted = dict(values)
        self.logger.debug(f"Converting reading values using units: {source_units}")

        unit = source_units.get("temperature", constants.DEFAULT_TEMPERATURE_UNIT)
        for temp_field in ["air_temp", "dew_point"]:
            if temp_field in converted:
                converted[temp_field] = self.convert_temperature(
                    converted[temp_field], unit, "celsius"
                )

        if "wind_speed" in converted:
            unit = source_units.get("wind_speed", constants.DEFAULT_WIND_SPEED_UNIT)
            converted["wind_speed"] = self.convert_wind_speed(
                converted["wind_speed"], unit, "mph"
            )

        if "total_rain" in converted:
            unit = source_units.get("rainfall", constants.DEFAULT_RAINFALL_UNIT)
            converted["total_rain"] = self.convert_rainfall(
                converted["total_rain"], unit, "mm"
            )

        return converted

    def convert_temperature(self, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert temperature between units.

        Args:
            value: Temperature value
            from_unit: Source unit (celsius, fahrenheit, kelvin)
            to_unit: Target unit

        Returns:
            Converted temperature value
        """
        source = self._canonical(from_unit, constants.TEMPERATURE_UNITS, "temperature")
        target = self._canonical(to_unit, constants.TEMPERATURE_UNITS, "temperature")
        if source == target:
            return value

        # Convert to Celsius first
        if source == "fahrenheit":
            celsius = (value - constants.FAHRENHEIT_OFFSET) / constants.FAHRENHEIT_SCALE
        elif source == "kelvin":
            celsius = value - constants.KELVIN_OFFSET
        else:
            celsius = value

        if target == "fahrenheit":
            return celsius * constants.FAHRENHEIT_SCALE + constants.FAHRENHEIT_OFFSET
        elif target == "kelvin":
            return celsius + constants.KELVIN_OFFSET
        return celsius

    def convert_wind_speed(self, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert wind speed between units.

        Args:
            value: Wind speed value
            from_unit: Source unit (mph, km/h, m/s, knots)
            to_unit: Target unit

        Returns:
            Converted wind speed value
        """
        source = self._canonical(from_unit, constants.WIND_SPEED_UNITS, "wind speed")
        target = self._canonical(to_unit, constants.WIND_SPEED_UNITS, "wind speed")
        if source == target:
            return value

        # Convert to m/s first
        if source == "km/h":
            ms = value / 3.6
        elif source == "mph":
            ms = value * constants.MPH_TO_MS
        elif source == "knots":
            ms = value * constants.KNOTS_TO_MS
        else:
            ms = value

        if target == "km/h":
            return ms * 3.6
        elif target == "mph":
            return ms / constants.MPH_TO_MS
        elif target == "knots":
            return ms / constants.KNOTS_TO_MS
        return ms

    def convert_rainfall(self, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert rainfall depth between units.

        Args:
            value: Rainfall value
            from_unit: Source unit (mm, cm, inches)
            to_unit: Target unit

        Returns:
            Converted rainfall value
        """
        source = self._canonical(from_unit, constants.RAINFALL_UNITS, "rainfall")
        target = self._canonical(to_unit, constants.RAINFALL_UNITS, "rainfall")
        if source == target:
            return value

        if source == "cm":
            mm = value * 10
        elif source == "inches":
            mm = value * constants.INCH_TO_MM
        else:
            mm = value

        if target == "cm":
            return mm / 10
        elif target == "inches":
            return mm / constants.INCH_TO_MM
        return mm
