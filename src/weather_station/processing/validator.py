"""
Reading validation module.

Validates the raw inputs of a weather station reading.
"""

import logging
import math
from numbers import Real
from typing import Any, Dict, List, Tuple, Optional

from ..core.exceptions import InvalidConstructionError

REQUIRED_FIELDS = ("air_temp", "dew_point", "wind_speed", "total_rain")


class ReadingValidator:
    """Validate raw weather station inputs."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize reading validator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _number_error(field: str, value: Any) -> Optional[str]:
        if isinstance(value, bool) or not isinstance(value, Real):
            return f"{field} must be a number, got {value!r}"
        if not math.isfinite(value):
            return f"{field} must be finite, got {value!r}"
        return None

    def validate_inputs(self, values: Dict[str, Any]) -> Tuple[bool, List[str]]:
        """
        Validate that all inputs are present and satisfy the reading rules.

        Errors are reported in checking order.

        Args:
            values: Dictionary with air_temp, dew_point, wind_speed and total_rain

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []
        numeric = set()

        for field in REQUIRED_FIELDS:
            if field not in values:
                errors.append(f"Missing required field: {field}")
                continue
            error = self._number_error(field, values[field])
            if error:
                errors.append(error)
            else:
                numeric.add(field)

        if "wind_speed" in numeric and values["wind_speed"] < 0:
            errors.append("wind speed must be non-negative")

        if "total_rain" in numeric and values["total_rain"] < 0:
            errors.append("total rain must be non-negative")

        if {"air_temp", "dew_point"} <= numeric and values["dew_point"] > values["air_temp"]:
            errors.append("dew point cannot exceed air temperature")

        if errors:
            self.logger.debug(f"Rejected reading inputs {values}: {'; '.join(errors)}")

        return len(errors) == 0, errors

    def check(
        self,
        air_temp: float,
        dew_point: float,
        wind_speed: float,
        total_rain: float
    ) -> None:
        """
        Validate reading inputs, raising on the first violation.

        Args:
            air_temp: Air temperature (°C)
            dew_point: Dew point temperature (°C)
            wind_speed: Wind speed (mph)
            total_rain: Rain in the last 24 hours (mm)

        Raises:
            InvalidConstructionError: If any input is invalid
        """
        is_valid, errors = self.validate_inputs({
            "air_temp": air_temp,
            "dew_point": dew_point,
            "wind_speed": wind_speed,
            "total_rain": total_rain,
        })
        if not is_valid:
            raise InvalidConstructionError(errors[0])
