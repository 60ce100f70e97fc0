"""
Reading processor.

Turns raw station values, in whatever units the station reports, into
validated StevensonReading objects.
"""

import logging
from typing import Any, Dict, Optional

from .core import constants
from .core.config import Config
from .core.exceptions import InvalidConstructionError, InvalidReading
from .models.reading import StevensonReading
from .processing import UnitConverter, ReadingValidator, REQUIRED_FIELDS


class ReadingProcessor:
    """
    Unified reading builder combining conversion and validation.

    Source units come from, in order of precedence: the per-call units, the
    configuration, and the canonical units (°C, mph, mm).
    """

    def __init__(self, config: Optional[Config] = None, logger: Optional[logging.Logger] = None):
        """
        Initialize reading processor.

        Args:
            config: Configuration supplying default source units and, when no
                    logger is given, the level of this module's logger
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.converter = UnitConverter(self.logger)
        self.validator = ReadingValidator(self.logger)

        if config is not None:
            self.default_units = config.source_units
            if logger is None:
                self.logger.setLevel(config.log_level)
        else:
            self.default_units = {
                "temperature": constants.DEFAULT_TEMPERATURE_UNIT,
                "wind_speed": constants.DEFAULT_WIND_SPEED_UNIT,
                "rainfall": constants.DEFAULT_RAINFALL_UNIT,
            }

    def build_reading(
        self,
        values: Dict[str, Any],
        source_units: Optional[Dict[str, str]] = None
    ) -> StevensonReading:
        """
        Build a reading from raw station values.

        Args:
            values: Dictionary with air_temp, dew_point, wind_speed and total_rain
            source_units: Units of the raw values, keyed by temperature,
                          wind_speed and rainfall (overrides configured units)

        Returns:
            Validated StevensonReading in canonical units

        Raises:
            InvalidConstructionError: If values are missing or invalid
            ValueError: If a unit is not supported
        """
        units = dict(self.default_units)
        if source_units:
            units.update(source_units)

        try:
            is_valid, errors = self.validator.validate_inputs(values)
            if not is_valid:
                raise InvalidConstructionError(errors[0])

            converted = self.converter.convert_units(
                {field: values[field] for field in REQUIRED_FIELDS}, units
            )

            reading = StevensonReading(
                air_temp=converted["air_temp"],
                dew_point=converted["dew_point"],
                wind_speed=converted["wind_speed"],
                total_rain=converted["total_rain"],
            )

        except InvalidReading as e:
            self.logger.warning(f"Rejected station values: {e}")
            raise

        self.logger.debug(f"Built {reading} from {values} ({units})")
        return reading
