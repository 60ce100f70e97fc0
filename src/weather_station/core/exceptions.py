"""
Exceptions raised by weather station readings.
"""


class InvalidReading(ValueError):
    """Base error for readings that violate their domain rules."""


class InvalidConstructionError(InvalidReading):
    """Raised when raw inputs fail validation; no reading is created."""


class InvalidDerivedMetricError(InvalidReading):
    """Raised when a derived metric evaluates outside its valid range."""
