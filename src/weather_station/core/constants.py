"""
Constants for weather station reading calculations.

Regression coefficients are reproduced exactly as published; do not round them.
"""

# Vapor pressure term (Magnus-style)
VAPOR_PRESSURE_BASE = 6.11  # hPa
VAPOR_PRESSURE_SCALE = 10.0
MAGNUS_A = 7.5
MAGNUS_B = 237.3  # °C

# Relative humidity bounds (%)
HUMIDITY_MIN = 0
HUMIDITY_MAX = 100

# Heat index: Steadman simple estimate (°F)
STEADMAN_OFFSET = 61.0
STEADMAN_REFERENCE_F = 68.0
STEADMAN_TEMP_FACTOR = 1.2
STEADMAN_HUMIDITY_FACTOR = 0.094

# Below this mean of (estimate, Tf) the simple estimate is used
ROTHFUSZ_THRESHOLD_F = 80.0

# Heat index: Rothfusz regression, Celsius coefficients
HEAT_INDEX_C1 = -8.78469475556
HEAT_INDEX_C2 = 1.61139411
HEAT_INDEX_C3 = 2.33854883889
HEAT_INDEX_C4 = -0.14611605
HEAT_INDEX_C5 = -0.012308094
HEAT_INDEX_C6 = -0.0164248277778
HEAT_INDEX_C7 = 0.002211732
HEAT_INDEX_C8 = 0.00072546
HEAT_INDEX_C9 = -0.000003582

# Wind chill regression (°F, mph)
WIND_CHILL_A = 35.74
WIND_CHILL_B = 0.6215
WIND_CHILL_C = 35.75
WIND_CHILL_D = 0.4275
WIND_CHILL_EXPONENT = 0.16

# Unit conversion factors
FAHRENHEIT_SCALE = 1.8
FAHRENHEIT_OFFSET = 32.0
KELVIN_OFFSET = 273.15
MPH_TO_MS = 0.44704
KNOTS_TO_MS = 0.514444
INCH_TO_MM = 25.4

# Canonical units for stored readings
DEFAULT_TEMPERATURE_UNIT = "celsius"
DEFAULT_WIND_SPEED_UNIT = "mph"
DEFAULT_RAINFALL_UNIT = "mm"

# Accepted unit aliases, mapped to their canonical name
TEMPERATURE_UNITS = {
    "celsius": "celsius", "c": "celsius", "°c": "celsius",
    "fahrenheit": "fahrenheit", "f": "fahrenheit", "°f": "fahrenheit",
    "kelvin": "kelvin", "k": "kelvin",
}
WIND_SPEED_UNITS = {
    "mph": "mph", "mi/h": "mph",
    "km/h": "km/h", "kmh": "km/h", "kph": "km/h",
    "m/s": "m/s", "ms": "m/s",
    "knots": "knots", "kt": "knots", "kn": "knots",
}
RAINFALL_UNITS = {
    "mm": "mm", "millimeters": "mm", "millimetres": "mm",
    "cm": "cm", "centimeters": "cm", "centimetres": "cm",
    "in": "inches", "inch": "inches", "inches": "inches",
}
