"""
Tests for the StevensonReading value object.

Covers construction rules, rounding accessors, rendering, equality and the
derived comfort metrics.
"""

import dataclasses

import pytest

from weather_station import (
    StevensonReading,
    WeatherReading,
    InvalidReading,
    InvalidConstructionError,
    InvalidDerivedMetricError,
)


@pytest.mark.unit
class TestReadingAccessors:
    """Test cases for the basic accessors."""

    @pytest.fixture
    def reading(self, reading_factory):
        """Reading used by most accessor tests."""
        return reading_factory(30, 20, 15, 1)

    def test_is_weather_reading(self, reading):
        assert isinstance(reading, WeatherReading)

    def test_temperature(self, reading):
        assert reading.temperature() == 30

    def test_dew_point(self, reading):
        assert reading.dew_point() == 20

    def test_wind_speed(self, reading):
        assert reading.wind_speed() == 15

    def test_total_rain(self, reading):
        assert reading.total_rain() == 1

    def test_accessors_return_int(self, reading_factory):
        reading = reading_factory(21.7, 11.2, 4.4, 0.6)
        for value in (
            reading.temperature(),
            reading.dew_point(),
            reading.wind_speed(),
            reading.total_rain(),
        ):
            assert isinstance(value, int)

    def test_rounds_half_up(self, reading_factory):
        """Ties round up, unlike Python's round()."""
        reading = reading_factory(2.5, 1.5, 0.5, 3.5)
        assert reading.temperature() == 3
        assert reading.dew_point() == 2
        assert reading.wind_speed() == 1
        assert reading.total_rain() == 4

    def test_negative_ties_round_toward_positive(self, reading_factory):
        reading = reading_factory(-2.5, -3.5, 0, 0)
        assert reading.temperature() == -2
        assert reading.dew_point() == -3

    def test_raw_values_stored_verbatim(self, reading_factory):
        reading = reading_factory(21.7, 11.2, 4.4, 0.6)
        assert reading.air_temp_celsius == 21.7
        assert reading.dew_point_celsius == 11.2
        assert reading.wind_speed_mph == 4.4
        assert reading.total_rain_mm == 0.6

    def test_dew_point_never_above_temperature_after_rounding(self, reading_factory):
        reading = reading_factory(10.49, 10.49, 0, 0)
        assert reading.dew_point() <= reading.temperature()

    def test_value_just_below_half_rounds_down(self, reading_factory):
        reading = reading_factory(0.49999999999999994, 0, 0, 0)
        assert reading.temperature() == 0

    def test_large_float_rounds_exactly(self, reading_factory):
        reading = reading_factory(4503599627370497.0, 0, 0, 4503599627370497.0)
        assert reading.temperature() == 4503599627370497
        assert reading.total_rain() == 4503599627370497

    def test_large_int_returned_unchanged(self, reading_factory):
        reading = reading_factory(10 ** 20 + 1, 0, 0, 0)
        assert reading.temperature() == 10 ** 20 + 1
        assert str(reading) == f"Reading: T = {10 ** 20 + 1}, D = 0, v = 0, rain = 0"

    def test_negative_fraction_rounds_half_up(self, reading_factory):
        reading = reading_factory(-0.5, -1.5000000000000002, 0, 0)
        assert reading.temperature() == 0
        assert reading.dew_point() == -2


@pytest.mark.unit
class TestReadingValidation:
    """Test cases for construction-time validation."""

    def test_negative_wind_speed(self, reading_factory):
        with pytest.raises(InvalidConstructionError, match="wind speed"):
            reading_factory(30, 20, -5, 1)

    def test_negative_wind_speed_checked_first(self, reading_factory):
        """Wind speed is reported even when other inputs are also invalid."""
        with pytest.raises(InvalidConstructionError, match="wind speed"):
            reading_factory(10, 20, -5, -1)

    def test_negative_total_rain(self, reading_factory):
        with pytest.raises(InvalidConstructionError, match="total rain"):
            reading_factory(30, 20, 5, -1)

    def test_dew_point_above_air_temperature(self, reading_factory):
        with pytest.raises(InvalidConstructionError, match="dew point"):
            reading_factory(10, 20, 15, 1)

    def test_dew_point_far_above_air_temperature(self, reading_factory):
        with pytest.raises(InvalidConstructionError):
            reading_factory(47, 100, 1, 28)

    def test_boundary_values_accepted(self, reading_factory):
        reading = reading_factory(15, 15, 0, 0)
        assert reading.wind_speed() == 0
        assert reading.total_rain() == 0

    def test_construction_error_is_value_error(self, reading_factory):
        with pytest.raises(ValueError):
            reading_factory(30, 20, -5, 1)
        with pytest.raises(InvalidReading):
            reading_factory(30, 20, -5, 1)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), "30", None, True])
    def test_non_numeric_inputs_rejected(self, reading_factory, bad):
        with pytest.raises(InvalidConstructionError):
            reading_factory(bad, 20, 15, 1)

    def test_keyword_construction(self):
        reading = StevensonReading(air_temp=30, dew_point=20, wind_speed=15, total_rain=1)
        assert str(reading) == "Reading: T = 30, D = 20, v = 15, rain = 1"

    def test_immutable(self, reading_factory):
        reading = reading_factory(30, 20, 15, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            reading.air_temp_celsius = 40


@pytest.mark.unit
class TestReadingIdentity:
    """Test cases for rendering, equality and hashing."""

    def test_to_string(self, reading_factory):
        reading = reading_factory(30, 20, 15, 1)
        assert str(reading) == "Reading: T = 30, D = 20, v = 15, rain = 1"

    def test_to_string_uses_rounded_values(self, reading_factory):
        reading = reading_factory(29.5, 19.4, 14.5, 0.5)
        assert str(reading) == "Reading: T = 30, D = 19, v = 15, rain = 1"

    def test_equals_reflexive(self, reading_factory):
        reading = reading_factory(30, 20, 15, 1)
        assert reading == reading

    def test_equal_for_identical_inputs(self, reading_factory):
        assert reading_factory(30, 20, 15, 1) == reading_factory(30, 20, 15, 1)

    def test_int_and_float_inputs_equal(self, reading_factory):
        assert reading_factory(30, 20, 15, 1) == reading_factory(30.0, 20.0, 15.0, 1.0)

    @pytest.mark.parametrize("other", [
        (10, 5, 3, 1),
        (31, 20, 15, 1),
        (30, 19, 15, 1),
        (30, 20, 16, 1),
        (30, 20, 15, 2),
    ])
    def test_not_equal_when_any_input_differs(self, reading_factory, other):
        assert reading_factory(30, 20, 15, 1) != reading_factory(*other)

    def test_equality_uses_raw_values(self, reading_factory):
        """Readings that render the same but differ in raw values are unequal."""
        first = reading_factory(30.1, 20, 15, 1)
        second = reading_factory(30.2, 20, 15, 1)
        assert str(first) == str(second)
        assert first != second

    def test_not_equal_to_other_types(self, reading_factory):
        reading = reading_factory(30, 20, 15, 1)
        assert reading != "Reading: T = 30, D = 20, v = 15, rain = 1"
        assert reading != (30, 20, 15, 1)

    def test_hash_equality(self, reading_factory):
        assert hash(reading_factory(30, 20, 15, 1)) == hash(reading_factory(30, 20, 15, 1))

    def test_usable_in_sets(self, reading_factory):
        readings = {
            reading_factory(30, 20, 15, 1),
            reading_factory(30, 20, 15, 1),
            reading_factory(10, 5, 3, 1),
        }
        assert len(readings) == 2


@pytest.mark.unit
class TestReadingDerivedMetrics:
    """Test cases for relative humidity, heat index and wind chill."""

    def test_relative_humidity(self, reading_factory):
        reading = reading_factory(72.729961, 57.282306, 22.651818, 65)
        assert reading.relative_humidity() == 83

    def test_relative_humidity_saturated(self, reading_factory):
        assert reading_factory(25, 25, 0, 0).relative_humidity() == 100

    def test_relative_humidity_out_of_range(self, reading_factory):
        """Below freezing the station formula leaves 0-100 %; checked on evaluation."""
        reading = reading_factory(-5, -10, 10, 0)
        with pytest.raises(InvalidDerivedMetricError):
            reading.relative_humidity()

    def test_relative_humidity_undefined_at_zero(self, reading_factory):
        reading = reading_factory(0, 0, 0, 0)
        with pytest.raises(InvalidDerivedMetricError):
            reading.relative_humidity()

    def test_heat_index(self, reading_factory):
        reading = reading_factory(20, 10, 15, 25)
        assert reading.heat_index() == 19

    def test_heat_index_hot_and_humid(self, reading_factory):
        assert reading_factory(30, 20, 15, 1).heat_index() == 34
        assert reading_factory(35, 25, 5, 0).heat_index() == 52

    def test_heat_index_propagates_humidity_error(self, reading_factory):
        reading = reading_factory(-5, -10, 10, 0)
        with pytest.raises(InvalidDerivedMetricError):
            reading.heat_index()

    def test_wind_chill(self, reading_factory):
        reading = reading_factory(99.596363, 98.579070, 7.347576, 59)
        assert reading.wind_chill() == 117

    def test_wind_chill_cold(self, reading_factory):
        assert reading_factory(-10, -20, 20, 0).wind_chill() == -20

    def test_wind_chill_without_wind(self, reading_factory):
        assert reading_factory(25, 25, 0, 0).wind_chill() == 29

    def test_wind_chill_does_not_depend_on_humidity(self, reading_factory):
        """Wind chill is available even when humidity is out of range."""
        reading = reading_factory(-5, -10, 10, 0)
        assert reading.wind_chill() == -11

    def test_components_match_metrics(self, reading_factory):
        reading = reading_factory(30, 20, 15, 1)
        components = reading.components()
        assert components.relative_humidity == reading.relative_humidity()
        assert components.heat_index == reading.heat_index()
        assert components.wind_chill == reading.wind_chill()

    def test_metrics_are_repeatable(self, reading_factory):
        reading = reading_factory(30, 20, 15, 1)
        assert reading.heat_index() == reading.heat_index()
        assert reading.relative_humidity() == reading.relative_humidity()
