"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add src/ to sys.path so the package imports without installation
src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


@pytest.fixture
def reading_factory():
    """Create readings through the abstract contract."""
    from weather_station import StevensonReading

    def create(air_temp, dew_point, wind_speed, total_rain):
        return StevensonReading(air_temp, dew_point, wind_speed, total_rain)

    return create


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables that affect configuration."""
    for name in (
        "WEATHER_STATION_CONFIG",
        "LOG_LEVEL",
        "LOG_FILE",
        "WEATHER_TEMPERATURE_UNIT",
        "WEATHER_WIND_SPEED_UNIT",
        "WEATHER_RAINFALL_UNIT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
