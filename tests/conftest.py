import pytest

from huntmate.config import Settings
from huntmate.models import Coordinate

GEOCODE_URL = "https://geo.test/search"
WEATHER_URL = "https://weather.test/v1/forecast"
ELEVATION_URL = "https://elev.test/v1/test-dataset"


@pytest.fixture
def settings():
    return Settings(
        geocode_url=GEOCODE_URL,
        weather_url=WEATHER_URL,
        elevation_url=ELEVATION_URL,
        retries=0,
    )


@pytest.fixture
def high_point():
    return Coordinate(35.9557, -80.0053)
