import copy

import pytest

from ecolive.dashboard.controller import DashboardController
from ecolive.dashboard.generators import SyntheticReadingFactory
from ecolive.shared.storage import LocalStore, ReadingsStorage
from ecolive.weather.client import WeatherReport

MANILA_WEATHER = {
    "coord": {"lat": 14.5995, "lon": 120.9842},
    "main": {"temp": 25, "humidity": 70},
    "weather": [{"main": "Clear", "description": "clear sky", "icon": "01d"}],
    "wind": {"speed": 5},
    "name": "Manila",
    "sys": {"country": "PH"},
}


class FixedRandom:
    """Stands in for random.Random with midpoint values."""

    def random(self):
        return 0.5

    def uniform(self, a, b):
        return (a + b) / 2


class FakeWeatherClient:
    """Returns canned reports keyed by city, None for anything else."""

    def __init__(self, payloads=None):
        self.payloads = payloads or {}
        self.calls = []

    async def fetch_current(self, city):
        self.calls.append(city)
        payload = self.payloads.get(city)
        return WeatherReport.from_dict(payload) if payload else None


@pytest.fixture
def manila_payload():
    return copy.deepcopy(MANILA_WEATHER)


@pytest.fixture
def store(tmp_path):
    return LocalStore(tmp_path / "storage.json")


@pytest.fixture
def storage(store):
    return ReadingsStorage(store)


@pytest.fixture
def weather_client(manila_payload):
    return FakeWeatherClient({"Manila": manila_payload})


@pytest.fixture
def controller(storage, weather_client):
    return DashboardController(storage, weather_client, SyntheticReadingFactory(FixedRandom()))
