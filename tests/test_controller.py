import json

import pytest

from ecolive.dashboard.controller import DashboardController
from ecolive.dashboard.generators import (
    AIR_QUALITY,
    ECOSYSTEM_HEALTH,
    SOIL_QUALITY,
    WATER_QUALITY,
    SyntheticReadingFactory,
)
from ecolive.shared.errors import CityNotSelectedError, EmptyCityError, UnknownCategoryError
from ecolive.shared.models import Reading, TemperatureReading
from tests.conftest import FakeWeatherClient, FixedRandom


async def test_toggle_without_city_reverts_and_raises(controller, storage):
    with pytest.raises(CityNotSelectedError):
        await controller.toggle_category(AIR_QUALITY, True)

    assert controller.state.checkboxes[AIR_QUALITY] is False
    assert storage.load_all() == []


async def test_toggle_on_creates_exactly_one_reading(controller, storage):
    await controller.render_city_view("Manila")
    created = await controller.toggle_category(AIR_QUALITY, True)

    readings = storage.load_all()
    assert [r.name for r in readings] == ["Manila Air Quality"]
    assert readings[0] == created
    assert isinstance(readings[0], TemperatureReading)
    assert (readings[0].lat, readings[0].lon) == (14.5995, 120.9842)
    assert controller.state.checkboxes[AIR_QUALITY] is True
    assert controller.state.chart.labels == ["Manila Air Quality"]
    assert controller.state.map.center == (14.5995, 120.9842)


async def test_toggle_on_twice_does_not_duplicate(controller, storage):
    await controller.render_city_view("Manila")
    await controller.toggle_category(SOIL_QUALITY, True)
    assert await controller.toggle_category(SOIL_QUALITY, True) is None
    assert [r.name for r in storage.load_all()] == ["Manila Soil Quality"]


async def test_toggle_off_removes_only_that_reading(controller, storage):
    other = TemperatureReading("Cebu Air Quality", 60, "PM2.5 Index", "Cebu", 10.3, 123.9, "AQI")
    storage.save_all([other])

    await controller.render_city_view("Manila")
    await controller.toggle_category(AIR_QUALITY, True)
    await controller.toggle_category(WATER_QUALITY, True)
    await controller.toggle_category(AIR_QUALITY, False)

    assert [r.name for r in storage.load_all()] == ["Cebu Air Quality", "Manila Water Quality"]
    assert controller.state.checkboxes[AIR_QUALITY] is False
    assert controller.state.chart.labels == ["Manila Water Quality"]


async def test_toggle_uses_cached_weather(controller, weather_client):
    await controller.render_city_view("Manila")
    await controller.toggle_category(AIR_QUALITY, True)
    await controller.toggle_category(ECOSYSTEM_HEALTH, True)
    assert weather_client.calls == ["Manila"]


async def test_toggle_fetches_weather_when_not_cached(storage, manila_payload):
    client = FakeWeatherClient({"Manila": manila_payload})
    controller = DashboardController(storage, client, SyntheticReadingFactory(FixedRandom()))
    controller.state.current_city = "Manila"

    await controller.toggle_category(WATER_QUALITY, True)

    assert client.calls == ["Manila"]
    assert storage.load_all()[0].value == 7.5


async def test_failed_fetch_leaves_storage_untouched(controller, storage):
    existing = [Reading("Cebu Notes", 1, city="Cebu")]
    storage.save_all(existing)

    view = await controller.render_city_view("Atlantis")
    assert view.error == 'Could not fetch weather for "Atlantis".'
    assert controller.state.weather_circle is None

    assert await controller.toggle_category(AIR_QUALITY, True) is None
    assert storage.load_all() == existing
    assert controller.state.checkboxes[AIR_QUALITY] is False
    assert controller.state.error == 'Could not fetch weather for "Atlantis".'


async def test_unknown_category(controller):
    await controller.render_city_view("Manila")
    with pytest.raises(UnknownCategoryError):
        await controller.toggle_category("Noise", True)


async def test_render_city_view_classifies_and_syncs(controller, storage):
    storage.save_all([
        TemperatureReading("manila Soil Quality", 40, "Moisture Level", "manila", None, None, "%"),
        TemperatureReading("Cebu Air Quality", 60, "PM2.5 Index", "Cebu", 10.3, 123.9, "AQI"),
    ])
    controller.state.checkboxes[AIR_QUALITY] = True

    view = await controller.render_city_view("Manila")

    assert view.assessment.status == "Good Condition"
    assert view.show_analytics
    circle = controller.state.weather_circle
    assert (circle.lat, circle.lon, circle.color) == (14.5995, 120.9842, "green")
    assert controller.state.checkboxes == {
        AIR_QUALITY: False,
        WATER_QUALITY: False,
        SOIL_QUALITY: True,
        ECOSYSTEM_HEALTH: False,
    }
    assert controller.state.chart.labels == ["manila Soil Quality"]
    assert [(m.lat, m.lon) for m in controller.state.map.markers] == [(14.5995, 120.9842)]


async def test_render_city_view_without_coordinates_skips_sync(storage, manila_payload):
    del manila_payload["coord"]
    controller = DashboardController(storage, FakeWeatherClient({"Manila": manila_payload}))
    controller.state.checkboxes[AIR_QUALITY] = True

    view = await controller.render_city_view("Manila")

    assert view.report is not None
    assert controller.state.weather_circle is None
    assert controller.state.checkboxes[AIR_QUALITY] is True


async def test_search_city_trims_and_rejects_empty(controller):
    with pytest.raises(EmptyCityError):
        await controller.search_city("   ")

    view = await controller.search_city("  Manila ")
    assert view.city == "Manila"
    assert controller.state.current_city == "Manila"


async def test_delete_removes_only_that_row(controller, storage):
    readings = [Reading(f"Row {i}", i, city="Manila") for i in range(4)]
    storage.save_all(readings)

    removed = controller.delete_reading(1)

    assert removed.name == "Row 1"
    assert [r.name for r in storage.load_all()] == ["Row 0", "Row 2", "Row 3"]


async def test_delete_refreshes_city_views(controller, storage):
    await controller.render_city_view("Manila")
    await controller.toggle_category(AIR_QUALITY, True)
    await controller.toggle_category(SOIL_QUALITY, True)

    controller.delete_reading(0)

    assert controller.state.chart.labels == ["Manila Soil Quality"]
    assert controller.state.checkboxes[AIR_QUALITY] is False
    assert controller.state.checkboxes[SOIL_QUALITY] is True


def test_delete_out_of_range(controller, storage):
    storage.save_all([Reading("Only", 1)])
    with pytest.raises(IndexError):
        controller.delete_reading(1)
    with pytest.raises(IndexError):
        controller.delete_reading(-1)
    assert len(storage.load_all()) == 1


@pytest.fixture
def corrupted(store):
    store.set_item("eco_sensors_v1", "[{broken")
    return store


async def test_render_city_view_propagates_malformed_storage(controller, corrupted):
    with pytest.raises(json.JSONDecodeError):
        await controller.render_city_view("Manila")
    assert corrupted.get_item("eco_sensors_v1") == "[{broken"


async def test_toggle_propagates_malformed_storage(controller, corrupted):
    controller.state.current_city = "Manila"
    with pytest.raises(json.JSONDecodeError):
        await controller.toggle_category(AIR_QUALITY, True)
    with pytest.raises(json.JSONDecodeError):
        await controller.toggle_category(AIR_QUALITY, False)
    assert corrupted.get_item("eco_sensors_v1") == "[{broken"


def test_delete_propagates_malformed_storage(controller, corrupted):
    with pytest.raises(json.JSONDecodeError):
        controller.delete_reading(0)
    assert corrupted.get_item("eco_sensors_v1") == "[{broken"
