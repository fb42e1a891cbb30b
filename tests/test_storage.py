import json

import pytest

from ecolive.shared.models import Reading, TemperatureReading
from ecolive.shared.storage import READINGS_KEY, filter_by_city, find_index


def test_lazy_initialization(store, storage):
    assert store.get_item(READINGS_KEY) is None
    assert storage.load_all() == []
    assert store.get_item(READINGS_KEY) == "[]"


def test_save_then_load_reproduces_readings(storage):
    readings = [
        TemperatureReading("Manila Air Quality", 95, "PM2.5 Index", "Manila", 14.5995, 120.9842, "AQI"),
        Reading("Manila Notes", 3, "free text", "Manila", None, None),
        TemperatureReading("Cebu Water Quality", 7.5, "Acidity Level", "Cebu", 10.3, 123.9, "pH"),
    ]
    storage.save_all(readings)

    loaded = storage.load_all()
    assert loaded == readings
    assert [type(r) for r in loaded] == [TemperatureReading, Reading, TemperatureReading]
    assert loaded[2].unit == "pH"


def test_save_overwrites_previous_collection(storage):
    storage.save_all([Reading("A", 1), Reading("B", 2)])
    storage.save_all([Reading("C", 3)])
    assert [r.name for r in storage.load_all()] == ["C"]


def test_other_keys_survive_readings_writes(store, storage):
    store.set_item("ecolive_theme", "dark")
    storage.save_all([Reading("A", 1)])
    assert store.get_item("ecolive_theme") == "dark"


def test_reads_legacy_records(store, storage):
    legacy = [
        {"name": "Manila Soil Quality", "value": 40, "description": "Moisture Level",
         "city": "Manila", "lat": 14.6, "lon": 121.0, "unit": "%", "type": "temperature"},
        {"name": "Garden Temp", "value": 19, "city": "Manila", "lat": None, "lon": None},
    ]
    store.set_item(READINGS_KEY, json.dumps(legacy))

    loaded = storage.load_all()
    assert loaded[0].unit == "%"
    assert isinstance(loaded[1], TemperatureReading)
    assert loaded[1].unit == "°C"


def test_malformed_stored_json_propagates(store, storage):
    store.set_item(READINGS_KEY, "[{not json")
    with pytest.raises(json.JSONDecodeError):
        storage.load_all()


def test_remove_item(store):
    store.set_item("loggedIn", "true")
    store.remove_item("loggedIn")
    assert store.get_item("loggedIn") is None
    store.remove_item("loggedIn")


def test_find_index_matches_exact_name():
    readings = [Reading("Manila Air Quality", 1), Reading("manila air quality", 2)]
    assert find_index(readings, "manila air quality") == 1
    assert find_index(readings, "Manila Air") == -1


def test_filter_by_city_is_case_insensitive():
    readings = [
        Reading("Manila Air Quality", 1, city="Manila"),
        Reading("Cebu Air Quality", 2, city="Cebu"),
        Reading("MANILA Soil Quality", 3, city="MANILA"),
        Reading("Orphan", 4),
    ]
    assert [r.value for r in filter_by_city(readings, "manila")] == [1, 3]
