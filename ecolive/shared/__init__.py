"""Shared utilities for the EcoLive dashboard."""

from .models import Reading, TemperatureReading, reading_from_dict
from .storage import LocalStore, ReadingsStorage
from .config import DashboardConfig, WeatherConfig, load_config, load_yaml_config, get_config_path
from .errors import DashboardError, CityNotSelectedError, EmptyCityError, UnknownCategoryError
from .logging import setup_logging

__all__ = [
    "Reading",
    "TemperatureReading",
    "reading_from_dict",
    "LocalStore",
    "ReadingsStorage",
    "DashboardConfig",
    "WeatherConfig",
    "load_config",
    "load_yaml_config",
    "get_config_path",
    "DashboardError",
    "CityNotSelectedError",
    "EmptyCityError",
    "UnknownCategoryError",
    "setup_logging",
]
