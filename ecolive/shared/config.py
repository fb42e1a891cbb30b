"""Configuration loading utilities."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import yaml
from dotenv import load_dotenv

from .storage import DEFAULT_STORAGE_PATH

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


def get_environment() -> str:
    """Get the current environment name.

    Returns:
        Environment name from ECOLIVE_ENV, defaults to 'ecolive'.
    """
    return os.getenv("ECOLIVE_ENV", "ecolive")


def get_config_path(
    config_name: Optional[str] = None,
    config_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """Get path to a configuration file.

    Args:
        config_name: Name of config file (without path). If None, uses
            config-{environment}.yaml based on ECOLIVE_ENV.
        config_dir: Directory containing config files. If None, uses
            the 'config' directory at the repo root.

    Returns:
        Path to the configuration file.
    """
    if config_dir is None:
        package_dir = Path(__file__).parent.parent.parent
        config_dir = package_dir / "config"

    config_dir = Path(config_dir)

    if config_name is None:
        env = get_environment()
        config_name = f"config-{env}.yaml"

    return config_dir / config_name


def load_yaml_config(
    config_path: Optional[Union[str, Path]] = None,
    load_env: bool = True,
) -> dict:
    """Load YAML configuration file.

    Args:
        config_path: Path to config file. If None, uses get_config_path().
        load_env: Whether to load .env file first.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If config file is invalid YAML.
    """
    if load_env:
        load_dotenv()

    if config_path is None:
        config_path = get_config_path()
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


@dataclass
class WeatherConfig:
    """Current-weather provider settings."""
    api_key: str = ""
    base_url: str = OPENWEATHER_URL
    units: str = "metric"

    @classmethod
    def from_dict(cls, data: dict) -> "WeatherConfig":
        """Create config from dictionary."""
        return cls(
            api_key=data.get("api_key", ""),
            base_url=data.get("base_url", OPENWEATHER_URL),
            units=data.get("units", "metric"),
        )


@dataclass
class DashboardConfig:
    """Top-level dashboard configuration."""
    storage_path: str = DEFAULT_STORAGE_PATH
    weather: WeatherConfig = field(default_factory=WeatherConfig)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "DashboardConfig":
        """Create config from dictionary."""
        return cls(
            storage_path=data.get("storage_path", DEFAULT_STORAGE_PATH),
            weather=WeatherConfig.from_dict(data.get("weather", {})),
            log_level=data.get("log_level", "INFO").upper(),
            log_file=data.get("log_file"),
        )


def load_config(config_path: Optional[str] = None) -> DashboardConfig:
    """Load configuration from YAML file and environment.

    Args:
        config_path: Path to YAML config file. If not provided, looks for
                    ECOLIVE_CONFIG env var, then config-{env}.yaml in the
                    repo's config directory. A missing file means defaults.

    Returns:
        DashboardConfig instance.
    """
    load_dotenv()

    if config_path is None:
        config_path = os.environ.get("ECOLIVE_CONFIG") or str(get_config_path())

    if os.path.exists(config_path):
        config = DashboardConfig.from_dict(load_yaml_config(config_path, load_env=False))
    else:
        config = DashboardConfig()

    # Environment variable overrides
    if api_key := os.environ.get("OPENWEATHER_API_KEY"):
        config.weather.api_key = api_key
    if storage_path := os.environ.get("ECOLIVE_STORAGE_PATH"):
        config.storage_path = storage_path
    if log_level := os.environ.get("LOG_LEVEL"):
        config.log_level = log_level.upper()

    return config
