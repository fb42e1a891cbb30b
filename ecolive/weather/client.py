"""Current-weather lookup against the OpenWeather HTTP API."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import aiohttp

from ecolive.shared.config import WeatherConfig

logger = logging.getLogger(__name__)

ICON_URL = "https://openweathermap.org/img/wn/{icon}.png"


@dataclass
class Coordinates:
    lat: float
    lon: float


@dataclass
class WeatherReport:
    """Current weather for one city, as returned by the provider."""
    city_name: str
    country: str
    temperature: float
    humidity: float
    main: str
    description: str
    icon: str
    wind_speed: float
    coord: Optional[Coordinates] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeatherReport":
        """Parse a current-weather response body.

        Raises:
            KeyError: If a required section (main, weather, wind) is missing.
        """
        coord = data.get("coord")
        condition = data["weather"][0]
        return cls(
            city_name=data.get("name", ""),
            country=(data.get("sys") or {}).get("country", ""),
            temperature=data["main"]["temp"],
            humidity=data["main"]["humidity"],
            main=condition.get("main", ""),
            description=condition.get("description", ""),
            icon=condition.get("icon", ""),
            wind_speed=data["wind"]["speed"],
            coord=Coordinates(lat=coord["lat"], lon=coord["lon"]) if coord else None,
        )

    @property
    def icon_url(self) -> str:
        return ICON_URL.format(icon=self.icon)


class WeatherClient:
    """Fetches current weather by city name.

    Failures never raise: a network error, a non-success status or an
    unparseable body is logged and reported as ``None``. There is no retry
    and no cancellation.
    """

    def __init__(self, config: WeatherConfig, session: Optional[aiohttp.ClientSession] = None):
        """Initialize the client.

        Args:
            config: Provider settings (API key, endpoint, units).
            session: Shared session to reuse. If None, a session is opened
                per request.
        """
        self.config = config
        self._session = session

    async def _get_json(self, session: aiohttp.ClientSession, params: dict) -> Optional[dict]:
        async with session.get(self.config.base_url, params=params) as response:
            if not 200 <= response.status < 300:
                logger.warning(f"Weather lookup for {params['q']!r} failed: HTTP {response.status}")
                return None
            return await response.json()

    async def fetch_raw(self, city: str) -> Optional[Dict[str, Any]]:
        """Fetch the provider's raw response body for ``city``."""
        params = {"q": city, "appid": self.config.api_key, "units": self.config.units}
        try:
            if self._session is not None:
                return await self._get_json(self._session, params)
            async with aiohttp.ClientSession() as session:
                return await self._get_json(session, params)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Weather lookup for {city!r} failed: {e}")
            return None

    async def fetch_current(self, city: str) -> Optional[WeatherReport]:
        """Fetch current weather for ``city``.

        Returns:
            The parsed report, or None if the lookup failed.
        """
        data = await self.fetch_raw(city)
        if data is None:
            return None
        try:
            report = WeatherReport.from_dict(data)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            logger.error(f"Unexpected weather payload for {city!r}: {e}")
            return None
        logger.info(f"Fetched weather for {report.city_name or city}: {report.temperature}°C {report.main}")
        return report

    async def resolve_city_coords(self, city: str) -> Optional[Coordinates]:
        """Look up the coordinates of ``city`` via its current weather."""
        report = await self.fetch_current(city)
        if report is None:
            return None
        return report.coord
