from typing import List, Optional
import logging

from ecolive.shared.errors import CityNotSelectedError, EmptyCityError, UnknownCategoryError
from ecolive.shared.models import Reading
from ecolive.shared.storage import ReadingsStorage, filter_by_city, find_index
from ecolive.weather.analysis import classify_conditions
from ecolive.weather.client import WeatherClient
from .generators import CATEGORIES, SyntheticReadingFactory, reading_name
from .projections import chart_series, map_view, weather_circle
from .state import AppState, CityView

logger = logging.getLogger(__name__)


def fetch_error_message(city: str) -> str:
    return f'Could not fetch weather for "{city}".'


class DashboardController:
    """Handles user actions against the stored readings and session state.

    Every mutating action loads the full collection, changes it in memory
    and writes it back whole.
    """

    def __init__(
        self,
        storage: ReadingsStorage,
        weather_client: WeatherClient,
        factory: Optional[SyntheticReadingFactory] = None,
        state: Optional[AppState] = None,
    ):
        self.storage = storage
        self.weather_client = weather_client
        self.factory = factory or SyntheticReadingFactory()
        self.state = state or AppState()

    def manage_list(self) -> List[Reading]:
        """All stored readings, freshly loaded, for the management list."""
        return self.storage.load_all()

    def refresh_city_views(self, readings: Optional[List[Reading]] = None) -> List[Reading]:
        """Project the current city's readings onto the chart and map.

        Returns:
            The readings belonging to the current city.
        """
        if readings is None:
            readings = self.storage.load_all()
        city_readings = filter_by_city(readings, self.state.current_city or "")
        focus_lat, focus_lon = self.state.focus

        self.state.chart = chart_series(city_readings, self.state.theme)
        self.state.map = map_view(city_readings, focus_lat, focus_lon)
        return city_readings

    def sync_checkboxes(self, city_readings: List[Reading]) -> None:
        """Check exactly the categories that already have a reading for the city."""
        for category in CATEGORIES:
            self.state.checkboxes[category] = False
        for reading in city_readings:
            for category in CATEGORIES:
                if category in reading.name:
                    self.state.checkboxes[category] = True

    def delete_reading(self, index: int) -> Reading:
        """Remove the row at ``index`` of the management list.

        Raises:
            IndexError: If no row has that index.
        """
        readings = self.storage.load_all()
        if not 0 <= index < len(readings):
            raise IndexError(f"No reading at row {index + 1}")

        removed = readings.pop(index)
        self.storage.save_all(readings)
        logger.info(f"Deleted {removed.name}")

        if self.state.current_city:
            self.sync_checkboxes(self.refresh_city_views(readings))
        return removed

    async def toggle_category(self, category: str, checked: bool) -> Optional[Reading]:
        """Add or remove the current city's reading for ``category``.

        Returns:
            The newly created reading, or None if nothing was created.

        Raises:
            UnknownCategoryError: If ``category`` is not supported.
            CityNotSelectedError: If no city has been searched yet. The
                checkbox is reverted first.
        """
        if category not in CATEGORIES:
            raise UnknownCategoryError(category)

        city = self.state.current_city
        if not city:
            self.state.checkboxes[category] = not checked
            raise CityNotSelectedError()

        self.state.error = None
        self.state.checkboxes[category] = checked
        readings = self.storage.load_all()
        name = reading_name(city, category)
        existing_idx = find_index(readings, name)
        created = None

        if checked:
            if existing_idx == -1:
                if self.state.current_weather is None:
                    self.state.current_weather = await self.weather_client.fetch_current(city)
                if self.state.current_weather is None:
                    logger.warning(f"Not adding {name}, no weather data for {city}")
                    self.state.checkboxes[category] = False
                    self.state.error = fetch_error_message(city)
                    return None

                lat, lon = self.state.focus
                created = self.factory.create(category, city, lat, lon)
                readings.append(created)
        elif existing_idx != -1:
            readings.pop(existing_idx)
            logger.info(f"Removed {name}")

        self.storage.save_all(readings)
        self.refresh_city_views(readings)
        return created

    async def render_city_view(self, city: str) -> CityView:
        """Fetch weather for ``city`` and rebuild everything shown for it."""
        self.state.current_city = city
        report = await self.weather_client.fetch_current(city)
        self.state.current_weather = report

        view = CityView(city=city)
        self.state.city_view = view

        if report is None:
            view.error = fetch_error_message(city)
            self.state.error = view.error
            self.state.weather_circle = None
            return view

        self.state.error = None
        view.report = report
        view.assessment = classify_conditions(report.temperature, report.main, report.wind_speed)
        logger.info(f"{city}: {view.assessment.status}")

        focus_lat, focus_lon = self.state.focus
        self.state.weather_circle = weather_circle(focus_lat, focus_lon, view.assessment.color)

        if report.coord:
            self.sync_checkboxes(self.refresh_city_views())
        return view

    async def search_city(self, text: str) -> CityView:
        """Handle the search box.

        Raises:
            EmptyCityError: If ``text`` is blank.
        """
        city = (text or "").strip()
        if not city:
            raise EmptyCityError()
        return await self.render_city_view(city)
