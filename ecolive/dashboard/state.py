"""Session-scoped application state."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from ecolive.weather.analysis import ConditionAssessment
from ecolive.weather.client import WeatherReport
from .generators import CATEGORIES
from .projections import THEME_LIGHT, ChartData, MapView, WeatherCircle


@dataclass
class CityView:
    """What the weather panel shows for the searched city."""
    city: str
    report: Optional[WeatherReport] = None
    assessment: Optional[ConditionAssessment] = None
    error: Optional[str] = None

    @property
    def show_analytics(self) -> bool:
        return self.assessment is not None


@dataclass
class AppState:
    """Everything the dashboard remembers between user actions.

    Lives for one session. The weather report is cached here so category
    toggles for the same city do not fetch again.
    """
    current_city: Optional[str] = None
    current_weather: Optional[WeatherReport] = None
    checkboxes: Dict[str, bool] = field(default_factory=lambda: {c: False for c in CATEGORIES})
    city_view: Optional[CityView] = None
    chart: ChartData = field(default_factory=ChartData)
    map: MapView = field(default_factory=MapView)
    weather_circle: Optional[WeatherCircle] = None
    error: Optional[str] = None
    theme: str = THEME_LIGHT

    @property
    def focus(self):
        """Coordinates of the cached weather, as (lat, lon) or (None, None)."""
        if self.current_weather and self.current_weather.coord:
            return self.current_weather.coord.lat, self.current_weather.coord.lon
        return None, None
