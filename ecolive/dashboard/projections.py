"""Projections of readings onto chart and map views.

Pure functions: the console display draws whatever these return.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ecolive.shared.models import Reading

THEME_LIGHT = "light"
THEME_DARK = "dark"

BAR_COLORS = {
    THEME_LIGHT: "#2e8b57",
    THEME_DARK: "#4ade80",
}

CITY_ZOOM = 10
FOCUS_ZOOM = 8
WEATHER_CIRCLE_RADIUS_M = 5000


@dataclass
class ChartData:
    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)
    colors: List[str] = field(default_factory=list)


@dataclass
class MapMarker:
    lat: float
    lon: float
    popup: str


@dataclass
class MapView:
    markers: List[MapMarker] = field(default_factory=list)
    center: Optional[Tuple[float, float]] = None
    zoom: Optional[int] = None


@dataclass
class WeatherCircle:
    lat: float
    lon: float
    color: str
    radius_m: int = WEATHER_CIRCLE_RADIUS_M


def chart_series(readings: List[Reading], theme: str = THEME_LIGHT) -> ChartData:
    """Labels, values and bar colors for ``readings``."""
    color = BAR_COLORS.get(theme, BAR_COLORS[THEME_LIGHT])
    return ChartData(
        labels=[r.name for r in readings],
        values=[r.value for r in readings],
        colors=[color for _ in readings],
    )


def _popup(reading: Reading) -> str:
    return f"{reading.name}\n{reading.description or ''}\nValue: {reading.value}"


def map_view(
    readings: List[Reading],
    focus_lat: Optional[float] = None,
    focus_lon: Optional[float] = None,
) -> MapView:
    """Marker positions and map center for ``readings``.

    A reading without its own coordinates is placed at the focus
    coordinate. The view centers on the first reading if it has both
    coordinates, else on the focus.
    """
    has_focus = focus_lat is not None and focus_lon is not None

    if not readings:
        if has_focus:
            return MapView(center=(focus_lat, focus_lon), zoom=FOCUS_ZOOM)
        return MapView()

    markers = []
    for reading in readings:
        lat = reading.lat if reading.lat is not None else focus_lat
        lon = reading.lon if reading.lon is not None else focus_lon
        if lat is not None and lon is not None:
            markers.append(MapMarker(lat=lat, lon=lon, popup=_popup(reading)))

    first = readings[0]
    if first.lat is not None and first.lon is not None:
        return MapView(markers=markers, center=(first.lat, first.lon), zoom=CITY_ZOOM)
    if has_focus:
        return MapView(markers=markers, center=(focus_lat, focus_lon), zoom=CITY_ZOOM)
    return MapView(markers=markers)


def weather_circle(
    lat: Optional[float],
    lon: Optional[float],
    color: Optional[str],
) -> Optional[WeatherCircle]:
    """Overlay circle around the city, or None to clear it."""
    if lat is None or lon is None or not color:
        return None
    return WeatherCircle(lat=lat, lon=lon, color=color)
