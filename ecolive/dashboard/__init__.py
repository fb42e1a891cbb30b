"""Reading management, city weather view and chart/map projections."""

from .controller import DashboardController
from .generators import CATEGORIES, SyntheticReadingFactory
from .session import SessionGate, ThemePreference
from .state import AppState, CityView

__all__ = [
    "DashboardController",
    "CATEGORIES",
    "SyntheticReadingFactory",
    "SessionGate",
    "ThemePreference",
    "AppState",
    "CityView",
]
