"""Weather lookup and condition analysis."""

from .client import Coordinates, WeatherClient, WeatherReport
from .analysis import ConditionAssessment, classify_conditions

__all__ = [
    "Coordinates",
    "WeatherClient",
    "WeatherReport",
    "ConditionAssessment",
    "classify_conditions",
]
