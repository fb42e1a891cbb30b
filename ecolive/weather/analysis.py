"""Weather condition classification."""

from dataclasses import dataclass

GOOD = "Good Condition"
MODERATE = "Moderate"
BAD = "Bad Condition"

# Temperature thresholds in °C, wind thresholds in m/s
GOOD_TEMP_MIN = 18.0
GOOD_TEMP_MAX = 32.0
GOOD_WIND_MAX = 10.0
BAD_TEMP_MIN = 5.0
BAD_TEMP_MAX = 35.0
BAD_WIND_MIN = 15.0


@dataclass
class ConditionAssessment:
    """Classification plus the colors used to present it."""
    status: str
    color: str
    bg_color: str
    text_color: str


ASSESSMENTS = {
    GOOD: ConditionAssessment(GOOD, "green", "#d4edda", "#155724"),
    MODERATE: ConditionAssessment(MODERATE, "orange", "#fff3cd", "#856404"),
    BAD: ConditionAssessment(BAD, "red", "#f8d7da", "#721c24"),
}


def is_rain(weather_main: str) -> bool:
    main = (weather_main or "").lower()
    return "rain" in main or "thunder" in main


def classify_conditions(temperature: float, weather_main: str, wind_speed: float) -> ConditionAssessment:
    """Classify current weather as Good, Moderate or Bad.

    Good requires a mild temperature, no rain and light wind. Any one of
    extreme temperature, rain or strong wind is Bad. Everything else is
    Moderate. Good is checked first.

    Args:
        temperature: Air temperature in °C.
        weather_main: Provider's condition group (e.g. 'Clear', 'Rain').
        wind_speed: Wind speed in m/s.
    """
    rain = is_rain(weather_main)

    if GOOD_TEMP_MIN <= temperature <= GOOD_TEMP_MAX and not rain and wind_speed < GOOD_WIND_MAX:
        return ASSESSMENTS[GOOD]
    if temperature > BAD_TEMP_MAX or temperature < BAD_TEMP_MIN or rain or wind_speed > BAD_WIND_MIN:
        return ASSESSMENTS[BAD]
    return ASSESSMENTS[MODERATE]
