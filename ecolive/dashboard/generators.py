import random
from dataclasses import dataclass
from typing import Dict, Optional
import logging

from ecolive.shared.errors import UnknownCategoryError
from ecolive.shared.models import TemperatureReading

logger = logging.getLogger(__name__)

AIR_QUALITY = "Air Quality"
WATER_QUALITY = "Water Quality"
SOIL_QUALITY = "Soil Quality"
ECOSYSTEM_HEALTH = "Ecosystem Health"

CATEGORIES = [AIR_QUALITY, WATER_QUALITY, SOIL_QUALITY, ECOSYSTEM_HEALTH]


@dataclass
class CategoryProfile:
    """Value range and presentation for one category.

    Integer profiles draw from ``low`` up to but excluding ``high``;
    decimal profiles draw uniformly from ``[low, high]`` and round.
    """
    low: float
    high: float
    unit: str
    description: str
    decimals: Optional[int] = None


PROFILES: Dict[str, CategoryProfile] = {
    AIR_QUALITY: CategoryProfile(20, 170, "AQI", "PM2.5 Index"),
    WATER_QUALITY: CategoryProfile(6.0, 9.0, "pH", "Acidity Level", decimals=1),
    SOIL_QUALITY: CategoryProfile(0, 100, "%", "Moisture Level"),
    ECOSYSTEM_HEALTH: CategoryProfile(0, 100, "Index", "Biodiversity Score"),
}


def reading_name(city: str, category: str) -> str:
    return f"{city} {category}"


class SyntheticReadingFactory:
    def __init__(self, rng: Optional[random.Random] = None):
        """
        rng is any object with random.Random's interface; tests pass a
        seeded instance or a stub returning fixed values.
        """
        self.rng = rng or random.Random()

    def generate_value(self, category: str) -> float:
        profile = PROFILES.get(category)
        if profile is None:
            raise UnknownCategoryError(category)

        if profile.decimals is None:
            return int(profile.low + self.rng.random() * (profile.high - profile.low))
        return round(self.rng.uniform(profile.low, profile.high), profile.decimals)

    def create(
        self,
        category: str,
        city: str,
        lat: Optional[float] = None,
        lon: Optional[float] = None,
    ) -> TemperatureReading:
        """Build a new reading for ``category`` in ``city`` with a generated value."""
        value = self.generate_value(category)
        profile = PROFILES[category]
        reading = TemperatureReading(
            name=reading_name(city, category),
            value=value,
            description=profile.description,
            city=city,
            lat=lat,
            lon=lon,
            unit=profile.unit,
        )
        logger.info(f"Generated {reading.display()}")
        return reading
