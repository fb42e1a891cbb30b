"""Core data models for environmental readings."""

from typing import Any, Dict, Optional, Type

TYPE_READING = "reading"
TYPE_TEMPERATURE = "temperature"


class Reading:
    """A single persisted environmental reading.

    The name is the key within the stored collection: lookups and
    deletions match on it exactly, so it is fixed once constructed.
    """

    type_tag = TYPE_READING

    def __init__(
        self,
        name: str,
        value: float,
        description: str = "",
        city: str = "",
        lat: Optional[float] = None,
        lon: Optional[float] = None,
    ):
        self._name = name
        self._value = value
        self.description = description
        self.city = city
        self.lat = lat
        self.lon = lon

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float):
        self._value = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the plain record shape used in storage."""
        return {
            "name": self.name,
            "value": self.value,
            "description": self.description,
            "city": self.city,
            "lat": self.lat,
            "lon": self.lon,
            "type": self.type_tag,
        }

    def display(self) -> str:
        return f"{self.name}: {self.value}"

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_dict()!r})"


class TemperatureReading(Reading):
    """Reading with a display unit.

    Every reading created from a category toggle uses this shape, so the
    unit is a generic display unit (AQI, pH, %, Index) rather than
    strictly a temperature scale.
    """

    type_tag = TYPE_TEMPERATURE

    def __init__(
        self,
        name: str,
        value: float,
        description: str = "",
        city: str = "",
        lat: Optional[float] = None,
        lon: Optional[float] = None,
        unit: str = "°C",
    ):
        super().__init__(name, value, description, city, lat, lon)
        self.unit = unit

    def to_dict(self) -> Dict[str, Any]:
        record = super().to_dict()
        record["unit"] = self.unit
        return record

    def display(self) -> str:
        return f"{self.name}: {self.value} {self.unit}"


READING_TYPES: Dict[str, Type[Reading]] = {
    TYPE_READING: Reading,
    TYPE_TEMPERATURE: TemperatureReading,
}


def _coerce_value(value: Any) -> Any:
    """Older records stored one-decimal values as strings."""
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


def _infer_type(record: Dict[str, Any]) -> str:
    """Pick the record type from its tag, else from the legacy name heuristic."""
    type_tag = record.get("type")
    if type_tag in READING_TYPES:
        return type_tag
    if type_tag is None and "temp" in (record.get("name") or "").lower():
        return TYPE_TEMPERATURE
    return TYPE_READING


def reading_from_dict(record: Dict[str, Any]) -> Reading:
    """Rebuild a reading instance from a stored plain record.

    Args:
        record: Plain dictionary as written by ``Reading.to_dict``, or an
            older record without a type tag.

    Returns:
        A ``Reading`` or ``TemperatureReading``.
    """
    kwargs = dict(
        name=record.get("name"),
        value=_coerce_value(record.get("value")),
        description=record.get("description") or "",
        city=record.get("city") or "",
        lat=record.get("lat"),
        lon=record.get("lon"),
    )
    if _infer_type(record) == TYPE_TEMPERATURE:
        return TemperatureReading(unit=record.get("unit") or "°C", **kwargs)
    return Reading(**kwargs)
