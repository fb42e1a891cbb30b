"""Local storage and retrieval of environmental readings."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from .models import Reading, reading_from_dict

logger = logging.getLogger(__name__)

READINGS_KEY = "eco_sensors_v1"
LOGIN_KEY = "loggedIn"
THEME_KEY = "ecolive_theme"

DEFAULT_STORAGE_PATH = "~/.ecolive/storage.json"


class LocalStore:
    """String key/value store persisted as a single JSON object on disk.

    Every change rewrites the whole file. There is no locking: two writers
    racing on the same file get last-write-wins.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            content = f.read()
        return json.loads(content) if content.strip() else {}

    def _write(self, items: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(items, f, ensure_ascii=False, indent=2)

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if key in items:
            del items[key]
            self._write(items)


class ReadingsStorage:
    """Translates between stored plain records and reading instances.

    The whole collection lives under one key as a JSON array. Reads
    rebuild fresh instances every time, writes replace the full array.
    """

    def __init__(self, store: LocalStore, key: str = READINGS_KEY):
        """Initialize storage.

        Args:
            store: Key/value store holding the serialized collection.
            key: Key under which the JSON array is kept.
        """
        self.store = store
        self.key = key

    def ensure_initialized(self) -> None:
        """Set the readings key to an empty array if it was never written."""
        if self.store.get_item(self.key) is None:
            logger.debug(f"Initializing empty readings collection at {self.key}")
            self.store.set_item(self.key, "[]")

    def load_all(self) -> List[Reading]:
        """Load every stored reading.

        Returns:
            Reading instances in stored order.

        Raises:
            json.JSONDecodeError: If the stored collection is not valid JSON.
        """
        self.ensure_initialized()
        raw = json.loads(self.store.get_item(self.key) or "[]")
        return [reading_from_dict(record) for record in raw]

    def save_all(self, readings: List[Reading]) -> None:
        """Overwrite the stored collection with ``readings``."""
        plain = [reading.to_dict() for reading in readings]
        self.store.set_item(self.key, json.dumps(plain, ensure_ascii=False))
        logger.debug(f"Saved {len(plain)} readings")


def find_index(readings: List[Reading], name: str) -> int:
    """Return the index of the first reading named ``name``, or -1."""
    for idx, reading in enumerate(readings):
        if reading.name == name:
            return idx
    return -1


def filter_by_city(readings: List[Reading], city: str) -> List[Reading]:
    """Readings whose city matches ``city`` case-insensitively."""
    wanted = city.lower()
    return [r for r in readings if r.city and r.city.lower() == wanted]
