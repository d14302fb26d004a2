"""Key-value preferences persisted to a JSON file."""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__.split(".")[-1])


class PreferencesStore:
    """Named int and string values saved to disk on every write."""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize preferences store.

        Args:
            path: JSON file holding the preferences. Created on first write.
        """
        self.path = Path(path)
        self._values: dict[str, Any] = self._load()

    def _load(self) -> dict[str, Any]:
        """Load values from disk. A missing or unreadable file yields an empty store."""
        if not self.path.exists():
            logger.info(f"No preferences file at {self.path}, starting fresh")
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading preferences from {self.path}: {e}", exc_info=True)
            return {}

        if not isinstance(data, dict):
            logger.error(f"Preferences file {self.path} does not hold an object, ignoring it")
            return {}

        logger.debug(f"Loaded {len(data)} preference(s) from {self.path}")
        return data

    def _flush(self) -> None:
        """Write all values to disk atomically."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path = self.path.with_suffix(".tmp")
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(self._values, f, indent=2)
            temp_path.replace(self.path)
        except OSError as e:
            logger.error(f"Error writing preferences to {self.path}: {e}", exc_info=True)
            raise

    def get_int(self, key: str) -> Optional[int]:
        """Get an int value, or None if missing or not an int."""
        value = self._values.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    def get_string(self, key: str) -> Optional[str]:
        """Get a string value, or None if missing or not a string."""
        value = self._values.get(key)
        if not isinstance(value, str):
            return None
        return value

    def set_int(self, key: str, value: int) -> None:
        self.set_many({key: int(value)})

    def set_string(self, key: str, value: str) -> None:
        self.set_many({key: str(value)})

    def set_many(self, values: dict[str, Union[int, str]]) -> None:
        """Set several values with a single write to disk."""
        self._values.update(values)
        self._flush()

    def remove(self, key: str) -> None:
        if key in self._values:
            del self._values[key]
            self._flush()

    def contains(self, key: str) -> bool:
        return key in self._values

    def keys(self) -> list[str]:
        return list(self._values)
