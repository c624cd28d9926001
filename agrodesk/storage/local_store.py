"""Mini README: Local key-value store backing every Agrodesk list.

Structure:
    * FINANCIAL_MOVEMENTS_KEY / GRAIN_ITEMS_KEY / CROP_EVENTS_KEY - store keys.
    * LocalStore - string-valued key/value mapping persisted as one JSON file.

Values are JSON-encoded strings, the same shape a browser's local storage
holds, so a store file can be filled from an exported page session. Each
``set_item`` rewrites the whole file through a temporary sibling and
``os.replace``; there are no partial writes. ``load_list`` never raises:
an absent key, bad JSON or a non-list value comes back as an empty list,
and individual entries that cannot be coerced are dropped with a warning
while the valid ones are kept.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, TypeVar

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

FINANCIAL_MOVEMENTS_KEY = "financialMovements"
GRAIN_ITEMS_KEY = "grainItems"
CROP_EVENTS_KEY = "cropEvents"

T = TypeVar("T")


class LocalStore:
    """Persist string values by key, optionally backed by a JSON file.

    Passing ``path=None`` keeps everything in memory, which is what the
    unit tests use.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else None
        self._items: Dict[str, str] = self._read_file()
        LOGGER.debug(
            "Local store opened at %s with keys %s",
            self._path or "<memory>",
            sorted(self._items),
        )

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def _read_file(self) -> Dict[str, str]:
        if self._path is None or not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as error:
            LOGGER.warning("Ignoring unreadable store file %s: %s", self._path, error)
            return {}
        if not isinstance(raw, dict):
            LOGGER.warning("Ignoring store file %s: top level is not an object", self._path)
            return {}
        return {str(key): value for key, value in raw.items() if isinstance(value, str)}

    def _write_file(self) -> None:
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        temporary = self._path.with_name(self._path.name + ".tmp")
        temporary.write_text(
            json.dumps(self._items, ensure_ascii=False, indent=2), encoding="utf-8"
        )
        os.replace(temporary, self._path)

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._write_file()

    def keys(self) -> List[str]:
        return sorted(self._items)

    def load_list(self, key: str, coerce: Callable[[dict], T]) -> List[T]:
        """Decode the list stored under ``key``, skipping entries that cannot be coerced."""

        raw = self.get_item(key)
        if raw is None:
            return []
        try:
            decoded = json.loads(raw)
        except ValueError:
            LOGGER.warning("Stored value for '%s' is not valid JSON; starting empty", key)
            return []
        if not isinstance(decoded, list):
            LOGGER.warning("Stored value for '%s' is not a list; starting empty", key)
            return []
        entries: List[T] = []
        for position, entry in enumerate(decoded):
            try:
                entries.append(coerce(entry))
            except (KeyError, TypeError, ValueError, AttributeError) as error:
                LOGGER.warning("Skipping malformed entry %s under '%s': %s", position, key, error)
        return entries

    def save_list(self, key: str, entries: Iterable[dict]) -> None:
        """Serialise and overwrite the full list stored under ``key``."""

        payload = list(entries)
        self.set_item(key, json.dumps(payload, ensure_ascii=False))
        LOGGER.debug("Saved %s entries under '%s'", len(payload), key)
