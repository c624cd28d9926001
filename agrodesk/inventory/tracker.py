"""Mini README: Grain and supply ("insumo") inventory tracker.

Structure:
    * StockStatus - point-in-time health flag of an item.
    * GrainItem - dataclass holding name, quantity and reorder threshold.
    * InventoryRow - rendered table row including the status CSS class.
    * InventoryTracker - case-insensitive upsert, removal by position and
      table rendering.

Items are keyed by their case-folded name: submitting "wheat" after
"Wheat" updates the existing row in place and keeps its original spelling.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from ..logging_utils import get_logger
from ..storage import GRAIN_ITEMS_KEY, LocalStore
from ..utils import OperationResult, clean_field

LOGGER = get_logger(__name__)

EMPTY_INVENTORY_MESSAGE = "Nenhum insumo cadastrado."


class StockStatus(str, Enum):
    """Simple threshold comparison; no trend or hysteresis."""

    OK = "OK"
    ALERT = "ALERTA"

    @property
    def css_class(self) -> str:
        return "status-ok" if self is StockStatus.OK else "status-alert"


def _parse_count(value: object) -> int:
    """Accept non-negative integers given as ints or integer text."""

    if isinstance(value, bool):
        raise ValueError("Booleans are not quantities")
    if isinstance(value, int):
        count = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{value} is not an integer")
        count = int(value)
    else:
        count = int(clean_field(value))
    if count < 0:
        raise ValueError(f"{count} is negative")
    return count


@dataclass(slots=True)
class GrainItem:
    """Inventory entry compared against its reorder threshold."""

    name: str
    quantity: int
    threshold: int

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "GrainItem":
        name = clean_field(payload["name"])
        if not name:
            raise ValueError("Item name is empty")
        return cls(
            name=name,
            quantity=_parse_count(payload["quantity"]),
            threshold=_parse_count(payload["threshold"]),
        )

    @property
    def key(self) -> str:
        return self.name.casefold()

    @property
    def status(self) -> StockStatus:
        return StockStatus.OK if self.quantity >= self.threshold else StockStatus.ALERT

    def as_dict(self) -> Dict[str, object]:
        return {"name": self.name, "quantity": self.quantity, "threshold": self.threshold}


@dataclass(frozen=True, slots=True)
class InventoryRow:
    """One rendered inventory table row."""

    position: int
    name: str
    quantity: int
    threshold: int
    status: StockStatus

    def as_dict(self) -> Dict[str, object]:
        return {
            "position": self.position,
            "name": self.name,
            "quantity": self.quantity,
            "threshold": self.threshold,
            "status": self.status.value,
        }


class InventoryTracker:
    """Own the list of grain items and keep it persisted."""

    def __init__(self, store: LocalStore) -> None:
        self._store = store
        self._items: List[GrainItem] = store.load_list(GRAIN_ITEMS_KEY, GrainItem.from_dict)
        LOGGER.debug("Inventory loaded with %s items", len(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def _save(self) -> None:
        self._store.save_list(GRAIN_ITEMS_KEY, (item.as_dict() for item in self._items))

    def _find(self, name: str) -> Optional[int]:
        key = name.casefold()
        for position, item in enumerate(self._items):
            if item.key == key:
                return position
        return None

    def list_items(self) -> List[GrainItem]:
        return list(self._items)

    def upsert(self, name: Optional[str], quantity: object, threshold: object) -> OperationResult:
        """Insert a new item or overwrite the counts of a same-named one."""

        try:
            candidate = GrainItem.from_dict(
                {"name": name, "quantity": quantity, "threshold": threshold}
            )
        except (TypeError, ValueError) as error:
            LOGGER.debug("Rejected inventory upsert for %r: %s", name, error)
            return OperationResult.reject(str(error))

        position = self._find(candidate.name)
        if position is None:
            self._items.append(candidate)
            item = candidate
            LOGGER.info("Added inventory item %s", item.name)
        else:
            item = self._items[position]
            item.quantity = candidate.quantity
            item.threshold = candidate.threshold
            LOGGER.info("Updated inventory item %s at position %s", item.name, position)
        self._save()
        return OperationResult.accept(item)

    def remove(self, position: object) -> OperationResult:
        """Delete the item at ``position``; invalid positions change nothing."""

        if isinstance(position, bool) or not isinstance(position, int):
            return OperationResult.reject(f"Invalid position: {position!r}")
        if not 0 <= position < len(self._items):
            LOGGER.debug("Ignoring removal of missing position %s", position)
            return OperationResult.reject(f"No item at position {position}")
        removed = self._items.pop(position)
        self._save()
        LOGGER.info("Removed inventory item %s", removed.name)
        return OperationResult.accept(removed)

    def render_rows(self) -> List[InventoryRow]:
        """Return table rows; an empty list means the empty-state message is shown."""

        return [
            InventoryRow(
                position=position,
                name=item.name,
                quantity=item.quantity,
                threshold=item.threshold,
                status=item.status,
            )
            for position, item in enumerate(self._items)
        ]

    @property
    def empty_message(self) -> Optional[str]:
        return EMPTY_INVENTORY_MESSAGE if not self._items else None
