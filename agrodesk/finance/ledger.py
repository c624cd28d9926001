"""Mini README: Append-only ledger of farm financial movements.

Structure:
    * MovementKind - enum for inflow ("entrada") versus outflow ("saida").
    * FinancialMovement - dataclass mirroring one stored ledger entry.
    * FinancialLedger - loads, appends, filters and renders movements.

Movements are never edited or removed; list position is their identity.
The amount is kept exactly as typed (text), so "1.500,00" and "1500" both
display the way the operator entered them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from ..logging_utils import get_logger
from ..storage import FINANCIAL_MOVEMENTS_KEY, LocalStore
from ..utils import OperationResult, capitalize_first, clean_field

LOGGER = get_logger(__name__)

ALL_MOVEMENTS = "todos"
_ALL_ALIASES = {ALL_MOVEMENTS, "all"}


class MovementKind(str, Enum):
    """Enumerate the supported movement types."""

    ENTRADA = "entrada"
    SAIDA = "saida"

    @classmethod
    def from_str(cls, value: str) -> "MovementKind":
        """Coerce arbitrary casing into a valid movement kind."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported movement type: {value}") from error

    @property
    def label(self) -> str:
        return "Entrada" if self is MovementKind.ENTRADA else "Saída"


@dataclass(slots=True)
class FinancialMovement:
    """Represent a ledger entry exactly as submitted."""

    kind: MovementKind
    date: str
    description: str
    category: str
    value: str

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "FinancialMovement":
        return cls(
            kind=MovementKind.from_str(str(payload["type"])),
            date=str(payload["date"]),
            description=str(payload["description"]),
            category=str(payload["category"]),
            value=str(payload["value"]),
        )

    def as_dict(self) -> Dict[str, str]:
        """Export the movement using the persisted key names."""

        return {
            "type": self.kind.value,
            "date": self.date,
            "description": self.description,
            "category": self.category,
            "value": self.value,
        }

    def as_row(self) -> List[str]:
        """Return the table cells shown for this movement."""

        return [
            self.kind.label,
            self.date,
            self.description,
            capitalize_first(self.category),
            self.value,
        ]


def _normalise_filter(movement_filter: Optional[str]) -> Optional[MovementKind]:
    """Return the kind to keep, or ``None`` when every movement is shown."""

    if movement_filter is None or movement_filter.strip().lower() in _ALL_ALIASES:
        return None
    return MovementKind.from_str(movement_filter)


class FinancialLedger:
    """Own the list of financial movements and keep it persisted."""

    def __init__(self, store: LocalStore) -> None:
        self._store = store
        self._movements: List[FinancialMovement] = store.load_list(
            FINANCIAL_MOVEMENTS_KEY, FinancialMovement.from_dict
        )
        LOGGER.debug("Financial ledger loaded with %s movements", len(self._movements))

    def __len__(self) -> int:
        return len(self._movements)

    def _save(self) -> None:
        self._store.save_list(
            FINANCIAL_MOVEMENTS_KEY, (movement.as_dict() for movement in self._movements)
        )

    def add_movement(
        self,
        kind: Optional[str],
        date: Optional[str],
        description: Optional[str],
        category: Optional[str],
        value: Optional[str],
    ) -> OperationResult:
        """Append a movement when every field is present."""

        fields = {
            "type": clean_field(kind),
            "date": clean_field(date),
            "description": clean_field(description),
            "category": clean_field(category),
            "value": clean_field(value),
        }
        missing = [name for name, content in fields.items() if not content]
        if missing:
            LOGGER.debug("Rejected movement with missing fields: %s", ", ".join(missing))
            return OperationResult.reject(f"Missing fields: {', '.join(missing)}")
        try:
            movement = FinancialMovement.from_dict(fields)
        except ValueError as error:
            LOGGER.debug("Rejected movement: %s", error)
            return OperationResult.reject(str(error))

        self._movements.append(movement)
        self._save()
        LOGGER.info(
            "Recorded %s of %s on %s (%s)",
            movement.kind.value,
            movement.value,
            movement.date,
            movement.category,
        )
        return OperationResult.accept(movement)

    def list_movements(self, movement_filter: Optional[str] = ALL_MOVEMENTS) -> List[FinancialMovement]:
        """Return movements in insertion order, optionally restricted to one kind."""

        kind = _normalise_filter(movement_filter)
        if kind is None:
            return list(self._movements)
        return [movement for movement in self._movements if movement.kind is kind]

    def render_rows(self, movement_filter: Optional[str] = ALL_MOVEMENTS) -> List[List[str]]:
        """Return table rows for the movements matching ``movement_filter``."""

        return [movement.as_row() for movement in self.list_movements(movement_filter)]
